import tempfile
import unittest
from fastapi.testclient import TestClient
from weekmenu.api.api_run import app
from weekmenu.api.deps import get_planner
from weekmenu.events import web_observers
from weekmenu.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from weekmenu.logic.planner import Planner


class PlannerApiTestCase(unittest.TestCase):
    bus = None

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.planner = Planner(tmp.name, event_bus=self.bus or EventBus())
        app.dependency_overrides[get_planner] = lambda: self.planner
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)


class TestPlanApi(PlannerApiTestCase):

    def test_week_grid(self):
        resp = self.client.get("/api/plan")
        self.assertEqual(resp.status_code, 200)
        days = resp.json()["days"]
        self.assertEqual(len(days), 7)
        self.assertEqual([s["id"] for s in days[0]["slots"]], ["sarapan", "siang", "malam"])

    def test_meal_and_ingredients(self):
        resp = self.client.put("/api/plan/senin/siang/name", json={"name": " Nasi Padang "})
        self.assertEqual(resp.json()["meal"]["name"], "Nasi Padang")

        resp = self.client.post("/api/plan/senin/siang/ingredients", json={"name": "Rendang", "quantity": ""})
        self.assertEqual(resp.status_code, 201)
        ingredient = resp.json()["ingredient"]
        self.assertEqual(ingredient["quantity"], "1")

        resp = self.client.patch(f"/api/plan/senin/siang/ingredients/{ingredient['id']}", json={"ready": True})
        self.assertTrue(resp.json()["ingredient"]["ready"])

        resp = self.client.get("/api/plan/senin/siang")
        self.assertEqual(resp.json()["label"], "Makan Siang")
        self.assertEqual(len(resp.json()["meal"]["ingredients"]), 1)

        resp = self.client.delete(f"/api/plan/senin/siang/ingredients/{ingredient['id']}")
        self.assertEqual(resp.status_code, 200)
        resp = self.client.delete(f"/api/plan/senin/siang/ingredients/{ingredient['id']}")
        self.assertEqual(resp.status_code, 404)
        self.assertIn("not found", resp.json()["error"]["message"])

    def test_blank_ingredient_name_rejected(self):
        resp = self.client.post("/api/plan/senin/siang/ingredients", json={"name": "  "})
        self.assertEqual(resp.status_code, 422)
        self.assertIn("validation_errors", resp.json()["error"]["details"])
        self.assertIsNone(self.planner.get_meal("senin", "siang"))

    def test_unknown_day_and_slot(self):
        resp = self.client.put("/api/plan/someday/siang/name", json={"name": "x"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"]["details"], {"field": "day"})
        resp = self.client.put("/api/plan/senin/custom_0_zz/name", json={"name": "x"})
        self.assertEqual(resp.status_code, 404)

    def test_get_meal_for_unknown_day_or_slot(self):
        self.assertEqual(self.client.get("/api/plan/someday/siang").status_code, 400)
        resp = self.client.get("/api/plan/senin/custom_0_zz")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"]["details"]["resource"], "Slot")
        resp = self.client.get("/api/plan/senin/malam")
        self.assertEqual(resp.status_code, 200)
        self.assertIsNone(resp.json()["meal"])

    def test_clear_plan_confirmation(self):
        self.client.put("/api/plan/senin/siang/name", json={"name": "Bakso"})
        self.assertEqual(self.client.delete("/api/plan").status_code, 409)
        self.assertEqual(self.client.delete("/api/plan?confirm=true").status_code, 200)
        self.assertTrue(self.planner.plan.is_empty())


class TestSlotsApi(PlannerApiTestCase):

    def test_add_rename_remove(self):
        resp = self.client.post("/api/slots/kamis", json={"label": ""})
        self.assertEqual(resp.status_code, 201)
        slot = resp.json()
        self.assertEqual(slot["label"], "Additional Item")

        resp = self.client.put(f"/api/slots/kamis/{slot['id']}", json={"label": "Cemilan"})
        self.assertEqual(resp.json(), {"id": slot["id"], "label": "Cemilan", "isCustom": True})

        self.client.put(f"/api/plan/kamis/{slot['id']}/name", json={"name": "Onde-onde"})
        resp = self.client.delete(f"/api/slots/kamis/{slot['id']}")
        self.assertEqual(resp.json(), {"success": True, "meal_deleted": True})
        self.assertEqual(len(self.client.get("/api/slots/kamis").json()["slots"]), 3)


class TestShoppingApi(PlannerApiTestCase):

    def test_generate_without_ingredients(self):
        resp = self.client.post("/api/shopping-list/generate")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("No ingredients", resp.json()["error"]["message"])

    def test_generate_toggle_and_sort(self):
        self.client.post("/api/plan/senin/malam/ingredients", json={"name": "Tomat", "quantity": "3"})
        self.client.post("/api/plan/senin/malam/ingredients", json={"name": "bawang", "quantity": "2"})
        resp = self.client.post("/api/shopping-list/generate")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["count"], 2)
        item_id = body["items"][0]["id"]

        self.assertTrue(self.client.post(f"/api/shopping-list/items/{item_id}/toggle").json()["checked"])
        body = self.client.get("/api/shopping-list?sort=name").json()
        self.assertEqual([i["name"] for i in body["items"]], ["bawang", "Tomat"])
        self.assertEqual(body["stats"], {"total": 2, "checked": 1, "remaining": 1})

    def test_manual_items_and_clear(self):
        resp = self.client.post("/api/shopping-list/items", json={"name": "Tisu"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(self.client.delete("/api/shopping-list").status_code, 409)
        self.client.delete("/api/shopping-list?confirm=true")
        self.assertEqual(self.client.get("/api/shopping-list").json()["count"], 0)
        self.assertEqual(self.client.delete("/api/shopping-list/items/missing").status_code, 404)


class TestTemplatesApi(PlannerApiTestCase):

    def test_save_apply_delete(self):
        self.client.put("/api/plan/rabu/sarapan/name", json={"name": "Lontong"})
        template_id = self.client.post("/api/templates", json={"name": "Rabu"}).json()["id"]
        self.assertEqual(self.client.get("/api/templates").json()["count"], 1)

        self.client.put("/api/plan/rabu/sarapan/name", json={"name": "Roti"})
        resp = self.client.post(f"/api/templates/{template_id}/apply")
        self.assertEqual(resp.status_code, 409)
        resp = self.client.post(f"/api/templates/{template_id}/apply?confirm=true")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.planner.get_meal("rabu", "sarapan").name, "Lontong")

        self.assertEqual(self.client.delete(f"/api/templates/{template_id}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/templates/{template_id}").status_code, 404)


class TestExportAndThemeApi(PlannerApiTestCase):

    def test_exports(self):
        self.assertEqual(self.client.get("/export/text").status_code, 400)
        self.client.put("/api/plan/jumat/malam/name", json={"name": "Ikan Bakar"})
        self.client.post("/api/plan/jumat/malam/ingredients", json={"name": "Ikan", "quantity": "1 ekor"})

        resp = self.client.get("/export/text")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("attachment", resp.headers["content-disposition"])
        self.assertIn("Ikan Bakar", resp.text)

        resp = self.client.get("/export/html")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("--theme-primary", resp.text)
        self.assertIn("Ikan (1 ekor)", resp.text)

        resp = self.client.get("/export/pdf")
        self.assertEqual(resp.headers["content-type"], "application/pdf")
        self.assertTrue(resp.content.startswith(b"%PDF"))

    def test_theme(self):
        self.assertEqual(self.client.get("/api/theme").json()["theme"], "default")
        resp = self.client.put("/api/theme", json={"theme": "green"})
        self.assertEqual(resp.json()["theme"], "green")
        self.assertEqual(self.client.put("/api/theme", json={"theme": "neon"}).status_code, 400)


class TestEventsApi(PlannerApiTestCase):
    bus = GLOBAL_EVENT_BUS

    def test_events_since_cursor(self):
        web_observers.start()
        cursor = self.client.get("/api/events").json()["next_cursor"]
        self.client.post("/api/slots/sabtu", json={"label": "Brunch"})
        body = self.client.get(f"/api/events?since={cursor}").json()
        self.assertEqual([e["type"] for e in body["events"]], ["slot.added"])
        self.assertEqual(body["events"][0]["label"], "Brunch")
        self.assertGreater(body["next_cursor"], cursor)
