import tempfile
import unittest
from weekmenu.domain.errors import ConfirmationRequired, NotFoundError
from weekmenu.events.Event_Bus import EventBus, TEMPLATE_APPLIED
from weekmenu.logic.planner import Planner


class TestTemplates(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.bus = EventBus()
        self.planner = Planner(tmp.name, event_bus=self.bus)

    def _fill_week(self):
        slot_id = self.planner.add_custom_slot("senin", "Cemilan")
        self.planner.set_meal_name("senin", "sarapan", "Nasi Uduk")
        self.planner.add_ingredient("senin", "sarapan", "Beras", "2 cup")
        self.planner.set_meal_name("senin", slot_id, "Pisang Goreng")
        return slot_id

    def test_apply_restores_equal_but_independent_copy(self):
        self._fill_week()
        saved_plan = self.planner.plan.snapshot()
        saved_slots = self.planner.slots.snapshot()
        template_id = self.planner.save_template("Minggu biasa")

        self.planner.clear_meal_plan(confirmed=True)
        self.planner.slots.clear()
        self.planner.apply_template(template_id)

        self.assertEqual(self.planner.plan.snapshot(), saved_plan)
        self.assertEqual(self.planner.slots.snapshot(), saved_slots)
        self.assertIsNot(self.planner.templates.get(template_id).meal_plan, self.planner.plan.to_dict())

    def test_template_is_frozen_after_save(self):
        self._fill_week()
        template_id = self.planner.save_template("Frozen")
        self.planner.set_meal_name("senin", "sarapan", "Roti Bakar")
        stored = self.planner.templates.get(template_id)
        self.assertEqual(stored.meal_plan["senin_sarapan"]["name"], "Nasi Uduk")

        self.planner.apply_template(template_id, confirmed=True)
        self.planner.set_meal_name("senin", "sarapan", "Lontong")
        self.assertEqual(self.planner.templates.get(template_id).meal_plan["senin_sarapan"]["name"],
                         "Nasi Uduk")

    def test_apply_over_live_edits_needs_confirmation(self):
        self._fill_week()
        template_id = self.planner.save_template("A")
        self.planner.set_meal_name("selasa", "malam", "Soto")
        before = self.planner.plan.snapshot()

        with self.assertRaises(ConfirmationRequired):
            self.planner.apply_template(template_id)
        self.assertEqual(self.planner.plan.snapshot(), before)

        self.planner.apply_template(template_id, confirmed=True)
        self.assertIsNone(self.planner.get_meal("selasa", "malam"))

    def test_apply_matching_state_needs_no_confirmation(self):
        self._fill_week()
        template_id = self.planner.save_template("Same")
        self.planner.apply_template(template_id)
        self.assertEqual(self.planner.get_meal("senin", "sarapan").name, "Nasi Uduk")

    def test_missing_slots_are_materialized(self):
        meal_plan = {
            "rabu_custom_5_xyz": {"name": "Es Buah", "ingredients": [], "slotLabel": "Pencuci Mulut"},
            "rabu_siang": {"name": "Gado-gado", "ingredients": [], "slotLabel": "Makan Siang"},
        }
        template_id = self.planner.templates.save("Legacy", meal_plan, {})
        received = []
        self.bus.subscribe(TEMPLATE_APPLIED, lambda name, payload: received.append(payload))

        self.planner.apply_template(template_id)

        slot = self.planner.slots.find_custom("rabu", "custom_5_xyz")
        self.assertIsNotNone(slot)
        self.assertEqual(slot.label, "Pencuci Mulut")
        self.assertEqual(self.planner.get_meal("rabu", "custom_5_xyz").name, "Es Buah")
        self.assertEqual(received[0]["materialized"], 1)

    def test_unknown_day_keys_are_dropped(self):
        template_id = self.planner.templates.save("Odd", {"funday_sarapan": {"name": "x"}}, {})
        self.planner.apply_template(template_id)
        self.assertTrue(self.planner.plan.is_empty())

    def test_blank_name_gets_dated_default(self):
        template_id = self.planner.save_template("   ")
        self.assertTrue(self.planner.templates.get(template_id).name.startswith("Template "))

    def test_delete(self):
        template_id = self.planner.save_template("Gone")
        self.planner.delete_template(template_id)
        self.assertEqual(self.planner.list_templates(), [])
        with self.assertRaises(NotFoundError):
            self.planner.apply_template(template_id)
        with self.assertRaises(NotFoundError):
            self.planner.delete_template(template_id)
