"""Application state and the operations the UI layer calls.

A Planner owns every store for one data directory. Routes receive it through
a FastAPI dependency; nothing in the package keeps planner state in module
globals. Each public operation runs to completion under the planner's lock.
"""
from __future__ import annotations
import functools
import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from weekmenu.domain.Ingredient import Ingredient, new_id
from weekmenu.domain.Meal import Meal, meal_key, split_key
from weekmenu.domain.ShoppingList import ShoppingItem, ShoppingList
from weekmenu.domain.Slot import Slot
from weekmenu.domain.Template import Template
from weekmenu.domain.errors import (
    ConfirmationRequired, NotFoundError, NothingToGenerate, ValidationError
)
from weekmenu.events.Event_Bus import (
    GLOBAL_EVENT_BUS, PLAN_CLEARED, PLAN_UPDATED, SHOPPING_CLEARED, SHOPPING_GENERATED,
    SLOT_ADDED, SLOT_REMOVED, TEMPLATE_APPLIED, TEMPLATE_SAVED
)
from weekmenu.infra.Plan_Repository import MealPlanStore
from weekmenu.infra.Preferences_Repository import PreferencesRepository
from weekmenu.infra.Shopping_Repository import ShoppingListRepository
from weekmenu.infra.Slot_Registry import SlotRegistry
from weekmenu.infra.Template_Repository import TemplateStore
from weekmenu.infra.storage import JsonStorage
from weekmenu.logic.export.text_export import plan_rows, render_plan_text
from weekmenu.logic.shopping.list_builder import aggregate_ingredients
from weekmenu.logic.shopping.merger import merge_shopping_list
from weekmenu.logic.slots.labels import resolve_slot_label
from weekmenu.utilities.constants import DAYS, DEFAULT_QUANTITY

logger = logging.getLogger(__name__)


def _locked(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


def _require_name(name: Optional[str], what: str = "Ingredient name") -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"{what} is required", field="name")
    return cleaned


class Planner:
    def __init__(self, data_dir, event_bus=GLOBAL_EVENT_BUS):
        self.storage = JsonStorage(data_dir)
        self.slots = SlotRegistry(self.storage)
        self.plan = MealPlanStore(self.storage, active_keys=self.slots.active_keys)
        self.shopping = ShoppingListRepository(self.storage)
        self.templates = TemplateStore(self.storage)
        self.preferences = PreferencesRepository(self.storage)
        self._event_bus = event_bus
        self._lock = threading.RLock()
        self._reconcile_loaded_plan()

    def _materialize_slots(self, labelled_keys: Iterable, source: str) -> int:
        """Register the slot of every ``(key, slot_label)`` pair that is missing from the registry.

        Keys with an unknown day are skipped; the next save prunes them.
        """
        materialized = 0
        for key, label in labelled_keys:
            day, slot_id = split_key(key)
            if day not in DAYS or not slot_id:
                logger.warning("%s has meal under unknown key %r; skipped", source, key)
                continue
            if self.slots.ensure_slot(day, slot_id, label or None):
                materialized += 1
        return materialized

    def _reconcile_loaded_plan(self) -> None:
        # a reset or older registry must not hide stored meals, nor let the next save drop them
        materialized = self._materialize_slots(
            ((key, meal.slot_label) for key, meal in self.plan.items()), "Stored plan")
        if materialized:
            logger.info("Restored %d custom slot(s) from stored meals", materialized)
        self.plan.prune_inactive(self.slots.active_keys())

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _publish(self, event_name: str, payload: Optional[Dict[str, Any]] = None):
        self._event_bus.publish(event_name, payload or {})

    def _check_slot(self, day: str, slot: str) -> None:
        if day not in DAYS:
            raise ValidationError(f"Unknown day '{day}'", field="day")
        if not self.slots.has_slot(day, slot):
            raise NotFoundError("Slot", meal_key(day, slot))

    # --- Slot registry -----------------------------------------------------
    @_locked
    def require_slot(self, day: str, slot: str) -> None:
        """Raise ValidationError for an unknown day, NotFoundError for a slot the day lacks."""
        self._check_slot(day, slot)

    @_locked
    def list_slots(self, day: str) -> List[Slot]:
        return self.slots.list_slots(day)

    @_locked
    def label_of(self, day: str, slot_id: str) -> str:
        return resolve_slot_label(day, slot_id, self.slots.custom, self.plan.meals)

    @_locked
    def add_custom_slot(self, day: str, label: Optional[str] = None) -> str:
        slot_id = self.slots.add_custom_slot(day, label)
        self._publish(SLOT_ADDED, {"day": day, "slot": slot_id, "label": self.label_of(day, slot_id)})
        return slot_id

    @_locked
    def rename_custom_slot(self, day: str, slot_id: str, label: Optional[str]) -> Slot:
        slot = self.slots.rename_custom_slot(day, slot_id, label)
        self.plan.set_slot_label(day, slot_id, slot.label)
        return slot

    @_locked
    def remove_custom_slot(self, day: str, slot_id: str) -> bool:
        """Unregister a custom slot and delete the meal stored under it."""
        self.slots.remove_custom_slot(day, slot_id)
        meal_deleted = self.plan.delete(day, slot_id)
        self._publish(SLOT_REMOVED, {"day": day, "slot": slot_id, "meal_deleted": meal_deleted})
        return meal_deleted

    # --- Meal plan ---------------------------------------------------------
    @_locked
    def get_meal(self, day: str, slot: str) -> Optional[Meal]:
        return self.plan.get(day, slot)

    @_locked
    def set_meal_name(self, day: str, slot: str, name: str) -> Meal:
        self._check_slot(day, slot)
        meal = self.plan.set_meal_name(day, slot, name, slot_label=self.label_of(day, slot))
        self._publish(PLAN_UPDATED, {"key": meal_key(day, slot), "action": "name"})
        return meal

    @_locked
    def set_ingredients(self, day: str, slot: str, ingredients: Iterable[Any]) -> Meal:
        """Replace a meal's ingredient list. Validates every entry before changing anything."""
        self._check_slot(day, slot)
        prepared: List[Ingredient] = []
        seen_ids = set()
        for entry in ingredients:
            data = entry.to_dict() if isinstance(entry, Ingredient) else dict(entry)
            name = _require_name(data.get("name"))
            ing = Ingredient.create(name, data.get("quantity") or "", data.get("ready", False))
            if data.get("id") is not None and data["id"] not in seen_ids:
                ing.id = data["id"]
            seen_ids.add(ing.id)
            prepared.append(ing)
        meal = self.plan.set_ingredients(day, slot, prepared, slot_label=self.label_of(day, slot))
        self._publish(PLAN_UPDATED, {"key": meal_key(day, slot), "action": "ingredients"})
        return meal

    @_locked
    def add_ingredient(self, day: str, slot: str, name: str, quantity: str = "",
                       ready: bool = False) -> Ingredient:
        self._check_slot(day, slot)
        ingredient = Ingredient.create(_require_name(name), quantity, ready)
        meal = self.plan.get(day, slot)
        current = meal.ingredients if meal else []
        self.plan.set_ingredients(day, slot, current + [ingredient], slot_label=self.label_of(day, slot))
        self._publish(PLAN_UPDATED, {"key": meal_key(day, slot), "action": "ingredient_added"})
        return ingredient

    @_locked
    def update_ingredient(self, day: str, slot: str, ingredient_id, name: Optional[str] = None,
                          quantity: Optional[str] = None, ready: Optional[bool] = None) -> Ingredient:
        meal = self.plan.get(day, slot)
        ingredient = meal.find_ingredient(ingredient_id) if meal else None
        if ingredient is None:
            raise NotFoundError("Ingredient", ingredient_id)
        if name is not None:
            ingredient.name = _require_name(name)
        if quantity is not None:
            ingredient.quantity = quantity.strip() or DEFAULT_QUANTITY
        if ready is not None:
            ingredient.ready = bool(ready)
        self.plan.save()
        self._publish(PLAN_UPDATED, {"key": meal_key(day, slot), "action": "ingredient_updated"})
        return ingredient

    @_locked
    def remove_ingredient(self, day: str, slot: str, ingredient_id) -> None:
        meal = self.plan.get(day, slot)
        ingredient = meal.find_ingredient(ingredient_id) if meal else None
        if ingredient is None:
            raise NotFoundError("Ingredient", ingredient_id)
        self.plan.set_ingredients(day, slot, [i for i in meal.ingredients if i is not ingredient])
        self._publish(PLAN_UPDATED, {"key": meal_key(day, slot), "action": "ingredient_removed"})

    @_locked
    def clear_meal_plan(self, confirmed: bool = False) -> None:
        if not confirmed:
            raise ConfirmationRequired("clear every meal and its ingredients")
        self.plan.clear()
        logger.info("Meal plan cleared")
        self._publish(PLAN_CLEARED)

    @_locked
    def week_view(self) -> List[Dict[str, Any]]:
        """Every day with its slots (labels resolved) and the meal stored in each."""
        view = []
        for day in DAYS:
            slots = []
            for slot in self.slots.list_slots(day):
                meal = self.plan.get(day, slot.id)
                slots.append({
                    **slot.to_view(),
                    "label": resolve_slot_label(day, slot.id, self.slots.custom, self.plan.meals),
                    "meal": meal.to_dict() if meal else None,
                })
            view.append({"day": day, "slots": slots})
        return view

    # --- Shopping list -----------------------------------------------------
    @_locked
    def get_shopping_list(self) -> ShoppingList:
        return self.shopping.load()

    @_locked
    def generate_shopping_list(self) -> ShoppingList:
        """Aggregate the plan, merge it into the saved list and persist the result.

        Raises NothingToGenerate when no meal has an ingredient left to buy.
        """
        aggregated = aggregate_ingredients(self.plan.items())
        if not aggregated:
            raise NothingToGenerate()
        previous = self.shopping.load().get_items()
        merged = ShoppingList(merge_shopping_list(aggregated, previous, id_factory=new_id))
        self.shopping.save(merged)
        orphans = len(merged) - len(aggregated)
        previous_ids = {p.id for p in previous}
        kept = sum(1 for item in merged.get_items()[:len(aggregated)] if item.id in previous_ids)
        logger.info("Generated shopping list: %d items (%d kept from previous, %d carried over)",
                    len(merged), kept, orphans)
        self._publish(SHOPPING_GENERATED, {"count": len(merged), "kept": kept, "orphans": orphans})
        return merged

    @_locked
    def toggle_item(self, item_id) -> ShoppingItem:
        shopping_list = self.shopping.load()
        item = shopping_list.toggle(item_id)
        self.shopping.save(shopping_list)
        return item

    @_locked
    def add_shopping_item(self, name: str, quantity: str = "") -> ShoppingItem:
        shopping_list = self.shopping.load()
        item = shopping_list.add_item(ShoppingItem(_require_name(name, "Item name"),
                                                   (quantity or "").strip() or DEFAULT_QUANTITY))
        self.shopping.save(shopping_list)
        return item

    @_locked
    def remove_shopping_item(self, item_id) -> None:
        shopping_list = self.shopping.load()
        shopping_list.remove_item(item_id)
        self.shopping.save(shopping_list)

    @_locked
    def clear_shopping_list(self, confirmed: bool = False) -> None:
        if not confirmed:
            raise ConfirmationRequired("remove every item from the shopping list")
        self.shopping.save(ShoppingList())
        logger.info("Shopping list cleared")
        self._publish(SHOPPING_CLEARED)

    # --- Templates ---------------------------------------------------------
    @_locked
    def save_template(self, name: str) -> str:
        template_id = self.templates.save(name, self.plan.snapshot(), self.slots.snapshot())
        self._publish(TEMPLATE_SAVED, {"id": template_id, "name": self.templates.get(template_id).name})
        return template_id

    @_locked
    def list_templates(self) -> List[Template]:
        return self.templates.list()

    @_locked
    def delete_template(self, template_id: str) -> None:
        self.templates.delete(template_id)

    def has_unsaved_edits(self, template: Template) -> bool:
        '''True when applying template would throw away live state that differs from it.'''
        live_plan, live_slots = self.plan.snapshot(), self.slots.snapshot()
        if not live_plan and not live_slots:
            return False
        return live_plan != template.meal_plan or live_slots != template.slot_registry

    @_locked
    def apply_template(self, template_id: str, confirmed: bool = False) -> Template:
        """Replace the live plan and slot registry with copies of a template.

        Overwriting live edits needs confirmed=True; otherwise ConfirmationRequired
        is raised and nothing changes. Slots referenced by the template's meals
        but missing from its registry are registered before the plan is restored.
        """
        template = self.templates.get(template_id)
        if not confirmed and self.has_unsaved_edits(template):
            raise ConfirmationRequired(f"overwrite the current plan with template '{template.name}'")
        self.slots.restore(template.slot_registry)
        materialized = self._materialize_slots(
            ((key, meal_data.get("slotLabel") if isinstance(meal_data, dict) else None)
             for key, meal_data in template.meal_plan.items()),
            f"Template {template.id}")
        self.plan.restore(template.meal_plan)
        logger.info("Applied template %s (%s); %d slot(s) materialized", template.id, template.name, materialized)
        self._publish(TEMPLATE_APPLIED, {"id": template.id, "name": template.name, "materialized": materialized})
        return template

    # --- Preferences -------------------------------------------------------
    @_locked
    def get_theme(self) -> str:
        return self.preferences.get_theme()

    @_locked
    def set_theme(self, theme: str) -> str:
        return self.preferences.set_theme(theme)

    # --- Export ------------------------------------------------------------
    @_locked
    def export_text(self) -> str:
        return render_plan_text(self.plan, self.slots)

    @_locked
    def export_data(self) -> Dict[str, Any]:
        """Rows, shopping summary and theme for the HTML and PDF exports."""
        return {
            "rows": plan_rows(self.plan, self.slots),
            "summary": aggregate_ingredients(self.plan.items()),
            "theme": self.preferences.get_theme(),
        }
