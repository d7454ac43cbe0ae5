"""Slot label resolution.

Precedence, first hit wins:
  1. fixed label of a base slot
  2. label of a registered custom slot of that day
  3. label stored on the persisted meal of that day/slot
  4. FALLBACK_SLOT_LABEL
"""
from typing import List, Mapping, Optional
from weekmenu.domain.Meal import Meal, meal_key
from weekmenu.domain.Slot import Slot
from weekmenu.utilities.constants import BASE_SLOTS, FALLBACK_SLOT_LABEL


def resolve_slot_label(day: str, slot_id: str,
                       custom_slots: Mapping[str, List[Slot]],
                       meals: Optional[Mapping[str, Meal]] = None) -> str:
    if slot_id in BASE_SLOTS:
        return BASE_SLOTS[slot_id]
    for slot in custom_slots.get(day, []):
        if slot.id == slot_id and slot.label:
            return slot.label
    meal = (meals or {}).get(meal_key(day, slot_id))
    if meal is not None and meal.slot_label:
        return meal.slot_label
    return FALLBACK_SLOT_LABEL


__all__ = ['resolve_slot_label']
