"""Meal domain entity: what is eaten in one day/slot and what it needs."""
from typing import List, Optional
from weekmenu.domain.Ingredient import Ingredient


def meal_key(day: str, slot: str) -> str:
    return f"{day}_{slot}"


def split_key(key: str) -> tuple[str, str]:
    '''Inverse of meal_key. Day names never contain "_", slot ids may.'''
    day, _, slot = key.partition("_")
    return day, slot


class Meal:
    def __init__(self, name: str = "", ingredients: Optional[List[Ingredient]] = None,
                 slot_label: str = ""):
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        self.slot_label = slot_label

    def __str__(self) -> str:
        return f"{self.slot_label}: {self.name or '-'} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def find_ingredient(self, ingredient_id) -> Optional[Ingredient]:
        for ing in self.ingredients:
            if ing.id == ingredient_id or str(ing.id) == str(ingredient_id):
                return ing
        return None

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        raw_ingredients = d.get("ingredients")
        if not isinstance(raw_ingredients, list):
            raw_ingredients = []
        return Meal(
            name=str(d.get("name") or ""),
            ingredients=[Ingredient.from_dict(i) for i in raw_ingredients if isinstance(i, dict)],
            slot_label=str(d.get("slotLabel") or ""),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "slotLabel": self.slot_label,
        }
