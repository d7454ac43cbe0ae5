"""Ingredient domain entity: id, name, free-text quantity, ready flag."""
from typing import Any, Optional
from uuid import uuid4
from weekmenu.utilities.constants import DEFAULT_QUANTITY


def new_id() -> str:
    return uuid4().hex


class Ingredient:
    def __init__(self, name: str = "", quantity: str = DEFAULT_QUANTITY, ready: bool = False,
                 id: Optional[Any] = None):
        self.id = id if id is not None else new_id()
        self.name = name
        self.quantity = quantity
        # ready: the user already has it, keep it off the shopping list
        self.ready = ready

    @classmethod
    def create(cls, name: str, quantity: str = "", ready: bool = False) -> "Ingredient":
        '''Builds a new ingredient from user entry: trims text, defaults an empty quantity to "1".'''
        return cls(name=(name or "").strip(), quantity=(quantity or "").strip() or DEFAULT_QUANTITY,
                   ready=bool(ready))

    def __str__(self) -> str:
        text = f"{self.name} ({self.quantity})"
        return f"{text} [ready]" if self.ready else text

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys; keeps stored ids as-is.'''
        d = dict(data) if isinstance(data, dict) else {}
        quantity = d.get("quantity")
        return Ingredient(
            name=str(d.get("name") or ""),
            quantity="" if quantity is None else str(quantity),
            ready=bool(d.get("ready", False)),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "ready": self.ready,
        }
