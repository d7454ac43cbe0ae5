"""Slot domain entity: a fixed base slot or a user-created custom slot of one day."""
import random
import time
from weekmenu.utilities.constants import BASE_SLOTS, CUSTOM_SLOT_PREFIX


def generate_slot_id() -> str:
    '''Timestamp plus random suffix; collisions are unlikely, not impossible.'''
    suffix = "".join(random.choices("abcdefghijklmnopqrstuvwxyz0123456789", k=6))
    return f"{CUSTOM_SLOT_PREFIX}_{int(time.time() * 1000)}_{suffix}"


def is_base_slot(slot_id: str) -> bool:
    return slot_id in BASE_SLOTS


class Slot:
    def __init__(self, id: str, label: str, is_custom: bool = True):
        self.id = id
        self.label = label
        self.is_custom = is_custom

    def __str__(self) -> str:
        return f"{self.label} ({self.id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return Slot(str(d.get("id") or ""), str(d.get("label") or ""), is_custom=True)

    def to_dict(self):
        # only custom slots are persisted; base slots are fixed
        return {"id": self.id, "label": self.label}

    def to_view(self):
        return {"id": self.id, "label": self.label, "isCustom": self.is_custom}
