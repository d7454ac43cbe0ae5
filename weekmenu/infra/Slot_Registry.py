import copy
import logging
from typing import Dict, List, Optional, Set
from weekmenu.domain.Meal import meal_key
from weekmenu.domain.Slot import Slot, generate_slot_id, is_base_slot
from weekmenu.domain.errors import NotFoundError, ValidationError
from weekmenu.infra.storage import JsonStorage
from weekmenu.utilities.constants import BASE_SLOTS, CUSTOM_SLOTS_KEY, DAYS, DEFAULT_CUSTOM_SLOT_LABEL

logger = logging.getLogger(__name__)


def _check_day(day: str) -> str:
    if day not in DAYS:
        raise ValidationError(f"Unknown day '{day}'. Expected one of: {', '.join(DAYS)}", field="day")
    return day


def _clean_label(label: Optional[str]) -> str:
    return (label or "").strip() or DEFAULT_CUSTOM_SLOT_LABEL


class SlotRegistry:
    """Which (day, slot) combinations exist.

    Base slots exist on every day and are never stored. Custom slots are kept
    per day in registration order and persisted as
    ``{day: [{"id": ..., "label": ...}]}``.
    """

    def __init__(self, storage: JsonStorage):
        self.storage = storage
        self.custom: Dict[str, List[Slot]] = self._load()

    def _load(self) -> Dict[str, List[Slot]]:
        raw = self.storage.get(CUSTOM_SLOTS_KEY, {}, expected_type=dict)
        custom: Dict[str, List[Slot]] = {}
        for day, entries in raw.items():
            if day not in DAYS or not isinstance(entries, list):
                continue
            slots = [Slot.from_dict(e) for e in entries if isinstance(e, dict) and e.get("id")]
            if slots:
                custom[day] = slots
        return custom

    def save(self) -> None:
        self.storage.set(CUSTOM_SLOTS_KEY, self.to_dict())

    # --- Queries -----------------------------------------------------------
    def custom_slots(self, day: str) -> List[Slot]:
        return list(self.custom.get(_check_day(day), []))

    def find_custom(self, day: str, slot_id: str) -> Optional[Slot]:
        for slot in self.custom.get(day, []):
            if slot.id == slot_id:
                return slot
        return None

    def list_slots(self, day: str) -> List[Slot]:
        '''Base slots in fixed order, followed by the day's custom slots in registration order.'''
        _check_day(day)
        slots = [Slot(slot_id, label, is_custom=False) for slot_id, label in BASE_SLOTS.items()]
        return slots + self.custom_slots(day)

    def has_slot(self, day: str, slot_id: str) -> bool:
        return is_base_slot(slot_id) or self.find_custom(day, slot_id) is not None

    def active_keys(self) -> Set[str]:
        return {meal_key(day, slot.id) for day in DAYS for slot in self.list_slots(day)}

    # --- Mutations ---------------------------------------------------------
    def add_custom_slot(self, day: str, label: Optional[str] = None) -> str:
        _check_day(day)
        slot = Slot(generate_slot_id(), _clean_label(label))
        self.custom.setdefault(day, []).append(slot)
        self.save()
        logger.info("Added custom slot %s (%s) on %s", slot.id, slot.label, day)
        return slot.id

    def ensure_slot(self, day: str, slot_id: str, label: Optional[str] = None) -> bool:
        '''Registers slot_id on day unless it already exists. Returns True when it was added.'''
        _check_day(day)
        if self.has_slot(day, slot_id):
            return False
        self.custom.setdefault(day, []).append(Slot(slot_id, _clean_label(label)))
        self.save()
        logger.info("Materialized slot %s on %s", slot_id, day)
        return True

    def rename_custom_slot(self, day: str, slot_id: str, label: Optional[str]) -> Slot:
        _check_day(day)
        slot = self.find_custom(day, slot_id)
        if slot is None:
            raise NotFoundError("Custom slot", slot_id)
        slot.label = _clean_label(label)
        self.save()
        return slot

    def remove_custom_slot(self, day: str, slot_id: str) -> Slot:
        _check_day(day)
        slot = self.find_custom(day, slot_id)
        if slot is None:
            raise NotFoundError("Custom slot", slot_id)
        self.custom[day].remove(slot)
        if not self.custom[day]:
            del self.custom[day]
        self.save()
        logger.info("Removed custom slot %s on %s", slot_id, day)
        return slot

    def clear(self) -> None:
        self.custom = {}
        self.save()

    # --- Snapshots ---------------------------------------------------------
    def to_dict(self):
        return {day: [s.to_dict() for s in slots] for day, slots in self.custom.items()}

    def snapshot(self) -> Dict[str, List[dict]]:
        return copy.deepcopy(self.to_dict())

    def restore(self, snapshot: Dict[str, List[dict]]) -> None:
        self.storage.set(CUSTOM_SLOTS_KEY, copy.deepcopy(snapshot) if isinstance(snapshot, dict) else {})
        self.custom = self._load()
        # _load drops malformed entries; write back what was kept
        self.save()
