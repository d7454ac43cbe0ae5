import copy
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.domain.Meal import Meal, meal_key
from weekmenu.infra.storage import JsonStorage
from weekmenu.utilities.constants import MEAL_PLAN_KEY

logger = logging.getLogger(__name__)


class MealPlanStore:
    """Meals keyed by ``"{day}_{slot}"``, persisted as one JSON document.

    Every mutation rewrites the whole document. When an ``active_keys``
    provider is given, keys it does not list are pruned before each write, so
    meals whose slot no longer exists never survive a save.
    """

    def __init__(self, storage: JsonStorage, active_keys: Optional[Callable[[], Set[str]]] = None):
        self.storage = storage
        self._active_keys = active_keys
        self.meals: Dict[str, Meal] = self._load()

    def _load(self) -> Dict[str, Meal]:
        raw = self.storage.get(MEAL_PLAN_KEY, {}, expected_type=dict)
        return {str(k): Meal.from_dict(v) for k, v in raw.items() if isinstance(v, dict)}

    def reload(self):
        self.meals = self._load()
        return self

    def save(self) -> None:
        if self._active_keys is not None:
            self.prune_inactive(self._active_keys(), persist=False)
        self.storage.set(MEAL_PLAN_KEY, self.to_dict())

    # --- Queries -----------------------------------------------------------
    def get(self, day: str, slot: str) -> Optional[Meal]:
        return self.meals.get(meal_key(day, slot))

    def items(self) -> Iterator[Tuple[str, Meal]]:
        return iter(list(self.meals.items()))

    def keys(self) -> List[str]:
        return list(self.meals.keys())

    def is_empty(self) -> bool:
        return not self.meals

    def __len__(self) -> int:
        return len(self.meals)

    # --- Mutations ---------------------------------------------------------
    def _get_or_create(self, day: str, slot: str) -> Meal:
        return self.meals.setdefault(meal_key(day, slot), Meal())

    def set_meal_name(self, day: str, slot: str, name: str, slot_label: Optional[str] = None) -> Meal:
        meal = self._get_or_create(day, slot)
        meal.name = (name or "").strip()
        if slot_label is not None:
            meal.slot_label = slot_label
        self.save()
        return meal

    def set_ingredients(self, day: str, slot: str, ingredients: Iterable[Ingredient],
                        slot_label: Optional[str] = None) -> Meal:
        meal = self._get_or_create(day, slot)
        meal.ingredients = list(ingredients)
        if slot_label is not None:
            meal.slot_label = slot_label
        self.save()
        return meal

    def set_slot_label(self, day: str, slot: str, slot_label: str) -> None:
        meal = self.get(day, slot)
        if meal is not None:
            meal.slot_label = slot_label
            self.save()

    def delete(self, day: str, slot: str) -> bool:
        removed = self.meals.pop(meal_key(day, slot), None) is not None
        if removed:
            self.save()
        return removed

    def prune_inactive(self, active_keys: Set[str], persist: bool = True) -> List[str]:
        '''Drops every meal whose key is not in active_keys; returns the dropped keys.'''
        stale = [k for k in self.meals if k not in active_keys]
        for k in stale:
            del self.meals[k]
        if stale:
            logger.info("Pruned %d inactive meal(s): %s", len(stale), ", ".join(stale))
            if persist:
                self.storage.set(MEAL_PLAN_KEY, self.to_dict())
        return stale

    def clear(self) -> None:
        self.meals = {}
        self.storage.set(MEAL_PLAN_KEY, {})

    # --- Snapshots ---------------------------------------------------------
    def to_dict(self):
        return {k: m.to_dict() for k, m in self.meals.items()}

    def snapshot(self) -> Dict[str, dict]:
        return copy.deepcopy(self.to_dict())

    def restore(self, snapshot: Dict[str, dict]) -> None:
        '''Replaces the whole plan with a deep copy of snapshot and persists it.'''
        data = copy.deepcopy(snapshot) if isinstance(snapshot, dict) else {}
        self.meals = {str(k): Meal.from_dict(v) for k, v in data.items() if isinstance(v, dict)}
        self.save()
