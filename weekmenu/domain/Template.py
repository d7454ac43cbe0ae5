"""Template domain entity: a named, frozen copy of the plan and slot registry."""
import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from weekmenu.domain.Ingredient import new_id


class Template:
    def __init__(self, name: str, meal_plan: Dict[str, Any], slot_registry: Dict[str, List[dict]],
                 id: Optional[str] = None, created_at: Optional[str] = None):
        self.id = id or new_id()
        self.name = name
        # Deep copies: later edits to the live state must never leak in
        self.meal_plan = copy.deepcopy(meal_plan)
        self.slot_registry = copy.deepcopy(slot_registry)
        self.created_at = created_at or datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"{self.name} - {len(self.meal_plan)} meals - {self.created_at}"

    __repr__ = __str__

    def summary(self):
        return {"id": self.id, "name": self.name, "createdAt": self.created_at,
                "mealCount": len(self.meal_plan)}

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        plan = d.get("mealPlanSnapshot")
        registry = d.get("slotRegistrySnapshot")
        return Template(
            name=str(d.get("name") or ""),
            meal_plan=plan if isinstance(plan, dict) else {},
            slot_registry=registry if isinstance(registry, dict) else {},
            id=d.get("id"),
            created_at=d.get("createdAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "mealPlanSnapshot": copy.deepcopy(self.meal_plan),
            "slotRegistrySnapshot": copy.deepcopy(self.slot_registry),
            "createdAt": self.created_at,
        }
