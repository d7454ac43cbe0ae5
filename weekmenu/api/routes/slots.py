from fastapi import APIRouter, Depends

from weekmenu.api.deps import get_planner
from weekmenu.logic.planner import Planner
from weekmenu.utilities.validators import SlotInput

router = APIRouter(prefix="/api/slots", tags=["slots"])


@router.get("/{day}")
def list_slots(day: str, planner: Planner = Depends(get_planner)):
    return {"day": day, "slots": [s.to_view() for s in planner.list_slots(day)]}


@router.post("/{day}", status_code=201)
def add_slot(day: str, payload: SlotInput, planner: Planner = Depends(get_planner)):
    slot_id = planner.add_custom_slot(day, payload.label)
    return {"id": slot_id, "label": planner.label_of(day, slot_id), "isCustom": True}


@router.put("/{day}/{slot_id}")
def rename_slot(day: str, slot_id: str, payload: SlotInput, planner: Planner = Depends(get_planner)):
    return planner.rename_custom_slot(day, slot_id, payload.label).to_view()


@router.delete("/{day}/{slot_id}")
def remove_slot(day: str, slot_id: str, planner: Planner = Depends(get_planner)):
    meal_deleted = planner.remove_custom_slot(day, slot_id)
    return {"success": True, "meal_deleted": meal_deleted}
