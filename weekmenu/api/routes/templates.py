from fastapi import APIRouter, Depends, Query

from weekmenu.api.deps import get_planner
from weekmenu.logic.planner import Planner
from weekmenu.utilities.validators import TemplateInput

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("")
def list_templates(planner: Planner = Depends(get_planner)):
    templates = planner.list_templates()
    return {"templates": [t.summary() for t in templates], "count": len(templates)}


@router.post("", status_code=201)
def save_template(payload: TemplateInput, planner: Planner = Depends(get_planner)):
    template_id = planner.save_template(payload.name)
    return {"id": template_id}


@router.post("/{template_id}/apply")
def apply_template(template_id: str, confirm: bool = Query(default=False),
                   planner: Planner = Depends(get_planner)):
    """Overwrites the live plan; answers 409 when live edits exist and confirm is not set."""
    template = planner.apply_template(template_id, confirmed=confirm)
    return {"success": True, "applied": template.summary(), "days": planner.week_view()}


@router.delete("/{template_id}")
def delete_template(template_id: str, planner: Planner = Depends(get_planner)):
    planner.delete_template(template_id)
    return {"success": True}
