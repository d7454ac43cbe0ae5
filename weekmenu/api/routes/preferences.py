from fastapi import APIRouter, Depends

from weekmenu.api.deps import get_planner
from weekmenu.logic.planner import Planner
from weekmenu.logic.themes import theme_variables
from weekmenu.utilities.constants import THEMES
from weekmenu.utilities.validators import ThemeInput

router = APIRouter(prefix="/api/theme", tags=["preferences"])


@router.get("")
def get_theme(planner: Planner = Depends(get_planner)):
    theme = planner.get_theme()
    return {"theme": theme, "variables": theme_variables(theme), "available": list(THEMES)}


@router.put("")
def set_theme(payload: ThemeInput, planner: Planner = Depends(get_planner)):
    theme = planner.set_theme(payload.theme)
    return {"theme": theme, "variables": theme_variables(theme)}
