"""Dependency helpers that hand the application's Planner to the routes."""
from fastapi import Request

from weekmenu.logic.planner import Planner
from weekmenu.utilities.config import DATA_DIR


def get_planner(request: Request) -> Planner:
    """Return the planner owned by the app, creating it on first use."""
    planner = getattr(request.app.state, "planner", None)
    if planner is None:
        planner = Planner(DATA_DIR)
        request.app.state.planner = planner
    return planner
