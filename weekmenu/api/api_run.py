from fastapi import FastAPI, Query
from fastapi.responses import RedirectResponse
from typing import Optional
import logging

from weekmenu.api.error_handlers import register_exception_handlers
from weekmenu.api.routes import export, plan, preferences, shopping, slots, templates
from weekmenu.events.web_observers import start as start_event_observers, get_events as get_web_events
from weekmenu.utilities.constants import BASE_SLOTS, DAYS
from weekmenu.utilities.logger import setup_logging

setup_logging()
logger = logging.getLogger("weekmenu.app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Menu & Shopping List API")
register_exception_handlers(app)

# Include routers
app.include_router(plan.router)
app.include_router(slots.router)
app.include_router(shopping.router)
app.include_router(templates.router)
app.include_router(preferences.router)
app.include_router(export.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web polling when the app starts."""
    start_event_observers()
    logger.info("Web observers for planner events started")


@app.get("/")
def index():
    return RedirectResponse(url="/api/plan")


@app.get("/api/meta")
def meta():
    """Static vocabulary the UI needs to draw the week grid."""
    return {"days": list(DAYS), "base_slots": [{"id": k, "label": v} for k, v in BASE_SLOTS.items()]}


@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None, ge=0)):
    return get_web_events(since)
