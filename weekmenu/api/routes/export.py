from datetime import datetime

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates

from weekmenu.api.deps import get_planner
from weekmenu.infra.pdf_utils import generate_pdf_for_plan
from weekmenu.logic.export.text_export import export_filename
from weekmenu.logic.planner import Planner
from weekmenu.logic.themes import theme_variables
from weekmenu.utilities.config import TEMPLATES_DIR
from weekmenu.utilities.constants import THEMES

router = APIRouter(prefix="/export", tags=["export"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/text", response_class=PlainTextResponse)
def export_text(planner: Planner = Depends(get_planner)):
    return PlainTextResponse(planner.export_text(), headers=_attachment(export_filename("txt")))


@router.get("/html")
def export_html(request: Request, planner: Planner = Depends(get_planner)):
    data = planner.export_data()
    return templates.TemplateResponse(request, "plan_export.html", {
        "rows": data["rows"],
        "summary": data["summary"],
        "theme_vars": theme_variables(data["theme"]),
        "generated_on": datetime.now().strftime("%d.%m.%Y %H:%M"),
    })


@router.get("/pdf")
def export_pdf(planner: Planner = Depends(get_planner)):
    data = planner.export_data()
    pdf_bytes = generate_pdf_for_plan(data["rows"], data["summary"],
                                      primary_colour=THEMES[data["theme"]]["primary"])
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers=_attachment(export_filename("pdf")))
