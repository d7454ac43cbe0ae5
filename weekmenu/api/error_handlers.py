"""Error handlers for the FastAPI application.

Planner exceptions become ``{"error": {"message", "status_code", "details"}}``
with the status code the exception carries.
"""
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from weekmenu.domain.errors import PlannerError

logger = logging.getLogger(__name__)


def create_error_response(message: str, status_code: int = 500, details: dict = None) -> JSONResponse:
    error_body = {"error": {"message": message, "status_code": status_code}}
    if details:
        error_body["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=error_body)


async def planner_exception_handler(request: Request, exc: PlannerError) -> JSONResponse:
    logger.warning("Planner error: %s [%s %s]", exc.message, request.method, request.url.path)
    return create_error_response(exc.message, exc.status_code, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten pydantic errors into field/message pairs."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        })
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, errors)
    message = errors[0]["message"] if len(errors) == 1 else "Validation error"
    return create_error_response(message, status.HTTP_422_UNPROCESSABLE_ENTITY,
                                 {"validation_errors": errors})


def register_exception_handlers(app):
    app.add_exception_handler(PlannerError, planner_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
