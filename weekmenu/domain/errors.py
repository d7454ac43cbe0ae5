"""Planner exceptions.

Every exception carries the HTTP status the API layer answers with, so the
routes never need to translate them one by one.
"""
from typing import Any, Dict, Optional


class PlannerError(Exception):
    """Base class for expected, user-facing planner failures."""

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(PlannerError):
    """Rejected input; nothing was mutated."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else None)


class NotFoundError(PlannerError):
    status_code = 404

    def __init__(self, resource: str, identifier: Any):
        super().__init__(f"{resource} '{identifier}' not found",
                         {"resource": resource, "id": identifier})


class ConfirmationRequired(PlannerError):
    """A destructive action was requested without explicit confirmation."""

    status_code = 409

    def __init__(self, action: str):
        super().__init__(f"Confirmation required to {action}", {"action": action})


class NothingToGenerate(PlannerError):
    """The plan has no ingredients left to shop for."""

    def __init__(self):
        super().__init__("No ingredients to generate a shopping list from. "
                         "Add ingredients to your meals first.")


class NothingToExport(PlannerError):
    def __init__(self):
        super().__init__("No meals have been filled in yet.")


__all__ = ['PlannerError', 'ValidationError', 'NotFoundError', 'ConfirmationRequired',
           'NothingToGenerate', 'NothingToExport']
