"""
Domain exceptions raised by the service layer.

Routes translate these into HTTP responses:
- NotFoundError            -> 404
- InvalidInputError        -> 400 (with per-field errors)
- UpstreamUnavailableError -> 503
"""

from typing import Dict, List, Optional


class CopilotError(Exception):
    """Base class for all application errors."""


class NotFoundError(CopilotError):
    """A requested entity does not exist."""


class StudentNotFoundError(NotFoundError):
    def __init__(self, student_ref: str):
        self.student_ref = student_ref
        super().__init__(f"Student not found: {student_ref}")


class InvalidInputError(CopilotError):
    """
    Request payload failed validation.

    errors is a list of {"field": ..., "message": ...} dicts so the
    caller can show which fields were rejected.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        self.errors = errors or []
        super().__init__(message)


class UpstreamUnavailableError(CopilotError):
    """The storage backend could not complete a write."""
