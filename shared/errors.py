"""
Shared error handling for the Micro Bookstore services.
"""

from typing import Dict, Any, Optional

from opentelemetry import trace
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format used between services."""

    trace_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class BookstoreException(Exception):
    """Base exception for bookstore services."""

    status_code: int = 500

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        # Get trace ID from current span
        trace_id = None
        current_span = trace.get_current_span()
        if current_span and current_span.is_recording():
            span_context = current_span.get_span_context()
            if span_context.trace_id != 0:
                trace_id = f"{span_context.trace_id:032x}"

        return ErrorResponse(
            trace_id=trace_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class NotFoundError(BookstoreException):
    """A lookup by id found no matching record."""

    status_code = 404

    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__("NOT_FOUND", message, details)


class InvalidInputError(BookstoreException):
    """A request parameter was malformed."""

    status_code = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_INPUT", message, details)


class BackendCallError(BookstoreException):
    """A backend call completed but its outcome could not be used."""

    status_code = 502

    def __init__(self, service: str, message: str = "Backend call failed", details: Optional[Dict[str, Any]] = None):
        self.service = service
        super().__init__("BACKEND_CALL_FAILED", f"{service}: {message}", details)


class BackendUnavailableError(BackendCallError):
    """A backend could not be reached (connection refused, timeout)."""

    status_code = 503

    def __init__(self, service: str, message: str = "Backend unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__(service, message, details)
        self.code = "BACKEND_UNAVAILABLE"
