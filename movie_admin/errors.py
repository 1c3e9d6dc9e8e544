"""
Exception classes raised by the admin REST clients.

Every error carries a single user-visible message (str(error)); the UI shows
that message as-is and clears it when the next operation starts.
"""

from typing import Any, Optional

BODY_PREVIEW_CHARS = 200


def truncate_body(text: Optional[str], limit: int = BODY_PREVIEW_CHARS) -> str:
    """Shorten a response body for inclusion in an error message."""
    if not text:
        return ""
    return text[:limit]


class AdminApiError(Exception):
    """Base class for all errors surfaced by the admin clients."""


class FormValidationError(AdminApiError):
    """A draft failed client-side validation; no request was sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class ApiTransportError(AdminApiError):
    """The request never produced an HTTP response (connection, timeout)."""


class ApiStatusError(AdminApiError):
    """The backend answered with a non-success HTTP status."""

    def __init__(self, method: str, path: str, status_code: int, body: Optional[str] = None):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body or ""
        message = f"{method} {path} failed: {status_code}"
        preview = truncate_body(self.body)
        if preview:
            message = f"{message} - {preview}"
        super().__init__(message)


class ApiFormatError(AdminApiError):
    """
    The backend answered 2xx but the body is not the expected structure.

    Typical cause is an HTML error page served where JSON was expected.
    """

    def __init__(self, path: str, content_type: Optional[str], body: Optional[str] = None, reason: Optional[str] = None):
        self.path = path
        self.content_type = content_type or ""
        self.body = body or ""
        detail = f" ({reason})" if reason else ""
        super().__init__(
            f"Unexpected response from {path}{detail}: "
            f"content-type={self.content_type or 'unknown'}. Body: {truncate_body(self.body)}"
        )


class BulkDeleteError(AdminApiError):
    """
    At least one delete of a bulk delete failed.

    The message is that of the first failure to complete; `result` holds the
    outcome of every delete that was issued.
    """

    def __init__(self, first_error: AdminApiError, result: Any):
        self.first_error = first_error
        self.result = result
        super().__init__(str(first_error))
