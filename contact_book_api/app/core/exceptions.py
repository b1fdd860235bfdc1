"""Error types raised by the contact service.

Every error carries the HTTP status it maps to.  The application
registers a single handler that renders them as ``{"error": message}``.
"""

from typing import Any, Dict, Optional


class ContactServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class ValidationError(ContactServiceError):
    """Missing or malformed input; nothing is persisted."""

    status_code = 400


class NotFoundError(ContactServiceError):
    status_code = 404


class StorageError(ContactServiceError):
    """Any failure reported by SQLite, carrying its raw message."""

    status_code = 500
