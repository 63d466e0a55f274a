"""
Domain errors raised by the core and mapped to HTTP responses by the API layer.
"""

from typing import Any, Dict, Optional


class FeedMeshError(Exception):
    """Base error for the feed core."""

    status_code: int = 500
    error: str = "InternalServerError"

    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class Unauthorized(FeedMeshError):
    """Missing or invalid credentials on a gated operation."""

    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidToken(FeedMeshError):
    """Token signature, format or expiry check failed."""

    status_code = 401
    error = "InvalidToken"

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ValidationError(FeedMeshError):
    """Malformed input, always reported with the failing field."""

    status_code = 400
    error = "ValidationError"

    def __init__(self, field: str, message: str):
        super().__init__(message, details={"field": field})
        self.field = field


class NotFound(FeedMeshError):
    """Referenced post or user does not exist."""

    status_code = 404
    error = "NotFound"

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        details = {"resource": resource}
        if resource_id is not None:
            details["id"] = resource_id
        super().__init__(message, details=details)


class TransientStoreError(FeedMeshError):
    """Storage timed out or the connection failed; safe to retry."""

    status_code = 503
    error = "TransientStoreError"

    def __init__(self, message: str = "Storage temporarily unavailable, retry later"):
        super().__init__(message)


class ChannelUnavailable(FeedMeshError):
    """Realtime publish failed. Never surfaced to callers."""

    status_code = 503
    error = "ChannelUnavailable"

    def __init__(self, message: str = "Notification channel unavailable"):
        super().__init__(message)
