"""
Shared response schemas - cursor pages, errors etc
"""

from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for wire schemas: snake_case in Python, camelCase in JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CursorPage(CamelModel, Generic[T]):
    """Cursor pagination wrapper for API responses"""

    items: List[T]
    next_cursor: Optional[int] = Field(
        default=None, description="Id to pass as cursor for the next page, null at the end"
    )

    @classmethod
    def create(cls, items: List[T], limit: int, last_id: Optional[int]) -> "CursorPage[T]":
        # a full page means there may be more below the last id
        next_cursor = last_id if len(items) == limit else None
        return cls(items=items, next_cursor=next_cursor)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Error type")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Error timestamp"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "ValidationError",
                "message": "Content cannot be empty",
                "details": {"field": "content"},
                "timestamp": "2025-09-13T17:23:45Z",
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")
