"""
Nainaland Backend — Shared Schema Building Blocks
===================================================

What:  Base classes for records and update structs, plus the response models
       that are not tied to a single entity (errors, health, delete result).
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class RecordModel(BaseModel):
    """
    Base for records held by MemStorage.

    Why frozen: the store replaces a record on update instead of mutating it,
    so a record handed out earlier never changes under its holder.
    """

    model_config = {"frozen": True, "populate_by_name": True}


class InsertModel(BaseModel):
    """Base for create payloads (camelCase or snake_case keys accepted)."""

    model_config = {"populate_by_name": True}


class UpdateModel(BaseModel):
    """
    Base for explicit partial-update structs.

    Every field on a subclass is Optional. Only fields the client actually
    sent, with a non-null value, are merged into the stored record.
    """

    model_config = {"populate_by_name": True}

    def changed_fields(self) -> Dict[str, Any]:
        """Field-name → value for the fields to merge over the stored record."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class DeleteResponse(BaseModel):
    """Body returned by every successful DELETE."""
    success: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Property with ID '42' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response: service status plus how much the store holds."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    records: Dict[str, int] = Field(description="Record count per collection")
    uptime_seconds: float = Field(description="Seconds since service started")
