"""Common shared schema types used across the API."""

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Standard error response envelope."""

    error: str
    detail: Optional[str] = None


class FieldErrorKind(str, enum.Enum):
    """Why a single request field was rejected."""

    MISSING_REQUIRED_FIELD = "missing_required_field"
    INVALID_FIELD_TYPE = "invalid_field_type"
    INVALID_ENUMERATION_VALUE = "invalid_enumeration_value"


class FieldError(BaseModel):
    """A rejected request field, reported by its wire name."""

    model_config = ConfigDict(frozen=True)

    field: str
    kind: FieldErrorKind
    message: str


class ValidationErrorResponse(BaseModel):
    """Error envelope listing every field that failed validation."""

    error: str = "Invalid access key form"
    fields: list[FieldError]
