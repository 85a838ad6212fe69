"""Access key service Pydantic schemas package.

Re-exports all request and response schemas for convenient importing:

    from accesskeys.schemas import AccessKeyFormData, KeyType, FieldError, ...
"""

from accesskeys.schemas.access_key import (
    DEFAULT_SSH_PORT,
    AccessKeyAccepted,
    AccessKeyFormData,
    KeyType,
)
from accesskeys.schemas.common import (
    ErrorResponse,
    FieldError,
    FieldErrorKind,
    ValidationErrorResponse,
)

__all__ = [
    # Access keys
    "AccessKeyFormData",
    "AccessKeyAccepted",
    "KeyType",
    "DEFAULT_SSH_PORT",
    # Common
    "ErrorResponse",
    "FieldError",
    "FieldErrorKind",
    "ValidationErrorResponse",
]
