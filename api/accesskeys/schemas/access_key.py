"""Pydantic schemas for access key creation requests."""

import enum
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Normally cloud access keys are created along with their provider, so the
# default only matters for on-premises providers, where sshd listens on 22.
DEFAULT_SSH_PORT = 22

# sshPort binds to a signed 32-bit integer; anything wider is rejected.
SSH_PORT_MIN = -(2**31)
SSH_PORT_MAX = 2**31 - 1


class KeyType(str, enum.Enum):
    """Kind of key material carried in keyContent."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"

    @property
    def extension(self) -> str:
        """File extension the key is stored under."""
        return _KEY_EXTENSIONS[self]


_KEY_EXTENSIONS = {
    KeyType.PUBLIC: ".pub",
    KeyType.PRIVATE: ".pem",
}


class AccessKeyFormData(BaseModel):
    """Request fields for creating an access key in a region.

    Only keyCode and regionUUID are required; every other field falls back
    to its default when the request omits it. Instances are immutable once
    bound.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    key_code: str = Field(alias="keyCode", min_length=1)
    region_uuid: uuid.UUID = Field(alias="regionUUID")
    key_type: Optional[KeyType] = Field(None, alias="keyType")
    key_content: Optional[str] = Field(None, alias="keyContent")
    ssh_user: Optional[str] = Field(None, alias="sshUser")
    ssh_port: int = Field(DEFAULT_SSH_PORT, alias="sshPort", ge=SSH_PORT_MIN, le=SSH_PORT_MAX)
    passwordless_sudo_access: bool = Field(True, alias="passwordlessSudoAccess")
    air_gap_install: bool = Field(False, alias="airGapInstall")

    @field_validator("key_code")
    @classmethod
    def key_code_not_blank(cls, value: str) -> str:
        """Reject whitespace-only key codes, which binding treats as missing."""
        if not value.strip():
            raise ValueError("keyCode must not be blank")
        return value

    @property
    def has_key_content(self) -> bool:
        """True when key material was uploaded rather than left to be generated."""
        return bool(self.key_content and self.key_content.strip())


class AccessKeyAccepted(BaseModel):
    """Immediate response after an access key request is handed off."""

    key_code: str
    region_uuid: uuid.UUID
    provider_uuid: uuid.UUID
    status: str = "accepted"
    message: str = "Access key request accepted for processing"
