import uuid
from typing import Annotated, Protocol

from fastapi import Depends, HTTPException, Request

from accesskeys.schemas.access_key import AccessKeyFormData


class AccessKeyHandler(Protocol):
    """Workflow that creates the access key described by a validated form.

    Implemented by the provisioning side of the application; this service
    only validates requests and hands them off.
    """

    async def __call__(self, provider_uuid: uuid.UUID, form: AccessKeyFormData) -> None:
        ...


async def get_access_key_handler(request: Request) -> AccessKeyHandler:
    """Inject the access key handler from app.state (registered at startup).

    Raises 503 when no handler has been registered.
    """
    handler = getattr(request.app.state, "access_key_handler", None)
    if handler is None:
        raise HTTPException(status_code=503, detail="Access key handler is not configured")
    return handler


Handler = Annotated[AccessKeyHandler, Depends(get_access_key_handler)]
