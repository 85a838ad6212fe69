"""Access key creation endpoint.

POST /api/v1/providers/{provider_uuid}/access_keys -- validate and hand off an access key request
"""

import json
import uuid
from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from accesskeys.config import settings
from accesskeys.dependencies import Handler
from accesskeys.metrics import access_keys_accepted
from accesskeys.schemas.access_key import AccessKeyAccepted
from accesskeys.schemas.common import ErrorResponse, ValidationErrorResponse
from accesskeys.services.access_key_form import bind_access_key_form

log = structlog.get_logger()

router = APIRouter(prefix=settings.api_prefix, tags=["access_keys"])


async def read_request_fields(request: Request) -> dict[str, Any]:
    """Collect the request's field set from a JSON or form-encoded body.

    Uploaded files are passed on as raw bytes, so a key file posted as
    keyContent binds like pasted key text and is rejected if it is not UTF-8.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        fields: dict[str, Any] = {}
        async with request.form() as form:
            for name, value in form.items():
                if isinstance(value, UploadFile):
                    value = await value.read()
                fields[name] = value
        return fields

    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body is not valid JSON")
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return payload


@router.post(
    "/providers/{provider_uuid}/access_keys",
    response_model=AccessKeyAccepted,
    status_code=202,
    responses={400: {"model": ValidationErrorResponse}, 503: {"model": ErrorResponse}},
)
async def create_access_key(
    provider_uuid: uuid.UUID,
    request: Request,
    handler: Handler,
):
    """Validate an access key request and pass it to the access key handler.

    Validation rules enforced:
    - keyCode and regionUUID must be present and non-blank (400)
    - sshPort, passwordlessSudoAccess, airGapInstall and regionUUID must
      coerce to their types; keyType must be PUBLIC or PRIVATE (400)
    - A handler must be registered on the application (503)

    Omitted optional fields take their defaults (sshPort 22, passwordless
    sudo on, air-gap install off) before the handler sees the form.
    """
    fields = await read_request_fields(request)
    result = bind_access_key_form(fields)
    if not result.ok:
        return JSONResponse(
            status_code=400,
            content=ValidationErrorResponse(fields=list(result.errors)).model_dump(mode="json"),
        )

    form = result.form
    await handler(provider_uuid, form)
    access_keys_accepted.inc()

    log.info(
        "access_key_accepted",
        provider_uuid=str(provider_uuid),
        region_uuid=str(form.region_uuid),
        key_code=form.key_code,
        uploaded=form.has_key_content,
    )
    return AccessKeyAccepted(
        key_code=form.key_code,
        region_uuid=form.region_uuid,
        provider_uuid=provider_uuid,
    )
