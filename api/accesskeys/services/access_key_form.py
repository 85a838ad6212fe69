"""Binding and validation of access key request fields.

Turns a raw request field set (parsed JSON or form fields, keyed by wire
name) into an immutable AccessKeyFormData, or into the list of fields that
were rejected.

Binding rules:
- Keys that are not access key fields are ignored.
- None and blank strings count as absent, the way a form post sends an
  empty input. Absent optional fields take their defaults; absent keyCode
  or regionUUID is a missing_required_field error.
- Values are coerced leniently ("22" -> 22, "on" -> True, UUID strings ->
  uuid.UUID). A keyType that is not a KeyType variant is reported as
  invalid_enumeration_value; any other coercion failure as
  invalid_field_type. Uploaded bytes must decode as UTF-8 or the field is
  invalid_field_type.
- All-or-nothing: every failing field is reported and no form is produced.
"""

from collections.abc import Mapping
from typing import Any, Optional

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from accesskeys.metrics import form_rejections
from accesskeys.schemas.access_key import AccessKeyFormData
from accesskeys.schemas.common import FieldError, FieldErrorKind

log = structlog.get_logger()

# Wire names in declaration order.
FORM_FIELDS: tuple[str, ...] = tuple(
    info.alias or name for name, info in AccessKeyFormData.model_fields.items()
)
REQUIRED_FIELDS: tuple[str, ...] = ("keyCode", "regionUUID")


class AccessKeyFormError(ValueError):
    """Raised when request fields cannot be bound to an AccessKeyFormData."""

    def __init__(self, errors: tuple[FieldError, ...]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{error.field}: {error.message}" for error in errors)
        )

    @property
    def kinds(self) -> list[FieldErrorKind]:
        """Distinct error kinds, in the order they were first reported."""
        return list(dict.fromkeys(error.kind for error in self.errors))


class FormBindingResult(BaseModel):
    """Outcome of binding: either a form or the errors that prevented one."""

    model_config = ConfigDict(frozen=True)

    form: Optional[AccessKeyFormData] = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.form is not None

    def missing_fields(self) -> list[str]:
        return [
            error.field
            for error in self.errors
            if error.kind is FieldErrorKind.MISSING_REQUIRED_FIELD
        ]


def _is_blank(value: Any) -> bool:
    if isinstance(value, bytes):
        return not value.strip()
    return value is None or (isinstance(value, str) and not value.strip())


def _present_fields(fields: Mapping[str, Any]) -> tuple[dict[str, Any], list[FieldError]]:
    """Drop absent fields and decode uploaded bytes as UTF-8.

    Bytes that do not decode are reported instead of being bound.
    """
    present: dict[str, Any] = {}
    errors: list[FieldError] = []
    for name in FORM_FIELDS:
        if name not in fields or _is_blank(fields[name]):
            continue
        value = fields[name]
        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError as exc:
                errors.append(
                    FieldError(
                        field=name,
                        kind=FieldErrorKind.INVALID_FIELD_TYPE,
                        message=f"Input should be valid UTF-8 text: {exc.reason}",
                    )
                )
                continue
        present[name] = value
    return present, errors


def _to_field_error(error: dict) -> FieldError:
    field = str(error["loc"][0]) if error["loc"] else "__root__"
    if error["type"] == "missing":
        return FieldError(
            field=field,
            kind=FieldErrorKind.MISSING_REQUIRED_FIELD,
            message=f"{field} is required",
        )
    if error["type"] == "enum":
        return FieldError(
            field=field,
            kind=FieldErrorKind.INVALID_ENUMERATION_VALUE,
            message=error["msg"],
        )
    return FieldError(
        field=field,
        kind=FieldErrorKind.INVALID_FIELD_TYPE,
        message=error["msg"],
    )


def _rejected(errors: tuple[FieldError, ...]) -> FormBindingResult:
    for error in errors:
        form_rejections.labels(field=error.field, kind=error.kind.value).inc()
    log.warning(
        "access_key_form_rejected",
        fields=[error.field for error in errors],
        kinds=[error.kind.value for error in errors],
    )
    return FormBindingResult(errors=errors)


def bind_access_key_form(fields: Mapping[str, Any]) -> FormBindingResult:
    """Bind raw request fields to an AccessKeyFormData.

    Never raises for bad input; inspect ``result.ok`` / ``result.errors``.
    """
    present, decode_errors = _present_fields(fields)
    try:
        form = AccessKeyFormData.model_validate(present)
    except ValidationError as exc:
        undecodable = {error.field for error in decode_errors}
        errors = [_to_field_error(error) for error in exc.errors()]
        return _rejected(
            tuple(decode_errors) + tuple(e for e in errors if e.field not in undecodable)
        )
    if decode_errors:
        return _rejected(tuple(decode_errors))

    log.debug(
        "access_key_form_bound",
        key_code=form.key_code,
        region_uuid=str(form.region_uuid),
    )
    return FormBindingResult(form=form)


def validate_access_key_form(fields: Mapping[str, Any]) -> AccessKeyFormData:
    """Bind raw request fields, raising AccessKeyFormError on any rejection."""
    result = bind_access_key_form(fields)
    if not result.ok:
        raise AccessKeyFormError(result.errors)
    return result.form
