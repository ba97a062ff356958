"""Argument validation against an `OperationSchema`.

Runs before any request is built; on failure nothing is sent and nothing is
logged as a remote error.
"""

from __future__ import annotations

from typing import Any, Mapping

from starbuero.core.domain.models import FieldKind, FieldSpec, OperationSchema
from starbuero.core.errors import ValidationError

_ARRAY_TYPES = (list, tuple)


def _is_provided(value: Any) -> bool:
    return value is not None


def check_field(spec: FieldSpec, value: Any) -> bool:
    """Return True when `value` satisfies `spec` (required fields only)."""

    if spec.kind is FieldKind.EXPLICIT_BOOLEAN:
        return _is_provided(value)
    if spec.kind is FieldKind.ARRAY:
        return isinstance(value, _ARRAY_TYPES)
    if isinstance(value, str):
        return value != ""
    return _is_provided(value)


def validate_arguments(schema: OperationSchema, arguments: Mapping[str, Any]) -> None:
    """Raise `ValidationError` listing every required argument that fails its check.

    Optional arguments are not checked; absent ones are simply not sent.
    """

    failed = [
        spec.name
        for spec in schema.required_fields
        if not check_field(spec, arguments.get(spec.name))
    ]
    if failed:
        raise ValidationError(schema.name, failed)
