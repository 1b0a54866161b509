"""Early-return checks for decoding untrusted response bodies.

Each helper returns an outcome. A decoder runs them in order and returns
the first ``Err`` it sees, so the error always names the first bad field.
"""

from __future__ import annotations

from typing import Any

from promptsdk.core.errors import MalformedResponse
from promptsdk.result import Outcome, err, ok

_MISSING = object()


def decode_error(operation: str, reason: str, field: str | None = None) -> MalformedResponse:
    return MalformedResponse(
        message=f'{operation}: Failed to decode response ({reason})',
        field=field,
    )


def expect_object(body: Any, *, operation: str) -> Outcome[dict[str, Any]]:
    """The response body itself must be a JSON object."""
    if not isinstance(body, dict):
        return err(decode_error(operation, 'invalid body format'))
    return ok(body)


def expect_field(
    obj: dict[str, Any],
    name: str,
    types: type | tuple[type, ...],
    *,
    operation: str,
    path: str | None = None,
    nullable: bool = False,
) -> Outcome[Any]:
    """A required field: the key must exist and hold one of ``types``.

    Args:
        obj: Object holding the field.
        name: Key to read.
        types: Accepted Python types for the JSON value.
        operation: Operation name used in the error message.
        path: Dotted path reported on failure (defaults to ``name``).
        nullable: Accept an explicit JSON ``null``.
    """
    path = path or name
    value = obj.get(name, _MISSING)

    if value is _MISSING:
        return err(decode_error(operation, f'missing {path}', path))
    if value is None and nullable:
        return ok(None)
    # bool is an int subclass; never let true/false pass as a number
    if isinstance(value, bool) and bool not in _as_tuple(types):
        return err(decode_error(operation, f'missing {path}', path))
    if not isinstance(value, types):
        return err(decode_error(operation, f'missing {path}', path))
    return ok(value)


def optional_string(obj: dict[str, Any], name: str) -> str | None:
    """An optional field: anything but a string reads as absent."""
    value = obj.get(name)
    return value if isinstance(value, str) else None


def _as_tuple(types: type | tuple[type, ...]) -> tuple[type, ...]:
    return types if isinstance(types, tuple) else (types,)
