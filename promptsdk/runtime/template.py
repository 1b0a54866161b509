"""Template variable engine for ``{{name}}`` placeholders.

A placeholder opens at a literal ``{{`` and closes at the first ``}}`` that
follows it. There is no brace balancing and no escaping, so
``"{{a} } {{b}}"`` holds a single placeholder named ``"a} } {{b"``.

Rendering is done in two separate steps so a caller can validate before
doing anything that depends on the final text:

    required = extract_variable_names(text)
    picked = pick_variables(required, user_vars)   # Outcome[dict]
    final = replace_variables(text, picked.unwrap())
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping

from promptsdk.core.errors import MissingVariable
from promptsdk.result import Outcome, err, ok

OPEN = '{{'
CLOSE = '}}'


def _scan(template: str) -> Iterator[tuple[int, int, str]]:
    """Yield ``(start, end, name)`` for each placeholder, left to right.

    ``template[start:end]`` is the whole ``{{name}}`` span.
    """
    pos = 0
    while True:
        start = template.find(OPEN, pos)
        if start == -1:
            return
        close = template.find(CLOSE, start + len(OPEN))
        if close == -1:
            return
        end = close + len(CLOSE)
        yield start, end, template[start + len(OPEN):close]
        pos = end


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _format_float(value: float) -> str:
    # Plain decimals in [1e-6, 1e21), exponent form ("1e-7", "1e+21") outside.
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        text = format(Decimal(text), 'f')
        return text.rstrip('0').rstrip('.') if '.' in text else text
    mantissa, _, exponent = text.partition('e')
    return f'{mantissa}e{int(exponent):+d}'


def extract_variable_names(template: str) -> list[str]:
    """Find all variable names present in a template.

    Args:
        template: Prompt text, e.g. ``"Hello {{name}}"``.

    Returns:
        Every placeholder payload in scan order, duplicates included.
    """
    return [name for _, _, name in _scan(template)]


def pick_variables(required: Iterable[str], supplied: Mapping[str, Any]) -> Outcome[dict[str, Any]]:
    """Project ``supplied`` onto the ``required`` names.

    A name counts as supplied only when it is a key of ``supplied`` and its
    value is not ``None``. Keys that are not required are dropped.

    Returns:
        ``Ok`` with a new dict holding exactly the required keys, or ``Err``
        with a ``MissingVariable`` listing every missing name.
    """
    picked: dict[str, Any] = {}
    missing: list[str] = []

    for name in required:
        if name in picked or name in missing:
            continue
        value = supplied.get(name)
        if value is None:
            missing.append(name)
        else:
            picked[name] = value

    if missing:
        return err(MissingVariable(
            message=f'Missing prompt variables: {", ".join(missing)}',
            names=tuple(missing),
        ))
    return ok(picked)


def replace_variables(template: str, variables: Mapping[str, Any]) -> str:
    """Replace ``{{name}}`` placeholders with values from ``variables``.

    Placeholders without a value (absent or ``None``) are left untouched,
    which allows rendering a prompt in several passes. Inserted values are
    not scanned again.
    """
    parts: list[str] = []
    pos = 0
    for start, end, name in _scan(template):
        value = variables.get(name)
        if value is None:
            continue
        parts.append(template[pos:start])
        parts.append(_stringify(value))
        pos = end
    parts.append(template[pos:])
    return ''.join(parts)


def missing_variables(template: str, variables: Mapping[str, Any]) -> list[str]:
    """Names used by ``template`` that ``variables`` does not resolve, deduplicated."""
    seen: list[str] = []
    for name in extract_variable_names(template):
        if variables.get(name) is None and name not in seen:
            seen.append(name)
    return seen
