"""Identifier rules: vertex and edge ids are either ``int`` or ``str``."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from netsgraph.exceptions import InvalidIdentifierError

if TYPE_CHECKING:
    from collections.abc import Iterable

VertexId = int | str
"""A vertex identifier.  ``1`` and ``"1"`` are different vertices."""

EdgeId = int | str
"""An edge identifier, unique within one network."""

_INT_RE = re.compile(r"^[+-]?\d+$")


def check_id(value: Any, *, kind: str = "vertex") -> VertexId:
    """Return *value* unchanged if it is a valid identifier.

    ``bool`` is rejected even though it subclasses ``int``, so ``True``
    never silently aliases vertex ``1``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        msg = f"Invalid {kind} id {value!r}: expected int or str, got {type(value).__name__}"
        raise InvalidIdentifierError(msg)
    return value


def id_sort_key(value: VertexId) -> tuple[int, int | str]:
    """Total order over mixed ids: all ints first (by value), then strings."""
    if isinstance(value, int):
        return (0, value)
    return (1, value)


def sorted_ids(ids: Iterable[VertexId]) -> list[VertexId]:
    """Return *ids* sorted with :func:`id_sort_key`."""
    return sorted(ids, key=id_sort_key)


def parse_id(text: str) -> VertexId:
    """Parse a textual id (e.g. a CSV header cell).

    Integer-looking text becomes an ``int``; anything else is kept as a
    stripped string.
    """
    text = text.strip()
    if _INT_RE.match(text):
        return int(text)
    return text


def format_number(value: float) -> str:
    """Render a weight without a trailing ``.0`` when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
