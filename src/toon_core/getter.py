"""Path resolution, list access and typed getters.

Lookups never raise: a miss, a wrong kind or a ``None`` input all give
:data:`Absent`.  Typed getters fall back to a per-kind default instead.
"""

from __future__ import annotations

from .values import (
    Absent,
    Value,
    VBool,
    VDouble,
    VInt,
    VList,
    VNull,
    VObject,
    VString,
    VTable,
    _Absent,
)


def get(value: Value | _Absent | None, path: str | None) -> Value | _Absent:
    """Walk a dotted *path* of property keys starting at *value*.

    Each segment picks the first property with an exactly equal key.
    Stepping into anything but a VObject yields Absent.
    """
    if value is None or path is None or isinstance(value, _Absent):
        return Absent

    current: Value = value
    for segment in path.split("."):
        if not isinstance(current, VObject):
            return Absent
        for prop in current.properties:
            if prop.key == segment:
                current = prop
                break
        else:
            return Absent
    return current


def _elements(value) -> list[Value] | None:
    if isinstance(value, VList):
        return value.items
    if isinstance(value, VTable):
        return value.rows
    return None


def length(value) -> int:
    """Element count of a list or table; ``-1`` for anything else."""
    elements = _elements(value)
    return -1 if elements is None else len(elements)


def at(value, index: int) -> Value | _Absent:
    elements = _elements(value)
    if elements is None or index < 0 or index >= len(elements):
        return Absent
    return elements[index]


# ---------------------------------------------------------------------------
# Typed getters
# ---------------------------------------------------------------------------

def as_string(value) -> str | None:
    return value.value if isinstance(value, VString) else None


def as_int(value) -> int:
    return value.value if isinstance(value, VInt) else 0


def as_double(value) -> float:
    return value.value if isinstance(value, VDouble) else 0.0


def as_bool(value) -> bool:
    return value.value if isinstance(value, VBool) else False


# ---------------------------------------------------------------------------
# Kind predicates
# ---------------------------------------------------------------------------

def is_string(value) -> bool:
    return isinstance(value, VString)


def is_int(value) -> bool:
    return isinstance(value, VInt)


def is_double(value) -> bool:
    return isinstance(value, VDouble)


def is_bool(value) -> bool:
    return isinstance(value, VBool)


def is_null(value) -> bool:
    return isinstance(value, VNull)


def is_object(value) -> bool:
    return isinstance(value, VObject)


def is_list(value) -> bool:
    """True for plain lists and tables alike."""
    return isinstance(value, (VList, VTable))


def is_table(value) -> bool:
    return isinstance(value, VTable)
