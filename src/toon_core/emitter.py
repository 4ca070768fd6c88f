"""JSON emission for value trees."""

from __future__ import annotations

import json
import math
from typing import IO, Any

from .values import (
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

INDENT = "  "


def _fmt_scalar(value: Value) -> str:
    if isinstance(value, VString):
        return json.dumps(value.value, ensure_ascii=False)
    if isinstance(value, VBool):
        return "true" if value.value else "false"
    if isinstance(value, VInt):
        return str(value.value)
    if isinstance(value, VDouble):
        # JSON has no spelling for nan/inf
        if math.isnan(value.value) or math.isinf(value.value):
            return "null"
        return repr(value.value)
    return "null"


def _write(value: Value, depth: int, out: list[str]) -> None:
    if isinstance(value, VObject):
        if not value.properties:
            out.append("{}")
            return
        pad = INDENT * (depth + 1)
        out.append("{\n")
        for i, prop in enumerate(value.properties):
            if i:
                out.append(",\n")
            out.append(f"{pad}{json.dumps(prop.key or '', ensure_ascii=False)}: ")
            _write(prop, depth + 1, out)
        out.append("\n" + INDENT * depth + "}")
        return

    if isinstance(value, (VList, VTable)):
        elements = value.items if isinstance(value, VList) else value.rows
        if not elements:
            out.append("[]")
            return
        pad = INDENT * (depth + 1)
        out.append("[\n")
        for i, item in enumerate(elements):
            if i:
                out.append(",\n")
            out.append(pad)
            _write(item, depth + 1, out)
        out.append("\n" + INDENT * depth + "]")
        return

    out.append(_fmt_scalar(value))


def to_json(value: Value | _Absent, depth: int = 0) -> str:
    """Pretty-print *value* as JSON with two spaces per level.

    A keyed value is emitted as its bare value; the key belongs to the
    enclosing object.  Absent emits ``null``.
    """
    if isinstance(value, _Absent):
        return "null"
    out: list[str] = []
    _write(value, depth, out)
    return "".join(out)


def dump_json(value: Value | _Absent, fp: IO[str], depth: int = 0) -> None:
    fp.write(to_json(value, depth))


def to_python(value: Value | _Absent) -> Any:
    """Convert to plain dicts, lists and scalars.

    Duplicate keys keep their first occurrence, matching :func:`get`.
    """
    if isinstance(value, VObject):
        result: dict[str, Any] = {}
        for prop in value.properties:
            if prop.key not in result:
                result[prop.key] = to_python(prop)
        return result
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VTable):
        return [to_python(r) for r in value.rows]
    if isinstance(value, (VNull, _Absent)):
        return None
    return value.value
