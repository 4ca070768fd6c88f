"""Programmatic construction of value trees."""

from __future__ import annotations

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
)


def new_object() -> VObject:
    return VObject()


def new_string(s: str) -> VString:
    return VString(s)


def new_int(value: int) -> VInt:
    return VInt(int(value))


def new_double(value: float) -> VDouble:
    return VDouble(float(value))


def new_bool(value) -> VBool:
    return VBool(bool(value))


def new_null() -> VNull:
    return VNull()


def new_list(items: list[Value] | None = None) -> VList:
    lst = VList()
    for item in items or ():
        list_push(lst, item)
    return lst


def new_table(columns: list[str]) -> VTable:
    return VTable(columns=list(columns))


def list_push(container: VList | VTable, item: Value) -> Value:
    """Append *item* as a list element; list elements carry no key."""
    if isinstance(container, VTable):
        if not isinstance(item, VObject):
            raise TypeError("table rows must be VObject")
        container.rows.append(item)
    else:
        container.items.append(item)
    item.key = None
    item.indent = container.indent + 1
    return item


def add_property(obj: VObject, key: str, value: Value) -> Value:
    """Attach *value* to *obj* under *key* and return it.

    Properties are appended; an existing property with the same key is
    left in place and keeps winning lookups.
    """
    value.key = key
    value.indent = obj.indent + 1
    obj.properties.append(value)
    return value
