"""Tests for programmatic tree construction."""

import pytest

from toon_core import (
    VBool,
    VDouble,
    VInt,
    VNull,
    VString,
    add_property,
    as_double,
    get,
    length,
    list_push,
    new_bool,
    new_double,
    new_int,
    new_list,
    new_null,
    new_object,
    new_string,
    new_table,
    at,
)


def test_constructors():
    assert new_string("Test User") == VString("Test User")
    assert new_int(42) == VInt(42)
    assert new_double(95.5) == VDouble(95.5)
    assert new_bool(1) == VBool(True)
    assert new_null() == VNull()


def test_add_property_sets_key_and_indent():
    root = new_object()
    name = add_property(root, "name", new_string("Test User"))
    assert name.key == "name"
    assert name.indent == root.indent + 1
    assert get(root, "name") is name


def test_built_tree_is_queryable():
    root = new_object()
    add_property(root, "name", new_string("Test User"))
    add_property(root, "age", new_int(42))
    add_property(root, "score", new_double(95.5))
    add_property(root, "active", new_bool(True))
    add_property(root, "null_field", new_null())
    tags = add_property(root, "tags", new_list())
    for tag in ("admin", "user", "tester"):
        list_push(tags, new_string(tag))

    assert [p.key for p in root.properties] == [
        "name", "age", "score", "active", "null_field", "tags",
    ]
    assert as_double(get(root, "score")) == pytest.approx(95.5)
    assert length(get(root, "tags")) == 3
    assert at(get(root, "tags"), 2) == VString("tester")


def test_new_list_with_items():
    lst = new_list([new_int(1), new_int(2)])
    assert lst.items == [VInt(1), VInt(2)]


def test_list_push_clears_key():
    lst = new_list()
    item = new_int(1)
    item.key = "stray"
    list_push(lst, item)
    assert item.key is None


def test_table_push_requires_object():
    table = new_table(["a"])
    row = new_object()
    add_property(row, "a", new_int(1))
    list_push(table, row)
    assert length(table) == 1
    with pytest.raises(TypeError):
        list_push(table, new_int(2))


def test_nested_objects():
    root = new_object()
    db = add_property(root, "database", new_object())
    add_property(db, "host", new_string("localhost"))
    assert get(root, "database.host") == VString("localhost")
    assert get(root, "database.host").indent == 2
