"""Tree teardown."""

from __future__ import annotations

from .values import Value, VList, VObject, VString, VTable, _Absent


def release(value: Value | _Absent | None) -> int:
    """Detach every node of the tree rooted at *value*.

    Containers are emptied and keys cleared so that no sub-tree stays
    reachable from another.  The walk uses an explicit stack, so wide or
    deep trees do not recurse.  Returns the number of values released.
    """
    if value is None or isinstance(value, _Absent):
        return 0

    count = 0
    pending: list[Value] = [value]
    while pending:
        node = pending.pop()
        if isinstance(node, VObject):
            pending.extend(node.properties)
            node.properties.clear()
        elif isinstance(node, VList):
            pending.extend(node.items)
            node.items.clear()
        elif isinstance(node, VTable):
            pending.extend(node.rows)
            node.rows.clear()
            node.columns.clear()
        elif isinstance(node, VString):
            node.value = ""
        node.key = None
        count += 1
    return count
