"""Value types for TOON Core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class VString:
    value: str
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return self.value


@dataclass
class VInt:
    value: int
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class VDouble:
    value: float
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return repr(self.value)


@dataclass
class VBool:
    value: bool
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VNull:
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return "null"


@dataclass
class VObject:
    """Ordered properties; each property carries its own key."""

    properties: list["Value"] = field(default_factory=list)
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{p.key}: {p}" for p in self.properties) + "}"


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VTable:
    """List produced by ``key[N]{col,...}:``; every row is a VObject."""

    rows: list[VObject] = field(default_factory=list)
    columns: list[str] = field(default_factory=list)
    key: str | None = field(default=None, compare=False)
    indent: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return "[" + ", ".join(str(r) for r in self.rows) + "]"


class _Absent:
    """Singleton returned when a lookup misses."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Absent"


Absent = _Absent()

Value = Union[VString, VInt, VDouble, VBool, VNull, VObject, VList, VTable]
