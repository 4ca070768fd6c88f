"""Exceptions and parse diagnostics for TOON Core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TOONError(Exception):
    """Base class for errors raised by TOON Core."""


class DepthLimitError(TOONError):
    """Nesting went deeper than the indent stack allows."""

    def __init__(self, line: int, max_depth: int) -> None:
        super().__init__(f"Nesting too deep at line {line}: limit is {max_depth} levels")
        self.line = line
        self.max_depth = max_depth


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Diagnostic:
    message: str
    line: int
    column: int = 0
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        return self.message
