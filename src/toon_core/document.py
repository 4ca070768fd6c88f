"""Document — one parsed source together with its diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field

from .emitter import to_json
from .errors import Diagnostic, Severity
from .getter import get
from .values import Value, VObject, _Absent


@dataclass
class Document:
    """Holds the root of a parse and everything reported while parsing."""

    root: VObject = field(default_factory=lambda: VObject(indent=-1))
    diagnostics: list[Diagnostic] = field(default_factory=list)

    # -- Convenience accessors ------------------------------------------

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    def get(self, path: str) -> Value | _Absent:
        return get(self.root, path)

    def keys(self) -> list[str]:
        """Top-level property keys in source order."""
        return [p.key for p in self.root.properties]

    def to_json(self) -> str:
        return to_json(self.root)
