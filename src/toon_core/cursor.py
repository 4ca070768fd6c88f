"""Lexical primitives: a line-counting cursor over the source text."""

from __future__ import annotations

# ASCII whitespace, as trimmed around keys and values.
WHITESPACE = " \t\r\n\v\f"


class Cursor:
    """Mutable position over *text* with a 1-based line counter.

    End of input is ``pos >= len(text)``; :meth:`peek` returns ``""`` there
    so that character tests never need a separate bounds check.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def at_line_end(self) -> bool:
        """True at ``\\n`` or end of input."""
        return self.pos >= len(self.text) or self.text[self.pos] == "\n"

    def skip_spaces(self) -> None:
        """Advance over spaces and tabs; never crosses a newline."""
        text = self.text
        while self.pos < len(text) and text[self.pos] in " \t":
            self.pos += 1

    def consume_newline(self) -> None:
        if self.peek() == "\n":
            self.pos += 1
            self.line += 1

    def count_indent(self) -> int:
        """Consume leading spaces (not tabs) and return the indent level."""
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] == " ":
            self.pos += 1
        return (self.pos - start) // 2

    def line_end(self) -> int:
        """Index of the next newline, or ``len(text)``."""
        end = self.text.find("\n", self.pos)
        return len(self.text) if end < 0 else end

    def skip_line(self) -> None:
        self.pos = self.line_end()
        self.consume_newline()

    def at_comment_or_blank(self) -> bool:
        self.skip_spaces()
        return self.peek() in ("#", "\n", "")

    def column(self) -> int:
        """1-based column of the cursor on its line."""
        return self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
