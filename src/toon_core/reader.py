"""Reader layer: turns TOON source text into a value tree.

The driver walks the input one logical line at a time.  Every property
line is parsed by :meth:`Parser._parse_property` into a Value and then
attached under the innermost open container whose depth matches the
line's indent level.  Open containers live on a bounded stack indexed by
indent level, so dedents are plain pops.
"""

from __future__ import annotations

import sys
from typing import IO

from .cursor import Cursor, WHITESPACE
from .document import Document
from .errors import DepthLimitError, Diagnostic, Severity
from .options import ParseOptions
from .scalars import atom_to_value, find_inline_comment, read_field
from .values import Value, VList, VObject, VTable

_DIGITS = "0123456789"


class Parser:
    """Single-use parser over one input.

    Diagnostics are appended to :attr:`diagnostics` and, when *echo* is
    true, printed one per line to *errors* (``sys.stderr`` by default).
    """

    def __init__(
        self,
        text: str | bytes,
        errors: IO[str] | None = None,
        options: ParseOptions | None = None,
        echo: bool = True,
    ) -> None:
        self.errors = errors
        self.options = options or ParseOptions()
        self.echo = echo
        self.diagnostics: list[Diagnostic] = []
        if isinstance(text, (bytes, bytearray)):
            text = self._decode(bytes(text))
        # Input ends at the first NUL.
        nul = text.find("\0")
        if nul >= 0:
            text = text[:nul]
        self.cur = Cursor(text)

    def _decode(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            line = data.count(b"\n", 0, exc.start) + 1
            self._report(
                f"Warning at line {line}: invalid UTF-8 replaced",
                line, 0, Severity.WARNING,
            )
            return data.decode("utf-8", errors="replace")

    # -- Driver ---------------------------------------------------------

    def parse(self) -> VObject:
        cur = self.cur
        root = VObject(indent=-1)
        stack: list[VObject] = [root]

        while not cur.at_end():
            line_start = cur.pos
            if cur.at_comment_or_blank():
                cur.skip_line()
                continue
            cur.pos = line_start

            line = cur.line
            indent = cur.count_indent()
            cur.skip_spaces()  # tabs after the spaces count for nothing

            prop, opens = self._parse_property(indent)
            if prop is not None:
                while len(stack) > indent + 1 or stack[-1].indent >= indent:
                    stack.pop()
                stack[-1].properties.append(prop)
                if opens:
                    if len(stack) >= self.options.max_depth:
                        raise DepthLimitError(line, self.options.max_depth)
                    stack.append(prop)

            cur.skip_line()

        return root

    # -- Property line --------------------------------------------------

    def _parse_property(self, indent: int) -> tuple[Value | None, bool]:
        """Parse ``key[N]{cols}: rhs`` at the cursor.

        Returns the new value (``None`` when the line is dropped) and
        whether it opens a nested object.
        """
        cur = self.cur
        text = cur.text
        line = cur.line
        end = cur.line_end()

        start = pos = cur.pos
        while pos < end and text[pos] not in ":[{":
            pos += 1
        key = text[start:pos].rstrip(WHITESPACE)
        cur.pos = pos
        if not key:
            return None, False

        bracketed = cur.peek() == "["
        arity = self._parse_arity()
        columns = self._parse_columns(end)

        if cur.peek() != ":":
            self._report(
                f"Syntax error at line {line}: expected ':'",
                line, cur.column(), Severity.ERROR,
            )
            return None, False
        cur.pos += 1

        opens = False
        if columns is not None:
            value: Value = self._parse_table(columns, arity, indent)
        elif arity >= 0:
            value = self._parse_inline_list(arity, indent, line)
        else:
            value, opens = self._parse_scalar()
            # `key[]:` yields an empty object but never opens a block
            opens = opens and not bracketed

        value.key = key
        value.indent = indent
        return value, opens

    def _parse_arity(self) -> int:
        cur = self.cur
        if cur.peek() != "[":
            return -1
        cur.pos += 1
        start = cur.pos
        while cur.peek() and cur.peek() in _DIGITS:
            cur.pos += 1
        arity = int(cur.text[start:cur.pos]) if cur.pos > start else -1
        if cur.peek() == "]":
            cur.pos += 1
        return arity

    def _parse_columns(self, end: int) -> list[str] | None:
        cur = self.cur
        if cur.peek() != "{":
            return None
        cur.pos += 1
        close = cur.text.find("}", cur.pos, end)
        stop = end if close < 0 else close
        payload = cur.text[cur.pos:stop]
        cur.pos = stop if close < 0 else close + 1
        if not payload.strip(WHITESPACE):
            return []
        return [name.strip(WHITESPACE) for name in payload.split(",")]

    def _payload_end(self) -> int:
        cur = self.cur
        end = cur.line_end()
        if self.options.strip_inline_comments:
            end = find_inline_comment(cur.text, cur.pos, end)
        return end

    # -- Right-hand sides -----------------------------------------------

    def _parse_scalar(self) -> tuple[Value, bool]:
        cur = self.cur
        cur.skip_spaces()
        end = self._payload_end()
        atom = cur.text[cur.pos:end].strip(WHITESPACE)
        cur.pos = end
        if not atom:
            return VObject(), True
        return atom_to_value(atom, self.options.unescape_strings), False

    def _parse_inline_list(self, arity: int, indent: int, line: int) -> VList:
        cur = self.cur
        lst = VList()
        cur.skip_spaces()
        end = self._payload_end()
        if cur.pos >= end:
            return lst

        dropped = 0
        while True:
            atom = read_field(cur, end)
            if len(lst.items) < arity:
                item = atom_to_value(atom, self.options.unescape_strings)
                item.indent = indent + 1
                lst.items.append(item)
            else:
                dropped += 1
            if cur.pos < end and cur.text[cur.pos] == ",":
                cur.pos += 1
                continue
            break

        if dropped:
            self._report(
                f"Warning at line {line}: list declares {arity} items, extra values dropped",
                line, 0, Severity.WARNING,
            )
        return lst

    def _parse_table(self, columns: list[str], arity: int, indent: int) -> VTable:
        """Read up to *arity* rows (unbounded when negative) below the header.

        Rows are positional: their indent is not checked.  A blank line or
        end of input ends the table early.
        """
        cur = self.cur
        text = cur.text
        table = VTable(columns=columns)
        cur.pos = cur.line_end()

        while arity < 0 or len(table.rows) < arity:
            cur.consume_newline()
            cur.skip_spaces()
            end = cur.line_end()
            if not text[cur.pos:end].strip(WHITESPACE):
                break

            row = VObject(indent=indent + 1)
            for i, name in enumerate(columns):
                if i and cur.pos < end:
                    cur.pos += 1  # the ',' read_field stopped on
                cell = atom_to_value(read_field(cur, end), self.options.unescape_strings)
                cell.key = name
                cell.indent = indent + 2
                row.properties.append(cell)

            if cur.pos < end:
                self._report(
                    f"Warning at line {cur.line}: row has more values than columns",
                    cur.line, cur.column(), Severity.WARNING,
                )
                cur.pos = end
            table.rows.append(row)

        return table

    # -- Diagnostics ----------------------------------------------------

    def _report(self, message: str, line: int, column: int, severity: Severity) -> None:
        self.diagnostics.append(Diagnostic(message, line, column, severity))
        if self.echo:
            print(message, file=self.errors or sys.stderr)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(
    text: str | bytes,
    errors: IO[str] | None = None,
    *,
    options: ParseOptions | None = None,
) -> VObject:
    """Parse *text* and return the root object.

    Malformed lines are reported to *errors* and skipped; only
    :class:`DepthLimitError` escapes.
    """
    return Parser(text, errors, options).parse()


def parse_document(text: str | bytes, options: ParseOptions | None = None) -> Document:
    """Parse *text* into a :class:`Document`, collecting diagnostics silently."""
    parser = Parser(text, options=options, echo=False)
    root = parser.parse()
    return Document(root=root, diagnostics=parser.diagnostics)
