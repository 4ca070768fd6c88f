"""Scalar recognition: turns a trimmed atom into a leaf Value."""

from __future__ import annotations

import re

from .cursor import Cursor, WHITESPACE
from .values import Value, VBool, VDouble, VInt, VNull, VString

_NUMBER_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_ESCAPE_RE = re.compile(r'\\(["\\])')

# Longest atom still converted as a number; longer digit runs stay text.
NUMERIC_SCRATCH = 128


def unquote(atom: str, unescape: bool = True) -> str:
    """Strip the surrounding double quotes, optionally resolving \\" and \\\\."""
    inner = atom[1:-1]
    if unescape:
        return _ESCAPE_RE.sub(r"\1", inner)
    return inner


def atom_to_value(atom: str, unescape: bool = True) -> Value:
    """Classify an already-trimmed atom.

    First match wins:

    - ``""`` (empty)            → VNull
    - ``"..."``                 → VString of the interior
    - ``true`` / ``false``      → VBool
    - ``null``                  → VNull
    - ``-12`` / ``+3``          → VInt
    - ``1.5`` / ``2e10``        → VDouble
    - anything else             → VString, verbatim
    """
    if not atom:
        return VNull()
    if len(atom) >= 2 and atom[0] == '"' and atom[-1] == '"':
        return VString(unquote(atom, unescape))
    if atom == "true":
        return VBool(True)
    if atom == "false":
        return VBool(False)
    if atom == "null":
        return VNull()
    if len(atom) < NUMERIC_SCRATCH:
        m = _NUMBER_RE.fullmatch(atom)
        if m:
            if m.group(1) or m.group(2):
                return VDouble(float(atom))
            return VInt(int(atom))
    return VString(atom)


def read_field(cur: Cursor, end: int) -> str:
    """Read one comma-delimited field ending no later than *end*.

    A field that opens with ``"`` may contain commas up to its closing
    quote.  The cursor is left on the delimiting ``,`` or at *end*.
    """
    text = cur.text
    cur.skip_spaces()
    start = pos = min(cur.pos, end)
    if pos < end and text[pos] == '"':
        pos += 1
        while pos < end and text[pos] != '"':
            if text[pos] == "\\" and pos + 1 < end:
                pos += 1
            pos += 1
        if pos < end:
            pos += 1
    while pos < end and text[pos] != ",":
        pos += 1
    cur.pos = pos
    return text[start:pos].strip(WHITESPACE)


def find_inline_comment(text: str, start: int, end: int) -> int:
    """Index of a ``#`` that follows whitespace outside quotes, else *end*."""
    quoted = False
    i = start
    while i < end:
        ch = text[i]
        if quoted:
            if ch == "\\":
                i += 1
            elif ch == '"':
                quoted = False
        elif ch == '"':
            quoted = True
        elif ch == "#" and i > start and text[i - 1] in " \t":
            return i
        i += 1
    return end
