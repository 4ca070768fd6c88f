"""TOONRepl and the ``toon-json`` command line entry point.

``toon-json FILE`` prints the JSON form of a TOON file, ``--get PATH``
narrows the output to one value and ``-i`` opens an interactive session.
"""

from __future__ import annotations

import argparse
import sys
from typing import IO

from .document import Document
from .emitter import to_json
from .reader import parse, parse_document
from .getter import get
from .values import Value, _Absent


# ---------------------------------------------------------------------------
# TOONRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class TOONRepl:
    """Session that accumulates TOON source across calls.

    Usage::

        repl = TOONRepl()
        repl.feed("user:")
        repl.feed("  name: Alice")
        repl.query("user.name")   # → VString("Alice")

        repl.doc.diagnostics      # everything reported so far
        repl.reset()              # clear state
    """

    def __init__(self) -> None:
        self.source = ""
        self.doc = Document()

    def feed(self, line: str) -> Document:
        """Append one source line and re-parse the accumulated text."""
        self.source += line.rstrip("\n") + "\n"
        self.doc = parse_document(self.source)
        return self.doc

    def load(self, text: str) -> Document:
        """Replace the accumulated source with *text*."""
        self.source = text if text.endswith("\n") or not text else text + "\n"
        self.doc = parse_document(self.source)
        return self.doc

    def query(self, path: str) -> Value | _Absent:
        return self.doc.get(path)

    def reset(self) -> None:
        self.source = ""
        self.doc = Document()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _show_keys(repl: TOONRepl, dest: IO[str]) -> None:
    keys = repl.doc.keys()
    if not keys:
        print("  (no properties)", file=dest)
        return
    for key in keys:
        print(f"  {key}", file=dest)


def _show_diagnostics(repl: TOONRepl, dest: IO[str]) -> None:
    if not repl.doc.diagnostics:
        print("  (no diagnostics)", file=dest)
        return
    for diag in repl.doc.diagnostics:
        print(f"  [{diag.severity.value}] {diag.message}", file=dest)


def _query(repl: TOONRepl, path: str, dest: IO[str]) -> None:
    result = repl.query(path)
    if isinstance(result, _Absent):
        print(repr(result), file=dest)
    else:
        print(to_json(result), file=dest)


def _process_line(repl: TOONRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    stripped = line.strip()
    if not stripped:
        return True

    if stripped in (":q", ":quit"):
        return False

    if stripped == ":json":
        print(repl.doc.to_json(), file=dest)
        return True

    if stripped == ":keys":
        _show_keys(repl, dest)
        return True

    if stripped == ":diag":
        _show_diagnostics(repl, dest)
        return True

    if stripped == ":reset":
        repl.reset()
        return True

    if stripped.startswith(":load "):
        filepath = stripped[6:].strip()
        try:
            with open(filepath, encoding="utf-8") as fh:
                repl.load(fh.read())
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return True

    if stripped.startswith("? "):
        _query(repl, stripped[2:].strip(), dest)
        return True

    # Anything else is TOON source; indentation is significant.
    repl.feed(line)
    return True


def _read_source(filepath: str) -> str:
    if filepath == "-":
        return sys.stdin.read()
    with open(filepath, encoding="utf-8") as fh:
        return fh.read()


def _interactive(repl: TOONRepl) -> None:
    print("TOON REPL  (:q to quit  |  :json  :keys  :diag  :reset  :load <file>  |  ? <path>)")
    while True:
        try:
            line = input("TOON> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue
        if not _process_line(repl, line, sys.stdout):
            break


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Convert TOON to JSON (``toon-json`` / ``python -m toon_core.cli``)."""
    ap = argparse.ArgumentParser(prog="toon-json", description="Convert TOON to JSON.")
    ap.add_argument("file", nargs="?", default="-", help="TOON file, '-' for stdin")
    ap.add_argument("--get", metavar="PATH", help="emit only the value at a dotted path")
    ap.add_argument("-i", "--interactive", action="store_true", help="start an interactive session")
    args = ap.parse_args(argv)

    if args.interactive:
        repl = TOONRepl()
        if args.file != "-":
            try:
                repl.load(_read_source(args.file))
            except OSError as exc:
                print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
                return 2
        _interactive(repl)
        return 0

    try:
        text = _read_source(args.file)
    except OSError as exc:
        print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
        return 2

    root = parse(text, sys.stderr)
    value: Value | _Absent = root
    if args.get:
        value = get(root, args.get)
        if isinstance(value, _Absent):
            print(f"{args.get}: not found", file=sys.stderr)
            return 1
    print(to_json(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
