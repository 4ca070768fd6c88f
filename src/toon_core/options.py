"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParseOptions:
    max_depth: int = 64
    # Cut scalar and inline-list payloads at a `#` that follows whitespace.
    strip_inline_comments: bool = False
    # Turn \" and \\ inside quoted strings into " and \.
    unescape_strings: bool = True
