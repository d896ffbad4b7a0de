"""Apply font substitutions to the original stylesheet text."""

from __future__ import annotations

import base64
from collections.abc import Iterable
from dataclasses import replace

from fontfetch.core.allocator import FontEntry


def inline_data_uri(content: bytes, mime: str) -> str:
    """Return a ``url(...)`` reference embedding ``content`` as base64."""
    body = base64.b64encode(content).decode("ascii")
    return f"url('data:{mime};base64,{body}')"


def inline_entry(entry: FontEntry, content: bytes, mime: str) -> FontEntry:
    """Return ``entry`` with its replacement switched to an inline data URI."""
    return replace(entry, output_text=inline_data_uri(content, mime))


def rewrite(css: str, entries: Iterable[FontEntry]) -> str:
    """Replace each entry's ``url(...)`` span with its ``output_text``.

    Substitutions are applied in one pass against the offsets recorded while
    parsing, so every entry consumes exactly its own occurrence even when
    several faces share the same literal URL.
    """
    ordered = sorted(entries, key=lambda entry: entry.start)
    pieces: list[str] = []
    cursor = 0
    for entry in ordered:
        if entry.start < cursor:
            raise ValueError(f"Overlapping substitution for '{entry.input_text}'.")
        if css[entry.start : entry.end] != entry.input_text:
            raise ValueError(
                f"Stylesheet text at {entry.start}:{entry.end} does not match '{entry.input_text}'."
            )
        pieces.append(css[cursor : entry.start])
        pieces.append(entry.output_text)
        cursor = entry.end
    pieces.append(css[cursor:])
    return "".join(pieces)


__all__ = ["inline_data_uri", "inline_entry", "rewrite"]
