"""Assign output filenames to the font sources of a stylesheet."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import itertools
from pathlib import PurePosixPath, PureWindowsPath
import re
from urllib.parse import urljoin

from fontfetch.core.css import FontFaceBlock, FontSource, font_sources
from fontfetch.core.exceptions import DuplicateFilenameError, UnsafeFilenameError
from fontfetch.core.template import render_filename


_WHITESPACE_RE = re.compile(r"\s+")
_PATH_SEPARATOR_RE = re.compile(r"[/\\]")


@dataclass(frozen=True, slots=True)
class FontEntry:
    """A font asset to download and the CSS substitution that points at it."""

    input_url: str
    source_url: str
    input_text: str
    output_font: str
    output_text: str
    start: int
    end: int
    index: int


def template_values(block: FontFaceBlock, source: FontSource, index: int) -> dict[str, object]:
    """Return the template variables available for ``source``."""
    family = _path_safe(block.family)
    return {
        "comment": _path_safe(block.comment),
        "family": family,
        "_family": _WHITESPACE_RE.sub("_", family),
        "weight": _path_safe(block.weight),
        "filename": _path_safe(source.basename),
        "ext": _path_safe(source.extension.lstrip(".")),
        "i": index,
    }


def _path_safe(value: str) -> str:
    # Stylesheet text must never introduce directories into a filename.
    return _PATH_SEPARATOR_RE.sub("_", value)


def ensure_safe_filename(filename: str) -> str:
    """Return ``filename`` when it names a file directly inside the output directory."""
    if (
        filename in {"", ".", ".."}
        or _PATH_SEPARATOR_RE.search(filename)
        or PurePosixPath(filename).is_absolute()
        or PureWindowsPath(filename).drive
    ):
        raise UnsafeFilenameError(filename)
    return filename


def css_reference(path_prefix: str, filename: str) -> str:
    return f"url('{path_prefix}{filename}')"


def allocate(
    blocks: Iterable[FontFaceBlock],
    *,
    template: str,
    base_url: str,
    path_prefix: str,
    start: int = 1,
) -> list[FontEntry]:
    """Render unique output filenames for every downloadable source.

    ``{i}`` advances once per emitted source across the whole stylesheet,
    starting at ``start``. A filename rendered twice raises
    :class:`DuplicateFilenameError`; a filename that is not a single path
    component raises :class:`UnsafeFilenameError`.
    """
    counter = itertools.count(start)
    entries: list[FontEntry] = []
    seen: set[str] = set()
    for block, source in font_sources(blocks):
        index = next(counter)
        filename = ensure_safe_filename(
            render_filename(template, template_values(block, source, index))
        )
        if filename in seen:
            raise DuplicateFilenameError(filename, template)
        seen.add(filename)
        entries.append(
            FontEntry(
                input_url=urljoin(base_url, source.url),
                source_url=source.url,
                input_text=source.text,
                output_font=filename,
                output_text=css_reference(path_prefix, filename),
                start=source.start,
                end=source.end,
                index=index,
            )
        )
    return entries


__all__ = [
    "FontEntry",
    "allocate",
    "css_reference",
    "ensure_safe_filename",
    "template_values",
]
