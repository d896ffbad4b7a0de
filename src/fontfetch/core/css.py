"""Lexical scan of ``@font-face`` rules in web-font stylesheets.

The scanner only recognises ``@font-face { ... }`` spans, an optional comment
right before them and the ``url(...)`` tokens they contain. It does not
implement a CSS grammar: nested braces or malformed rules are not supported.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import posixpath
import re
from urllib.parse import urlsplit


_FACE_RE = re.compile(
    r"\s*(?:/\*\s*(.*?)\s*\*/)?[^@]*?@font-face\s*\{[^}]*?\}\s*",
    re.IGNORECASE,
)
_FAMILY_RE = re.compile(r"font-family\s*:\s*['\"]?([^;]*?)['\"]?\s*;", re.IGNORECASE)
_WEIGHT_RE = re.compile(r"font-weight\s*:\s*([^;]*?)\s*;", re.IGNORECASE)
_URL_RE = re.compile(r"url\s*\(\s*['\"]?\s*(.*?)\s*['\"]?\s*\)", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True, slots=True)
class FontSource:
    """A single ``url(...)`` token and its position in the stylesheet."""

    url: str
    text: str
    start: int
    end: int

    @property
    def extension(self) -> str:
        """Return the extension of the URL path, including the leading dot."""
        return posixpath.splitext(urlsplit(self.url).path)[1]

    @property
    def basename(self) -> str:
        """Return the remote filename without its extension."""
        name = posixpath.basename(urlsplit(self.url).path)
        return posixpath.splitext(name)[0]

    @property
    def is_data_uri(self) -> bool:
        return self.url[:5].lower() == "data:"


@dataclass(frozen=True, slots=True)
class FontFaceBlock:
    """One ``@font-face`` rule together with the comment preceding it."""

    text: str
    start: int
    end: int
    comment: str
    family: str
    weight: str
    sources: tuple[FontSource, ...]


def _group(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    if match is None:
        return ""
    return match.group(1) or ""


def iter_font_faces(css: str) -> Iterator[FontFaceBlock]:
    """Yield ``@font-face`` blocks in document order."""
    for face in _FACE_RE.finditer(css):
        text = face.group(0)
        offset = face.start()
        sources = tuple(
            FontSource(
                url=match.group(1),
                text=match.group(0),
                start=offset + match.start(),
                end=offset + match.end(),
            )
            for match in _URL_RE.finditer(text)
        )
        yield FontFaceBlock(
            text=text,
            start=face.start(),
            end=face.end(),
            comment=face.group(1) or "",
            family=_group(_FAMILY_RE, text),
            weight=_group(_WEIGHT_RE, text),
            sources=sources,
        )


def parse(css: str) -> list[FontFaceBlock]:
    """Return every ``@font-face`` block found in ``css``."""
    return list(iter_font_faces(css))


def font_sources(
    blocks: Iterable[FontFaceBlock],
) -> Iterator[tuple[FontFaceBlock, FontSource]]:
    """Yield downloadable sources with the block they belong to.

    Sources without a usable file extension and already inlined ``data:`` URIs
    are skipped since no filename can be derived from them.
    """
    for block in blocks:
        for source in block.sources:
            if source.is_data_uri:
                continue
            if len(source.extension) < 2:
                continue
            yield block, source


__all__ = ["FontFaceBlock", "FontSource", "font_sources", "iter_font_faces", "parse"]
