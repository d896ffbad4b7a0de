"""Utility helpers for resolving ``{name}`` placeholders in filename templates."""

from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Any


_PLACEHOLDER_RE = re.compile(r"\{\{|\}\}|\{([a-z0-9_-]+)\}", re.IGNORECASE)


def render(template: str, values: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders in ``template`` using ``values``.

    Placeholders without a matching key are left as-is, ``None`` renders as an
    empty string and doubled braces collapse to a single literal brace, so
    ``{{name}}`` yields the text ``{name}``.
    """

    def _replacement(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        name = match.group(1)
        if name not in values:
            return token
        value = values[name]
        return "" if value is None else str(value)

    return _PLACEHOLDER_RE.sub(_replacement, template)


def render_filename(template: str, values: Mapping[str, Any]) -> str:
    """Render a filename, trimming the dot left behind by an empty extension."""
    rendered = render(template, values)
    if rendered.endswith("."):
        rendered = rendered[:-1]
    return rendered


__all__ = ["render", "render_filename"]
