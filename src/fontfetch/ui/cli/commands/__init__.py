"""CLI command implementations."""

from __future__ import annotations

from .download import download


__all__ = ["download"]
