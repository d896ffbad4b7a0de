"""Write downloaded fonts and rewritten stylesheets to disk."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from fontfetch.core.exceptions import FilesystemError


class WriteOutcome(str, Enum):
    """Result of a write request."""

    WRITTEN = "written"
    SKIPPED = "skipped"
    SIMULATED = "simulated"


def ensure_dir(path: str | Path, *, simulate: bool = False) -> Path:
    """Create ``path`` and its parents unless running a simulation."""
    target = Path(path)
    if simulate:
        return target
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            f"Unable to create directory '{target}': {exc}", path=str(target)
        ) from exc
    return target


def target_exists(path: str | Path) -> bool:
    return Path(path).exists()


def _plan(target: Path, *, overwrite: bool, simulate: bool) -> WriteOutcome | None:
    if simulate:
        return WriteOutcome.SIMULATED
    if not overwrite and target.exists():
        return WriteOutcome.SKIPPED
    return None


def write_font(
    path: str | Path, data: bytes, *, overwrite: bool = False, simulate: bool = False
) -> WriteOutcome:
    """Persist font bytes, leaving an existing file untouched unless ``overwrite``."""
    target = Path(path)
    planned = _plan(target, overwrite=overwrite, simulate=simulate)
    if planned is not None:
        return planned
    try:
        target.write_bytes(data)
    except OSError as exc:
        raise FilesystemError(f"Unable to write font '{target}': {exc}", path=str(target)) from exc
    return WriteOutcome.WRITTEN


def write_css(
    path: str | Path, text: str, *, overwrite: bool = False, simulate: bool = False
) -> WriteOutcome:
    """Persist the stylesheet as UTF-8 with the same overwrite rules as fonts."""
    target = Path(path)
    planned = _plan(target, overwrite=overwrite, simulate=simulate)
    if planned is not None:
        return planned
    try:
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(
            f"Unable to write stylesheet '{target}': {exc}", path=str(target)
        ) from exc
    return WriteOutcome.WRITTEN


__all__ = ["WriteOutcome", "ensure_dir", "target_exists", "write_css", "write_font"]
