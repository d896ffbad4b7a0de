from __future__ import annotations

from pathlib import Path

import pytest

from fontfetch.core.exceptions import FilesystemError
from fontfetch.core.storage import WriteOutcome, ensure_dir, write_css, write_font


def test_ensure_dir_is_recursive_and_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "fonts"

    assert ensure_dir(target) == target
    assert ensure_dir(target) == target
    assert target.is_dir()


def test_ensure_dir_simulation_creates_nothing(tmp_path: Path) -> None:
    target = tmp_path / "fonts"

    ensure_dir(target, simulate=True)

    assert not target.exists()


def test_write_font_writes_bytes(tmp_path: Path) -> None:
    target = tmp_path / "a.woff2"

    assert write_font(target, b"font") is WriteOutcome.WRITTEN
    assert target.read_bytes() == b"font"


def test_existing_files_are_kept_without_overwrite(tmp_path: Path) -> None:
    font = tmp_path / "a.woff2"
    css = tmp_path / "fonts.css"
    font.write_bytes(b"old")
    css.write_text("old", encoding="utf-8")

    assert write_font(font, b"new") is WriteOutcome.SKIPPED
    assert write_css(css, "new") is WriteOutcome.SKIPPED
    assert font.read_bytes() == b"old"
    assert css.read_text(encoding="utf-8") == "old"


def test_overwrite_replaces_existing_files(tmp_path: Path) -> None:
    css = tmp_path / "fonts.css"
    css.write_text("old", encoding="utf-8")

    assert write_css(css, "été", overwrite=True) is WriteOutcome.WRITTEN
    assert css.read_text(encoding="utf-8") == "été"


def test_simulation_writes_nothing(tmp_path: Path) -> None:
    font = tmp_path / "a.woff2"
    css = tmp_path / "fonts.css"

    assert write_font(font, b"font", simulate=True) is WriteOutcome.SIMULATED
    assert write_css(css, "css", overwrite=True, simulate=True) is WriteOutcome.SIMULATED
    assert list(tmp_path.iterdir()) == []


def test_write_errors_are_wrapped(tmp_path: Path) -> None:
    target = tmp_path / "missing-dir" / "a.woff2"

    with pytest.raises(FilesystemError) as excinfo:
        write_font(target, b"font")

    assert excinfo.value.path == str(target)


def test_ensure_dir_errors_are_wrapped(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(FilesystemError):
        ensure_dir(blocker / "fonts")
