from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fontfetch.core.exceptions import InvalidInputError
from fontfetch.downloader import FontDownloader
from fontfetch.pipeline import DownloadResult
from fontfetch.ui.cli import app


download_module = importlib.import_module("fontfetch.ui.cli.commands.download")


class RecordingDownloader:
    """Stand-in for FontDownloader that records how it was driven."""

    instances: list[RecordingDownloader] = []

    def __init__(self, config=None, *, session=None) -> None:
        self.real = FontDownloader(config, session=session)
        self.sources: list[object] = []
        RecordingDownloader.instances.append(self)

    def get_config(self):
        return self.real.get_config()

    def download(self, source, config=None):
        self.sources.append(source)
        return DownloadResult(url=str(source), css="", entries=[])


@pytest.fixture
def recording(monkeypatch: pytest.MonkeyPatch) -> type[RecordingDownloader]:
    RecordingDownloader.instances = []
    monkeypatch.setattr(download_module, "FontDownloader", RecordingDownloader)
    return RecordingDownloader


def test_print_options_outputs_resolved_config(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "--print-options",
            "-o",
            str(tmp_path),
            "-t",
            "{family}-{i}.{ext}",
            "--non-strict-ssl",
            "-b",
            "-q",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["output_dir"] == str(tmp_path)
    assert payload["template"] == "{family}-{i}.{ext}"
    assert payload["strict_ssl"] is False
    assert payload["base64"] is True
    assert payload["verbose"] is False
    assert not any(tmp_path.iterdir())


def test_missing_input_is_a_usage_error() -> None:
    result = CliRunner().invoke(app, ["-q"])

    assert result.exit_code == 2


def test_input_and_family_are_mutually_exclusive() -> None:
    result = CliRunner().invoke(app, ["-i", "https://x/a.css", "-f", "Lato"])

    assert result.exit_code == 2


def test_input_url_is_forwarded(recording) -> None:
    result = CliRunner().invoke(app, ["-i", "https://x/a.css", "-q", "-s"])

    assert result.exit_code == 0, result.output
    (instance,) = recording.instances
    assert instance.sources == ["https://x/a.css"]
    assert instance.get_config().simulate is True
    assert instance.get_config().verbose is False


def test_families_and_subsets_are_collected(recording) -> None:
    result = CliRunner().invoke(
        app,
        ["-f", "Alegreya Sans SC:700,700i", "-f", "Rajdhani", "--subset", "latin,greek", "-q"],
    )

    assert result.exit_code == 0, result.output
    (instance,) = recording.instances
    assert instance.sources == [
        ({"Alegreya Sans SC": ["700", "700i"], "Rajdhani": []}, ["latin", "greek"])
    ]


def test_library_errors_exit_with_code_one() -> None:
    result = CliRunner().invoke(app, ["-i", "ftp://example.com/fonts.css"])

    assert result.exit_code == 1
    assert "Unsupported protocol" in result.output


def test_end_to_end_with_fake_session(
    tmp_path: Path, monkeypatch, fake_session, css_response, font_response
) -> None:
    css_url = "https://fonts.googleapis.com/css?family=Test"
    css = "/* latin */@font-face{font-family:'Test';font-weight:400;src:url(https://x/t.woff2);}"
    session = fake_session({css_url: css_response(css), "https://x/t.woff2": font_response()})
    real = download_module.FontDownloader

    def factory(config=None, **_kwargs):
        return real(config, session=session)

    monkeypatch.setattr(download_module, "FontDownloader", factory)

    result = CliRunner().invoke(app, ["-f", "Test", "-o", str(tmp_path), "-p", "/fonts/"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "Test-400-latin1.woff2").exists()
    assert "url('/fonts/Test-400-latin1.woff2')" in (tmp_path / "fonts.css").read_text(
        encoding="utf-8"
    )
    assert "Found reference to 1 fonts" in result.output


def test_parse_family_specs_merges_repeated_names() -> None:
    families = download_module.parse_family_specs(["Lato:400", "Lato:700,", "Roboto"])

    assert families == {"Lato": ["400", "700"], "Roboto": []}


def test_parse_family_specs_rejects_missing_names() -> None:
    with pytest.raises(InvalidInputError):
        download_module.parse_family_specs([":400"])
