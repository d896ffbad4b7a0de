"""High-level orchestration of a stylesheet download run.

A run moves through the stages of :class:`PipelineStage` in order. The first
error stops the run, leaves ``stage`` at ``FAILED`` and propagates to the
caller.

Open points settled here:

- A stylesheet answering with a 4xx/5xx status is treated as an empty
  document, the run then reports zero fonts.
- Any font download failure aborts the run before the stylesheet is written,
  so no stylesheet references a file that was never saved.
- In simulate mode font files are not downloaded unless base64 inlining needs
  their content.
- Base64 mode never enters ``REWRITING``: the inlined data URIs are
  substituted while the run is still in ``FETCHING_FONTS``, which keeps the
  stage order linear.
- Every font target is checked to resolve inside the output directory before
  its download starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import time

from fontfetch.core.allocator import FontEntry, allocate
from fontfetch.core.config import DownloadConfig
from fontfetch.core.css import parse
from fontfetch.core.exceptions import UnsafeFilenameError
from fontfetch.core.http import FontFetcher
from fontfetch.core.logging import DownloadLogger
from fontfetch.core.rewriter import inline_entry, rewrite
from fontfetch.core.storage import (
    WriteOutcome,
    ensure_dir,
    target_exists,
    write_css,
    write_font,
)


class PipelineStage(str, Enum):
    IDLE = "idle"
    FETCHING_CSS = "fetching-css"
    PARSING = "parsing"
    ALLOCATING = "allocating"
    REWRITING = "rewriting"
    FETCHING_FONTS = "fetching-fonts"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class DownloadResult:
    """Outcome of a run: final stylesheet, entries and what happened on disk."""

    url: str
    css: str
    entries: list[FontEntry]
    outputs: dict[Path, WriteOutcome] = field(default_factory=dict)
    elapsed: float = 0.0

    @property
    def written(self) -> list[Path]:
        return [path for path, outcome in self.outputs.items() if outcome is WriteOutcome.WRITTEN]


@dataclass(slots=True)
class DownloadPipeline:
    """Drive one stylesheet through fetch, parse, allocate, rewrite and persist."""

    config: DownloadConfig
    fetcher: FontFetcher
    logger: DownloadLogger = field(default_factory=DownloadLogger)
    stage: PipelineStage = field(default=PipelineStage.IDLE, init=False)

    @property
    def output_dir(self) -> Path:
        return Path(self.config.output_dir)

    def run(self, url: str) -> DownloadResult:
        started = time.perf_counter()
        try:
            result = self._run(url)
        except Exception:
            self.stage = PipelineStage.FAILED
            raise
        result.elapsed = time.perf_counter() - started
        self.stage = PipelineStage.DONE
        self.logger.debug("Done in %dms", int(result.elapsed * 1000))
        return result

    def _run(self, url: str) -> DownloadResult:
        config = self.config

        self.stage = PipelineStage.FETCHING_CSS
        source_css = self._fetch_stylesheet(url)

        self.stage = PipelineStage.PARSING
        blocks = parse(source_css)

        self.stage = PipelineStage.ALLOCATING
        entries = allocate(
            blocks,
            template=config.template,
            base_url=url,
            path_prefix=config.path,
        )
        self.logger.debug("Found reference to %d fonts", len(entries))

        result = DownloadResult(url=url, css=source_css, entries=entries)
        if not config.base64:
            self.stage = PipelineStage.REWRITING
            result.css = rewrite(source_css, entries)

        ensure_dir(self.output_dir, simulate=config.simulate)

        self.stage = PipelineStage.FETCHING_FONTS
        if config.base64:
            result.css = rewrite(source_css, self._inline_fonts(entries))
        else:
            result.outputs.update(self._save_fonts(entries))

        self.stage = PipelineStage.PERSISTING
        css_path = self.output_dir / config.css_file
        self.logger.debug("Saving %s", css_path.name)
        outcome = write_css(
            css_path,
            result.css,
            overwrite=config.overwriting,
            simulate=config.simulate,
        )
        self._report(css_path, outcome)
        result.outputs[css_path] = outcome
        return result

    def _fetch_stylesheet(self, url: str) -> str:
        self.logger.debug("Downloading CSS from URL: %s", url)
        fetched = self.fetcher.fetch_text(url)
        self.logger.debug(
            "Downloaded CSS with status code: %d in %dms",
            fetched.status_code,
            int(fetched.elapsed * 1000),
        )
        if fetched.status_code >= 400:
            self.logger.warning(
                "Stylesheet request returned HTTP %d; continuing with an empty document.",
                fetched.status_code,
            )
            return ""
        return fetched.text

    def _save_fonts(self, entries: list[FontEntry]) -> dict[Path, WriteOutcome]:
        config = self.config
        outcomes: dict[Path, WriteOutcome] = {}
        with self.logger.progress("Downloading fonts", total=len(entries)) as advance:
            for entry in entries:
                target = self._font_target(entry)
                self.logger.debug("Saving %s", entry.output_font)
                if config.simulate:
                    outcome = WriteOutcome.SIMULATED
                elif not config.overwriting and target_exists(target):
                    outcome = WriteOutcome.SKIPPED
                else:
                    asset = self.fetcher.fetch_binary(entry.input_url)
                    outcome = write_font(
                        target,
                        asset.content,
                        overwrite=config.overwriting,
                        simulate=config.simulate,
                    )
                self._report(target, outcome)
                outcomes[target] = outcome
                advance(1)
        return outcomes

    def _font_target(self, entry: FontEntry) -> Path:
        target = self.output_dir / entry.output_font
        if not target.resolve().is_relative_to(self.output_dir.resolve()):
            raise UnsafeFilenameError(entry.output_font)
        return target

    def _inline_fonts(self, entries: list[FontEntry]) -> list[FontEntry]:
        inlined: list[FontEntry] = []
        with self.logger.progress("Inlining fonts", total=len(entries)) as advance:
            for entry in entries:
                self.logger.debug("Inlining %s", entry.input_url)
                asset = self.fetcher.fetch_binary(entry.input_url)
                inlined.append(inline_entry(entry, asset.content, asset.content_type))
                advance(1)
        return inlined

    def _report(self, target: Path, outcome: WriteOutcome) -> None:
        if outcome is WriteOutcome.SKIPPED:
            self.logger.debug("Passing %s - overwriting is disabled", target.name)
        elif outcome is WriteOutcome.SIMULATED:
            self.logger.debug("Simulation: %s not written", target)


__all__ = ["DownloadPipeline", "DownloadResult", "PipelineStage"]
