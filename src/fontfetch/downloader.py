"""Public entry point wrapping configuration handling around the pipeline."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from fontfetch.core.config import DownloadConfig
from fontfetch.core.http import FontFetcher
from fontfetch.core.logging import DownloadLogger
from fontfetch.core.urls import construct_url, resolve_input
from fontfetch.pipeline import DownloadPipeline, DownloadResult


ConfigLike = Mapping[str, Any] | DownloadConfig | None


class FontDownloader:
    """Download the fonts of a stylesheet and store a rewritten local copy.

    The instance keeps a default configuration; each :meth:`download` call may
    override parts of it. An optional ``session`` (any object exposing a
    ``requests``-compatible ``get``) is shared by every run.
    """

    def __init__(self, config: ConfigLike = None, *, session: Any | None = None) -> None:
        self._config = DownloadConfig()
        self._session = session
        self.set_config(config)

    def set_config(self, config: ConfigLike = None, *, reset: bool = True) -> FontDownloader:
        """Replace the configuration, or merge into the current one when ``reset`` is false."""
        base = DownloadConfig() if reset else self._config
        self._config = base.merged(config)
        return self

    def get_config(self) -> DownloadConfig:
        return self._config

    @staticmethod
    def construct_url(
        families: Mapping[str, Any] | None = None,
        subsets: Sequence[str] | str | None = None,
    ) -> str:
        return construct_url(families, subsets)

    def prepare(self, source: Any, config: ConfigLike = None) -> tuple[str, DownloadConfig]:
        """Validate the input and resolve the effective configuration without any I/O."""
        url = resolve_input(source)
        return url, self._config.merged(config)

    def download(self, source: Any, config: ConfigLike = None) -> DownloadResult:
        """Run the whole pipeline for a stylesheet URL or a family description."""
        url, effective = self.prepare(source, config)
        logger = DownloadLogger(verbose=effective.verbose)
        with FontFetcher.from_config(effective, session=self._session) as fetcher:
            pipeline = DownloadPipeline(config=effective, fetcher=fetcher, logger=logger)
            return pipeline.run(url)


__all__ = ["FontDownloader"]
