"""Download web fonts referenced by a stylesheet and rewrite it for self-hosting.

Architecture
: `parse` scans the stylesheet for ``@font-face`` rules and their ``url(...)``
  sources. `allocate` renders a unique local filename for each source through
  the filename template, and `rewrite` swaps the remote references for local
  paths (or base64 data URIs) in a single pass.
: `FontFetcher` performs the HTTP requests, the storage helpers persist the
  results honouring the overwrite and simulation switches.
: `DownloadPipeline` sequences the stages for one run and `FontDownloader`
  wraps it with configuration handling.
"""

from __future__ import annotations

from fontfetch.core.allocator import FontEntry
from fontfetch.core.config import DownloadConfig
from fontfetch.core.exceptions import (
    DuplicateFilenameError,
    FilesystemError,
    FontFetchError,
    HttpStatusError,
    InvalidInputError,
    NetworkError,
    TLSCertificateError,
    UnsafeFilenameError,
    UnsupportedProtocolError,
)
from fontfetch.core.urls import construct_url
from fontfetch.downloader import FontDownloader
from fontfetch.pipeline import DownloadPipeline, DownloadResult, PipelineStage
from fontfetch.version import get_version


__version__ = get_version()

__all__ = [
    "DownloadConfig",
    "DownloadPipeline",
    "DownloadResult",
    "DuplicateFilenameError",
    "FilesystemError",
    "FontDownloader",
    "FontEntry",
    "FontFetchError",
    "HttpStatusError",
    "InvalidInputError",
    "NetworkError",
    "PipelineStage",
    "TLSCertificateError",
    "UnsafeFilenameError",
    "UnsupportedProtocolError",
    "__version__",
    "construct_url",
    "get_version",
]
