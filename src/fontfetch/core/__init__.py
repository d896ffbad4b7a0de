"""Core building blocks of the font download pipeline."""

from fontfetch.core.allocator import FontEntry, allocate
from fontfetch.core.config import DownloadConfig
from fontfetch.core.css import FontFaceBlock, FontSource, parse
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
from fontfetch.core.http import FetchedAsset, FetchedText, FontFetcher
from fontfetch.core.rewriter import inline_data_uri, rewrite
from fontfetch.core.storage import WriteOutcome, ensure_dir, write_css, write_font
from fontfetch.core.template import render, render_filename
from fontfetch.core.urls import construct_url, repair_url, resolve_input


__all__ = [
    "DownloadConfig",
    "DuplicateFilenameError",
    "FetchedAsset",
    "FetchedText",
    "FilesystemError",
    "FontEntry",
    "FontFaceBlock",
    "FontFetchError",
    "FontFetcher",
    "FontSource",
    "HttpStatusError",
    "InvalidInputError",
    "NetworkError",
    "TLSCertificateError",
    "UnsafeFilenameError",
    "UnsupportedProtocolError",
    "WriteOutcome",
    "allocate",
    "construct_url",
    "ensure_dir",
    "inline_data_uri",
    "parse",
    "render",
    "render_filename",
    "repair_url",
    "resolve_input",
    "rewrite",
    "write_css",
    "write_font",
]
