"""Custom exception hierarchy for the font download pipeline."""

from __future__ import annotations


class FontFetchError(RuntimeError):
    """Base exception for font download failures."""


class InvalidInputError(FontFetchError, ValueError):
    """Raised when the input is neither a URL nor a family description."""


class UnsupportedProtocolError(InvalidInputError):
    """Raised when the stylesheet URL does not use http or https."""


class UnsafeFilenameError(InvalidInputError):
    """Raised when a rendered font filename would land outside the output directory."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            f"Refusing to write font file '{filename}': output filenames must be a "
            "single name inside the output directory."
        )
        self.filename = filename


class NetworkError(FontFetchError):
    """Raised when a stylesheet or font asset cannot be fetched."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TLSCertificateError(NetworkError):
    """Raised when TLS certificate verification fails during downloads."""


class HttpStatusError(NetworkError):
    """Raised when a font asset answers with a 4xx/5xx status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"HTTP {status_code} while downloading '{url}'.", url=url)
        self.status_code = status_code


class FilesystemError(FontFetchError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class DuplicateFilenameError(FontFetchError):
    """Raised when two font entries render the same output filename."""

    def __init__(self, filename: str, template: str) -> None:
        super().__init__(
            f"Template '{template}' renders '{filename}' more than once; "
            "include '{i}' in the template to keep filenames unique."
        )
        self.filename = filename
        self.template = template


__all__ = [
    "DuplicateFilenameError",
    "FilesystemError",
    "FontFetchError",
    "HttpStatusError",
    "InvalidInputError",
    "NetworkError",
    "TLSCertificateError",
    "UnsafeFilenameError",
    "UnsupportedProtocolError",
]
