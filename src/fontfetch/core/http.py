"""HTTP helpers for fetching stylesheets and font assets."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
import time
from typing import Any

import requests

from fontfetch.core.config import DEFAULT_USER_AGENT, DownloadConfig
from fontfetch.core.exceptions import HttpStatusError, NetworkError, TLSCertificateError


DEFAULT_FONT_MIME = "font/woff2"


def _tls_help(url: str) -> str:
    return (
        "TLS certificate verification failed while downloading "
        f"'{url}'. On macOS run the Python 'Install Certificates.command' "
        "(from the python.org installer). On Windows run 'py -m pip install --upgrade certifi'. "
        "On Linux install your 'ca-certificates' package (apt/yum/apk). "
        "Behind a proxy or a self-signed certificate, retry with --non-strict-ssl."
    )


@dataclass(frozen=True, slots=True)
class FetchedText:
    """Decoded text body of a response together with its status."""

    url: str
    text: str
    status_code: int
    elapsed: float


@dataclass(frozen=True, slots=True)
class FetchedAsset:
    """Raw body of a font response and its declared media type."""

    url: str
    content: bytes
    content_type: str


class FontFetcher:
    """Issue GET requests with the configured user agent and TLS policy."""

    def __init__(
        self,
        *,
        session: Any | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        strict_ssl: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self._session_lock = Lock()
        self._session = session
        self._owns_session = session is None
        self.user_agent = user_agent
        self.strict_ssl = strict_ssl
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: DownloadConfig, *, session: Any | None = None) -> FontFetcher:
        return cls(
            session=session,
            user_agent=config.user_agent,
            strict_ssl=config.strict_ssl,
            timeout=config.timeout,
        )

    def __enter__(self) -> FontFetcher:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this fetcher created it."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def fetch_text(self, url: str) -> FetchedText:
        """Download ``url`` as text; status interpretation is left to the caller.

        A response that declares no charset is decoded as UTF-8 rather than the
        ISO-8859-1 default requests applies to ``text/*`` content.
        """
        started = time.perf_counter()
        response = self._get(url)
        content_type = response.headers.get("content-type") or ""
        if "charset" not in content_type.lower():
            response.encoding = "utf-8"
        return FetchedText(
            url=url,
            text=response.text,
            status_code=response.status_code,
            elapsed=time.perf_counter() - started,
        )

    def fetch_binary(self, url: str) -> FetchedAsset:
        """Download ``url`` as bytes, raising on 4xx/5xx statuses."""
        response = self._get(url)
        if response.status_code >= 400:
            raise HttpStatusError(url, response.status_code)
        content_type = response.headers.get("content-type") or DEFAULT_FONT_MIME
        return FetchedAsset(url=url, content=response.content, content_type=content_type)

    def _get(self, url: str) -> Any:
        client = self._ensure_session()
        try:
            return client.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                verify=self.strict_ssl,
            )
        except requests.exceptions.SSLError as exc:
            raise TLSCertificateError(_tls_help(url), url=url) from exc
        except requests.RequestException as exc:
            raise NetworkError(f"Unable to download '{url}': {exc}", url=url) from exc

    def _ensure_session(self) -> Any:
        if self._session is not None:
            return self._session
        with self._session_lock:
            if self._session is None:
                self._session = requests.Session()
            return self._session


__all__ = ["DEFAULT_FONT_MIME", "FetchedAsset", "FetchedText", "FontFetcher"]
