from __future__ import annotations

from collections.abc import Callable

import pytest
import requests


def _header_encoding(headers: dict[str, str]) -> str | None:
    content_type = headers.get("content-type", "")
    for param in content_type.split(";")[1:]:
        key, _, value = param.strip().partition("=")
        if key.lower() == "charset":
            return value.strip("'\"")
    if content_type.startswith("text/"):
        return "ISO-8859-1"
    return None


class FakeResponse:
    """Decode ``text`` from ``content`` the way requests does."""

    def __init__(
        self,
        status_code: int = 200,
        *,
        text: str | None = None,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.content = text.encode("utf-8") if text is not None else content
        self.headers = headers or {}
        self.encoding = _header_encoding(self.headers)

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding or "utf-8", errors="replace")


class FakeSession:
    """Answer GET requests from a URL map and record every call."""

    def __init__(self, routes: dict[str, FakeResponse | Exception] | None = None) -> None:
        self.routes: dict[str, FakeResponse | Exception] = dict(routes or {})
        self.calls: list[dict[str, object]] = []
        self.closed = False

    def get(self, url: str, **kwargs: object) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return route

    def close(self) -> None:
        self.closed = True

    @property
    def urls(self) -> list[str]:
        return [str(call["url"]) for call in self.calls]


@pytest.fixture
def fake_session() -> Callable[..., FakeSession]:
    def _factory(routes: dict[str, FakeResponse | Exception] | None = None) -> FakeSession:
        return FakeSession(routes)

    return _factory


@pytest.fixture
def font_response() -> Callable[..., FakeResponse]:
    def _factory(
        content: bytes = b"wOF2-font-bytes", content_type: str | None = "font/woff2"
    ) -> FakeResponse:
        headers = {"content-type": content_type} if content_type else {}
        return FakeResponse(200, content=content, headers=headers)

    return _factory


@pytest.fixture
def css_response() -> Callable[..., FakeResponse]:
    def _factory(
        text: str, status_code: int = 200, *, charset: str | None = None
    ) -> FakeResponse:
        content_type = f"text/css; charset={charset}" if charset else "text/css"
        return FakeResponse(
            status_code,
            content=text.encode(charset or "utf-8"),
            headers={"content-type": content_type},
        )

    return _factory


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection reset by peer")
