"""Normalise stylesheet URLs and build Google Fonts query URLs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import html
import re
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from fontfetch.core.exceptions import InvalidInputError, UnsupportedProtocolError


GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css"
SUPPORTED_SCHEMES = frozenset({"http", "https"})

_DEFAULT_PORTS = {"http": 80, "https": 443}
_FAMILY_STRIP_RE = re.compile(r"[^a-z0-9+_-]", re.IGNORECASE)
_WEIGHT_RE = re.compile(r"^\d{3}i?$")
_SUBSET_RE = re.compile(r"[a-z-]+")
_WHITESPACE_RE = re.compile(r"\s+")
_WWW_RE = re.compile(r"^www\.(?!www\.)[a-z\d-]{1,63}\.[a-z\d.-]{2,63}$")
_TRACKING_PARAM_RE = re.compile(r"^utm_\w+", re.IGNORECASE)


def _as_list(value: Any, delimiter: str = ",") -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(delimiter)
    if isinstance(value, (int, float)):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return []


def repair_url(url: str) -> str:
    """Return a normalised form of ``url`` as copied from HTML or CSS sources.

    Besides scheme, host, port and query canonicalisation, a leading ``www.``
    is dropped from the host and ``utm_*`` tracking parameters are removed.
    """
    candidate = html.unescape(url).strip()
    if candidate.startswith("//"):
        candidate = f"http:{candidate}"
    elif "://" not in candidate:
        candidate = f"http://{candidate}"

    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as exc:
        raise InvalidInputError(f"Malformed URL '{url}'.") from exc
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if _WWW_RE.match(host):
        host = host[4:]
    netloc = host
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{host}:{port}"
    if parts.username:
        credentials = parts.username
        if parts.password:
            credentials = f"{credentials}:{parts.password}"
        netloc = f"{credentials}@{netloc}"

    path = parts.path
    if path.endswith("/"):
        path = path.rstrip("/")
    params = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if not _TRACKING_PARAM_RE.match(key)
    ]
    query = urlencode(sorted(params), safe=":,|+")

    normalised = urlunsplit((scheme, netloc, path, query, ""))
    return _WHITESPACE_RE.sub("+", normalised.strip())


def _sanitize_family(name: Any) -> str:
    family = _WHITESPACE_RE.sub("+", str(name).strip())
    return _FAMILY_STRIP_RE.sub("", family)


def _sanitize_weights(weights: Any) -> list[str]:
    cleaned = (str(weight).strip() for weight in _as_list(weights))
    return [weight for weight in cleaned if _WEIGHT_RE.match(weight)]


def construct_url(
    families: Mapping[str, Any] | None = None,
    subsets: Sequence[str] | str | None = None,
) -> str:
    """Build a Google Fonts stylesheet URL from families and subsets.

    ``families`` maps a family name to its weights, given either as a comma
    separated string or an iterable. Duplicate families after sanitisation are
    merged and their weights united in first-seen order.
    """
    if not isinstance(families, Mapping):
        families = {}

    merged: dict[str, list[str]] = {}
    for name, weights in families.items():
        family = _sanitize_family(name)
        if not family:
            continue
        known = merged.setdefault(family, [])
        for weight in _sanitize_weights(weights):
            if weight not in known:
                known.append(weight)

    family_param = "|".join(
        f"{family}:{','.join(weights)}" if weights else family
        for family, weights in merged.items()
    )
    subset_param = ",".join(
        subset
        for subset in (str(item).strip().lower() for item in _as_list(subsets))
        if _SUBSET_RE.search(subset)
    )

    params = []
    if family_param:
        params.append(f"family={family_param}")
    if subset_param:
        params.append(f"subset={subset_param}")
    if not params:
        return GOOGLE_FONTS_CSS_URL
    return f"{GOOGLE_FONTS_CSS_URL}?{'&'.join(params)}"


def ensure_supported(url: str) -> str:
    """Raise when ``url`` does not use a supported scheme."""
    scheme = urlsplit(url).scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise UnsupportedProtocolError(
            f"Unsupported protocol '{scheme or '<none>'}' in '{url}'; use http or https."
        )
    return url


def resolve_input(value: Any) -> str:
    """Turn a URL or a ``(families, subsets)`` description into a stylesheet URL."""
    if isinstance(value, str):
        if not value.strip():
            raise InvalidInputError("Stylesheet URL is empty.")
        return ensure_supported(repair_url(value))
    if isinstance(value, Mapping):
        return construct_url(value)
    if isinstance(value, (list, tuple)) and 1 <= len(value) <= 2:
        families = value[0]
        subsets = value[1] if len(value) == 2 else None
        if not isinstance(families, Mapping):
            raise InvalidInputError("Font families must be provided as a mapping.")
        return construct_url(families, subsets)
    raise InvalidInputError(
        "Input must be a stylesheet URL or a (families, subsets) description, "
        f"got {type(value).__name__}."
    )


__all__ = [
    "GOOGLE_FONTS_CSS_URL",
    "SUPPORTED_SCHEMES",
    "construct_url",
    "ensure_supported",
    "repair_url",
    "resolve_input",
]
