"""Configuration model used by the font downloader.

DownloadConfig

`output_dir` (`str`)
: Directory receiving the stylesheet and the downloaded font files. Accepts
  the `outputDir` alias.

`path` (`str`)
: Prefix placed before every rewritten font reference in the stylesheet.

`template` (`str`)
: Filename template. Supports `{family}`, `{_family}`, `{weight}`,
  `{comment}`, `{filename}`, `{ext}` and the running counter `{i}`.

`css_file` (`str`)
: Name of the stylesheet written inside `output_dir`. Accepts `cssFile`.

`user_agent` (`str`)
: User agent sent with every request. Google Fonts picks the font format
  (woff2, woff, ttf) from it. Accepts `userAgent`.

`base64` (`bool`)
: Inline fonts in the stylesheet as data URIs instead of saving files.

`overwriting` (`bool`)
: Replace files that already exist. When `False`, existing files are kept.

`strict_ssl` (`bool`)
: Reject invalid TLS certificates. Accepts `strictSSL`.

`verbose` (`bool`)
: Print progress information.

`simulate` (`bool`)
: Dry run; nothing is written to disk.

`timeout` (`float`)
: Timeout in seconds applied to each HTTP request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/57.0.2987.133 Safari/537.36"
)
DEFAULT_TEMPLATE = "{_family}-{weight}-{comment}{i}.{ext}"


class DownloadConfig(BaseModel):
    """Immutable options controlling a download run."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    output_dir: str = Field(default="./fonts", alias="outputDir")
    path: str = "./"
    template: str = DEFAULT_TEMPLATE
    css_file: str = Field(default="fonts.css", alias="cssFile")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="userAgent")
    base64: bool = False
    overwriting: bool = False
    strict_ssl: bool = Field(default=True, alias="strictSSL")
    verbose: bool = False
    simulate: bool = False
    timeout: float = 30.0

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid(cls, data: Any) -> dict[str, Any]:
        if isinstance(data, DownloadConfig):
            return data.model_dump()
        if not isinstance(data, Mapping):
            return {}
        return filter_options(data)

    def merged(self, *overrides: Mapping[str, Any] | DownloadConfig | None) -> DownloadConfig:
        """Return a copy with the valid entries of ``overrides`` applied in order."""
        values = self.model_dump()
        for override in overrides:
            if override is None:
                continue
            if isinstance(override, DownloadConfig):
                values.update(override.model_dump())
            elif isinstance(override, Mapping):
                values.update(filter_options(override))
        return DownloadConfig.model_validate(values)


def _field_name(key: str) -> str | None:
    if key in DownloadConfig.model_fields:
        return key
    for name, info in DownloadConfig.model_fields.items():
        if info.alias == key:
            return name
    return None


def _matches_default(value: Any, default: Any) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, float):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, type(default))


def filter_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Keep known options whose value type matches the default, keyed by field name."""
    filtered: dict[str, Any] = {}
    for key, value in options.items():
        if not isinstance(key, str):
            continue
        name = _field_name(key)
        if name is None:
            continue
        default = DownloadConfig.model_fields[name].default
        if not _matches_default(value, default):
            continue
        filtered[name] = float(value) if isinstance(default, float) else value
    return filtered


__all__ = ["DEFAULT_TEMPLATE", "DEFAULT_USER_AGENT", "DownloadConfig", "filter_options"]
