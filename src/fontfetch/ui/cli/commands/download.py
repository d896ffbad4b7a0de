"""Implementation of the primary ``fontfetch`` CLI command."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import typer

from fontfetch.core.config import DownloadConfig
from fontfetch.core.exceptions import FontFetchError, InvalidInputError
from fontfetch.downloader import FontDownloader
from fontfetch.version import get_version

from .._options import (
    Base64Option,
    CssFileOption,
    DebugOption,
    FamilyOption,
    InputOption,
    NonStrictSslOption,
    OutputDirOption,
    OverwritingOption,
    PathPrefixOption,
    PrintOptionsOption,
    QuietOption,
    SimulateOption,
    SubsetOption,
    TemplateOption,
    TimeoutOption,
    UserAgentOption,
    VersionOption,
)
from ..state import debug_enabled, emit_error, get_cli_state, set_cli_state


_DEFAULTS = DownloadConfig()


def parse_family_specs(specs: Iterable[str]) -> dict[str, list[str]]:
    """Turn ``Name:400,700i`` strings into a family to weights mapping."""
    families: dict[str, list[str]] = {}
    for spec in specs:
        name, _, weights = spec.partition(":")
        name = name.strip()
        if not name:
            raise InvalidInputError(f"Missing family name in '{spec}'.")
        known = families.setdefault(name, [])
        known.extend(weight for weight in weights.split(",") if weight.strip())
    return families


def _split_subsets(values: Iterable[str]) -> list[str]:
    return [item for value in values for item in value.split(",") if item.strip()]


def _resolve_source(input_url: str | None, families: list[str], subsets: list[str]) -> Any:
    if input_url and families:
        raise typer.BadParameter("Use either --input or --family, not both.")
    if input_url:
        return input_url
    if families:
        return (parse_family_specs(families), _split_subsets(subsets))
    raise typer.BadParameter("Provide a stylesheet URL with --input or at least one --family.")


def download(
    input_url: InputOption = None,
    family: FamilyOption = None,
    subset: SubsetOption = None,
    output: OutputDirOption = _DEFAULTS.output_dir,
    path: PathPrefixOption = _DEFAULTS.path,
    css: CssFileOption = _DEFAULTS.css_file,
    template: TemplateOption = _DEFAULTS.template,
    useragent: UserAgentOption = None,
    quiet: QuietOption = False,
    base64: Base64Option = False,
    non_strict_ssl: NonStrictSslOption = False,
    overwriting: OverwritingOption = False,
    simulate: SimulateOption = False,
    timeout: TimeoutOption = _DEFAULTS.timeout,
    print_options: PrintOptionsOption = False,
    debug: DebugOption = False,
    version: VersionOption = False,
) -> None:
    """Download the fonts of a stylesheet and save a rewritten local copy."""
    if version:
        typer.echo(get_version())
        raise typer.Exit()

    set_cli_state(verbosity=0 if quiet else 1, debug=debug)
    options = {
        "output_dir": output,
        "path": path,
        "css_file": css,
        "template": template,
        "user_agent": useragent or _DEFAULTS.user_agent,
        "verbose": not quiet,
        "overwriting": overwriting,
        "strict_ssl": not non_strict_ssl,
        "base64": base64,
        "simulate": simulate,
        "timeout": timeout,
    }
    downloader = FontDownloader(options)

    if print_options:
        typer.echo(downloader.get_config().model_dump_json(indent=2))
        return

    try:
        source = _resolve_source(input_url, family or [], subset or [])
        result = downloader.download(source)
    except FontFetchError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if not quiet:
        get_cli_state().console.log(
            f"{len(result.entries)} font(s) processed, {len(result.written)} file(s) written."
        )


__all__ = ["download", "parse_family_specs"]
