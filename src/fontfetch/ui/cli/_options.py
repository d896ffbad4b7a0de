"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
NETWORK_PANEL = "Network"
DIAGNOSTICS_PANEL = "Diagnostics"

InputOption = Annotated[
    str | None,
    typer.Option(
        "--input",
        "-i",
        help="Input URL of a CSS stylesheet with @font-face rules.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

FamilyOption = Annotated[
    list[str] | None,
    typer.Option(
        "--family",
        "-f",
        help="Google Fonts family to request, optionally with weights (e.g. 'Roboto:400,700i').",
        rich_help_panel=INPUTS_PANEL,
    ),
]

SubsetOption = Annotated[
    list[str] | None,
    typer.Option(
        "--subset",
        help="Character subset(s) to request with --family (e.g. 'latin,cyrillic').",
        rich_help_panel=INPUTS_PANEL,
    ),
]

OutputDirOption = Annotated[
    str,
    typer.Option(
        "--output",
        "-o",
        help="Output directory.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

PathPrefixOption = Annotated[
    str,
    typer.Option(
        "--path",
        "-p",
        help="Path placed before every font source in the stylesheet.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

CssFileOption = Annotated[
    str,
    typer.Option(
        "--css",
        "-c",
        help="Name of the CSS file.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

TemplateOption = Annotated[
    str,
    typer.Option(
        "--template",
        "-t",
        help=(
            "Template of font filenames. Variables: {family}, {_family}, {weight}, "
            "{comment}, {filename}, {ext}, {i}."
        ),
        rich_help_panel=OUTPUT_PANEL,
    ),
]

Base64Option = Annotated[
    bool,
    typer.Option(
        "--base64",
        "-b",
        help="Save fonts inside the CSS file as base64 URIs.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

OverwritingOption = Annotated[
    bool,
    typer.Option(
        "--overwriting",
        "-w",
        help="Allow overwriting existing files.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

SimulateOption = Annotated[
    bool,
    typer.Option(
        "--simulate",
        "-s",
        help="Simulation; no file will be saved.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

UserAgentOption = Annotated[
    str | None,
    typer.Option(
        "--useragent",
        "-u",
        help="User agent sent with every request.",
        rich_help_panel=NETWORK_PANEL,
    ),
]

NonStrictSslOption = Annotated[
    bool,
    typer.Option(
        "--non-strict-ssl",
        help="Accept invalid TLS certificates (proxies, self-signed certificates).",
        rich_help_panel=NETWORK_PANEL,
    ),
]

TimeoutOption = Annotated[
    float,
    typer.Option(
        "--timeout",
        min=0.1,
        help="Timeout in seconds for each HTTP request.",
        rich_help_panel=NETWORK_PANEL,
    ),
]

QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Do not display progress information.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

PrintOptionsOption = Annotated[
    bool,
    typer.Option(
        "--print-options",
        help="Show the resolved options without performing any action.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks on failure.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VersionOption = Annotated[
    bool,
    typer.Option(
        "--version",
        help="Show the fontfetch version and exit.",
        is_eager=True,
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "Base64Option",
    "CssFileOption",
    "DebugOption",
    "FamilyOption",
    "InputOption",
    "NonStrictSslOption",
    "OutputDirOption",
    "OverwritingOption",
    "PathPrefixOption",
    "PrintOptionsOption",
    "QuietOption",
    "SimulateOption",
    "SubsetOption",
    "TemplateOption",
    "TimeoutOption",
    "UserAgentOption",
    "VersionOption",
]
