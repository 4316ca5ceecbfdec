"""Shared CLI options and enums for commands."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer


class OutputFormat(StrEnum):
    """Supported output formats across commands."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


# Common typer options
MODEL_OPTION = Annotated[
    str | None,
    typer.Option(
        "--model",
        "-m",
        help="Model tier to query (e.g. gemini-2.5-flash, gemini-3-pro-preview)",
    ),
]

OUTPUT_PATH_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output file path (json/csv formats print to stdout when omitted)",
    ),
]

OUTPUT_FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
]

FORCE_OPTION = Annotated[
    bool,
    typer.Option(
        "--force",
        help="Skip the cache and fetch fresh data",
    ),
]

SHOW_LOGS_OPTION = Annotated[
    bool,
    typer.Option(
        "--show-logs",
        help="Stream fetch progress messages",
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]
