"""CLI utilities module."""

from codeeval.cli.utils.llm_command import create_fetcher, get_config, initialize_llm_client, load_leaderboard
from codeeval.cli.utils.options import (
    FORCE_OPTION,
    MODEL_OPTION,
    OUTPUT_FORMAT_OPTION,
    OUTPUT_PATH_OPTION,
    SHOW_LOGS_OPTION,
    VERBOSE_OPTION,
    OutputFormat,
)
from codeeval.cli.utils.output import handle_csv_output, handle_json_output

__all__ = [
    "FORCE_OPTION",
    "MODEL_OPTION",
    "OUTPUT_FORMAT_OPTION",
    "OUTPUT_PATH_OPTION",
    "SHOW_LOGS_OPTION",
    "VERBOSE_OPTION",
    "OutputFormat",
    "create_fetcher",
    "get_config",
    "handle_csv_output",
    "handle_json_output",
    "initialize_llm_client",
    "load_leaderboard",
]
