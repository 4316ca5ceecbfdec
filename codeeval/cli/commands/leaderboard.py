"""Leaderboard command implementation."""

import logging
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from codeeval.cli.utils.llm_command import create_fetcher, get_config, initialize_llm_client, load_leaderboard
from codeeval.cli.utils.options import (
    FORCE_OPTION,
    MODEL_OPTION,
    OUTPUT_FORMAT_OPTION,
    OUTPUT_PATH_OPTION,
    SHOW_LOGS_OPTION,
    OutputFormat,
)
from codeeval.cli.utils.output import handle_csv_output, handle_json_output
from codeeval.core.highlights import compute_highlights
from codeeval.models.leaderboard import FetchResult, Highlights, ModelRecord

console = Console()
# stdout is reserved for json/csv output
log_console = Console(stderr=True)
logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "name",
    "provider",
    "releaseDate",
    "humanEval",
    "sweBenchVerified",
    "liveCodeBench",
    "contextWindow",
    "inputPrice",
    "outputPrice",
    "isOpenSource",
    "strengths",
    "color",
]


def format_score(value: float) -> str:
    """Render a score, showing N/A when there is no data."""
    return "N/A" if value <= 0 else f"{value:g}%"


def handle_table_output(result: FetchResult, highlights: Highlights | None) -> None:
    """Handle table format output."""
    source = "cached" if result.is_cached else ("live" if result.is_live else "fallback")
    table = Table(title=f"Coding Model Leaderboard ({source})", show_lines=False)

    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Model", style="bold", min_width=18)
    table.add_column("Provider", min_width=12)
    table.add_column("SWE-bench", justify="right")
    table.add_column("LiveCodeBench", justify="right")
    table.add_column("HumanEval", justify="right")
    table.add_column("Context", justify="right")
    table.add_column("Price in/out", justify="right")
    table.add_column("Strengths", style="dim", min_width=20)

    ranked = sorted(result.models, key=lambda m: m.swe_bench_verified, reverse=True)
    for index, model in enumerate(ranked, start=1):
        name = f"{model.name} [green](open)[/green]" if model.is_open_source else model.name
        table.add_row(
            str(index),
            name,
            f"[{model.color}]■[/] {model.provider}",
            format_score(model.swe_bench_verified),
            format_score(model.live_code_bench),
            format_score(model.human_eval),
            model.context_window,
            f"{model.input_price} / {model.output_price}",
            ", ".join(model.strengths),
        )

    console.print(table)

    if highlights:
        console.print(render_highlights(highlights))


def render_highlights(highlights: Highlights) -> Panel:
    """Build the highlights panel."""
    best_value = highlights.best_value
    lines = [
        f"💰 Best value: [bold]{best_value.name}[/bold] "
        f"({best_value.input_price} input, {format_score(best_value.swe_bench_verified)} SWE-bench)"
    ]
    if highlights.best_open_weight:
        lines.append(
            f"🔓 Best open weights: [bold]{highlights.best_open_weight.name}[/bold] "
            f"({format_score(highlights.best_open_weight.swe_bench_verified)} SWE-bench)"
        )
    else:
        lines.append("🔓 Best open weights: [dim]none listed[/dim]")
    lines.append(
        f"🧠 Best reasoning: [bold]{highlights.best_reasoning.name}[/bold] "
        f"({format_score(highlights.best_reasoning.reasoning_score)})"
    )
    return Panel("\n".join(lines), title="Highlights", expand=False)


def transform_result_for_json(result: FetchResult) -> dict[str, Any]:
    """Transform a fetch result for JSON output."""
    highlights = compute_highlights(result.models)
    return {
        "is_live": result.is_live,
        "is_cached": result.is_cached,
        "used_model": result.used_model,
        "error": result.error,
        "highlights": (
            {
                "best_value": highlights.best_value.name,
                "best_open_weight": highlights.best_open_weight.name if highlights.best_open_weight else None,
                "best_reasoning": highlights.best_reasoning.name,
            }
            if highlights
            else None
        ),
        "models": [m.to_dict() for m in result.models],
    }


def transform_model_for_csv(model: ModelRecord) -> dict[str, Any]:
    """Transform a single record for CSV output."""
    row = model.to_dict()
    row["strengths"] = "; ".join(model.strengths)
    return row


def leaderboard(
    model: MODEL_OPTION = None,
    force: FORCE_OPTION = False,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TABLE,
    output: OUTPUT_PATH_OPTION = None,
    show_logs: SHOW_LOGS_OPTION = False,
) -> None:
    """Show the latest coding benchmark leaderboard.

    Results are searched live, cached for 24 hours, and retried on a cheaper
    model tier if the first search fails. When nothing can be fetched the
    built-in baseline dataset is shown instead.
    """
    start_time = datetime.now()
    config = get_config()

    on_log = (lambda message: log_console.print(f"[dim]{escape(message)}[/dim]")) if show_logs else None

    llm_client = initialize_llm_client(config)
    fetcher = create_fetcher(config, llm_client, on_log=on_log)
    result = load_leaderboard(fetcher, force=force, model=model)

    if output_format == OutputFormat.TABLE:
        handle_table_output(result, compute_highlights(result.models))
    elif output_format == OutputFormat.JSON:
        handle_json_output(result, output, transformer=transform_result_for_json)
    elif output_format == OutputFormat.CSV:
        handle_csv_output([transform_model_for_csv(m) for m in result.models], output, fieldnames=CSV_FIELDS)

    # Show timing info
    elapsed = datetime.now() - start_time
    logger.debug(f"Leaderboard command completed in {elapsed.total_seconds():.1f}s")
