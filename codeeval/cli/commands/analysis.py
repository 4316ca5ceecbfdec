"""Analysis report command implementation."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from codeeval.cli.utils.llm_command import create_fetcher, get_config, initialize_llm_client, load_leaderboard
from codeeval.cli.utils.options import FORCE_OPTION, MODEL_OPTION
from codeeval.models.analysis import AnalysisReport
from codeeval.services.analysis import AnalysisService

console = Console()
logger = logging.getLogger(__name__)


def handle_report_output(report: AnalysisReport) -> None:
    """Render a structured analysis report."""
    console.print(Panel(report.executive_summary, title="Market Intelligence Report", expand=False))

    if report.top_models:
        table = Table(title="Top Models", show_lines=True)
        table.add_column("Rank", justify="center", width=5)
        table.add_column("Model", style="cyan", min_width=18)
        table.add_column("Primary advantage", min_width=25)
        table.add_column("Recommended for", style="dim")
        table.add_column("Tools", style="dim")

        for model in sorted(report.top_models, key=lambda m: m.rank):
            table.add_row(
                str(model.rank),
                model.model_name,
                model.primary_advantage,
                ", ".join(model.recommended_for),
                ", ".join(model.compatible_tools),
            )
        console.print(table)

    if report.scenario_matrix:
        table = Table(title="Scenario Matrix", show_lines=True)
        table.add_column("Scenario", style="bold", min_width=20)
        table.add_column("Suggested model", style="cyan")
        table.add_column("Reasoning", min_width=30)

        for item in report.scenario_matrix:
            table.add_row(item.scenario, item.suggested_model, item.reasoning)
        console.print(table)


def analysis(
    model: MODEL_OPTION = None,
    analysis_model: Annotated[
        str | None,
        typer.Option(
            "--analysis-model",
            help="Model used to write the report (defaults to CODEEVAL_ANALYSIS_MODEL)",
        ),
    ] = None,
    force: FORCE_OPTION = False,
) -> None:
    """Generate an AI analysis report from the current leaderboard.

    Uses the cached leaderboard when fresh, otherwise searches for it first.
    """
    config = get_config()

    llm_client = initialize_llm_client(config)
    fetcher = create_fetcher(config, llm_client)
    result = load_leaderboard(fetcher, force=force, model=model)

    service = AnalysisService(llm_client, model=analysis_model)
    with console.status("[bold blue]Analyzing leaderboard data...[/bold blue]", spinner="dots"):
        response = service.generate_report(result.models)

    if response.report:
        handle_report_output(response.report)
    elif response.markdown:
        console.print(Markdown(response.markdown))
