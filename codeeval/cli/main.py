"""Main CLI entry point for CodeEval."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from codeeval.cli.commands.analysis import analysis
from codeeval.cli.commands.cache import cache
from codeeval.cli.commands.leaderboard import leaderboard
from codeeval.cli.commands.playground import playground
from codeeval.cli.utils.options import VERBOSE_OPTION

app = typer.Typer(
    name="codeeval",
    help="CodeEval - Live leaderboard of AI coding-model benchmarks",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VERBOSE_OPTION = False) -> None:
    """
    CodeEval CLI
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


app.command("leaderboard", help="Show the latest coding benchmark leaderboard with highlights")(leaderboard)
app.command("analysis", help="Generate an AI analysis report from the leaderboard")(analysis)
app.command("playground", help="Send a coding prompt to the model")(playground)
app.command("cache", help="Show or clear the local leaderboard cache")(cache)


if __name__ == "__main__":
    app()
