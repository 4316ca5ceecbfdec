"""Cache maintenance command implementation."""

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from codeeval.cache.leaderboard import DiskCacheStore
from codeeval.cli.utils.llm_command import get_config
from codeeval.exceptions import CacheError

console = Console()


def cache(
    clear: Annotated[
        bool,
        typer.Option(
            "--clear",
            help="Delete the cached leaderboard",
        ),
    ] = False,
) -> None:
    """Show or clear the local leaderboard cache."""
    config = get_config()
    try:
        store = DiskCacheStore(cache_dir=config.cache_dir, ttl_hours=config.cache_ttl_hours)
    except CacheError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if clear:
        store.clear()
        console.print("[green]✓ Cache cleared[/green]")
        return

    status = store.status()
    console.print(f"[dim]Cache location: {status.location}[/dim]")
    if not status.has_entry:
        console.print("[yellow]No cached leaderboard.[/yellow]")
        return

    freshness = "[green]fresh[/green]" if status.is_fresh else "[yellow]stale[/yellow]"
    console.print(
        f"Cached leaderboard: {status.total_items} models | {status.cache_age_hours:.1f} hours old | {freshness}"
    )
