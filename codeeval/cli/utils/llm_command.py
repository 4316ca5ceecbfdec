"""Shared utilities for LLM-based CLI commands."""

import logging

import typer
from rich.console import Console

from codeeval.cache.leaderboard import DiskCacheStore
from codeeval.config import Config, load_config
from codeeval.core.fallback import FALLBACK_MODELS
from codeeval.exceptions import CacheError, ConfigurationError
from codeeval.llm.client import LLMClient
from codeeval.models.leaderboard import FetchResult
from codeeval.services.leaderboard import LeaderboardFetcher, LogCallback

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def get_config() -> Config:
    """Load configuration, exiting with a readable message when it is invalid.

    Raises:
        typer.Exit: If the configuration fails validation
    """
    try:
        return load_config()
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e


def initialize_llm_client(config: Config | None = None, model: str | None = None) -> LLMClient:
    """Initialize the LLM client.

    Args:
        config: Application config
        model: Default model override

    Returns:
        Initialized LLM client

    Raises:
        typer.Exit: If initialization fails
    """
    config = config or get_config()
    try:
        llm_client = LLMClient(model=model, config=config)
        console.print(f"[dim]Using LLM: {llm_client}[/dim]")
    except Exception as e:
        console.print(f"[red]Error initializing LLM client: {e}[/red]")
        console.print("[dim]Check your LLM configuration and API keys (CODEEVAL_LLM_API_KEY).[/dim]")
        raise typer.Exit(1) from e

    return llm_client


def create_fetcher(config: Config, llm_client: LLMClient, on_log: LogCallback | None = None) -> LeaderboardFetcher:
    """Build a leaderboard fetcher backed by the on-disk cache, or uncached if the cache cannot be opened."""
    cache: DiskCacheStore | None
    try:
        cache = DiskCacheStore(cache_dir=config.cache_dir, ttl_hours=config.cache_ttl_hours)
    except CacheError as e:
        console.print(f"[yellow]⚠ {e}. Continuing without cache.[/yellow]")
        cache = None
    return LeaderboardFetcher(llm_client, cache=cache, config=config, on_log=on_log)


def load_leaderboard(
    fetcher: LeaderboardFetcher,
    force: bool = False,
    model: str | None = None,
) -> FetchResult:
    """Fetch the leaderboard, substituting the static dataset when live data is unavailable.

    Args:
        fetcher: Configured leaderboard fetcher
        force: Skip the cache
        model: Primary model tier

    Returns:
        FetchResult whose models are never empty
    """
    with console.status("[bold blue]Searching for the latest coding benchmarks...[/bold blue]", spinner="dots"):
        result = fetcher.fetch(force_refresh=force, model_tier=model)

    if result.is_cached:
        console.print("[green]✓ Using cached leaderboard[/green]")
    elif result.is_live:
        console.print(f"[green]✓ Live data via {result.used_model}[/green]")

    if not result.is_live:
        console.print("[yellow]⚠ Using fallback data[/yellow]")
        if result.error:
            console.print(f"[dim]{result.error}[/dim]")
        console.print("[dim]Retry with --force to fetch live data again.[/dim]")
        result = result.model_copy(update={"models": list(FALLBACK_MODELS)})

    return result
