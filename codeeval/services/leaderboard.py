"""Leaderboard acquisition: cache check, timed upstream search, extraction, normalization, fallback."""

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from codeeval.cache.base import BaseCacheStore
from codeeval.config import Config
from codeeval.core.constants import CACHED_MODEL_LABEL, FALLBACK_SUFFIX
from codeeval.core.extractor import extract_json, parse_records
from codeeval.core.normalizer import normalize
from codeeval.exceptions import EmptyResultError, NetworkError, TimeoutError, UpstreamError
from codeeval.llm.prompts import LEADERBOARD_PROMPT
from codeeval.models.leaderboard import FetchResult, ModelRecord

logger = logging.getLogger(__name__)

LogCallback = Callable[[str], None]


class Upstream(Protocol):
    """Generative backend that answers a prompt with free-form text."""

    def generate(self, prompt: str, model: str | None = None, use_search: bool = True) -> str:
        """Return completion text for prompt using the given model tier."""
        ...


class LeaderboardFetcher:
    """Fetches the coding leaderboard, degrading through cache, primary tier and fallback tier.

    ``fetch`` never raises: every upstream failure either triggers the fallback
    tier or ends in a FetchResult carrying an error message. Only one fetch
    should be in flight per instance.
    """

    def __init__(
        self,
        upstream: Upstream,
        cache: BaseCacheStore | None = None,
        config: Config | None = None,
        fallback_model: str | None = None,
        timeout_seconds: float | None = None,
        on_log: LogCallback | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            upstream: Backend used for search completions
            cache: Cache store, or None to always fetch
            config: Application config (falls back to defaults)
            fallback_model: Low-cost tier retried after a primary failure
            timeout_seconds: Bound on each upstream call
            on_log: Optional callback receiving a line per state transition
        """
        self.config = config or Config()
        self.upstream = upstream
        self.cache = cache
        self.fallback_model = fallback_model or self.config.fallback_model
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else self.config.search_timeout_seconds
        self.on_log = on_log
        self.prompt = LEADERBOARD_PROMPT

    def _log(self, message: str) -> None:
        logger.info(message)
        if self.on_log is None:
            return
        try:
            self.on_log(f"[{datetime.now().strftime('%H:%M:%S')}] {message}")
        except Exception as e:
            logger.warning(f"Log callback failed: {e}")

    def fetch(self, force_refresh: bool = False, model_tier: str | None = None) -> FetchResult:
        """Fetch the leaderboard.

        Args:
            force_refresh: Skip the cache and query the backend
            model_tier: Primary model tier (defaults to the configured primary model)

        Returns:
            FetchResult from a cache hit, primary success, fallback success or total failure
        """
        tier = model_tier or self.config.primary_model
        self._log(f"Starting leaderboard fetch using {tier}...")

        if force_refresh:
            self._log("Force refresh requested. Skipping cache.")
        elif self.cache is not None:
            self._log("Checking local cache...")
            entry = self.cache.read()
            if entry is not None:
                self._log(f"Cache valid ({len(entry.data)} models). Returning cached data.")
                return FetchResult(models=entry.data, is_live=True, is_cached=True, used_model=CACHED_MODEL_LABEL)
            self._log("No fresh cache entry.")

        try:
            records = self._attempt(tier)
            return self._succeed(records, tier)
        except UpstreamError as primary_error:
            self._log(f"Primary model {tier} failed: {primary_error}")
            error = f"Primary model {tier} failed: {primary_error}"

        if tier == self.fallback_model:
            self._log("Primary tier is the fallback tier. Giving up.")
            return self._fail(error, tier)

        self._log(f"Retrying with fallback model {self.fallback_model}...")
        try:
            records = self._attempt(self.fallback_model)
            return self._succeed(records, f"{self.fallback_model} {FALLBACK_SUFFIX}")
        except UpstreamError as fallback_error:
            self._log(f"Fallback model {self.fallback_model} failed: {fallback_error}")
            error = f"{error}; fallback model {self.fallback_model} failed: {fallback_error}"
            return self._fail(error, self.fallback_model)

    def _attempt(self, model: str) -> list[ModelRecord]:
        """Run one upstream call through extraction and normalization.

        Raises:
            UpstreamError: On timeout, transport failure or unusable output
        """
        text = self._call_with_timeout(model)
        self._log(f"API response received from {model} ({len(text)} chars).")

        try:
            self._log("Extracting JSON...")
            raw_records = parse_records(extract_json(text))
        except UpstreamError as e:
            e.model = model
            raise

        records = [normalize(raw) for raw in raw_records]
        if not records:
            raise EmptyResultError(model=model)

        self._log(f"Parsed models: {', '.join(r.name for r in records)}")
        return records

    def _call_with_timeout(self, model: str) -> str:
        """Race the upstream call against the timeout; the first to settle wins.

        The call runs on a daemon thread. A call that loses the race keeps
        running until it ends on its own, but its outcome is never read and it
        does not keep the process alive.
        """
        self._log(f"Sending request to {model} (timeout: {self.timeout_seconds:g}s)...")
        outcome: dict[str, Any] = {}
        settled = threading.Event()

        def run() -> None:
            try:
                outcome["text"] = self.upstream.generate(self.prompt, model, True)
            except Exception as e:
                outcome["error"] = e
            finally:
                settled.set()

        thread = threading.Thread(target=run, name=f"codeeval-upstream-{model}", daemon=True)
        thread.start()

        if not settled.wait(self.timeout_seconds):
            raise TimeoutError("leaderboard search", self.timeout_seconds, model=model)

        # Errors raised by the call itself, including socket timeouts, are transport failures
        error = outcome.get("error")
        if isinstance(error, UpstreamError):
            if error.model is None:
                error.model = model
            raise error
        if error is not None:
            raise NetworkError(str(error) or type(error).__name__, model=model) from error

        text = outcome.get("text")
        return text if isinstance(text, str) else ""

    def _succeed(self, records: list[ModelRecord], used_model: str) -> FetchResult:
        if self.cache is not None:
            self.cache.write(records)
        self._log(f"Fetched {len(records)} models via {used_model}.")
        return FetchResult(models=records, is_live=True, is_cached=False, used_model=used_model)

    def _fail(self, error: str, used_model: str) -> FetchResult:
        self._log(f"All attempts failed: {error}")
        return FetchResult(models=[], is_live=False, is_cached=False, used_model=used_model, error=error)
