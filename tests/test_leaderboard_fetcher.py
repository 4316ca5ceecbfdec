"""Tests for the leaderboard fetch workflow."""

import json
import logging
import os
import socket
import subprocess
import sys
import textwrap
import time
from pathlib import Path

import pytest

from codeeval.exceptions import NetworkError
from codeeval.services.leaderboard import LeaderboardFetcher
from tests.helpers import FALLBACK, PRIMARY, FakeUpstream, join_upstream_threads


def make_fetcher(upstream, cache=None, **kwargs) -> LeaderboardFetcher:
    kwargs.setdefault("timeout_seconds", 2)
    return LeaderboardFetcher(upstream, cache=cache, fallback_model=FALLBACK, **kwargs)


class TestCache:
    def test_fresh_cache_skips_upstream(self, memory_cache, records):
        memory_cache.write(records)
        upstream = FakeUpstream({})

        result = make_fetcher(upstream, memory_cache).fetch(model_tier=PRIMARY)

        assert upstream.calls == []
        assert result.models == records
        assert result.is_live and result.is_cached
        assert result.used_model == "cache"
        assert result.error is None

    def test_force_refresh_bypasses_cache(self, memory_cache, records, llm_response_text):
        memory_cache.write(records[:1])
        upstream = FakeUpstream({PRIMARY: llm_response_text})

        result = make_fetcher(upstream, memory_cache).fetch(force_refresh=True, model_tier=PRIMARY)

        assert upstream.calls == [PRIMARY]
        assert result.is_cached is False
        assert len(result.models) == 3
        assert len(memory_cache.read().data) == 3

    def test_stale_cache_triggers_fetch(self, memory_cache, records, clock, llm_response_text):
        memory_cache.write(records[:1])
        clock.advance(25 * 3600)
        upstream = FakeUpstream({PRIMARY: llm_response_text})

        result = make_fetcher(upstream, memory_cache).fetch(model_tier=PRIMARY)

        assert upstream.calls == [PRIMARY]
        assert result.used_model == PRIMARY

    def test_works_without_cache(self, llm_response_text):
        result = make_fetcher(FakeUpstream({PRIMARY: llm_response_text})).fetch(model_tier=PRIMARY)
        assert result.succeeded


class TestPrimary:
    def test_primary_success(self, memory_cache, records, llm_response_text):
        upstream = FakeUpstream({PRIMARY: llm_response_text})

        result = make_fetcher(upstream, memory_cache).fetch(model_tier=PRIMARY)

        assert result.models == records
        assert result.is_live is True
        assert result.is_cached is False
        assert result.used_model == PRIMARY
        assert result.error is None
        assert memory_cache.read().data == records

    def test_claude_record_is_reattributed(self, llm_response_text):
        result = make_fetcher(FakeUpstream({PRIMARY: llm_response_text})).fetch(model_tier=PRIMARY)

        claude = next(m for m in result.models if m.name.startswith("Claude"))
        assert claude.provider == "Anthropic"

    def test_defaults_to_configured_primary_tier(self, llm_response_text):
        fetcher = make_fetcher(FakeUpstream({}))
        fetcher.upstream = FakeUpstream({fetcher.config.primary_model: llm_response_text})

        result = fetcher.fetch()

        assert result.used_model == fetcher.config.primary_model


class TestFallback:
    def test_timeout_falls_back(self, memory_cache, hang, llm_response_text):
        late = json.dumps([{"name": "Late Model", "sweBench": 99}])
        upstream = FakeUpstream({PRIMARY: hang(late), FALLBACK: llm_response_text})

        result = make_fetcher(upstream, memory_cache, timeout_seconds=0.05).fetch(model_tier=PRIMARY)

        assert upstream.calls == [PRIMARY, FALLBACK]
        assert result.used_model == f"{FALLBACK} (Fallback)"
        assert result.is_live is True
        assert result.is_cached is False
        assert len(result.models) == 3
        cached = memory_cache.read().model_dump()

        hang.release()
        join_upstream_threads()

        assert memory_cache.read().model_dump() == cached
        assert "Late Model" not in [m.name for m in result.models]
        assert result.used_model == f"{FALLBACK} (Fallback)"

    def test_timeout_raised_by_the_call_is_a_network_failure(self):
        upstream = FakeUpstream(
            {PRIMARY: socket.timeout("read timed out"), FALLBACK: socket.timeout("read timed out")}
        )

        started = time.monotonic()
        result = make_fetcher(upstream, timeout_seconds=30).fetch(model_tier=PRIMARY)

        assert time.monotonic() - started < 5
        assert "read timed out" in result.error
        assert "timed out after" not in result.error

    def test_hung_call_does_not_block_interpreter_exit(self):
        script = textwrap.dedent(
            f"""
            import time

            from codeeval.services.leaderboard import LeaderboardFetcher

            class Slow:
                def generate(self, prompt, model=None, use_search=True):
                    time.sleep(10)
                    return "[]"

            fetcher = LeaderboardFetcher(Slow(), fallback_model="{FALLBACK}", timeout_seconds=0.2)
            print(fetcher.fetch(model_tier="{PRIMARY}").error)
            """
        )
        root = Path(__file__).resolve().parents[1]
        env = {**os.environ, "PYTHONPATH": str(root)}

        started = time.monotonic()
        completed = subprocess.run(
            [sys.executable, "-c", script], cwd=root, env=env, capture_output=True, text=True, timeout=30
        )
        elapsed = time.monotonic() - started

        assert completed.returncode == 0, completed.stderr
        assert "timed out after 0.2 seconds" in completed.stdout
        assert elapsed < 8

    def test_exception_falls_back(self, llm_response_text):
        upstream = FakeUpstream({PRIMARY: RuntimeError("503 overloaded"), FALLBACK: llm_response_text})

        result = make_fetcher(upstream).fetch(model_tier=PRIMARY)

        assert result.used_model.endswith("(Fallback)")
        assert result.error is None

    def test_unusable_text_falls_back(self, llm_response_text):
        upstream = FakeUpstream({PRIMARY: "Sorry, I could not find that.", FALLBACK: llm_response_text})

        result = make_fetcher(upstream).fetch(model_tier=PRIMARY)

        assert result.used_model == f"{FALLBACK} (Fallback)"

    @pytest.mark.parametrize("response", ["[]", "[1, 2]", '{"name": "X"}', "[{broken"])
    def test_bad_arrays_fall_back(self, response, llm_response_text):
        upstream = FakeUpstream({PRIMARY: response, FALLBACK: llm_response_text})

        result = make_fetcher(upstream).fetch(model_tier=PRIMARY)

        assert upstream.calls == [PRIMARY, FALLBACK]
        assert result.succeeded

    def test_total_failure(self, memory_cache):
        upstream = FakeUpstream({PRIMARY: NetworkError("connection reset"), FALLBACK: "no data today"})

        result = make_fetcher(upstream, memory_cache).fetch(model_tier=PRIMARY)

        assert result.models == []
        assert result.is_live is False
        assert result.is_cached is False
        assert PRIMARY in result.error
        assert FALLBACK in result.error
        assert "connection reset" in result.error
        assert "no JSON found" in result.error
        assert memory_cache.load_entry() is None

    def test_failure_keeps_previous_cache(self, memory_cache, records, clock):
        memory_cache.write(records)
        clock.advance(25 * 3600)
        upstream = FakeUpstream({PRIMARY: "nothing", FALLBACK: "nothing"})

        result = make_fetcher(upstream, memory_cache).fetch(model_tier=PRIMARY)

        assert not result.succeeded
        assert memory_cache.load_entry().data == records

    def test_primary_equal_to_fallback_calls_once(self):
        upstream = FakeUpstream({FALLBACK: RuntimeError("boom")})

        result = make_fetcher(upstream).fetch(model_tier=FALLBACK)

        assert upstream.calls == [FALLBACK]
        assert result.is_live is False
        assert "boom" in result.error


class TestLogging:
    def test_on_log_receives_progress(self, llm_response_text):
        lines: list[str] = []
        upstream = FakeUpstream({PRIMARY: "garbage", FALLBACK: llm_response_text})

        make_fetcher(upstream, on_log=lines.append).fetch(model_tier=PRIMARY)

        assert all(line.startswith("[") for line in lines)
        joined = "\n".join(lines)
        assert f"Starting leaderboard fetch using {PRIMARY}" in joined
        assert f"Retrying with fallback model {FALLBACK}" in joined
        assert "Parsed models: DeepSeek R1, Claude 3.7 Sonnet, Qwen 2.5 Coder 32B" in joined

    def test_failing_callback_is_tolerated(self, llm_response_text, caplog):
        def explode(message: str) -> None:
            raise ValueError("ui gone")

        upstream = FakeUpstream({PRIMARY: llm_response_text})

        with caplog.at_level(logging.WARNING):
            result = make_fetcher(upstream, on_log=explode).fetch(model_tier=PRIMARY)

        assert result.succeeded
        assert "Log callback failed" in caplog.text
