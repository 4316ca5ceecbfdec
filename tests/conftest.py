"""
Pytest configuration and fixtures for the test suite.
"""

import json
from collections.abc import Iterator
from typing import Any

import pytest

from codeeval.cache.base import MemoryCacheStore
from codeeval.core.normalizer import normalize
from codeeval.models.leaderboard import ModelRecord
from tests.helpers import FakeClock, Gate


@pytest.fixture
def raw_records() -> list[dict[str, Any]]:
    """Loosely shaped records as an LLM might return them."""
    return [
        {
            "name": "DeepSeek R1",
            "provider": "deepseek",
            "releaseDate": "2025-01",
            "humanEval": 96.3,
            "sweBench": 0.792,
            "liveCodeBench": 69.8,
            "contextWindow": "128K",
            "inputPrice": "$0.55",
            "outputPrice": "$2.19",
            "strengths": ["Reasoning"],
        },
        {
            "name": "Claude 3.7 Sonnet",
            "provider": "OpenAI",
            "humanEval": "95.8%",
            "swe_bench": 74.5,
            "LIVECODEBENCH": 0.672,
            "inputPrice": "$3.00",
            "isOpenSource": False,
        },
        {
            "name": "Qwen 2.5 Coder 32B",
            "SWE-bench": 55.5,
            "inputPrice": "Open",
            "strengths": "Local Coding",
        },
    ]


@pytest.fixture
def llm_response_text(raw_records: list[dict[str, Any]]) -> str:
    """A completion wrapping the records in prose and a fenced block."""
    return f"Here are the latest results:\n```json\n{json.dumps(raw_records)}\n```\nSources: various leaderboards."


@pytest.fixture
def records(raw_records: list[dict[str, Any]]) -> list[ModelRecord]:
    return [normalize(r) for r in raw_records]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> MemoryCacheStore:
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def hang() -> Iterator[Gate]:
    """Factory for upstream outcomes that block until released or the test finishes."""
    gate = Gate()
    yield gate
    gate.release()
