"""Leaderboard data models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from codeeval.core.constants import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_MODEL_NAME,
    DEFAULT_PRICE,
    DEFAULT_PROVIDER,
    DEFAULT_RELEASE_DATE,
    DEFAULT_STRENGTHS,
)


class ModelRecord(BaseModel):
    """One competitor on the leaderboard.

    Scores are percentages in [0, 100]; 0 means the benchmark has no data.
    Serialized with camelCase aliases (``sweBenchVerified``, ``inputPrice``...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str = Field(default=DEFAULT_MODEL_NAME, min_length=1)
    provider: str = DEFAULT_PROVIDER
    release_date: str = DEFAULT_RELEASE_DATE
    human_eval: float = 0.0
    swe_bench_verified: float = 0.0
    live_code_bench: float = 0.0
    context_window: str = DEFAULT_CONTEXT_WINDOW
    input_price: str = DEFAULT_PRICE
    output_price: str = DEFAULT_PRICE
    strengths: list[str] = Field(default_factory=lambda: list(DEFAULT_STRENGTHS), min_length=1)
    color: str = Field(default="#94a3b8", pattern=r"^#[0-9A-Fa-f]{6}$")
    is_open_source: bool = False

    @property
    def reasoning_score(self) -> float:
        """LiveCodeBench score, or SWE-bench Verified when LiveCodeBench is missing."""
        return self.live_code_bench if self.live_code_bench > 0 else self.swe_bench_verified

    def to_dict(self) -> dict:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)


class FetchResult(BaseModel):
    """Outcome of one leaderboard fetch."""

    models: list[ModelRecord] = Field(default_factory=list)
    is_live: bool = False
    is_cached: bool = False
    used_model: str = ""
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """True for cache hits and live successes."""
        return bool(self.models)


class Highlights(BaseModel):
    """The three highlighted leaderboard entries."""

    best_value: ModelRecord
    best_open_weight: ModelRecord | None = None
    best_reasoning: ModelRecord
