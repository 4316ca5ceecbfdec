"""Derive highlighted entries from a normalized leaderboard."""

import math
import re
from collections.abc import Sequence

from codeeval.core.constants import FREE_PRICE_MARKERS, HighlightThresholds
from codeeval.models.leaderboard import Highlights, ModelRecord

_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def parse_price(price: str | None) -> float:
    """Parse a display price into a comparable number.

    "Open"/"Free" prices are 0; missing or unparseable prices ("TBD") are
    infinite so they never beat a priced competitor.
    """
    if not price:
        return math.inf

    text = price.lower()
    if any(marker in text for marker in FREE_PRICE_MARKERS):
        return 0.0

    match = _NUMBER.search(text.replace(",", ""))
    if match is None:
        return math.inf
    return float(match.group())


def compute_highlights(records: Sequence[ModelRecord]) -> Highlights | None:
    """Pick the best value, best open-weight and best reasoning models.

    Ties resolve to the earliest record in input order.

    Args:
        records: Normalized leaderboard records

    Returns:
        Highlights, or None when there are no records
    """
    if not records:
        return None

    # min() and max() keep the first of equal elements
    eligible = [r for r in records if r.swe_bench_verified > HighlightThresholds.MIN_VALUE_SWE_BENCH]
    if eligible:
        best_value = min(eligible, key=lambda r: parse_price(r.input_price))
    else:
        best_value = records[0]

    open_weight = [r for r in records if r.is_open_source]
    best_open_weight = max(open_weight, key=lambda r: r.swe_bench_verified) if open_weight else None

    best_reasoning = max(records, key=lambda r: r.reasoning_score)

    return Highlights(
        best_value=best_value,
        best_open_weight=best_open_weight,
        best_reasoning=best_reasoning,
    )
