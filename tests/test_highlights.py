"""Tests for leaderboard highlights."""

import math

import pytest

from codeeval.core.highlights import compute_highlights, parse_price
from codeeval.models.leaderboard import ModelRecord


def make(name: str, swe: float = 0.0, lcb: float = 0.0, price: str = "TBD", open_source: bool = False) -> ModelRecord:
    return ModelRecord(
        name=name,
        swe_bench_verified=swe,
        live_code_bench=lcb,
        input_price=price,
        is_open_source=open_source,
    )


class TestParsePrice:
    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            ("$0.55", 0.55),
            ("$3.00 / 1M tokens", 3.0),
            ("$1,250", 1250.0),
            ("Open", 0.0),
            ("Free tier", 0.0),
            ("12", 12.0),
        ],
    )
    def test_parses_display_prices(self, price, expected):
        assert parse_price(price) == expected

    @pytest.mark.parametrize("price", ["TBD", "", None, "N/A"])
    def test_unpriced_is_infinite(self, price):
        assert math.isinf(parse_price(price))


class TestComputeHighlights:
    def test_empty_records(self):
        assert compute_highlights([]) is None

    def test_best_value_is_cheapest_above_threshold(self):
        a = make("A", swe=50, price="$3.00")
        b = make("B", swe=45, price="$0.50")
        c = make("C", swe=30, price="Open")

        highlights = compute_highlights([a, b, c])

        assert highlights.best_value == b

    def test_best_value_falls_back_to_first_record(self):
        records = [make("A", swe=10, price="$5"), make("B", swe=40, price="$0.10")]
        assert compute_highlights(records).best_value.name == "A"

    def test_unpriced_never_beats_priced(self):
        records = [make("A", swe=80, price="TBD"), make("B", swe=60, price="$15.00")]
        assert compute_highlights(records).best_value.name == "B"

    def test_all_unpriced_picks_first_eligible(self):
        records = [make("A", swe=20), make("B", swe=70), make("C", swe=90)]
        assert compute_highlights(records).best_value.name == "B"

    def test_open_price_counts_as_free(self):
        records = [make("A", swe=70, price="$0.01"), make("B", swe=55, price="Open")]
        assert compute_highlights(records).best_value.name == "B"

    def test_best_open_weight(self):
        records = [
            make("Closed", swe=90),
            make("Small", swe=40, open_source=True),
            make("Big", swe=70, open_source=True),
        ]
        assert compute_highlights(records).best_open_weight.name == "Big"

    def test_no_open_weight(self):
        assert compute_highlights([make("A", swe=50)]).best_open_weight is None

    def test_best_reasoning_prefers_live_code_bench(self):
        records = [make("A", swe=90, lcb=40), make("B", swe=50, lcb=70)]
        assert compute_highlights(records).best_reasoning.name == "B"

    def test_best_reasoning_uses_swe_bench_when_live_code_bench_missing(self):
        records = [make("A", swe=80), make("B", swe=20, lcb=70)]
        assert compute_highlights(records).best_reasoning.name == "A"

    def test_ties_resolve_to_first(self):
        records = [
            make("First", swe=60, lcb=50, price="$1.00", open_source=True),
            make("Second", swe=60, lcb=50, price="$1.00", open_source=True),
        ]

        highlights = compute_highlights(records)

        assert highlights.best_value.name == "First"
        assert highlights.best_open_weight.name == "First"
        assert highlights.best_reasoning.name == "First"

    def test_fixture_records(self, records):
        highlights = compute_highlights(records)

        assert highlights.best_value.name == "Qwen 2.5 Coder 32B"
        assert highlights.best_open_weight.name == "DeepSeek R1"
        assert highlights.best_reasoning.name == "DeepSeek R1"
