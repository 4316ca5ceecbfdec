"""Tests for JSON extraction from free-form responses."""

import pytest

from codeeval.core.extractor import extract_json, parse_records
from codeeval.exceptions import EmptyResultError, ExtractionError, ParseError, UpstreamError


class TestExtractJson:
    def test_fenced_json_block(self):
        assert extract_json('```json\n[{"name":"X"}]\n```') == '[{"name":"X"}]'

    def test_fenced_block_label_is_case_insensitive(self):
        assert extract_json('Result:\n```JSON\n[{"a": 1}]\n```') == '[{"a": 1}]'

    def test_bracketed_span_in_prose(self):
        assert extract_json('Here is data: [{"a":1}] done') == '[{"a":1}]'

    def test_span_runs_from_first_to_last_bracket(self):
        text = 'Top models: [{"tags": ["x", "y"]}, {"tags": []}] (see [1])'
        assert extract_json(text) == '[{"tags": ["x", "y"]}, {"tags": []}] (see [1]'

    def test_fenced_block_preferred_over_brackets(self):
        text = 'Notes [draft]\n```json\n[{"name": "A"}]\n```'
        assert extract_json(text) == '[{"name": "A"}]'

    def test_empty_fenced_block_falls_back_to_brackets(self):
        text = '```json\n```\n[{"name": "B"}]'
        assert extract_json(text) == '[{"name": "B"}]'

    def test_no_brackets_raises(self):
        with pytest.raises(ExtractionError, match="no JSON found"):
            extract_json("I could not find any leaderboard data today.")

    def test_closing_bracket_before_opening_raises(self):
        with pytest.raises(ExtractionError):
            extract_json("] nothing here [")

    def test_empty_text_raises(self):
        with pytest.raises(ExtractionError):
            extract_json("")

    def test_extraction_error_is_upstream_error(self):
        with pytest.raises(UpstreamError):
            extract_json("plain text")


class TestParseRecords:
    def test_parses_array_of_objects(self):
        assert parse_records('[{"name": "X"}, {"name": "Y"}]') == [{"name": "X"}, {"name": "Y"}]

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_records('[{"name": "X",}]')

    def test_non_array_raises_parse_error(self):
        with pytest.raises(ParseError, match="expected a JSON array"):
            parse_records('{"name": "X"}')

    def test_empty_array_raises_empty_result(self):
        with pytest.raises(EmptyResultError):
            parse_records("[]")

    def test_non_object_elements_are_dropped(self):
        assert parse_records('[1, "two", {"name": "X"}, null]') == [{"name": "X"}]

    def test_only_non_object_elements_raises_empty_result(self):
        with pytest.raises(EmptyResultError):
            parse_records('[1, 2, 3]')
