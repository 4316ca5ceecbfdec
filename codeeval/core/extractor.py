"""Locate and decode the JSON array inside a free-form model response."""

import json
import logging
import re
from typing import Any

from codeeval.exceptions import EmptyResultError, ExtractionError, ParseError

logger = logging.getLogger(__name__)

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)


def extract_json(raw_text: str) -> str:
    """Return the JSON substring of a model response.

    A fenced ```json block wins. Otherwise the text from the first ``[`` to the
    last ``]`` is taken, which tolerates arrays wrapped in prose.

    Args:
        raw_text: Untrusted completion text

    Returns:
        Candidate JSON text (not yet parsed)

    Raises:
        ExtractionError: If neither a fenced block nor a bracketed span exists
    """
    text = raw_text or ""

    match = _FENCED_JSON.search(text)
    if match and match.group(1).strip():
        return match.group(1)

    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end > start:
        return text[start : end + 1]

    raise ExtractionError("no JSON found")


def parse_records(json_str: str) -> list[dict[str, Any]]:
    """Decode extracted text into a list of raw record mappings.

    Args:
        json_str: Output of extract_json

    Returns:
        Non-empty list of dicts

    Raises:
        ParseError: If the text is not valid JSON or not an array
        EmptyResultError: If the array holds no objects
    """
    try:
        data = json.loads(json_str)
    except (json.JSONDecodeError, TypeError) as e:
        raise ParseError(f"response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ParseError(f"expected a JSON array, got {type(data).__name__}")

    records = [item for item in data if isinstance(item, dict)]
    skipped = len(data) - len(records)
    if skipped:
        logger.warning(f"Dropped {skipped} non-object element(s) from response array")

    if not records:
        raise EmptyResultError()

    return records
