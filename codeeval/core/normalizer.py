"""Map loosely shaped upstream records onto the canonical ModelRecord schema.

Normalization is total: every field of the result is populated, whatever the
upstream payload looked like. Missing or garbled values become inferred values
or defaults rather than errors, so a partially broken response still renders.
Unknown upstream keys are dropped.
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from codeeval.core.constants import (
    BLACK,
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_MODEL_NAME,
    DEFAULT_PRICE,
    DEFAULT_PROVIDER,
    DEFAULT_RELEASE_DATE,
    DEFAULT_STRENGTHS,
    FALSY_STRINGS,
    FIELD_ALIASES,
    MIN_HASH_COLOR_BRIGHTNESS,
    OPEN_WEIGHT_NAME_MARKERS,
    OPEN_WEIGHT_PROVIDER_MARKERS,
    PROVIDER_COLORS,
    PROVIDER_SIGNATURES,
    TRUTHY_STRINGS,
    UNKNOWN_PROVIDER_NAMES,
    WHITE,
    FormattingConstants,
)
from codeeval.models.leaderboard import ModelRecord

logger = logging.getLogger(__name__)

_MISSING = object()

_COMPILED_SIGNATURES = [
    (canonical, [re.compile(p) for p in name_patterns], [re.compile(p) for p in provider_patterns])
    for canonical, name_patterns, provider_patterns in PROVIDER_SIGNATURES
]


def lookup_field(raw: Mapping[str, Any], aliases: tuple[str, ...]) -> Any:
    """Find the first present value among the accepted key spellings.

    Each alias is tried as an exact key, then case-insensitively, before moving
    on to the next alias. ``None`` values count as absent.

    Returns:
        The value, or the module sentinel ``_MISSING``
    """
    lowered = {str(k).lower(): k for k in raw}
    for alias in aliases:
        value = raw.get(alias)
        if value is not None:
            return value
        original_key = lowered.get(alias.lower())
        if original_key is not None and raw[original_key] is not None:
            return raw[original_key]
    return _MISSING


def _field(raw: Mapping[str, Any], name: str) -> Any:
    return lookup_field(raw, FIELD_ALIASES[name])


def _text(value: Any) -> str | None:
    if value is _MISSING or isinstance(value, dict | list):
        return None
    text = str(value).strip()
    return text or None


def infer_provider(name: str, given_provider: str | None = None) -> str:
    """Resolve the canonical vendor for a model.

    Model-name signatures are checked first across the whole table, so a
    "Claude" model is Anthropic even if upstream reported another provider.

    Args:
        name: Model name
        given_provider: Provider string reported upstream, if any

    Returns:
        Canonical provider, the capitalized reported provider, or "Other"
    """
    n = (name or "").lower()
    for canonical, name_patterns, _ in _COMPILED_SIGNATURES:
        if any(p.search(n) for p in name_patterns):
            return canonical

    given = (given_provider or "").strip()
    p = given.lower()
    if p:
        for canonical, _, provider_patterns in _COMPILED_SIGNATURES:
            if any(pattern.search(p) for pattern in provider_patterns):
                return canonical

    if len(given) > 2 and p not in UNKNOWN_PROVIDER_NAMES:
        return given[0].upper() + given[1:]

    return DEFAULT_PROVIDER


def normalize_score(value: Any) -> float:
    """Coerce a benchmark value to a 0-100 percentage.

    Values in (0, 1] are read as fractions and rescaled; 0 and values above 1
    pass through. Unusable values become 0 (no data).
    """
    if value is _MISSING or value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        cleaned = value.strip().rstrip("%").strip()
        try:
            number = float(cleaned)
        except ValueError:
            return 0.0
    elif isinstance(value, int | float):
        number = float(value)
    else:
        return 0.0

    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    if 0 < number <= 1:
        return round(number * 100, FormattingConstants.SCORE_DECIMALS)
    return number


def string_to_color(text: str) -> str:
    """Derive a stable #RRGGBB color from a string.

    Dark results are lifted so hashed bars stay readable on a dark background.
    """
    h = 0
    for ch in text:
        h = (ord(ch) + ((h << 5) - h)) & 0xFFFFFFFF
    value = h & 0xFFFFFF

    r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    if 0.299 * r + 0.587 * g + 0.114 * b < MIN_HASH_COLOR_BRIGHTNESS:
        r, g, b = r | 0x80, g | 0x80, b | 0x80

    return f"#{r:02X}{g:02X}{b:02X}"


def assign_color(provider: str, name: str) -> str:
    """Pick the brand color for a provider, falling back to a hashed color."""
    color = PROVIDER_COLORS.get(provider)
    if color is None:
        color = next((c for key, c in PROVIDER_COLORS.items() if key in provider), None)
    if color is None:
        color = string_to_color(name or "unknown")

    if color.upper() in (WHITE, BLACK):
        return WHITE
    return color


def infer_open_source(name: str, provider: str, explicit: Any = _MISSING) -> bool:
    """Decide whether a model has open weights.

    An explicit upstream flag wins; otherwise known open-weight families are matched.
    """
    if explicit is not _MISSING and explicit is not None:
        if isinstance(explicit, str):
            flag = explicit.strip().lower()
            if flag in TRUTHY_STRINGS:
                return True
            if flag in FALSY_STRINGS:
                return False
        else:
            return bool(explicit)

    n = (name or "").lower()
    p = (provider or "").lower()
    return any(marker in n for marker in OPEN_WEIGHT_NAME_MARKERS) or any(
        marker in p for marker in OPEN_WEIGHT_PROVIDER_MARKERS
    )


def _price(value: Any) -> str:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return f"${value:.2f}"
    return _text(value) or DEFAULT_PRICE


def _strengths(value: Any) -> list[str]:
    if isinstance(value, str):
        items = [value.strip()]
    elif isinstance(value, list | tuple):
        items = [str(item).strip() for item in value if item is not None]
    else:
        items = []
    items = [item for item in items if item]
    return items or list(DEFAULT_STRENGTHS)


def normalize(raw: Mapping[str, Any]) -> ModelRecord:
    """Build a complete ModelRecord from one raw upstream record.

    Never raises. A non-mapping input yields a record made entirely of defaults.

    Args:
        raw: Untyped record decoded from the upstream JSON array

    Returns:
        Fully populated ModelRecord
    """
    if not isinstance(raw, Mapping):
        logger.debug(f"Normalizing non-mapping record of type {type(raw).__name__}")
        raw = {}

    name = _text(_field(raw, "name")) or DEFAULT_MODEL_NAME
    provider = infer_provider(name, _text(_field(raw, "provider")))
    context_window = _field(raw, "context_window")

    return ModelRecord(
        name=name,
        provider=provider,
        release_date=_text(_field(raw, "release_date")) or DEFAULT_RELEASE_DATE,
        human_eval=normalize_score(_field(raw, "human_eval")),
        swe_bench_verified=normalize_score(_field(raw, "swe_bench_verified")),
        live_code_bench=normalize_score(_field(raw, "live_code_bench")),
        context_window=_text(context_window) or DEFAULT_CONTEXT_WINDOW,
        input_price=_price(_field(raw, "input_price")),
        output_price=_price(_field(raw, "output_price")),
        strengths=_strengths(_field(raw, "strengths")),
        color=assign_color(provider, name),
        is_open_source=infer_open_source(name, provider, _field(raw, "is_open_source")),
    )
