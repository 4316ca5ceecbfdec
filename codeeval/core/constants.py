"""
Constants and lookup tables for CodeEval.
"""

from enum import IntEnum, StrEnum


class ModelTiers(StrEnum):
    """Known backend model tiers."""

    FAST = "gemini-2.5-flash"
    DEEP = "gemini-3-pro-preview"


class TimeoutConstants(IntEnum):
    """Upstream timing limits."""

    SEARCH_TIMEOUT_SECONDS = 150


class CacheLimits(IntEnum):
    """Cache-related limits."""

    MAX_CACHE_AGE_HOURS = 24


# Bump the suffix whenever the persisted record schema changes so old entries are ignored
CACHE_KEY = "codeeval_leaderboard_cache_v1"

CACHED_MODEL_LABEL = "cache"
FALLBACK_SUFFIX = "(Fallback)"


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2
    SCORE_DECIMALS = 1


class HighlightThresholds(IntEnum):
    """Thresholds used when picking leaderboard highlights."""

    MIN_VALUE_SWE_BENCH = 40


# Record defaults
DEFAULT_MODEL_NAME = "Unknown Model"
DEFAULT_PROVIDER = "Other"
DEFAULT_RELEASE_DATE = "2025-01"
DEFAULT_CONTEXT_WINDOW = "128K"
DEFAULT_PRICE = "TBD"
DEFAULT_STRENGTHS = ("General Coding",)

# Field alias table: attribute -> accepted upstream spellings, tried in order.
# Lookup is exact first, then case-insensitive. Bump the version on any change.
ALIAS_TABLE_VERSION = 2

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "model", "modelName", "model_name"),
    "provider": ("provider", "company", "vendor", "organization"),
    "release_date": ("releaseDate", "release_date", "released", "date"),
    "human_eval": ("humanEval", "human_eval", "HumanEval", "evalPlus", "eval_plus"),
    "swe_bench_verified": (
        "sweBenchVerified",
        "sweBench",
        "swe_bench_verified",
        "swe_bench",
        "swe-bench",
        "SWE-bench",
        "SWE-bench Verified",
    ),
    "live_code_bench": ("liveCodeBench", "live_code_bench", "LiveCodeBench", "live-code-bench", "lcb"),
    "context_window": ("contextWindow", "context_window", "context", "contextLength"),
    "input_price": ("inputPrice", "input_price", "priceInput", "input_cost"),
    "output_price": ("outputPrice", "output_price", "priceOutput", "output_cost"),
    "strengths": ("strengths", "tags", "highlights"),
    "is_open_source": ("isOpenSource", "is_open_source", "openSource", "open_source", "openWeights"),
}

# Ordered provider signatures: (canonical name, model-name patterns, provider-string patterns).
# Model-name matches are checked across the whole table before any provider-string match.
PROVIDER_SIGNATURES: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    ("Anthropic", (r"claude",), (r"anthropic",)),
    ("OpenAI", (r"gpt", r"\bo[134]\b"), (r"openai",)),
    ("Google", (r"gemini", r"gemma"), (r"google", r"deepmind")),
    ("DeepSeek", (r"deepseek",), (r"deepseek",)),
    ("Alibaba Cloud", (r"qwen",), (r"alibaba", r"qwen")),
    ("Meta", (r"llama",), (r"meta", r"facebook")),
    ("xAI", (r"grok",), (r"xai", r"x\.ai", r"twitter")),
    ("Moonshot AI", (r"kimi",), (r"moonshot",)),
    ("Mistral AI", (r"mistral", r"codestral", r"devstral"), (r"mistral",)),
    ("Microsoft", (r"\bphi-?\d",), (r"microsoft",)),
    ("01.AI", (r"\byi-",), (r"01\.ai",)),
)

UNKNOWN_PROVIDER_NAMES = frozenset({"unknown", "n/a", "none", "other"})

WHITE = "#FFFFFF"
BLACK = "#000000"

PROVIDER_COLORS: dict[str, str] = {
    "DeepSeek": "#6366f1",
    "Anthropic": "#d97706",
    "OpenAI": "#10a37f",
    "Google": "#3b82f6",
    "Alibaba Cloud": "#0ea5e9",
    "Meta": "#0668E1",
    "xAI": WHITE,
    "Mistral": "#f59e0b",
    "Moonshot AI": "#ec4899",
    "01.AI": "#14b8a6",
    "Microsoft": "#00a4ef",
    "Other": "#94a3b8",
}

# Hashed colors below this perceived brightness (0-255) are lifted
MIN_HASH_COLOR_BRIGHTNESS = 48

OPEN_WEIGHT_NAME_MARKERS = (
    "llama",
    "qwen",
    "deepseek",
    "mistral",
    "codestral",
    "devstral",
    "gemma",
    "gpt-oss",
)
OPEN_WEIGHT_PROVIDER_MARKERS = ("meta", "mistral", "01.ai")

TRUTHY_STRINGS = frozenset({"true", "yes", "y", "1", "open", "open source", "open-source"})
FALSY_STRINGS = frozenset({"false", "no", "n", "0", "closed", "proprietary"})

# Price strings that mean "no per-token charge"
FREE_PRICE_MARKERS = ("open", "free")
