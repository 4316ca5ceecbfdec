"""Static leaderboard shown when live data cannot be fetched (Feb 2025 baseline)."""

from codeeval.models.leaderboard import ModelRecord

FALLBACK_MODELS: tuple[ModelRecord, ...] = (
    ModelRecord(
        name="DeepSeek R1",
        provider="DeepSeek",
        release_date="2025-01",
        human_eval=96.3,
        swe_bench_verified=79.2,
        live_code_bench=69.8,
        context_window="128K",
        input_price="$0.55",
        output_price="$2.19",
        strengths=["#1 Reasoning", "Open Weights", "Chain of Thought"],
        color="#6366f1",
        is_open_source=True,
    ),
    ModelRecord(
        name="Claude 3.7 Sonnet",
        provider="Anthropic",
        release_date="2025-02",
        human_eval=95.8,
        swe_bench_verified=74.5,
        live_code_bench=67.2,
        context_window="200K",
        input_price="$3.00",
        output_price="$15.00",
        strengths=["Hybrid Reasoning", "Best Coding UX", "Thinking Mode"],
        color="#d97706",
        is_open_source=False,
    ),
    ModelRecord(
        name="OpenAI o3-mini",
        provider="OpenAI",
        release_date="2025-01",
        human_eval=95.0,
        swe_bench_verified=71.5,
        live_code_bench=66.1,
        context_window="128K",
        input_price="$1.10",
        output_price="$4.40",
        strengths=["Fast Reasoning", "STEM Expert", "Efficiency"],
        color="#10a37f",
        is_open_source=False,
    ),
    ModelRecord(
        name="Gemini 2.0 Flash",
        provider="Google",
        release_date="2025-Preview",
        human_eval=94.2,
        swe_bench_verified=64.8,
        live_code_bench=62.5,
        context_window="1M",
        input_price="$0.10",
        output_price="$0.40",
        strengths=["Context Window", "Multimodal", "Speed"],
        color="#3b82f6",
        is_open_source=False,
    ),
    ModelRecord(
        name="Qwen 2.5-Max",
        provider="Alibaba Cloud",
        release_date="2024-12",
        human_eval=93.5,
        swe_bench_verified=61.5,
        live_code_bench=58.4,
        context_window="128K",
        input_price="$2.50",
        output_price="$10.00",
        strengths=["Top Chinese Model", "Balanced Performance"],
        color="#0ea5e9",
        is_open_source=False,
    ),
    ModelRecord(
        name="Qwen 2.5 Coder 32B",
        provider="Alibaba Cloud",
        release_date="2024-11",
        human_eval=91.5,
        swe_bench_verified=55.5,
        live_code_bench=50.4,
        context_window="128K",
        input_price="Open",
        output_price="Open",
        strengths=["Best Small Model", "Local Coding"],
        color="#38bdf8",
        is_open_source=True,
    ),
    ModelRecord(
        name="Grok 3",
        provider="xAI",
        release_date="2025-02",
        human_eval=93.0,
        swe_bench_verified=60.2,
        live_code_bench=59.8,
        context_window="128K",
        input_price="TBD",
        output_price="TBD",
        strengths=["Real-time Data", "Strong Logic"],
        color="#FFFFFF",
        is_open_source=False,
    ),
    ModelRecord(
        name="GPT-4o",
        provider="OpenAI",
        release_date="2024-05",
        human_eval=90.2,
        swe_bench_verified=43.2,
        live_code_bench=43.5,
        context_window="128K",
        input_price="$2.50",
        output_price="$10.00",
        strengths=["Tool Calling", "Reliability", "Speed"],
        color="#10b981",
        is_open_source=False,
    ),
    ModelRecord(
        name="DeepSeek-V3",
        provider="DeepSeek",
        release_date="2024-12",
        human_eval=90.5,
        swe_bench_verified=48.2,
        live_code_bench=45.8,
        context_window="64K",
        input_price="$0.14",
        output_price="$0.28",
        strengths=["Price/Perf King", "Efficiency"],
        color="#818cf8",
        is_open_source=True,
    ),
    ModelRecord(
        name="Llama 3.1 405B",
        provider="Meta",
        release_date="2024-07",
        human_eval=89.0,
        swe_bench_verified=38.5,
        live_code_bench=40.1,
        context_window="128K",
        input_price="Open",
        output_price="Open",
        strengths=["Open Source Flagship", "General Knowledge"],
        color="#0668E1",
        is_open_source=True,
    ),
)
