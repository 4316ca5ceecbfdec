"""Prompt templates for leaderboard search, analysis reports and the playground."""

import json
from collections.abc import Sequence

from codeeval.core.constants import FormattingConstants
from codeeval.models.leaderboard import ModelRecord

SYSTEM_INSTRUCTION_JUDGE = """You are an expert Senior Software Architect and AI Researcher.
Your goal is to evaluate the current landscape of LLMs specifically for coding tasks.
You must provide objective comparisons including US models (Claude, OpenAI o-series, Gemini) and top Chinese models (DeepSeek, Qwen).

When asked for analysis, you MUST use web search to find the latest dates and benchmark scores.
Do not rely on your internal cutoff knowledge. Always cite the current date."""

LEADERBOARD_PROMPT = """Context: You are an AI Data Analyst.
TASK:
1. Search the web for the **LATEST** available "SWE-bench Verified Leaderboard", "EvalPlus Leaderboard" and "LiveCodeBench".
2. Identify the **TOP 10 performing models** currently on the market.
3. Extract their specific scores.

CRITICAL DATA FORMATTING RULES:
- **Scores MUST be PERCENTAGES (0-100).**
- Example: If a score is "0.75", output "75.0". Do NOT output decimals < 1.
- If a score is "62%", output "62.0".

OUTPUT FORMAT:
Return ONLY a valid JSON array. No markdown.
[
  {
    "name": "Model Name",
    "provider": "Company",
    "releaseDate": "YYYY-MM",
    "humanEval": 90.5,
    "sweBench": 50.2,
    "liveCodeBench": 45.0,
    "contextWindow": "128K",
    "inputPrice": "$X.XX",
    "outputPrice": "$X.XX",
    "isOpenSource": true,
    "strengths": ["Tag1", "Tag2"],
    "color": "#HexCode"
  }
]

NOTES:
- Make sure to find scores for "LiveCodeBench" specifically.
- If exact data is missing, use a reasonable estimate from the model's tier (e.g. ~70% for SOTA Pro models) rather than returning 0.
- Prices are USD per 1M tokens. Use "Open" for open-weight models without a hosted price."""

DEFAULT_PLAYGROUND_PROMPT = """Write a Python script using 'pandas' and 'scikit-learn' to create a Random Forest classifier.
It should load a CSV, handle missing values, and output the accuracy score.
Explain the feature importance selection."""

ANALYSIS_SYSTEM_PROMPT = f"""{SYSTEM_INSTRUCTION_JUDGE}

You will receive the current coding leaderboard as JSON. Base your report on it:
- Write a short executive summary naming the current leader for coding work.
- Rank the strongest models, giving each one primary advantage, the workloads it suits and the coding tools it works well with.
- Build a scenario matrix (e.g. "Local Deployment on Consumer Hardware", "Large Monorepo Refactoring", "Budget API Usage") with one suggested model and brief reasoning per scenario.
- Only recommend models present in the leaderboard. Do not invent scores."""


def create_analysis_messages(records: Sequence[ModelRecord]) -> list[dict[str, str]]:
    """Create messages for the analysis report prompt.

    Args:
        records: Normalized leaderboard records

    Returns:
        List of message dicts for LLM conversation
    """
    leaderboard = json.dumps([r.to_dict() for r in records], indent=FormattingConstants.JSON_INDENT)
    return [
        {
            "role": "system",
            "content": ANALYSIS_SYSTEM_PROMPT,
        },
        {
            "role": "user",
            "content": f"Analyze this coding model leaderboard:\n\n{leaderboard}",
        },
    ]
