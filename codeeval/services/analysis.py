"""Analysis report service using Instructor for structured outputs."""

import logging
from collections.abc import Sequence

from codeeval.llm.client import LLMClient, LLMError
from codeeval.llm.prompts import create_analysis_messages
from codeeval.models.analysis import AnalysisReport, AnalysisResponse
from codeeval.models.leaderboard import ModelRecord

logger = logging.getLogger(__name__)


class AnalysisService:
    """Service producing a qualitative market report from the normalized leaderboard."""

    def __init__(self, llm_client: LLMClient, model: str | None = None) -> None:
        """Initialize analysis service.

        Args:
            llm_client: LLM client for making report requests
            model: Model for the report (defaults to the configured analysis model)
        """
        self.llm_client = llm_client
        self.model = model or llm_client.config.analysis_model

    def generate_report(self, records: Sequence[ModelRecord]) -> AnalysisResponse:
        """Generate a structured report for the given leaderboard.

        The records are only read. Failures come back as markdown text instead of raising.

        Args:
            records: Normalized leaderboard records

        Returns:
            AnalysisResponse with either a report or a markdown message
        """
        if not records:
            return AnalysisResponse(markdown="No leaderboard data available to analyze.")

        messages = create_analysis_messages(records)
        logger.debug(f"Requesting analysis report for {len(records)} models with {self.model}")

        try:
            report = self.llm_client.complete(messages=messages, response_model=AnalysisReport, model=self.model)
            logger.debug(f"Analysis report ranked {len(report.top_models)} models")
            return AnalysisResponse(report=report)

        except LLMError as e:
            logger.error(f"Error generating analysis: {e}")
            return AnalysisResponse(markdown=f"Error fetching analysis: {e}. Please try again later.")
