"""Prompt playground: a single free-text completion under the judge instruction."""

import logging

from codeeval.llm.client import LLMClient, LLMError
from codeeval.llm.prompts import DEFAULT_PLAYGROUND_PROMPT, SYSTEM_INSTRUCTION_JUDGE

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response generated."


class PlaygroundService:
    """Runs ad-hoc coding prompts against the backend."""

    def __init__(self, llm_client: LLMClient, model: str | None = None) -> None:
        self.llm_client = llm_client
        self.model = model or llm_client.config.analysis_model

    def generate(self, prompt: str | None = None) -> str:
        """Return the completion for prompt, or an "Error: ..." string on failure."""
        try:
            text = self.llm_client.generate(
                prompt or DEFAULT_PLAYGROUND_PROMPT,
                model=self.model,
                use_search=False,
                system_prompt=SYSTEM_INSTRUCTION_JUDGE,
            )
        except LLMError as e:
            logger.error(f"Error generating code: {e}")
            return f"Error: {e}"

        return text or NO_RESPONSE
