"""LLM client using LiteLLM for free-text search completions and Instructor for structured outputs."""

import logging
from typing import Any, TypeVar, cast

import instructor
from litellm import completion
from pydantic import BaseModel

from codeeval.config import Config
from codeeval.exceptions import NetworkError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Providers whose models take Google Search grounding as a tool
_GOOGLE_SEARCH_PROVIDERS = {"gemini", "vertex_ai"}


class LLMError(NetworkError):
    """Base exception for LLM-related errors."""


class LLMClient:
    """LLM client for the generative backend."""

    def __init__(
        self,
        provider: str | None = None,
        model: str | None = None,
        api_key: str | None = None,
        temperature: float | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize LLM client.

        Args:
            provider: LiteLLM provider prefix (gemini, openai, anthropic, etc.)
            model: Default model name (gemini-2.5-flash, gpt-4o, etc.)
            api_key: API key for the provider
            temperature: Temperature for responses
            config: Application config (falls back to defaults)
        """
        self.config = config or Config()

        # Use provided values or fall back to config/defaults
        self.provider = provider or self.config.llm_provider
        self.model = model or self.config.primary_model
        self.temperature = temperature if temperature is not None else self.config.llm_temperature

        # Set API key if provided
        self.api_key = api_key
        if not self.api_key and self.config.llm_api_key:
            self.api_key = self.config.llm_api_key.get_secret_value()

        # Create Instructor client wrapping LiteLLM
        self.client = instructor.from_litellm(completion)

        logger.info(f"Initialized LLM client: provider={self.provider}, model={self.model}")

    def model_string(self, model: str | None = None) -> str:
        """Format a model name for LiteLLM.

        Args:
            model: Model name, or None for the client default

        Returns:
            Provider-prefixed model string
        """
        name = model or self.model
        if "/" in name or self.provider == "openai":
            # Already routed, or OpenAI which doesn't need a prefix
            return name
        return f"{self.provider}/{name}"

    def _request_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"temperature": self.temperature}
        if self.api_key:
            kwargs["api_key"] = self.api_key
        return kwargs

    def generate(
        self,
        prompt: str,
        model: str | None = None,
        use_search: bool = True,
        system_prompt: str | None = None,
        timeout: float | None = None,
    ) -> str:
        """Get a free-text completion, optionally grounded with live web search.

        Args:
            prompt: User instruction
            model: Model tier to use (defaults to the client model)
            use_search: Ask the backend to search the web before answering
            system_prompt: Optional system instruction
            timeout: Request timeout in seconds (defaults to the configured search timeout)

        Returns:
            Completion text (may be empty)

        Raises:
            LLMError: If the completion fails
        """
        model_string = self.model_string(model)
        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        kwargs = self._request_kwargs()
        kwargs["timeout"] = timeout if timeout is not None else self.config.search_timeout_seconds
        if use_search:
            if self.provider in _GOOGLE_SEARCH_PROVIDERS or model_string.startswith(("gemini/", "vertex_ai/")):
                kwargs["tools"] = [{"googleSearch": {}}]
            else:
                kwargs["web_search_options"] = {"search_context_size": "medium"}

        try:
            logger.debug(f"Calling LLM completion: model={model_string}, search={use_search}")
            response = completion(model=model_string, messages=messages, **kwargs)
            content = response.choices[0].message.content
            logger.debug(f"LLM completion successful: {len(content or '')} chars")
            return content or ""

        except Exception as e:
            logger.error(f"LLM completion error: {e}")
            raise LLMError(f"LLM completion failed: {e}", model=model_string) from e

    def complete(self, messages: list[dict[str, str]], response_model: type[T], model: str | None = None) -> T:
        """Get structured completion using Instructor.

        Args:
            messages: List of message dicts with 'role' and 'content'
            response_model: Pydantic model class for structured response
            model: Model to use (defaults to the client model)

        Returns:
            Instance of response_model with validated data

        Raises:
            LLMError: If completion fails
        """
        model_string = self.model_string(model)
        try:
            logger.debug(f"Calling LLM completion: model={model_string}, response_model={response_model.__name__}")

            # Cast messages to suppress type warnings - instructor handles various message formats
            messages_param = cast(Any, messages)

            response = self.client.chat.completions.create(
                model=model_string,
                messages=messages_param,
                response_model=response_model,
                **self._request_kwargs(),
            )

            logger.debug(f"LLM completion successful: {response_model.__name__}")
            return response

        except Exception as e:
            logger.error(f"LLM completion error: {e}")
            raise LLMError(f"LLM completion failed: {e}", model=model_string) from e

    def __str__(self) -> str:
        """String representation of the client."""
        return f"LLMClient(provider={self.provider}, model={self.model})"
