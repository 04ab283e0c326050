"""Client for the external text-generation endpoint (OpenRouter)."""

from typing import Optional, Union

import logfire
from pydantic_ai.models import Model

from config.settings import Settings
from pipeline.core.exceptions import GenerationFailure
from utils.llm_agent import build_openrouter_model, run_agent


class GenerationClient:
    """
    Sends a (system prompt, user prompt) pair to the generation endpoint.

    The API key is injected at construction. Every failure, including a
    missing key, is raised as GenerationFailure with a generic message;
    the provider error is logged and chained, never exposed.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str,
        base_url: str = "https://openrouter.ai/api/v1",
        temperature: float = 0.7,
        max_tokens: int = 1000,
        timeout: Optional[float] = 60.0,
        model: Optional[Model] = None,
    ):
        """
        Args:
            api_key: OpenRouter API key (may be empty; checked per call)
            model_name: OpenRouter model identifier
            base_url: OpenAI-compatible API base URL
            temperature: Sampling temperature
            max_tokens: Completion token limit
            timeout: Request timeout in seconds (None disables it)
            model: Pre-built pydantic-ai model, used instead of OpenRouter
        """
        self.api_key = api_key
        self.model_name = model_name
        self.base_url = base_url
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationClient":
        return cls(
            api_key=settings.openrouter_api_key,
            model_name=settings.generation_model,
            base_url=settings.openrouter_base_url,
            temperature=settings.generation_temperature,
            max_tokens=settings.generation_max_tokens,
            timeout=settings.generation_timeout,
        )

    def _resolve_model(self) -> Union[str, Model]:
        if self._model is not None:
            return self._model

        if not self.api_key:
            logfire.error(
                "Generation endpoint not configured",
                hint="Set OPENROUTER_API_KEY in the environment or .env file"
            )
            raise GenerationFailure()

        return build_openrouter_model(self.model_name, self.api_key, self.base_url)

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """
        Generate raw email text.

        Returns:
            Raw model output, stripped of surrounding whitespace

        Raises:
            GenerationFailure: On any endpoint error or an empty response
        """
        model = self._resolve_model()

        with logfire.span(
            "generation_client.generate",
            model=self.model_name,
            temperature=self.temperature,
            max_tokens=self.max_tokens
        ):
            try:
                text = await run_agent(
                    prompt=user_prompt,
                    model=model,
                    system_prompt=system_prompt,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                    retries=0,
                    timeout=self.timeout,
                )
            except Exception as e:
                logfire.error(
                    "Generation request failed",
                    model=self.model_name,
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True
                )
                raise GenerationFailure() from e

            if not text or not text.strip():
                logfire.error("Generation returned empty text", model=self.model_name)
                raise GenerationFailure()

            logfire.info("Generation completed", length=len(text))
            return text.strip()
