"""Utilities for creating instrumented pydantic-ai agents."""

import logging
from typing import Optional, Union

from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

logger = logging.getLogger(__name__)


def build_openrouter_model(model_name: str, api_key: str, base_url: str) -> OpenAIChatModel:
    """Create a chat model that talks to OpenRouter's OpenAI-compatible API."""
    provider = OpenAIProvider(base_url=base_url, api_key=api_key)
    return OpenAIChatModel(model_name, provider=provider)


def create_agent(
    model: Union[str, Model],
    system_prompt: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 1000,
    retries: int = 0,
    timeout: Optional[float] = None,
) -> Agent[None, str]:
    """Create a plain-text pydantic-ai Agent."""
    prompt = system_prompt or "You are a helpful AI assistant."

    model_settings = {
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if timeout is not None:
        model_settings["timeout"] = timeout

    agent = Agent(
        model=model,
        output_type=str,
        system_prompt=prompt,
        retries=retries,
        model_settings=model_settings,
    )

    logger.debug(
        "Created agent: model=%s, temperature=%s, max_tokens=%s, retries=%s, timeout=%s",
        getattr(model, "model_name", model),
        temperature,
        max_tokens,
        retries,
        timeout,
    )

    return agent


async def run_agent(
    prompt: str,
    model: Union[str, Model],
    system_prompt: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 1000,
    retries: int = 0,
    timeout: Optional[float] = None,
) -> str:
    """Create an agent, invoke it with prompt, and return the text output."""
    agent = create_agent(
        model=model,
        system_prompt=system_prompt,
        temperature=temperature,
        max_tokens=max_tokens,
        retries=retries,
        timeout=timeout,
    )

    result = await agent.run(prompt)
    return result.output
