"""Dependencies injected into API route handlers."""

from typing import Annotated
from fastapi import Depends

from config.settings import settings
from services.generation_client import GenerationClient


def get_generation_client() -> GenerationClient:
    """
    Build the generation client from settings.

    Overridden in tests via app.dependency_overrides.
    """
    return GenerationClient.from_settings(settings)


# Type alias for dependency injection
GenerationClientDep = Annotated[GenerationClient, Depends(get_generation_client)]
