"""
Prompt Builder Step

Assembles the system and user prompts for the generation endpoint
from the validated email request.
"""

from .main import PromptBuilderStep

__all__ = ["PromptBuilderStep"]
