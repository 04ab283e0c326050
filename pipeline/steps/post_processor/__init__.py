"""
Post-Processor Step

Normalizes raw model output into canonical email text: subject line,
greeting spacing, paragraph breaks and closing phrase.
"""

from .main import PostProcessorStep
from .utils import post_process

__all__ = ["PostProcessorStep", "post_process"]
