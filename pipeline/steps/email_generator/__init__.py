"""
Email Generator Step

Sends the prompt pair to the generation endpoint and stores the raw output.
"""

from .main import EmailGeneratorStep

__all__ = ["EmailGeneratorStep"]
