"""
Metadata Calculator Step

Computes word count and estimated reading time for the email body.
"""

from .main import MetadataCalculatorStep
from .utils import calculate_metadata

__all__ = ["MetadataCalculatorStep", "calculate_metadata"]
