"""
Email Splitter Step

Splits canonical email text into a display subject and body.
"""

from .main import EmailSplitterStep
from .utils import split_email

__all__ = ["EmailSplitterStep", "split_email"]
