"""
Services module for external integrations and business logic.
"""

from services.generation_client import GenerationClient
from services.email_generator import generate_email, validate_email_request

__all__ = ["GenerationClient", "generate_email", "validate_email_request"]
