"""
Pydantic schemas for request/response validation.
"""

from schemas.email import (
    GenerateEmailRequest,
    GenerateEmailResponse,
    EmailMetadataResponse,
    EmailOptionsResponse,
    ErrorResponse,
    OptionResponse,
)

__all__ = [
    "GenerateEmailRequest",
    "GenerateEmailResponse",
    "EmailMetadataResponse",
    "EmailOptionsResponse",
    "ErrorResponse",
    "OptionResponse",
]
