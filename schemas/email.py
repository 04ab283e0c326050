"""
Pydantic schemas for the email generation API.

Request fields are deliberately loose: length and purpose checks live in
services.email_generator.validate_email_request so every entry adapter
reports the same error kinds and messages.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from pipeline.models.core import EmailResult


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class GenerateEmailRequest(BaseModel):
    """
    Request body for POST /api/generate
    """

    context: Optional[str] = Field(
        None,
        description="Situation the email should address (10-2000 characters)"
    )

    purpose: Optional[str] = Field(
        None,
        description="Email purpose, e.g. 'follow-up', 'apology', 'invitation'"
    )

    tone: Optional[str] = Field(
        None,
        description="Email tone (default: professional)"
    )

    recipient: Optional[str] = Field(
        None,
        description="Optional recipient description, e.g. 'my manager'"
    )

    language: Optional[str] = Field(
        None,
        description="Language to write in (default: english)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "context": "Need to reschedule our meeting tomorrow due to a conflict",
                "purpose": "follow-up",
                "tone": "professional",
                "recipient": "the project team",
                "language": "english"
            }
        }
    )


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class EmailMetadataResponse(BaseModel):
    """Reading statistics for the email body."""

    word_count: int = Field(..., ge=0, serialization_alias="wordCount")
    estimated_read_time: int = Field(..., ge=0, serialization_alias="estimatedReadTime")


class GenerateEmailResponse(BaseModel):
    """
    Response from POST /api/generate

    email is the canonical text; subject and body are derived from it.
    """

    email: str
    subject: str
    body: str
    metadata: EmailMetadataResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "Subject: Rescheduling Request\n\nDear Team,\n\nI need to reschedule...\n\nBest regards",
                "subject": "Rescheduling Request",
                "body": "Dear Team,\n\nI need to reschedule...\n\nBest regards",
                "metadata": {"wordCount": 8, "estimatedReadTime": 1}
            }
        }
    )

    @classmethod
    def from_result(cls, result: EmailResult) -> "GenerateEmailResponse":
        return cls(
            email=result.full_email,
            subject=result.subject,
            body=result.body,
            metadata=EmailMetadataResponse(
                word_count=result.metadata.word_count,
                estimated_read_time=result.metadata.estimated_read_time,
            ),
        )


class ErrorResponse(BaseModel):
    """Error body returned with any non-2xx status."""

    error: str


class OptionResponse(BaseModel):
    value: str
    label: str


class EmailOptionsResponse(BaseModel):
    """Response from GET /api/options"""

    purposes: List[OptionResponse]
    tones: List[OptionResponse]
    languages: List[OptionResponse]
