"""Core data models for the email generation pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, List
from datetime import datetime


class Purpose(str, Enum):
    """Categorical intent of the email."""
    FOLLOW_UP = "follow-up"
    APOLOGY = "apology"
    COLD_EMAIL = "cold-email"
    THANK_YOU = "thank-you"
    PROMOTION = "promotion"
    INTRODUCTION = "introduction"
    REQUEST = "request"
    INVITATION = "invitation"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


class Tone(str, Enum):
    """Style register of the email."""
    FORMAL = "formal"
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    HUMOROUS = "humorous"
    URGENT = "urgent"
    CASUAL = "casual"

    @property
    def label(self) -> str:
        return self.value.title()


DEFAULT_TONE = Tone.PROFESSIONAL
DEFAULT_LANGUAGE = "english"

# Languages offered by the web form; any other language name is passed through
SUPPORTED_LANGUAGES = ["english", "spanish", "french", "german", "chinese", "japanese"]

MIN_CONTEXT_LENGTH = 10
MAX_CONTEXT_LENGTH = 2000


@dataclass(frozen=True)
class EmailRequest:
    """
    Validated user input for one email generation.

    Built by services.email_generator.validate_email_request; the pipeline
    assumes every field has already been checked.
    """

    context: str
    purpose: Purpose
    tone: Tone = DEFAULT_TONE
    recipient: str = ""
    language: str = DEFAULT_LANGUAGE


@dataclass
class EmailMetadata:
    """Derived reading statistics for an email body."""

    word_count: int = 0
    estimated_read_time: int = 0


@dataclass
class EmailResult:
    """
    Final output of the pipeline.

    full_email is the canonical text; subject and body are derived from it.
    """

    subject: str
    body: str
    full_email: str
    metadata: EmailMetadata


@dataclass
class PipelineData:
    """
    In-memory state passed between pipeline steps. Never persisted.
    """

    # Input data (set by the email service from the validated request)
    task_id: str
    """Request correlation ID - used in Logfire spans"""

    request: EmailRequest
    """Validated generation request"""

    # Step 1 outputs (PromptBuilder)
    system_prompt: str = ""
    user_prompt: str = ""

    # Step 2 outputs (EmailGenerator)
    raw_email: str = ""
    """Unmodified model output"""

    # Step 3 outputs (PostProcessor)
    full_email: str = ""
    """Canonical email text: subject marker, spacing and closing enforced"""

    # Step 4 outputs (EmailSplitter)
    subject: str = ""
    body: str = ""

    # Step 5 outputs (MetadataCalculator)
    email_metadata: Optional[EmailMetadata] = None

    # Free-form metadata (model, tokens, etc.)
    metadata: Dict[str, Any] = field(default_factory=dict)

    # Transient data (logged to Logfire)
    started_at: datetime = field(default_factory=datetime.utcnow)
    """Pipeline start time"""

    step_timings: Dict[str, float] = field(default_factory=dict)
    """
    Duration of each step in seconds.
    Example: {"prompt_builder": 0.001, "email_generator": 3.5, ...}
    """

    errors: List[str] = field(default_factory=list)
    """
    Non-fatal errors encountered during execution.
    Fatal errors raise exceptions and terminate pipeline.
    """

    # ===================================================================
    # HELPER METHODS
    # ===================================================================

    def total_duration(self) -> float:
        """Calculate total pipeline execution time in seconds"""
        return (datetime.utcnow() - self.started_at).total_seconds()

    def add_timing(self, step_name: str, duration: float) -> None:
        """Record step timing"""
        self.step_timings[step_name] = duration

    def add_error(self, step_name: str, error_message: str) -> None:
        """Record non-fatal error"""
        self.errors.append(f"{step_name}: {error_message}")

    def to_result(self) -> EmailResult:
        """Assemble the final EmailResult from step outputs."""
        return EmailResult(
            subject=self.subject,
            body=self.body,
            full_email=self.full_email,
            metadata=self.email_metadata or EmailMetadata(),
        )


# ===================================================================
# STEP RESULT
# ===================================================================

@dataclass
class StepResult:
    """
    Result of a pipeline step execution.

    Returned by BasePipelineStep.execute() to indicate success/failure.
    """

    success: bool
    """Whether the step completed successfully"""

    step_name: str
    """Name of the step that produced this result"""

    error: Optional[str] = None
    """Error message if success=False"""

    metadata: Optional[Dict[str, Any]] = None
    """
    Optional metadata about execution:
    - duration: float (seconds)
    - output_size: int (chars)
    """

    warnings: List[str] = field(default_factory=list)
    """Non-fatal warnings"""

    def __post_init__(self):
        """Validation: if success=False, error must be set"""
        if not self.success and not self.error:
            raise ValueError("StepResult with success=False must have error message")
