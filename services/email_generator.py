"""
Email generation service.

The single entry point shared by the HTTP route and the CLI script:
validate the raw input, then run the generation pipeline.
"""

import uuid
from typing import Optional

import logfire

from pipeline import create_email_pipeline
from pipeline.core.exceptions import (
    ContextTooLongError,
    ContextTooShortError,
    MissingFieldError,
    UnsupportedPurposeError,
)
from pipeline.core.runner import ProgressCallback
from pipeline.models.core import (
    DEFAULT_LANGUAGE,
    DEFAULT_TONE,
    MAX_CONTEXT_LENGTH,
    MIN_CONTEXT_LENGTH,
    EmailRequest,
    EmailResult,
    PipelineData,
    Purpose,
    Tone,
)
from services.generation_client import GenerationClient


def validate_email_request(
    context: Optional[str],
    purpose: Optional[str],
    tone: Optional[str] = None,
    recipient: Optional[str] = None,
    language: Optional[str] = None,
) -> EmailRequest:
    """
    Validate raw input fields and build an EmailRequest.

    Checks run in this order: required fields, minimum context length,
    maximum context length, purpose. Lengths are measured on the trimmed
    context. An unknown or empty tone falls back to "professional".

    Raises:
        MissingFieldError: context or purpose is empty
        ContextTooShortError: trimmed context has fewer than 10 characters
        ContextTooLongError: trimmed context has more than 2000 characters
        UnsupportedPurposeError: purpose is not a known Purpose value
    """
    if not context or not purpose:
        raise MissingFieldError()

    context = context.strip()
    if len(context) < MIN_CONTEXT_LENGTH:
        raise ContextTooShortError()
    if len(context) > MAX_CONTEXT_LENGTH:
        raise ContextTooLongError()

    try:
        purpose_value = Purpose(purpose.strip().lower())
    except ValueError:
        raise UnsupportedPurposeError()

    tone_value = DEFAULT_TONE
    if tone and tone.strip():
        try:
            tone_value = Tone(tone.strip().lower())
        except ValueError:
            logfire.warning("Unknown tone, using default", tone=tone, default=DEFAULT_TONE.value)

    return EmailRequest(
        context=context,
        purpose=purpose_value,
        tone=tone_value,
        recipient=(recipient or "").strip(),
        language=(language or "").strip() or DEFAULT_LANGUAGE,
    )


async def generate_email(
    request: EmailRequest,
    client: GenerationClient,
    task_id: Optional[str] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> EmailResult:
    """
    Run the full generation pipeline for a validated request.

    Args:
        request: Validated request (see validate_email_request)
        client: Generation client with its credential already injected
        task_id: Correlation ID for logs (generated when omitted)
        progress_callback: Optional async callback(step_name, status)

    Returns:
        EmailResult with canonical text, subject, body and metadata

    Raises:
        PipelineExecutionError: If any step fails (generation failures included)
    """
    task_id = task_id or str(uuid.uuid4())

    with logfire.span(
        "email_service.generate",
        task_id=task_id,
        purpose=request.purpose.value,
        tone=request.tone.value
    ):
        runner = create_email_pipeline(client)
        pipeline_data = PipelineData(task_id=task_id, request=request)
        result = await runner.run(pipeline_data, progress_callback)

        logfire.info(
            "Email generated",
            task_id=task_id,
            word_count=result.metadata.word_count,
            total_duration=pipeline_data.total_duration()
        )

        return result
