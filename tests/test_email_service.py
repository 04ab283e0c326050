"""
Tests for the email generation service (validation + full pipeline).

Run with:
    pytest tests/test_email_service.py -v
"""

import pytest

from pydantic_ai.messages import ModelResponse, TextPart

from pipeline.core.exceptions import (
    ContextTooLongError,
    ContextTooShortError,
    MissingFieldError,
    PipelineExecutionError,
    StepExecutionError,
    UnsupportedPurposeError,
)
from pipeline.models.core import EmailRequest, Purpose, Tone
from services.email_generator import generate_email, validate_email_request
from services.generation_client import GenerationClient


RESCHEDULE_CONTEXT = "Need to reschedule our meeting tomorrow due to a conflict"
RAW_EMAIL = (
    "Rescheduling Request\n"
    "Dear Team,\n"
    "I need to reschedule our meeting tomorrow due to a conflict"
)


# ===================================================================
# TESTS - validate_email_request
# ===================================================================

def test_validate_builds_request_with_defaults():
    request = validate_email_request(RESCHEDULE_CONTEXT, "follow-up")

    assert request == EmailRequest(
        context=RESCHEDULE_CONTEXT,
        purpose=Purpose.FOLLOW_UP,
        tone=Tone.PROFESSIONAL,
        recipient="",
        language="english",
    )


def test_validate_normalizes_fields():
    request = validate_email_request(
        f"  {RESCHEDULE_CONTEXT}  ",
        " Thank-You ",
        tone="FRIENDLY",
        recipient="  my manager ",
        language="  ",
    )

    assert request.context == RESCHEDULE_CONTEXT
    assert request.purpose is Purpose.THANK_YOU
    assert request.tone is Tone.FRIENDLY
    assert request.recipient == "my manager"
    assert request.language == "english"


@pytest.mark.parametrize("context, purpose", [
    (None, "follow-up"),
    ("", "follow-up"),
    (RESCHEDULE_CONTEXT, None),
    (RESCHEDULE_CONTEXT, ""),
])
def test_validate_missing_fields(context, purpose):
    with pytest.raises(MissingFieldError) as exc_info:
        validate_email_request(context, purpose)

    assert exc_info.value.message == "Missing required fields"
    assert exc_info.value.kind == "missing_field"


def test_validate_context_too_short():
    with pytest.raises(ContextTooShortError) as exc_info:
        validate_email_request("123456789", "apology")

    assert exc_info.value.message == (
        "Please provide more context for your email (at least 10 characters)"
    )


def test_validate_short_after_trimming():
    with pytest.raises(ContextTooShortError):
        validate_email_request("   short    ", "apology")


def test_validate_context_boundaries():
    assert validate_email_request("x" * 10, "request").context == "x" * 10
    assert validate_email_request("x" * 2000, "request").context == "x" * 2000


def test_validate_context_too_long():
    with pytest.raises(ContextTooLongError) as exc_info:
        validate_email_request("x" * 2001, "request")

    assert exc_info.value.message == "Context is too long. Please keep it under 2000 characters."


def test_validate_length_checked_before_purpose():
    with pytest.raises(ContextTooShortError):
        validate_email_request("tiny", "not-a-purpose")


def test_validate_unsupported_purpose():
    with pytest.raises(UnsupportedPurposeError) as exc_info:
        validate_email_request(RESCHEDULE_CONTEXT, "newsletter")

    assert exc_info.value.message == "Unsupported email purpose"


def test_validate_unknown_tone_falls_back_to_professional():
    request = validate_email_request(RESCHEDULE_CONTEXT, "follow-up", tone="sarcastic")
    assert request.tone is Tone.PROFESSIONAL


# ===================================================================
# TESTS - generate_email
# ===================================================================

@pytest.mark.asyncio
async def test_generate_email_full_pipeline(make_client):
    request = validate_email_request(RESCHEDULE_CONTEXT, "follow-up", tone="professional")

    result = await generate_email(request, make_client(RAW_EMAIL))

    assert result.full_email == (
        "Subject: Rescheduling Request\n\n"
        "Dear Team,\n\n"
        "I need to reschedule our meeting tomorrow due to a conflict\n\n"
        "Best regards"
    )
    assert result.subject == "Rescheduling Request"
    assert result.body == (
        "Dear Team,\n\n"
        "I need to reschedule our meeting tomorrow due to a conflict\n\n"
        "Best regards"
    )
    assert result.metadata.word_count == 15
    assert result.metadata.estimated_read_time == 1


@pytest.mark.asyncio
async def test_generate_email_prompts_reach_model(make_client):
    seen = {}

    def respond(messages, info):
        for message in messages:
            for part in message.parts:
                seen[part.part_kind] = part.content
        return ModelResponse(parts=[TextPart(RAW_EMAIL)])

    request = validate_email_request(
        RESCHEDULE_CONTEXT, "apology", tone="formal", recipient="Ms. Park", language="french"
    )

    result = await generate_email(request, make_client(function=respond))

    assert "Write in french language" in seen["system-prompt"]
    assert "Use a formal tone" in seen["system-prompt"]
    assert seen["user-prompt"].startswith("Write a apology email to Ms. Park")
    assert result.body.endswith("Sincerely")


@pytest.mark.asyncio
async def test_generate_email_greeting_first_uses_fallback_subject(make_client):
    request = validate_email_request(RESCHEDULE_CONTEXT, "invitation", tone="casual")

    result = await generate_email(request, make_client("Hi Sam,\nJoin us for dinner on Friday"))

    assert "Subject:" not in result.full_email
    assert result.subject == "You're invited"
    assert result.body == result.full_email


@pytest.mark.asyncio
async def test_generate_email_reports_progress(make_client):
    events = []

    async def record(step_name, status):
        events.append((step_name, status))

    request = validate_email_request(RESCHEDULE_CONTEXT, "follow-up")
    await generate_email(request, make_client(RAW_EMAIL), progress_callback=record)

    started = [name for name, status in events if status == "started"]
    assert started == [
        "prompt_builder",
        "email_generator",
        "post_processor",
        "email_splitter",
        "metadata_calculator",
    ]


@pytest.mark.asyncio
async def test_generate_email_without_credential_fails():
    request = validate_email_request(RESCHEDULE_CONTEXT, "follow-up")
    client = GenerationClient(api_key="", model_name="qwen/qwen3-0.6b-04-28:free")

    with pytest.raises(PipelineExecutionError) as exc_info:
        await generate_email(request, client)

    assert isinstance(exc_info.value, StepExecutionError)
    assert exc_info.value.step_name == "email_generator"
