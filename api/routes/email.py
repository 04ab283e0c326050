"""
Email generation API endpoints.

POST /api/generate runs the generation pipeline synchronously and returns
the canonical email with its derived subject, body and metadata.
Errors are returned as {"error": "..."} with a non-2xx status.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
import logfire

from api.dependencies import GenerationClientDep
from pipeline.core.exceptions import GenerationFailure, PipelineExecutionError, ValidationError
from pipeline.models.core import SUPPORTED_LANGUAGES, Purpose, Tone
from schemas.email import (
    EmailOptionsResponse,
    ErrorResponse,
    GenerateEmailRequest,
    GenerateEmailResponse,
    OptionResponse,
)
from services.email_generator import generate_email, validate_email_request


router = APIRouter(prefix="/api", tags=["Email Generation"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/generate",
    response_model=GenerateEmailResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def generate(request: GenerateEmailRequest, client: GenerationClientDep):
    """
    Generate a formatted email from user context.

    **Pipeline Flow**:
    1. Prompt building (language, tone, purpose, recipient)
    2. Generation via OpenRouter
    3. Post-processing (subject, greeting spacing, paragraphs, closing)
    4. Subject/body split
    5. Word count and reading time

    Returns:
        GenerateEmailResponse on success

    Errors:
        400: Missing fields, context too short/long, unsupported purpose
        500: Generation failed (details are logged, not returned)
    """
    with logfire.span("api.generate_email", purpose=request.purpose, tone=request.tone):
        try:
            email_request = validate_email_request(
                context=request.context,
                purpose=request.purpose,
                tone=request.tone,
                recipient=request.recipient,
                language=request.language,
            )
        except ValidationError as e:
            logfire.info("Email request rejected", kind=e.kind)
            return _error(status.HTTP_400_BAD_REQUEST, e.message)

        try:
            result = await generate_email(email_request, client)
        except PipelineExecutionError as e:
            logfire.error(
                "Email generation failed",
                error=str(e),
                error_type=type(e).__name__
            )
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GenerationFailure.GENERIC_MESSAGE)

        return GenerateEmailResponse.from_result(result)


@router.get("/options", response_model=EmailOptionsResponse)
async def list_options() -> EmailOptionsResponse:
    """Purposes, tones and languages offered by the generator form."""
    return EmailOptionsResponse(
        purposes=[OptionResponse(value=p.value, label=p.label) for p in Purpose],
        tones=[OptionResponse(value=t.value, label=t.label) for t in Tone],
        languages=[
            OptionResponse(value=language, label=language.title())
            for language in SUPPORTED_LANGUAGES
        ],
    )
