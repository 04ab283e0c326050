#!/usr/bin/env python3
"""
Generate an email from the command line.

Uses the same service as POST /api/generate. Reads OPENROUTER_API_KEY and
the other generation settings from the environment or .env.

Usage:
    python scripts/generate_email.py --context "Need to reschedule our meeting tomorrow" \
        --purpose follow-up --tone professional
    python scripts/generate_email.py --context "..." --purpose apology --json

Exit status: 0 on success, 2 on invalid input, 1 on generation failure.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path so we can import config, services, etc.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from observability.logfire_config import LogfireConfig
from pipeline.core.exceptions import GenerationFailure, PipelineExecutionError, ValidationError
from pipeline.models.core import Purpose, Tone
from schemas.email import GenerateEmailResponse
from services.email_generator import generate_email, validate_email_request
from services.generation_client import GenerationClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a formatted email from a short context.",
    )
    parser.add_argument("--context", required=True, help="What the email is about (10-2000 characters)")
    parser.add_argument(
        "--purpose",
        required=True,
        help=f"One of: {', '.join(p.value for p in Purpose)}",
    )
    parser.add_argument(
        "--tone",
        default=Tone.PROFESSIONAL.value,
        help=f"One of: {', '.join(t.value for t in Tone)} (default: professional)",
    )
    parser.add_argument("--recipient", default="", help="Who the email is for")
    parser.add_argument("--language", default="english", help="Language to write in (default: english)")
    parser.add_argument("--json", action="store_true", help="Print the API response JSON instead of the email")
    parser.add_argument("--verbose", action="store_true", help="Print pipeline progress to stderr")
    return parser


async def _print_progress(step_name: str, status: str) -> None:
    print(f"[{step_name}] {status}", file=sys.stderr)


def main(argv: Optional[List[str]] = None, client: Optional[GenerationClient] = None) -> int:
    args = build_parser().parse_args(argv)

    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment, console=False)

    try:
        email_request = validate_email_request(
            context=args.context,
            purpose=args.purpose,
            tone=args.tone,
            recipient=args.recipient,
            language=args.language,
        )
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    client = client or GenerationClient.from_settings(settings)
    progress = _print_progress if args.verbose else None

    try:
        result = asyncio.run(generate_email(email_request, client, progress_callback=progress))
    except PipelineExecutionError:
        print(f"Error: {GenerationFailure.GENERIC_MESSAGE}. Please try again.", file=sys.stderr)
        return 1

    if args.json:
        response = GenerateEmailResponse.from_result(result)
        print(json.dumps(response.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    else:
        print(result.full_email)

    return 0


if __name__ == "__main__":
    sys.exit(main())
