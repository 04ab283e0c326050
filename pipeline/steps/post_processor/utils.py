"""
Post-Processor Utilities

Deterministic rules that turn raw model output into canonical email text.
Each rule is a pure function over a string; post_process() applies them in
a fixed order. The order matters: paragraph splitting runs after the greeting
rule and before closing detection.
"""

import re
from typing import Callable, Tuple, Union

from pipeline.models.core import Tone


SUBJECT_MARKER = "Subject:"

# First lines starting with these are treated as greetings, not subjects
GREETING_PREFIXES = ("dear", "hi")

# Any of these (case-insensitive substring) counts as an existing closing
CLOSING_PHRASES = (
    "best regards",
    "sincerely",
    "thank you",
    "best",
    "regards",
    "kind regards",
    "warm regards",
    "yours truly",
    "respectfully",
)

DEFAULT_CLOSING = "Best regards"

TONE_CLOSINGS = {
    Tone.FORMAL.value: "Sincerely",
    Tone.FRIENDLY.value: "Warm regards",
    Tone.PROFESSIONAL.value: "Best regards",
    Tone.HUMOROUS.value: "Cheers",
    Tone.URGENT.value: "Thank you for your prompt attention",
    Tone.CASUAL.value: "Best",
}

_LINE_ENDING = re.compile(r"\r\n?")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_GREETING_LINE = re.compile(
    r"^((?:dear|hi|hello)[ \t]+[^,\n]+,)\s*(?=\S)",
    re.IGNORECASE | re.MULTILINE,
)
# Deliberately naive: "Dr. Smith" gets split too
_SENTENCE_BOUNDARY = re.compile(r"([.!?])\s*([A-Z])")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and bare CR line endings to "\\n"."""
    return _LINE_ENDING.sub("\n", text)


def trim_whitespace(text: str) -> str:
    return text.strip()


def collapse_blank_lines(text: str) -> str:
    """Collapse 3+ consecutive newlines to a single blank line."""
    return _EXCESS_NEWLINES.sub("\n\n", text)


def synthesize_subject(text: str) -> str:
    """
    Promote the first line to a "Subject:" line.

    Skipped when the text already has a subject marker, when the first line
    is empty, or when the first line looks like a greeting ("Dear ...",
    "Hi ..."). In the greeting case no subject is added at all.
    """
    if SUBJECT_MARKER in text:
        return text

    first_line, _, remainder = text.partition("\n")
    first_line = first_line.strip()
    remainder = remainder.lstrip("\n")

    if not first_line or first_line.lower().startswith(GREETING_PREFIXES):
        return text

    if not remainder:
        return f"{SUBJECT_MARKER} {first_line}"
    return f"{SUBJECT_MARKER} {first_line}\n\n{remainder}"


def space_greeting(text: str) -> str:
    """Put exactly one blank line after "Dear/Hi/Hello {name}," greeting lines."""
    return _GREETING_LINE.sub(r"\1\n\n", text)


def split_paragraphs(text: str) -> str:
    """
    Break paragraphs between a sentence end and a following capital letter.

    Whitespace between the two is replaced by a blank line, so text that is
    already separated this way is left unchanged.
    """
    return _SENTENCE_BOUNDARY.sub(r"\1\n\n\2", text)


def _tone_key(tone: Union[Tone, str, None]) -> str:
    if isinstance(tone, Tone):
        return tone.value
    return (tone or "").strip().lower()


def closing_for_tone(tone: Union[Tone, str, None]) -> str:
    return TONE_CLOSINGS.get(_tone_key(tone), DEFAULT_CLOSING)


def has_closing(text: str) -> bool:
    lowered = text.lower()
    return any(phrase in lowered for phrase in CLOSING_PHRASES)


def ensure_closing(text: str, tone: Union[Tone, str, None]) -> str:
    """Append the tone's closing phrase unless a recognized closing is present."""
    if has_closing(text):
        return text

    closing = closing_for_tone(tone)
    if not text:
        return closing
    return f"{text}\n\n{closing}"


TEXT_RULES: Tuple[Callable[[str], str], ...] = (
    normalize_line_endings,
    trim_whitespace,
    collapse_blank_lines,
    synthesize_subject,
    space_greeting,
    split_paragraphs,
)


def post_process(raw_text: str, tone: Union[Tone, str, None] = None) -> str:
    """
    Normalize raw model output into canonical email text.

    Never raises: rules whose trigger is absent leave the text as is.

    Args:
        raw_text: Unmodified model output
        tone: Email tone, selects the closing appended when none is present

    Returns:
        Canonical email text
    """
    text = raw_text or ""
    for rule in TEXT_RULES:
        text = rule(text)
    return ensure_closing(text, tone)
