"""
Email Splitter Utilities

Derive the display subject and body from canonical email text.
"""

import re
from typing import Optional, Tuple, Union

from pipeline.models.core import Purpose


DEFAULT_SUBJECT = "Important message"

# Ordered candidates per purpose; the first one is used as the fallback
FALLBACK_SUBJECTS = {
    Purpose.FOLLOW_UP.value: [
        "Following up on our conversation",
        "Quick follow-up",
        "Checking in",
    ],
    Purpose.APOLOGY.value: [
        "My apologies",
        "Sorry for the inconvenience",
        "An apology and next steps",
    ],
    Purpose.COLD_EMAIL.value: [
        "Quick introduction",
        "An idea for your team",
        "Worth a short conversation?",
    ],
    Purpose.THANK_YOU.value: [
        "Thank you",
        "With gratitude",
        "Thanks for your help",
    ],
    Purpose.PROMOTION.value: [
        "Something new for you",
        "An exclusive offer",
        "Don't miss this",
    ],
    Purpose.INTRODUCTION.value: [
        "Introduction",
        "Nice to meet you",
        "Let me introduce myself",
    ],
    Purpose.REQUEST.value: [
        "A quick request",
        "Request for your help",
        "Could you help with this?",
    ],
    Purpose.INVITATION.value: [
        "You're invited",
        "Invitation",
        "Join us",
    ],
}

_SUBJECT = re.compile(r"Subject:\s*(.+)", re.IGNORECASE)
_SUBJECT_LINE = re.compile(r"Subject:\s*.+\n*", re.IGNORECASE)


def extract_subject(email_text: str) -> str:
    """Return the trimmed text after the first "Subject:" marker, or ""."""
    match = _SUBJECT.search(email_text)
    return match.group(1).strip() if match else ""


def extract_body(email_text: str) -> str:
    """Remove the first "Subject: ..." line and its trailing newlines."""
    return _SUBJECT_LINE.sub("", email_text, count=1).strip()


def fallback_subject(purpose: Union[Purpose, str, None]) -> str:
    key = purpose.value if isinstance(purpose, Purpose) else (purpose or "")
    candidates = FALLBACK_SUBJECTS.get(key)
    return candidates[0] if candidates else DEFAULT_SUBJECT


def split_email(
    email_text: str,
    purpose: Optional[Union[Purpose, str]] = None
) -> Tuple[str, str]:
    """
    Split canonical email text into (subject, body).

    Args:
        email_text: Canonical email text
        purpose: Email purpose, used when no subject can be extracted

    Returns:
        Tuple of (subject, body); subject is never empty
    """
    subject = extract_subject(email_text) or fallback_subject(purpose)
    body = extract_body(email_text)
    return subject, body
