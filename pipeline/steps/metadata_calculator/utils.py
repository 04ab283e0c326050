"""Reading statistics for email bodies."""

import math

from pipeline.models.core import EmailMetadata


WORDS_PER_MINUTE = 200


def count_words(text: str) -> int:
    return len(text.split())


def calculate_metadata(body: str) -> EmailMetadata:
    """
    Compute word count and estimated reading time in whole minutes.

    An empty body reads in 0 minutes; any non-empty body in at least 1.
    """
    word_count = count_words(body or "")
    return EmailMetadata(
        word_count=word_count,
        estimated_read_time=math.ceil(word_count / WORDS_PER_MINUTE),
    )
