"""Extraction of @-mentioned email addresses from notification text."""

import re
from typing import Iterator, List

# "@" sigil, then an email address. The word boundary after the sigil means
# "@@x@example.com" yields "x@example.com".
MENTION_PATTERN = re.compile(
    r"@\b([A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,})\b",
    re.ASCII,
)


def extract_mentions(text: str) -> Iterator[str]:
    """Yield mentioned email addresses in order of appearance.

    Matches are leftmost-first and non-overlapping. The leading "@" sigil is
    stripped. Duplicates are yielded as often as they occur and nothing is
    checked against the store.

    Args:
        text: Free-text notification body.

    Yields:
        Email addresses without the "@" sigil.
    """
    for match in MENTION_PATTERN.finditer(text):
        yield match.group(1)


def unique_mentions(text: str) -> List[str]:
    """Mentioned addresses with duplicates removed, first occurrence order kept."""
    return list(dict.fromkeys(extract_mentions(text)))
