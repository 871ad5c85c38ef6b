"""Display formatting for bibliography entries."""
from __future__ import annotations

import re

from .models import PublicSiteMetadata

# Hiragana, Katakana, CJK unified ideographs
JAPANESE_PATTERN = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]")


def is_japanese(name: str) -> bool:
    return JAPANESE_PATTERN.search(name) is not None


def format_author(raw_author: str, language: str | None = None) -> str:
    """Render a ``"Family, Given"`` author string for display.

    Japanese names keep family-first order without a space; other names are
    shown given-name first. Strings that are not exactly two comma-separated
    parts are returned unchanged.
    """

    parts = [part.strip() for part in raw_author.split(",")]
    if len(parts) != 2:
        return raw_author

    family, given = parts
    if language == "japanese" or (not language and is_japanese(raw_author)):
        return f"{family}{given}"
    return f"{given} {family}"


def format_review(info: PublicSiteMetadata | None) -> list[str]:
    """Return review paragraphs regardless of how the review was written."""

    if info is None or info.review is None:
        return []
    if isinstance(info.review, str):
        return [info.review]
    return list(info.review)

