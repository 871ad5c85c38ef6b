"""Parser for BibTeX-style citation files."""
from __future__ import annotations

import logging
import re
from typing import Dict, List

from .models import BibRecord

logger = logging.getLogger(__name__)


class BibTeXParser:
    """Parses citation text into :class:`BibRecord` entries.

    Parsing is best-effort: entries that do not look like
    ``@type{key, field = value, ...}`` are skipped, never reported as errors.
    When a key is repeated the later entry replaces the earlier one but keeps
    its position in the output.
    """

    ENTRY_PATTERN = re.compile(r"@(\w+)\s*\{\s*([^,]+),([^@]*)\}", re.ASCII)
    # value forms: {braced, one nested level}, "quoted", bare token
    FIELD_PATTERN = re.compile(
        r"\s*(\w+)\s*=\s*(?:\{((?:[^{}]|\{[^{}]*\})*)\}|\"([^\"]*)\"|(\w+))\s*,?",
        re.DOTALL | re.ASCII,
    )
    YEAR_PATTERN = re.compile(r"^\s*([+-]?\d+)")
    KNOWN_FIELDS = ("title", "author", "year", "publisher", "series", "isbn", "url")

    def parse(self, text: str) -> List[BibRecord]:
        records: Dict[str, BibRecord] = {}
        for match in self.ENTRY_PATTERN.finditer(text or ""):
            key = match.group(2).strip()
            if not key:
                continue
            fields = self._parse_fields(match.group(3))
            record = BibRecord(
                key=key,
                entry_type=match.group(1).lower(),
                title=fields.get("title", ""),
                author=fields.get("author", ""),
                year=self._parse_year(fields.get("year")),
                publisher=fields.get("publisher"),
                series=fields.get("series"),
                isbn=fields.get("isbn"),
                url=fields.get("url"),
            )
            if key in records:
                logger.warning("Duplicate citation key %r; keeping the later entry", key)
            records[key] = record
        logger.debug("Parsed %d citation records", len(records))
        return list(records.values())

    def _parse_fields(self, content: str) -> Dict[str, str]:
        fields: Dict[str, str] = {}
        for match in self.FIELD_PATTERN.finditer(content):
            name = match.group(1).lower()
            if name not in self.KNOWN_FIELDS:
                continue
            value = next(
                (group for group in match.group(2, 3, 4) if group is not None), None
            )
            if value is not None:
                fields[name] = value.strip()
        return fields

    def _parse_year(self, value: str | None) -> int:
        if not value:
            return 0
        match = self.YEAR_PATTERN.match(value)
        if not match:
            return 0
        return int(match.group(1))


def parse_bibtex(text: str) -> List[BibRecord]:
    """Parse citation text with a default :class:`BibTeXParser`."""

    return BibTeXParser().parse(text)
