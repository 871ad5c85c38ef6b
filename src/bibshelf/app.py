"""High-level orchestrator for building and querying the bibliography."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from .bib_parser import BibTeXParser
from .config import Settings
from .exporters import compute_etag, to_site_json, to_static_json
from .merge import is_valid_site_id, items_for_site, merge_bibliography
from .metadata_parser import CustomInfoParser
from .models import BibliographyItem, QueryResult, SiteItem

logger = logging.getLogger(__name__)


class BibliographyApp:
    """Coordinates reading, parsing, merging, and site-scoped serving."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.bib_parser = BibTeXParser()
        self.metadata_parser = CustomInfoParser()

    def read_sources(
        self, bib_path: str | Path | None = None, metadata_path: str | Path | None = None
    ) -> Tuple[str, str]:
        """Read both source files. I/O errors propagate to the caller."""

        bib_file = Path(bib_path) if bib_path else self.settings.bib_path
        metadata_file = Path(metadata_path) if metadata_path else self.settings.metadata_path
        return (
            bib_file.read_text(encoding="utf-8"),
            metadata_file.read_text(encoding="utf-8"),
        )

    def build_items(self, bib_text: str, metadata_text: str) -> List[BibliographyItem]:
        records = self.bib_parser.parse(bib_text)
        metadata = self.metadata_parser.parse(metadata_text)
        items = merge_bibliography(records, metadata)
        logger.info(
            "Merged %d records with custom info for %d entries", len(records), len(metadata)
        )
        return items

    def load_items(
        self, bib_path: str | Path | None = None, metadata_path: str | Path | None = None
    ) -> List[BibliographyItem]:
        bib_text, metadata_text = self.read_sources(bib_path, metadata_path)
        return self.build_items(bib_text, metadata_text)

    def site_items(self, items: Sequence[BibliographyItem], site_id: str) -> List[SiteItem]:
        return items_for_site(items, site_id)

    def export_static(self, items: Sequence[BibliographyItem]) -> str:
        return to_static_json(items)

    def query(
        self,
        site_id: str | None,
        items: Sequence[BibliographyItem] | None = None,
        if_none_match: str | None = None,
    ) -> QueryResult:
        """Answer a site query without raising for bad caller input."""

        if not site_id:
            return QueryResult(400, {"error": "Missing required parameter: siteId"})
        if not is_valid_site_id(site_id):
            return QueryResult(400, {"error": "Invalid siteId format"})

        if items is None:
            items = self.load_items()
        scoped = items_for_site(items, site_id)
        if not scoped:
            return QueryResult(404, {"error": f"siteId not found: {site_id}"})

        body = to_site_json(scoped)
        headers = {
            "ETag": compute_etag(body),
            "Cache-Control": self.settings.cache_control(),
        }
        if if_none_match and _etag_matches(if_none_match, headers["ETag"]):
            return QueryResult(304, None, headers)
        return QueryResult(200, body, headers)


def _etag_matches(header: str, etag: str) -> bool:
    candidates = [value.strip() for value in header.split(",")]
    for candidate in candidates:
        if candidate.startswith("W/"):
            candidate = candidate[2:]
        if candidate == "*" or candidate == etag:
            return True
    return False
