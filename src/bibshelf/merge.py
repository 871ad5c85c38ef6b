"""Join citation records with custom info and scope them to one site."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Sequence

from .models import BibliographyItem, BibRecord, PublicSiteMetadata, SiteItem, SiteMetadata

SITE_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_.]+$")


def is_valid_site_id(site_id: str | None) -> bool:
    """Return True when ``site_id`` is safe to accept from a caller."""

    if not site_id:
        return False
    return SITE_ID_PATTERN.fullmatch(site_id) is not None


def merge_bibliography(
    records: Sequence[BibRecord],
    metadata: Mapping[str, Mapping[str, SiteMetadata]],
) -> List[BibliographyItem]:
    """Attach each record's full per-site metadata, preserving record order."""

    items: List[BibliographyItem] = []
    for record in records:
        sites = metadata.get(record.key)
        site_metadata = MappingProxyType(dict(sites)) if sites else None
        items.append(BibliographyItem(record=record, site_metadata=site_metadata))
    return items


def to_frontend(metadata: SiteMetadata | None) -> PublicSiteMetadata | None:
    """Project internal metadata to its public form.

    The memo is always dropped. Returns None when nothing public remains.
    """

    if metadata is None:
        return None
    if metadata.tags is None and metadata.review is None and metadata.read_date is None:
        return None
    return PublicSiteMetadata(
        tags=metadata.tags,
        review=metadata.review,
        read_date=metadata.read_date,
    )


def filter_by_site(items: Sequence[BibliographyItem], site_id: str) -> List[BibliographyItem]:
    """Return items carrying metadata for ``site_id``, in input order."""

    return [
        item
        for item in items
        if item.site_metadata is not None and site_id in item.site_metadata
    ]


def project_for_site(item: BibliographyItem, site_id: str) -> SiteItem:
    """Scope one item to ``site_id``, discarding every other site's metadata."""

    internal = item.site_metadata.get(site_id) if item.site_metadata else None
    return SiteItem(record=item.record, custom_info=to_frontend(internal))


def items_for_site(items: Sequence[BibliographyItem], site_id: str) -> List[SiteItem]:
    """Filter and project ``items`` for external exposure on ``site_id``."""

    return [project_for_site(item, site_id) for item in filter_by_site(items, site_id)]
