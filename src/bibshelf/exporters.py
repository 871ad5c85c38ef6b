"""Serializers for bibliography data."""
from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Sequence

from .models import BibliographyItem, BibRecord, PublicSiteMetadata, SiteItem, SiteMetadata


def _record_to_dict(record: BibRecord) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": record.key,
        "type": record.entry_type,
        "title": record.title,
        "author": record.author,
        "year": record.year,
    }
    for name in ("publisher", "series", "isbn", "url"):
        value = getattr(record, name)
        if value is not None:
            data[name] = value
    return data


def _review_value(review):
    if review is None or isinstance(review, str):
        return review
    return list(review)


def site_metadata_to_dict(metadata: SiteMetadata) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if metadata.tags is not None:
        data["tags"] = list(metadata.tags)
    if metadata.review is not None:
        data["review"] = _review_value(metadata.review)
    if metadata.memo is not None:
        data["memo"] = list(metadata.memo)
    if metadata.read_date is not None:
        data["readDate"] = metadata.read_date
    return data


def public_metadata_to_dict(metadata: PublicSiteMetadata) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if metadata.tags is not None:
        data["tags"] = list(metadata.tags)
    if metadata.review is not None:
        data["review"] = _review_value(metadata.review)
    if metadata.read_date is not None:
        data["readDate"] = metadata.read_date
    return data


def item_to_dict(item: BibliographyItem) -> Dict[str, Any]:
    """Serialize an item with every site's internal metadata."""

    data = _record_to_dict(item.record)
    if item.site_metadata is not None:
        data["customInfo"] = {
            site_id: site_metadata_to_dict(metadata)
            for site_id, metadata in item.site_metadata.items()
        }
    return data


def site_item_to_dict(item: SiteItem) -> Dict[str, Any]:
    """Serialize an item scoped to one site; ``customInfo`` has no site wrapper."""

    data = _record_to_dict(item.record)
    if item.custom_info is not None:
        data["customInfo"] = public_metadata_to_dict(item.custom_info)
    return data


def to_static_json(items: Sequence[BibliographyItem]) -> str:
    """Build-time data export. Contains memos; never serve it directly."""

    return json.dumps([item_to_dict(item) for item in items], indent=2, ensure_ascii=False)


def to_site_json(items: Sequence[SiteItem]) -> str:
    return json.dumps(
        [site_item_to_dict(item) for item in items],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def compute_etag(body: str) -> str:
    digest = hashlib.sha256(body.encode("utf-8")).hexdigest()
    return f'"{digest[:16]}"'
