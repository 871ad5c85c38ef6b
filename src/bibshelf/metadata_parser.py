"""Parser for the per-site custom info YAML file."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, Optional

import yaml

from .models import SiteMetadata

logger = logging.getLogger(__name__)

MetadataMapping = Dict[str, Dict[str, SiteMetadata]]


class _MetadataLoader(yaml.SafeLoader):
    """Safe loader following YAML 1.2 scalars: dates stay strings, only true/false are booleans."""


_MetadataLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in ("tag:yaml.org,2002:timestamp", "tag:yaml.org,2002:bool")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_MetadataLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


class CustomInfoParser:
    """Extracts validated :class:`SiteMetadata` from a YAML document.

    The document is shaped ``entry key -> site id -> fields``. A site block is
    kept only when every known field has an accepted shape; otherwise the
    whole block is dropped. Entries and sites left without metadata are
    omitted. A document that cannot be loaded yields an empty mapping.
    """

    def parse(self, text: str, site_ids: Optional[Iterable[str]] = None) -> MetadataMapping:
        wanted = set(site_ids) if site_ids is not None else None
        result: MetadataMapping = {}

        try:
            document = yaml.load(text or "", Loader=_MetadataLoader)
        except yaml.YAMLError as exc:
            logger.error("Failed to parse custom info YAML: %s", exc)
            return result

        if document is None:
            return result
        if not isinstance(document, dict):
            logger.warning(
                "Custom info document must be a mapping, got %s", type(document).__name__
            )
            return result

        for raw_key, sites in document.items():
            if not isinstance(sites, dict):
                continue
            entry_key = str(raw_key)
            entry: Dict[str, SiteMetadata] = {}
            for raw_site, block in sites.items():
                site_id = str(raw_site)
                if wanted is not None and site_id not in wanted:
                    continue
                metadata = self._parse_site_block(entry_key, site_id, block)
                if metadata is not None:
                    entry[site_id] = metadata
            if entry:
                result[entry_key] = entry

        logger.debug("Parsed custom info for %d entries", len(result))
        return result

    def _parse_site_block(self, entry_key: str, site_id: str, block: Any) -> SiteMetadata | None:
        if not isinstance(block, dict):
            return None

        tags = block.get("tags")
        review = block.get("review")
        memo = block.get("memo")
        read_date = block.get("readDate")

        # a key written with no value is present but null, which is not a valid shape
        invalid = None
        if "tags" in block and not _is_string_list(tags):
            invalid = "tags"
        elif "review" in block and not (isinstance(review, str) or _is_string_list(review)):
            invalid = "review"
        elif "memo" in block and not _is_string_list(memo):
            invalid = "memo"
        elif "readDate" in block and not isinstance(read_date, str):
            invalid = "readDate"
        if invalid:
            logger.warning(
                "Dropping custom info for %r on site %r: invalid %s", entry_key, site_id, invalid
            )
            return None

        metadata = SiteMetadata(
            tags=tuple(tags) if tags is not None else None,
            review=tuple(review) if isinstance(review, list) else review,
            memo=tuple(memo) if memo is not None else None,
            read_date=read_date,
        )
        if metadata.is_empty():
            return None
        return metadata


def parse_custom_info(text: str, site_ids: Optional[Iterable[str]] = None) -> MetadataMapping:
    """Parse a custom info document with a default :class:`CustomInfoParser`."""

    return CustomInfoParser().parse(text, site_ids=site_ids)
