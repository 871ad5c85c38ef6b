"""Data models for the bibliography pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union

Review = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class BibRecord:
    """Represents one parsed citation entry."""

    key: str
    entry_type: str
    title: str = ""
    author: str = ""
    year: int = 0
    publisher: Optional[str] = None
    series: Optional[str] = None
    isbn: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class SiteMetadata:
    """Per-site annotations as stored in the metadata file.

    ``memo`` is for the site owner only. Use :func:`bibshelf.merge.to_frontend`
    to obtain the shape that may leave the build.
    """

    tags: Optional[Tuple[str, ...]] = None
    review: Optional[Review] = None
    memo: Optional[Tuple[str, ...]] = None
    read_date: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            self.tags is None
            and self.review is None
            and self.memo is None
            and self.read_date is None
        )


@dataclass(frozen=True)
class PublicSiteMetadata:
    """Per-site annotations safe for external consumers."""

    tags: Optional[Tuple[str, ...]] = None
    review: Optional[Review] = None
    read_date: Optional[str] = None


@dataclass(frozen=True)
class BibliographyItem:
    """A record joined with every site's metadata for it."""

    record: BibRecord
    site_metadata: Optional[Mapping[str, SiteMetadata]] = None

    @property
    def key(self) -> str:
        return self.record.key


@dataclass(frozen=True)
class SiteItem:
    """A record scoped to one site, carrying only public metadata."""

    record: BibRecord
    custom_info: Optional[PublicSiteMetadata] = None

    @property
    def key(self) -> str:
        return self.record.key


@dataclass
class QueryResult:
    """HTTP-shaped outcome of a site query."""

    status: int
    body: object = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400
