"""Personal bibliography toolkit: BibTeX + per-site notes, merged and redacted."""

from .app import BibliographyApp
from .bib_parser import BibTeXParser, parse_bibtex
from .config import Settings
from .merge import (
    filter_by_site,
    is_valid_site_id,
    items_for_site,
    merge_bibliography,
    project_for_site,
    to_frontend,
)
from .metadata_parser import CustomInfoParser, parse_custom_info
from .models import BibliographyItem, BibRecord, PublicSiteMetadata, SiteItem, SiteMetadata

__all__ = [
    "BibliographyApp",
    "BibTeXParser",
    "parse_bibtex",
    "Settings",
    "filter_by_site",
    "is_valid_site_id",
    "items_for_site",
    "merge_bibliography",
    "project_for_site",
    "to_frontend",
    "CustomInfoParser",
    "parse_custom_info",
    "BibliographyItem",
    "BibRecord",
    "PublicSiteMetadata",
    "SiteItem",
    "SiteMetadata",
]
