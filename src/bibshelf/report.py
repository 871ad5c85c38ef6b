"""Build summary reporting."""
from __future__ import annotations

from collections import Counter
from typing import Sequence

from .models import BibliographyItem


def render_report(items: Sequence[BibliographyItem]) -> str:
    """Return a human-readable summary of a merged bibliography."""

    lines = ["Bibliography Build Report", f"Records: {len(items)}"]
    annotated = [item for item in items if item.site_metadata]
    lines.append(f"Records with custom info: {len(annotated)}")

    per_site: Counter = Counter()
    for item in annotated:
        per_site.update(item.site_metadata.keys())

    if not per_site:
        lines.append("No site metadata found.")
        return "\n".join(lines)

    lines.append("Sites:")
    for site_id, count in sorted(per_site.items()):
        lines.append(f"  {site_id}: {count}")
    return "\n".join(lines)
