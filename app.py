from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, List

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bibshelf.app import BibliographyApp  # noqa: E402
from bibshelf.config import Settings  # noqa: E402
from bibshelf.formatter import format_author, format_review  # noqa: E402
from bibshelf.merge import is_valid_site_id  # noqa: E402
from bibshelf.models import SiteItem  # noqa: E402


def _build_rows(items: List[SiteItem]) -> List[Dict[str, object]]:
    rows = []
    for item in items:
        record = item.record
        info = item.custom_info
        rows.append(
            {
                "Key": record.key,
                "Type": record.entry_type,
                "Title": record.title,
                "Author": format_author(record.author),
                "Year": record.year or None,
                "Publisher": record.publisher or "",
                "Tags": ", ".join(info.tags) if info and info.tags else "",
                "Review": "\n".join(format_review(info)),
                "Read": info.read_date if info and info.read_date else "",
                "URL": record.url or "",
            }
        )
    return rows


def main() -> None:
    settings = Settings.from_env()

    st.set_page_config(page_title="Bibliography Preview", layout="wide")
    st.title("Bibliography Preview")
    st.caption("Preview the public entries a site will receive. Internal memos are never shown.")

    contents_dir = st.text_input("Contents directory", value=str(settings.contents_dir))
    site_id = st.text_input("Site id", value=settings.default_site_id)

    if st.button("Load"):
        if not is_valid_site_id(site_id):
            st.warning("Site id may only contain letters, digits, underscores, and dots.")
            return

        bib_app = BibliographyApp(replace(settings, contents_dir=Path(contents_dir)))
        try:
            items = bib_app.load_items()
        except OSError as exc:
            st.error(f"Could not read bibliography sources: {exc}")
            return

        scoped = bib_app.site_items(items, site_id)
        if not scoped:
            st.info(f"No entries carry notes for {site_id}.")
            return

        df = pd.DataFrame(_build_rows(scoped))
        st.dataframe(
            df,
            use_container_width=True,
            column_config={"URL": st.column_config.LinkColumn("URL")},
            hide_index=True,
        )


if __name__ == "__main__":
    main()
