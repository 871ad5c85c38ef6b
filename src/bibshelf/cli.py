"""Command line interface for building bibliography data."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from .app import BibliographyApp
from .config import Settings
from .report import render_report

logger = logging.getLogger(__name__)


def main(argv: List[str] | None = None) -> int:
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Build bibliography data from BibTeX and custom info")
    parser.add_argument(
        "--contents-dir",
        type=Path,
        default=settings.contents_dir,
        help="Directory holding the citation and custom info files",
    )
    parser.add_argument("--bib", type=Path, help="Path to the BibTeX file")
    parser.add_argument("--metadata", type=Path, help="Path to the custom info YAML file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the merged data (all sites, internal notes included) as JSON",
    )
    parser.add_argument(
        "--site-id",
        default=settings.default_site_id,
        help="Site whose public entries are written with --site-output",
    )
    parser.add_argument(
        "--site-output",
        type=Path,
        help="Write the public entries for --site-id as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    bib_app = BibliographyApp(
        replace(
            settings,
            contents_dir=args.contents_dir,
            default_site_id=args.site_id,
            log_level=args.log_level,
        )
    )

    try:
        items = bib_app.load_items(args.bib, args.metadata)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(render_report(items))

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(bib_app.export_static(items), encoding="utf-8")
        logger.info("Wrote %d entries to %s", len(items), args.output)

    if args.site_output:
        result = bib_app.query(args.site_id, items=items)
        if result.status != 200:
            print(f"error: {result.body['error']}", file=sys.stderr)
            return 2
        args.site_output.parent.mkdir(parents=True, exist_ok=True)
        args.site_output.write_text(result.body, encoding="utf-8")
        logger.info("Wrote public entries for %s to %s", args.site_id, args.site_output)

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
