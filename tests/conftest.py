import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest


SAMPLE_BIB = """
@book{morita-2015,
  title = {数学する身体},
  author = {森田, 真生},
  year = {2015},
  publisher = {新潮社},
  isbn = {9784103396512},
  url = {https://books.google.co.jp/books?id=XX7dCwAAQBAJ}
}

@Article{smith-2020,
  TITLE = "Testing {BibTeX} Parsers",
  author = {Smith, John},
  year = 2020,
  journal = {Journal of Tests}
}

@book{doe-2019,
  title = {Plain {Notes} Revisited},
  author = {Doe, Jane},
  year = {2019},
  series = {Pocket Series}
}
"""

SAMPLE_YAML = """
morita-2015:
  site_a:
    tags: [数学, 身体]
    review:
      - First paragraph.
      - Second paragraph.
    memo: [private note]
    readDate: 2026-02-08
  site_b:
    memo: [only internal]
smith-2020:
  site_a:
    tags: [testing]
    review: Solid overview.
  site_b:
    tags: not-a-list
unknown-key:
  site_a:
    review: Orphan review.
"""


@pytest.fixture()
def sample_bib() -> str:
    return SAMPLE_BIB


@pytest.fixture()
def sample_yaml() -> str:
    return SAMPLE_YAML


@pytest.fixture()
def contents_dir(tmp_path: Path) -> Path:
    """Write the sample sources where the app expects them."""

    directory = tmp_path / "contents"
    directory.mkdir()
    (directory / "references.bib").write_text(SAMPLE_BIB, encoding="utf-8")
    (directory / "custom_info.yaml").write_text(SAMPLE_YAML, encoding="utf-8")
    return directory
