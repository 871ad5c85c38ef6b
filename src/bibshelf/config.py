"""Runtime settings read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    contents_dir: Path = Path("contents")
    bib_filename: str = "references.bib"
    metadata_filename: str = "custom_info.yaml"
    default_site_id: str = "default"
    cache_max_age: int = 3600
    stale_while_revalidate: int = 86400
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            contents_dir=Path(os.getenv("BIBSHELF_CONTENTS_DIR", "contents")),
            bib_filename=os.getenv("BIBSHELF_BIB_FILE", "references.bib"),
            metadata_filename=os.getenv("BIBSHELF_METADATA_FILE", "custom_info.yaml"),
            default_site_id=os.getenv("BIBSHELF_DEFAULT_SITE_ID", "default"),
            cache_max_age=_int_env("BIBSHELF_CACHE_MAX_AGE", 3600),
            stale_while_revalidate=_int_env("BIBSHELF_STALE_WHILE_REVALIDATE", 86400),
            log_level=os.getenv("BIBSHELF_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def bib_path(self) -> Path:
        return self.contents_dir / self.bib_filename

    @property
    def metadata_path(self) -> Path:
        return self.contents_dir / self.metadata_filename

    def cache_control(self) -> str:
        return (
            f"public, max-age={self.cache_max_age}, "
            f"stale-while-revalidate={self.stale_while_revalidate}"
        )
