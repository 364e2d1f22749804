"""
licenses.py

Responsibility: write the project LICENSE from `licenses/<name>` templates.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from pathlib import Path

from ccds import paths
from ccds.config import ProjectConfig
from ccds.renderer import Renderer, write_rendered

logger = logging.getLogger(__name__)

NO_LICENSE = "None"


@dataclass(frozen=True)
class LicenseRecord:
    year: str
    author: str

    def as_data(self) -> dict[str, str]:
        return {"Year": self.year, "Author": self.author}


def license_template(name: str) -> str:
    return f"licenses/{name}"


def write_license(config: ProjectConfig, renderer: Renderer, *, year: int | None = None) -> Path | None:
    """Render LICENSE for `config`; returns the written path, or None for `None`."""
    if config.license == NO_LICENSE:
        return None

    record = LicenseRecord(
        year=str(year if year is not None else dt.date.today().year),
        author=config.author,
    )
    dest = paths.license_file(config.project_root)
    write_rendered(renderer, license_template(config.license), dest, record.as_data())
    logger.debug("Wrote %s license to %s", config.license, dest)
    return dest
