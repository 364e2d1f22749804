"""
config.py

Responsibility: the resolved project configuration and its persisted form.

The configuration is created once per project root and written to
`<root>/.ccds/config.yml` as the last step of skeleton creation. A non-empty
`ProjectRoot` in that file marks the root as initialized; `init` refuses to run
again anywhere inside such a root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ccds import languages, paths
from ccds.errors import CCDSError

LICENSES: tuple[str, ...] = ("MIT", "BSD-3-Clause", "None")


class ConfigError(CCDSError):
    pass


@dataclass(frozen=True)
class ProjectConfig:
    """Resolved settings for a single project root."""

    project_root: Path
    author: str
    license: str
    primary_language: str

    def __post_init__(self) -> None:
        if self.license not in LICENSES:
            raise ConfigError(f"unknown license: {self.license}")
        if self.primary_language not in languages.SUPPORTED:
            raise ConfigError(f"unknown language: {self.primary_language}")

    def to_record(self) -> dict[str, str]:
        # Key names are part of the on-disk format.
        return {
            "ProjectRoot": str(self.project_root),
            "Author": self.author,
            "License": self.license,
            "PrimaryLanguage": self.primary_language,
        }


class ConfigStore:
    """
    Read/write access to `.ccds/config.yml`.

    Lookups walk from a start directory up through its parents, so a directory
    nested inside an initialized project also counts as initialized.
    """

    def find(self, start: Path) -> Path | None:
        """Return the first config file at or above `start`, if any."""
        start = start.resolve()
        for candidate in (start, *start.parents):
            path = paths.config_file(candidate)
            if path.is_file():
                return path
        return None

    def load(self, path: Path) -> dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"failed to read config {path}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"config must be a mapping at the top level: {path}")
        return data

    def is_initialized(self, start: Path) -> bool:
        path = self.find(start)
        if path is None:
            return False
        return bool(str(self.load(path).get("ProjectRoot") or "").strip())

    def write(self, config: ProjectConfig) -> Path:
        path = paths.config_file(config.project_root)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                yaml.safe_dump(config.to_record(), default_flow_style=False, sort_keys=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"failed to write config {path}") from e
        return path
