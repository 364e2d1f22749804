"""
manifest.py

Responsibility: map a `ProjectConfig` to the directories and template files that
make up the project skeleton.

Building a manifest is pure: no filesystem access, and identical configs always
produce identical manifests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from ccds import languages, paths
from ccds.config import ProjectConfig
from ccds.errors import CCDSError

# Directory path -> whether it gets a placeholder file so git keeps it while empty.
DIRECTORIES: Mapping[str, bool] = MappingProxyType(
    {
        paths.CONFIG_DIR: False,
        "data": False,
        "data/external": True,
        "data/interim": True,
        "data/processed": True,
        "data/raw": True,
        "docs": True,
        "models": True,
        "notebooks": True,
        "references": True,
        "reports": False,
        "reports/figures": True,
        "src": False,
        "src/datasets": True,
        "src/features": True,
        "src/models": True,
        "src/scripts": True,
        "src/visualization": True,
    }
)


class ManifestError(CCDSError):
    pass


@dataclass(frozen=True)
class Manifest:
    directories: Mapping[str, bool]
    # Template id -> absolute destination.
    files: Mapping[str, Path]

    def placeholders(self, root: Path) -> list[Path]:
        return [root / d / paths.PLACEHOLDER for d, keep in self.directories.items() if keep]


def universal_files(config: ProjectConfig) -> dict[str, Path]:
    root = config.project_root
    return {
        languages.gitignore_template(config.primary_language): root / paths.GITIGNORE,
        "docker/Dockerfile": paths.dockerfile(root),
        "docker/docker-compose.yml": paths.docker_compose(root),
    }


def build_manifest(config: ProjectConfig) -> Manifest:
    files = universal_files(config)
    destinations = {dest: src for src, dest in files.items()}

    for src, rel in sorted(languages.init_files(config.primary_language).items()):
        dest = config.project_root / rel
        if src in files:
            raise ManifestError(f"language template {src} would replace a universal file")
        if dest in destinations:
            raise ManifestError(f"templates {destinations[dest]} and {src} both write {dest}")
        files[src] = dest
        destinations[dest] = src

    return Manifest(
        directories=MappingProxyType(dict(DIRECTORIES)),
        files=MappingProxyType(files),
    )
