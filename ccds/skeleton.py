"""
skeleton.py

Responsibility: apply a `Manifest` to disk and persist the project config.

Re-applying over an existing tree is safe: directories that already exist are
kept, placeholders are recreated empty, and rendered files are overwritten.
Nothing is rolled back on failure; the error names the path that failed.
"""

from __future__ import annotations

import logging

from ccds.config import ConfigStore, ProjectConfig
from ccds.errors import CCDSError
from ccds.manifest import Manifest
from ccds.renderer import Renderer, write_rendered

logger = logging.getLogger(__name__)


class SkeletonError(CCDSError):
    pass


def create_directories(config: ProjectConfig, manifest: Manifest) -> None:
    root = config.project_root
    for rel in sorted(manifest.directories):
        directory = root / rel
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SkeletonError(f"failed to create directory {directory}") from e
        logger.debug("Created directory %s", directory)

    for placeholder in sorted(manifest.placeholders(root)):
        try:
            placeholder.write_bytes(b"")
        except OSError as e:
            raise SkeletonError(f"failed to create file {placeholder}") from e
        logger.debug("Created placeholder %s", placeholder)


def write_files(manifest: Manifest, renderer: Renderer) -> None:
    for src, dest in sorted(manifest.files.items()):
        write_rendered(renderer, src, dest, {})
        logger.debug("Rendered %s -> %s", src, dest)


def apply_skeleton(
    config: ProjectConfig,
    manifest: Manifest,
    renderer: Renderer,
    store: ConfigStore,
) -> None:
    create_directories(config, manifest)
    write_files(manifest, renderer)
    path = store.write(config)
    logger.debug("Wrote config %s", path)
