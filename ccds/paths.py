"""
paths.py

Well-known locations inside a generated project.
"""

from __future__ import annotations

from pathlib import Path

CONFIG_DIR = ".ccds"
CONFIG_FILE = "config.yml"
PLACEHOLDER = ".gitkeep"
GITIGNORE = ".gitignore"
LICENSE = "LICENSE"
DOCKERFILE = "Dockerfile"
DOCKER_COMPOSE = "docker-compose.yml"


def config_file(root: Path) -> Path:
    return root / CONFIG_DIR / CONFIG_FILE


def dockerfile(root: Path) -> Path:
    return root / DOCKERFILE


def docker_compose(root: Path) -> Path:
    return root / DOCKER_COMPOSE


def license_file(root: Path) -> Path:
    return root / LICENSE
