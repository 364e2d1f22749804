"""
languages.py

Supported primary languages and the starter files each one contributes.

`SUPPORTED` is ordered: the first entry is the default offered by the
interactive language menu.
"""

from __future__ import annotations

SUPPORTED: tuple[str, ...] = ("python", "R")

# Template id -> destination path relative to the project root.
INIT_FILES: dict[str, dict[str, str]] = {
    "python": {
        "languages/python/package_init.py": "src/__init__.py",
        "languages/python/example.py": "src/scripts/example.py",
    },
    "R": {
        "languages/R/example.R": "src/scripts/example.R",
    },
}


def gitignore_template(language: str) -> str:
    return f"gitignore/{language}"


def init_files(language: str) -> dict[str, str]:
    """Language-specific files; unknown languages contribute nothing."""
    return dict(INIT_FILES.get(language, {}))
