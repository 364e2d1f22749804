"""
resolver.py

Responsibility: resolve a `ProjectConfig` for the current directory from CLI
flags, falling back to interactive prompts for anything not supplied.

Nothing is written here; the resolved config is persisted by the skeleton step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ccds import languages
from ccds.config import LICENSES, ConfigError, ConfigStore, ProjectConfig
from ccds.errors import CCDSError
from ccds.prompts import Prompter

logger = logging.getLogger(__name__)


class InitAborted(CCDSError):
    """The user declined to initialize a non-empty directory."""


@dataclass(frozen=True)
class InitOptions:
    author: str | None = None
    license: str | None = None
    language: str | None = None
    force: bool = False


def _validate_flags(options: InitOptions) -> None:
    if options.license is not None and options.license not in LICENSES:
        raise ConfigError(f"unknown license: {options.license}")
    if options.language is not None and options.language not in languages.SUPPORTED:
        raise ConfigError(f"unknown language: {options.language}")


def _is_empty(directory: Path) -> bool:
    try:
        return not any(directory.iterdir())
    except OSError as e:
        raise ConfigError(f"failed to read directory {directory}") from e


def resolve_config(
    project_root: Path,
    options: InitOptions,
    prompter: Prompter,
    store: ConfigStore,
) -> ProjectConfig:
    """
    Build the configuration for `project_root`.

    Raises `ConfigError` when the root is already initialized or a flag value is
    unknown, `InitAborted` when the user declines the non-empty directory prompt,
    and `InputRequiredError` when a prompt is needed in non-interactive mode.
    """
    if store.is_initialized(project_root):
        raise ConfigError("Project has already been initialized")

    _validate_flags(options)

    if not options.force and not _is_empty(project_root):
        if not prompter.confirm("This directory is not empty, initialize anyways? [y/N]: "):
            raise InitAborted(f"not initializing non-empty directory {project_root}")

    author = options.author
    if author is None:
        author = prompter.ask("Author (Your name or organization/company/team): ")

    license_name = options.license
    if license_name is None:
        license_name = prompter.choose("Select your license: ", LICENSES)

    language = options.language
    if language is None:
        language = prompter.choose("Select your primary language: ", languages.SUPPORTED, default=0)

    config = ProjectConfig(
        project_root=project_root,
        author=author,
        license=license_name,
        primary_language=language,
    )
    logger.debug("Resolved config: %s", config.to_record())
    return config
