"""
Shared test fixtures.
"""

from __future__ import annotations

import io
import shutil
import subprocess
from pathlib import Path

import pytest

from ccds.config import ConfigStore, ProjectConfig
from ccds.prompts import Prompter
from ccds.renderer import JinjaRenderer


@pytest.fixture
def renderer() -> JinjaRenderer:
    return JinjaRenderer()


@pytest.fixture
def store() -> ConfigStore:
    return ConfigStore()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def make_config(project: Path):
    def _make(author: str = "Ada", license: str = "MIT", language: str = "python") -> ProjectConfig:
        return ProjectConfig(project_root=project, author=author, license=license, primary_language=language)

    return _make


def scripted(answers: str, *, interactive: bool = True) -> tuple[Prompter, io.StringIO]:
    """Prompter fed from `answers`, plus the buffer its prompts are written to."""
    out = io.StringIO()
    return Prompter(stdin=io.StringIO(answers), stdout=out, interactive=interactive), out


def snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file() and ".git" not in p.relative_to(root).parts
    }


def git_subjects(root: Path) -> list[str]:
    result = subprocess.run(
        ["git", "log", "--reverse", "--format=%s"],
        cwd=str(root),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=True,
    )
    return result.stdout.splitlines()


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
