"""
repo.py

Responsibility: turn a freshly generated skeleton into a git repository.

The history is built as a fixed sequence of commits, one per logical group of
generated files (`COMMIT_PLAN`). The order and messages are stable; tooling
downstream reads the history commit by commit.

Any failing `git add` / `git commit` aborts with `RepoError`. Paths of a step
that do not exist on disk (e.g. LICENSE for unlicensed projects) are not
staged, and a step left with nothing to stage is skipped.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from ccds import paths
from ccds.errors import CCDSError

logger = logging.getLogger(__name__)

GIT_DIR = ".git"


class RepoError(CCDSError):
    pass


@dataclass(frozen=True)
class CommitStep:
    paths: tuple[str, ...]
    message: str


COMMIT_PLAN: tuple[CommitStep, ...] = (
    CommitStep((paths.CONFIG_DIR,), "Add ccds config directory"),
    CommitStep((paths.GITIGNORE, paths.LICENSE), "Add standard repo files"),
    CommitStep((paths.DOCKERFILE, paths.DOCKER_COMPOSE), "Add Docker configuration for Jupyter"),
    CommitStep(("data",), "Add directory for storing datasets"),
    CommitStep(("docs",), "Add directory for storing documentation"),
    CommitStep(("models",), "Add directory for storing models"),
    CommitStep(("notebooks",), "Add directory for storing notebooks"),
    CommitStep(("references",), "Add directory for storing references"),
    CommitStep(("reports",), "Add directory for storing reports"),
    CommitStep(("src",), "Add directory for storing source code"),
)


def _run(cmd: list[str], *, cwd: Path, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    """
    Run a subprocess command, raising a RepoError on failure.
    """
    try:
        return subprocess.run(
            cmd, cwd=str(cwd), env=env, check=True, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True
        )
    except subprocess.CalledProcessError as e:
        raise RepoError(f"Command failed: {' '.join(cmd)}\n\n{e.stdout}") from e
    except OSError as e:
        raise RepoError(f"Command could not be started: {' '.join(cmd)}") from e


def _has_identity(git: str, cwd: Path) -> bool:
    for key in ("user.name", "user.email"):
        result = subprocess.run(
            [git, "config", "--get", key], cwd=str(cwd), stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True
        )
        if result.returncode != 0 or not result.stdout.strip():
            return False
    return True


def _git_env(git: str, cwd: Path, author: str, base_env: dict[str, str]) -> dict[str, str]:
    """
    Commit metadata fallback for machines without a configured git identity.
    An identity already set in git config or the environment wins.
    """
    env = dict(base_env)
    if _has_identity(git, cwd):
        return env
    name = author or "ccds"
    env.setdefault("GIT_AUTHOR_NAME", name)
    env.setdefault("GIT_AUTHOR_EMAIL", "ccds@example.invalid")
    env.setdefault("GIT_COMMITTER_NAME", name)
    env.setdefault("GIT_COMMITTER_EMAIL", "ccds@example.invalid")
    return env


def has_repo(root: Path) -> bool:
    return (root / GIT_DIR).is_dir()


def find_git(git: str = "git") -> str:
    resolved = shutil.which(git)
    if resolved is None:
        raise RepoError(f"{git} not found in path")
    return resolved


def init_repo(root: Path, *, author: str = "", git: str = "git") -> list[CommitStep]:
    """
    Initialize a repository in `root` and commit the skeleton following
    `COMMIT_PLAN`. Returns the steps that produced a commit.
    """
    if has_repo(root):
        raise RepoError("git repo already exists")

    git_bin = find_git(git)

    try:
        _run([git_bin, "init"], cwd=root)
    except RepoError as e:
        raise RepoError(f"failed to initialize git repo\n{e}") from e

    env = _git_env(git_bin, root, author, os.environ.copy())
    committed: list[CommitStep] = []
    for step in COMMIT_PLAN:
        present = [p for p in step.paths if (root / p).exists()]
        if not present:
            logger.debug("Skipping commit %r: nothing to stage", step.message)
            continue
        _run([git_bin, "add", *present], cwd=root, env=env)
        _run([git_bin, "commit", "-m", step.message], cwd=root, env=env)
        logger.debug("Committed %r", step.message)
        committed.append(step)
    return committed
