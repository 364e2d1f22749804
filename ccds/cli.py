"""
cli.py

Responsibility: CLI entrypoint for ccds.

High-level flow (single command `init`):
1) Resolve author / license / language from flags or prompts -> `ProjectConfig`
2) Build the manifest and apply it to the working directory
3) Write LICENSE
4) Initialize git and commit the skeleton in a fixed sequence

This module should orchestrate behavior but keep concerns isolated:
- Configuration: `resolver.py`, `config.py`
- Layout: `manifest.py`, `skeleton.py`, `licenses.py`
- Git: `repo.py`
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ccds import __version__, languages
from ccds.config import LICENSES, ConfigError, ConfigStore
from ccds.errors import CCDSError
from ccds.licenses import write_license
from ccds.manifest import build_manifest
from ccds.prompts import Prompter
from ccds.renderer import JinjaRenderer, Renderer
from ccds.repo import init_repo
from ccds.resolver import InitAborted, InitOptions, resolve_config
from ccds.skeleton import apply_skeleton

logger = logging.getLogger("ccds")


def init_project(
    project_root: Path,
    options: InitOptions,
    *,
    prompter: Prompter,
    renderer: Renderer | None = None,
    store: ConfigStore | None = None,
) -> None:
    store = store or ConfigStore()
    config = resolve_config(project_root, options, prompter, store)

    renderer = renderer or JinjaRenderer()
    logger.info("Creating project skeleton...")
    apply_skeleton(config, build_manifest(config), renderer, store)
    write_license(config, renderer)

    logger.info("Initializing git repository...")
    init_repo(config.project_root, author=config.author)


def init_cmd(args: argparse.Namespace) -> int:
    options = InitOptions(
        author=args.author,
        license=args.license,
        language=args.language,
        force=bool(args.force),
    )
    prompter = Prompter(interactive=not bool(args.non_interactive))
    try:
        project_root = Path.cwd()
    except OSError as e:
        raise ConfigError("failed to read current directory") from e
    try:
        init_project(project_root, options, prompter=prompter)
    except InitAborted as e:
        logger.debug("%s", e)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ccds", description="ccds - data science project scaffolder")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    i = sub.add_parser("init", help="Creates a basic data science project skeleton")
    i.add_argument("--author", default=None, help="Author name")
    i.add_argument("--license", default=None, help=f"Project license ({', '.join(LICENSES)})")
    i.add_argument(
        "--language",
        default=None,
        help=f"Which programming language to use ({', '.join(languages.SUPPORTED)})",
    )
    i.add_argument("-f", "--force", action="store_true", help="Ignore existing files and directories")
    i.add_argument(
        "-n",
        "--non-interactive",
        action="store_true",
        help="Error if any user input is required",
    )

    i.set_defaults(func=init_cmd)
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(args.verbose))
    try:
        return int(args.func(args))
    except CCDSError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
