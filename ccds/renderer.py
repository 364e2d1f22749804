"""
renderer.py

Responsibility: turn a template id plus a data record into rendered bytes.

Rules:
- Template ids are `/`-separated paths relative to a templates directory
  (e.g. `licenses/MIT`, `docker/Dockerfile`).
- Rendering uses Jinja2 with `StrictUndefined`, so a template referencing a
  value the record does not provide is an error, not an empty string.
- Output is UTF-8 with `\n` newlines; trailing newlines are preserved.

This module intentionally does NOT know about project layout, git, or prompts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Protocol

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from ccds.errors import CCDSError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class RenderError(CCDSError):
    pass


class Renderer(Protocol):
    def render(self, template_id: str, data: Mapping[str, Any]) -> bytes: ...


class JinjaRenderer:
    def __init__(self, templates_dir: str | Path = TEMPLATES_DIR) -> None:
        tpl_dir = Path(templates_dir).resolve()
        if not tpl_dir.is_dir():
            raise RenderError(f"Template directory not found: {tpl_dir}")
        self.templates_dir = tpl_dir
        self._env = Environment(
            loader=FileSystemLoader(str(tpl_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, template_id: str, data: Mapping[str, Any]) -> bytes:
        try:
            template = self._env.get_template(template_id)
        except TemplateNotFound as e:
            raise RenderError(f"Template not found: {template_id}") from e
        try:
            out = template.render(**data)
        except TemplateError as e:
            raise RenderError(f"Failed rendering template: {template_id}") from e
        return out.encode("utf-8")


def write_rendered(renderer: Renderer, template_id: str, dest: Path, data: Mapping[str, Any]) -> None:
    """Render `template_id` and write it to `dest`, replacing any existing file."""
    content = renderer.render(template_id, data)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(content)
    except OSError as e:
        raise RenderError(f"failed to write file {dest}") from e
