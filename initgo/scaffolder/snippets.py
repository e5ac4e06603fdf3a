"""Jinja2 rendering for initgo's own generated text.

The bundled webapp tree goes through plain token substitution only.  Text
the tool writes itself, the ``main.go`` of ``initgo init`` and the
"next steps" message, lives as ``.j2`` templates under
``initgo/templates/snippets/`` and is rendered here.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from initgo.errors import FileWriteError


def default_snippet_dir() -> Path:
    """Return the bundled snippet directory."""
    return Path(str(files("initgo") / "templates" / "snippets"))


class SnippetRenderer:
    """Renders the built-in ``.j2`` snippets."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = default_snippet_dir()
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render the snippet *template_name* with *context*."""
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_to_file(
        self,
        template_name: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a snippet and write it to *output_path*, overwriting it.

        Raises:
            FileWriteError: If the file cannot be written.
        """
        content = self.render(template_name, context)
        out = Path(output_path)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(content, encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise FileWriteError(str(out), str(exc)) from exc
        return out
