"""Template tree traversal.

The template tree is a read-only, traversable resource: by default the
``templates/webapp`` package data shipped with initgo, read through
:mod:`importlib.resources`, but any directory ``Path`` works as well.  The
walker yields one :class:`TemplateEntry` per node, lazily and depth-first.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from importlib.resources import files
from importlib.resources.abc import Traversable

from initgo.errors import TemplateReadError

TEMPLATE_SUFFIX = ".tmpl"


@dataclass(frozen=True)
class TemplateEntry:
    """A single node of the template tree.

    ``rel_path`` always uses forward slashes.  Directories carry no content.
    """

    rel_path: str
    is_dir: bool
    content: bytes | None = None

    @property
    def output_path(self) -> str:
        return output_path_for(self.rel_path)


def output_path_for(rel_path: str) -> str:
    """Strip a trailing ``.tmpl`` from *rel_path*; other paths map to themselves.

    Examples::

        output_path_for("a/b/file.go.tmpl") -> "a/b/file.go"
        output_path_for("a/b/file.go")      -> "a/b/file.go"
    """
    if rel_path.endswith(TEMPLATE_SUFFIX):
        return rel_path[: -len(TEMPLATE_SUFFIX)]
    return rel_path


def default_template_root() -> Traversable:
    """Return the bundled webapp template tree."""
    return files("initgo") / "templates" / "webapp"


def walk_templates(root: Traversable) -> Iterator[TemplateEntry]:
    """Yield every entry under *root*.

    Raises:
        TemplateReadError: If *root* is not a directory or any entry cannot
            be read.  Entries already yielded are not affected.
    """
    if not root.is_dir():
        raise TemplateReadError(str(root), "template root is not a directory")
    yield from _walk(root, "")


def _walk(node: Traversable, prefix: str) -> Iterator[TemplateEntry]:
    try:
        children = sorted(node.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise TemplateReadError(prefix.rstrip("/") or ".", str(exc)) from exc

    for child in children:
        rel_path = f"{prefix}{child.name}"
        if child.is_dir():
            yield TemplateEntry(rel_path=rel_path, is_dir=True)
            yield from _walk(child, f"{rel_path}/")
            continue

        try:
            content = child.read_bytes()
        except OSError as exc:
            raise TemplateReadError(rel_path, str(exc)) from exc
        yield TemplateEntry(rel_path=rel_path, is_dir=False, content=content)
