"""Writes the template tree to disk.

For each file of the tree the materializer computes the output path, makes
sure the parent directory exists, substitutes placeholders, and overwrites
whatever is at the destination.  A failure stops the run; files written
before it stay on disk.
"""

from __future__ import annotations

from collections.abc import Callable
from importlib.resources.abc import Traversable
from pathlib import Path

from initgo.errors import FileWriteError

from .naming import TemplateData
from .substitution import substitute
from .walker import default_template_root, walk_templates


def materialize(
    data: TemplateData,
    target_dir: str | Path,
    *,
    root: Traversable | None = None,
    on_file: Callable[[Path], None] | None = None,
) -> list[Path]:
    """Render every file of the template tree into *target_dir*.

    Args:
        data: Placeholder values for this run.
        target_dir: Directory the tree is written into.  Output paths are
            resolved against it, never against the process working directory.
        root: Template tree to walk.  Defaults to the bundled webapp tree.
        on_file: Called with each written path, in traversal order.

    Returns:
        The written output paths, in traversal order.

    Raises:
        TemplateReadError: If the tree cannot be read.
        FileWriteError: If a directory or file cannot be written.
    """
    if root is None:
        root = default_template_root()
    target = Path(target_dir)

    written: list[Path] = []
    for entry in walk_templates(root):
        if entry.is_dir:
            continue

        output = target / entry.output_path
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileWriteError(str(output.parent), str(exc)) from exc

        try:
            output.write_bytes(substitute(entry.content or b"", data))
        except OSError as exc:
            raise FileWriteError(str(output), str(exc)) from exc

        written.append(output)
        if on_file is not None:
            on_file(output)

    return written
