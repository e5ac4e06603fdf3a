"""Template materialization engine.

Resolves a project name into placeholder values, walks the read-only
template tree, and writes each file to the target directory with the
placeholders substituted.

Quick usage::

    from initgo.scaffolder import materialize, resolve_template_data

    data = resolve_template_data("my-app")
    written = materialize(data, "/tmp/my-app")
"""

from initgo.scaffolder.materializer import materialize
from initgo.scaffolder.naming import TemplateData, resolve_template_data
from initgo.scaffolder.snippets import SnippetRenderer
from initgo.scaffolder.substitution import PLACEHOLDERS, substitute
from initgo.scaffolder.walker import (
    TEMPLATE_SUFFIX,
    TemplateEntry,
    default_template_root,
    output_path_for,
    walk_templates,
)

__all__ = [
    "PLACEHOLDERS",
    "SnippetRenderer",
    "TEMPLATE_SUFFIX",
    "TemplateData",
    "TemplateEntry",
    "default_template_root",
    "materialize",
    "output_path_for",
    "resolve_template_data",
    "substitute",
    "walk_templates",
]
