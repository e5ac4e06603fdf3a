"""Placeholder substitution.

Replaces the four scaffolding tokens with values from :class:`TemplateData`.
Replacement is literal and case-sensitive and runs on raw bytes, so it is
applied to every file of the tree regardless of type.  Any other ``{{ }}``
construct (Go ``html/template`` actions, Handlebars, ...) is left untouched.
"""

from __future__ import annotations

from .naming import TemplateData

# token -> TemplateData field
PLACEHOLDERS: dict[str, str] = {
    "{{projectName}}": "project_name",
    "{{moduleName}}": "module_name",
    "{{appTitle}}": "app_title",
    "{{appTitleCamel}}": "app_title_camel",
}


def replacement_pairs(data: TemplateData) -> list[tuple[bytes, bytes]]:
    """Return ``(token, value)`` byte pairs for *data*.

    Values are UTF-8 encoded.  Names taken from a non UTF-8 directory carry
    surrogate escapes and are written back as their original bytes.
    """
    return [
        (token.encode("utf-8"), getattr(data, field_name).encode("utf-8", "surrogateescape"))
        for token, field_name in PLACEHOLDERS.items()
    ]


def substitute(content: bytes, data: TemplateData) -> bytes:
    """Replace every occurrence of each placeholder token in *content*."""
    for token, value in replacement_pairs(data):
        content = content.replace(token, value)
    return content
