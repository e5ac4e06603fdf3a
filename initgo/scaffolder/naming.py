"""Placeholder resolution.

Turns a raw project name into the :class:`TemplateData` record that drives
every substitution of a run.  All fields are pure functions of the trimmed
name, computed once before any filesystem work starts.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from initgo.errors import ValidationError

_WORD_SEPARATORS = re.compile(r"[-_\s]+")


class TemplateData(BaseModel):
    """Name-derived values substituted into the template tree."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    module_name: str
    app_title: str
    app_title_camel: str


def split_words(value: str) -> list[str]:
    """Split on ``-``, ``_`` and whitespace, dropping empty fragments."""
    return [word for word in _WORD_SEPARATORS.split(value) if word]


def to_title(value: str) -> str:
    """Convert ``my-app`` or ``my_app`` to ``My App``."""
    return " ".join(word.capitalize() for word in split_words(value))


def to_camel(value: str) -> str:
    """Convert ``my-app`` or ``my_app`` to ``MyApp``."""
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(value))


def resolve_template_data(raw_name: str) -> TemplateData:
    """Build the :class:`TemplateData` for *raw_name*.

    Raises:
        ValidationError: If the name is empty after trimming or consists only
            of separator characters.
    """
    name = raw_name.strip()
    if not name:
        raise ValidationError("project name cannot be empty")
    if not split_words(name):
        raise ValidationError(f"project name '{name}' contains no usable characters")

    return TemplateData(
        project_name=name,
        module_name=name,
        app_title=to_title(name),
        app_title_camel=to_camel(name),
    )
