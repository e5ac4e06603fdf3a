"""Shared pytest fixtures for the initgo test suite.

Provides reusable fixtures for:
- Small on-disk template trees
- Resolved TemplateData
- Mocked external commands (``go``, ``pnpm``, ``npm``)
- Working-directory isolation
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from initgo.scaffolder import TemplateData, resolve_template_data


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

def _write(path: Path, content: str | bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """A small template tree exercising every token and path rule.

    Layout::

        main.go.tmpl                      -> main.go
        .env.example                      -> .env.example
        views/index.html                  -> views/index.html (Go template syntax)
        internals/handlers/app.go.tmpl    -> internals/handlers/app.go
        assets/logo.bin                   -> assets/logo.bin (binary payload)
        empty/                            (directory only)
    """
    root = tmp_path / "templates"
    _write(
        root / "main.go.tmpl",
        'package main\n\nimport "{{moduleName}}/internals/handlers"\n\n'
        '// {{projectName}} -- {{appTitle}} ({{appTitleCamel}})\n',
    )
    _write(root / ".env.example", "APP_NAME={{projectName}}\n")
    _write(
        root / "views" / "index.html",
        "<h1>{{appTitle}}</h1>\n{{template \"partials/nav\" .}}\n<p>{{.Title}}</p>\n",
    )
    _write(
        root / "internals" / "handlers" / "app.go.tmpl",
        'package handlers\n\nconst Title = "{{appTitle}}"\n',
    )
    _write(root / "assets" / "logo.bin", b"\x89PNG\x00\x01{{projectName}}\xff")
    (root / "empty").mkdir(parents=True)
    yield root


@pytest.fixture
def template_data() -> TemplateData:
    """TemplateData for the project name ``my-app``."""
    return resolve_template_data("my-app")


# ---------------------------------------------------------------------------
# Working directory
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty directory that is also the current working directory."""
    work = tmp_path / "workspace"
    work.mkdir()
    monkeypatch.chdir(work)
    yield work


# ---------------------------------------------------------------------------
# Mock external commands
# ---------------------------------------------------------------------------

class FakeToolchain:
    """Records external command invocations and simulates their effects.

    ``go mod init <name>`` writes a ``go.mod`` into the command's cwd so the
    rest of the workflow sees an initialized module.  Tools listed in
    ``failing`` exit with status 1; tools listed in ``missing`` raise
    ``FileNotFoundError`` like a binary absent from ``PATH``.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.failing: set[str] = set()
        self.missing: set[str] = set()

    def __call__(self, cmd, cwd=None, capture=True):
        self.calls.append(
            {"cmd": list(cmd), "cwd": Path(cwd) if cwd else None, "process_cwd": Path.cwd()}
        )
        tool = cmd[0]
        if tool in self.missing:
            raise FileNotFoundError(2, "No such file or directory", tool)
        if tool in self.failing:
            return (1, "", "")
        if list(cmd[1:3]) == ["mod", "init"] and cwd is not None:
            (Path(cwd) / "go.mod").write_text(
                f"module {cmd[3]}\n", encoding="utf-8", errors="surrogateescape"
            )
        return (0, "", "")

    @property
    def commands(self) -> list[list[str]]:
        return [call["cmd"] for call in self.calls]


@pytest.fixture
def fake_toolchain() -> FakeToolchain:
    """Patch the command runner used for every external tool."""
    fake = FakeToolchain()
    with patch(
        "initgo.toolchain.commands.run_command",
        new=AsyncMock(side_effect=fake),
    ):
        yield fake
