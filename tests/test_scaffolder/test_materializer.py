"""Tests for writing the template tree to disk (initgo.scaffolder.materializer).

Covers:
- Output layout and suffix stripping
- Placeholder resolution in every written file
- Idempotent re-runs over an existing target
- Overwrite of pre-existing files
- Progress notifications
- Failure handling (read/write errors, partial output retained)
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from initgo.errors import FileWriteError, TemplateReadError
from initgo.scaffolder import PLACEHOLDERS, TemplateData, materialize


pytestmark = pytest.mark.unit


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()
    }


class TestMaterialize:
    def test_writes_expected_layout(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        materialize(template_data, target, root=template_tree)

        assert (target / "main.go").is_file()
        assert (target / ".env.example").is_file()
        assert (target / "views" / "index.html").is_file()
        assert (target / "internals" / "handlers" / "app.go").is_file()
        assert (target / "assets" / "logo.bin").is_file()
        assert not (target / "main.go.tmpl").exists()

    def test_returns_written_paths_in_traversal_order(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        written = materialize(template_data, target, root=template_tree)
        assert len(written) == 5
        assert all(p.is_file() for p in written)
        assert target / "main.go" in written

    def test_placeholders_resolved_everywhere(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        materialize(template_data, target, root=template_tree)

        for content in _snapshot(target).values():
            for token in PLACEHOLDERS:
                assert token.encode() not in content

        main_go = (target / "main.go").read_text(encoding="utf-8")
        assert 'import "my-app/internals/handlers"' in main_go
        assert "// my-app -- My App (MyApp)" in main_go

    def test_literal_files_also_substituted(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        materialize(template_data, target, root=template_tree)

        index = (target / "views" / "index.html").read_text(encoding="utf-8")
        assert "<h1>My App</h1>" in index
        assert '{{template "partials/nav" .}}' in index
        assert "{{.Title}}" in index
        assert (target / "assets" / "logo.bin").read_bytes() == b"\x89PNG\x00\x01my-app\xff"

    def test_directory_only_entries_not_required(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        materialize(template_data, target, root=template_tree)
        assert not (target / "empty").exists()

    def test_rerun_is_byte_identical(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        materialize(template_data, target, root=template_tree)
        first = _snapshot(target)
        materialize(template_data, target, root=template_tree)
        assert _snapshot(target) == first

    def test_existing_files_overwritten(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        target.mkdir()
        (target / "main.go").write_text("stale content that is much longer than before\n" * 50)
        materialize(template_data, target, root=template_tree)
        assert "stale" not in (target / "main.go").read_text(encoding="utf-8")

    def test_unrelated_files_left_alone(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        target.mkdir()
        (target / "notes.txt").write_text("keep me")
        materialize(template_data, target, root=template_tree)
        assert (target / "notes.txt").read_text() == "keep me"

    def test_on_file_called_for_each_write(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        seen: list[Path] = []
        written = materialize(
            template_data, tmp_path / "out", root=template_tree, on_file=seen.append
        )
        assert seen == written

    def test_missing_root_raises_before_writing(
        self, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        with pytest.raises(TemplateReadError):
            materialize(template_data, target, root=tmp_path / "missing")
        assert not target.exists()

    def test_write_failure_names_path_and_keeps_earlier_files(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        original = Path.write_bytes

        def fail_on_index(self: Path, data: bytes) -> int:
            if self.name == "index.html":
                raise OSError(28, "No space left on device")
            return original(self, data)

        with patch.object(Path, "write_bytes", fail_on_index):
            with pytest.raises(FileWriteError) as excinfo:
                materialize(template_data, target, root=template_tree)

        assert excinfo.value.path == str(target / "views" / "index.html")
        assert "No space left on device" in str(excinfo.value)
        # Entries before views/ in traversal order are already on disk.
        assert (target / "main.go").is_file()
        assert (target / "internals" / "handlers" / "app.go").is_file()

    def test_directory_creation_failure(
        self, template_tree: Path, template_data: TemplateData, tmp_path: Path
    ):
        target = tmp_path / "out"
        target.mkdir()
        # A regular file where a directory is needed.
        (target / "views").write_text("not a directory")

        with pytest.raises(FileWriteError) as excinfo:
            materialize(template_data, target, root=template_tree)
        assert excinfo.value.path == str(target / "views")
