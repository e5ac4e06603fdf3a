"""External command execution and the Go toolchain steps.

Every tool runs as a child process in an explicit working directory, with
stdout/stderr inherited so its output reaches the user unmodified.  Each call
is awaited to completion before the caller moves on.
"""

from __future__ import annotations

from pathlib import Path

from initgo.errors import ExternalCommandError
from initgo.utils import run_command

MODULE_DESCRIPTOR = "go.mod"


async def run_external(tool: str, *args: str, cwd: str | Path) -> None:
    """Run ``tool *args`` in *cwd* and wait for it to exit.

    Raises:
        ExternalCommandError: If the tool cannot be started or exits with a
            non-zero status.
    """
    try:
        returncode, _, _ = await run_command([tool, *args], cwd=cwd, capture=False)
    except OSError as exc:
        raise ExternalCommandError(tool, args, reason=exc.strerror or str(exc)) from exc

    if returncode != 0:
        raise ExternalCommandError(tool, args, returncode=returncode)


class GoToolchain:
    """Module initialization and dependency reconciliation via ``go mod``."""

    def __init__(self, binary: str = "go") -> None:
        self.binary = binary

    @staticmethod
    def has_module_descriptor(project_dir: str | Path) -> bool:
        """Return ``True`` if *project_dir* already contains a ``go.mod``."""
        return (Path(project_dir) / MODULE_DESCRIPTOR).exists()

    async def mod_init(self, module_name: str, cwd: str | Path) -> None:
        await run_external(self.binary, "mod", "init", module_name, cwd=cwd)

    async def mod_tidy(self, cwd: str | Path) -> None:
        await run_external(self.binary, "mod", "tidy", cwd=cwd)
