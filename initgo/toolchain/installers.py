"""Node.js dependency installers.

Two installer variants share one interface: the preferred tool (``pnpm`` by
default) and the fallback (``npm``).  :func:`select_node_installer` probes
``PATH`` for the preferred tool and falls back when it is missing.  Both run
``<tool> install`` in the project directory.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from initgo.config import ToolchainConfig
from initgo.utils import print_step

from .commands import run_external

Which = Callable[[str], str | None]


class InstallerRole(str, Enum):
    """Position of an installer in the probe order."""

    PREFERRED = "preferred"
    FALLBACK = "fallback"


class NodeInstaller:
    """Base class for Node.js package-manager installers."""

    role: InstallerRole
    default_binary: str
    install_args: tuple[str, ...] = ("install",)

    def __init__(self, binary: str | None = None) -> None:
        self.binary = binary or self.default_binary

    def __repr__(self) -> str:
        return f"{type(self).__name__}(binary={self.binary!r})"

    def install_command(self) -> list[str]:
        return [self.binary, *self.install_args]

    def script_command(self, script: str) -> str:
        """Return the command line that runs a ``package.json`` script."""
        return f"{self.binary} run {script}"

    async def install(self, cwd: str | Path) -> None:
        """Install the project's Node.js dependencies.

        Raises:
            ExternalCommandError: If the package manager fails.
        """
        print_step(f"Installing Node.js dependencies with {self.binary}...")
        await run_external(*self.install_command(), cwd=cwd)


class PnpmInstaller(NodeInstaller):
    role = InstallerRole.PREFERRED
    default_binary = "pnpm"


class NpmInstaller(NodeInstaller):
    role = InstallerRole.FALLBACK
    default_binary = "npm"


def select_node_installer(
    toolchain: ToolchainConfig | None = None,
    *,
    which: Which | None = None,
) -> NodeInstaller:
    """Pick the preferred installer if it is on ``PATH``, else the fallback.

    *which* defaults to :func:`shutil.which`.
    """
    toolchain = toolchain or ToolchainConfig()
    which = which or shutil.which
    if which(toolchain.node_preferred) is not None:
        return PnpmInstaller(toolchain.node_preferred)
    return NpmInstaller(toolchain.node_fallback)
