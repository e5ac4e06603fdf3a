"""External toolchain orchestration: ``go mod`` and Node.js installers."""

from initgo.toolchain.commands import MODULE_DESCRIPTOR, GoToolchain, run_external
from initgo.toolchain.installers import (
    InstallerRole,
    NodeInstaller,
    NpmInstaller,
    PnpmInstaller,
    select_node_installer,
)

__all__ = [
    "GoToolchain",
    "InstallerRole",
    "MODULE_DESCRIPTOR",
    "NodeInstaller",
    "NpmInstaller",
    "PnpmInstaller",
    "run_external",
    "select_node_installer",
]
