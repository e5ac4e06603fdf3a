"""Error taxonomy shared by every initgo component.

Every error the tool reports to the user derives from :class:`InitGoError`,
so the CLI can catch a single base class, print the message and exit with a
non-zero status.  Subclasses carry the path or tool involved as attributes
in addition to a readable message.
"""

from __future__ import annotations

from collections.abc import Sequence


class InitGoError(Exception):
    """Base class for all errors raised by initgo."""


class ValidationError(InitGoError):
    """Raised when a project name is empty or contains no usable words."""


class ConfigError(InitGoError):
    """Raised when a configuration file cannot be read or is invalid."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid config file {path}: {reason}")


class TemplateReadError(InitGoError):
    """Raised when an entry of the template tree cannot be read."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"failed to read template {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileWriteError(InitGoError):
    """Raised when an output file or directory cannot be created."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"failed to write {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ExternalCommandError(InitGoError):
    """Raised when an external tool exits non-zero or cannot be launched."""

    def __init__(
        self,
        tool: str,
        arguments: Sequence[str] = (),
        *,
        returncode: int | None = None,
        reason: str = "",
    ) -> None:
        self.tool = tool
        self.arguments = list(arguments)
        self.returncode = returncode
        self.reason = reason
        self.command = " ".join([tool, *self.arguments])
        if returncode is not None:
            message = f"{self.command} failed (exit {returncode})"
        else:
            message = f"{self.command} failed: {reason or 'could not be started'}"
        super().__init__(message)


class NonFatalCleanupError(InitGoError):
    """Raised by best-effort finishing steps; reported but never fatal."""
