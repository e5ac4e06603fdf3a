"""initgo workflow controller.

Implements the end-to-end "create web application" operation as a small
state machine:

START -> DIRECTORY_PREPARED -> MATERIALIZED -> MODULE_READY
      -> DEPS_INSTALLED -> DONE

Any fatal error moves the workflow to FAILED and surfaces as a
:class:`WorkflowError` naming the operation that failed, chained from the
original error.  The project directory is passed explicitly to every step.
When a new directory is created it is also entered for the duration of the
run, and the original working directory is restored on every exit path.
Files already written are left on disk.

Also provides :func:`init_module`, the bare ``go mod init`` + ``main.go``
operation.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from enum import Enum
from importlib.resources.abc import Traversable
from pathlib import Path

from initgo.config import Config
from initgo.errors import (
    ExternalCommandError,
    FileWriteError,
    InitGoError,
    NonFatalCleanupError,
    TemplateReadError,
    ValidationError,
)
from initgo.scaffolder import (
    SnippetRenderer,
    TemplateData,
    default_template_root,
    materialize,
    resolve_template_data,
)
from initgo.toolchain import GoToolchain, NodeInstaller, select_node_installer
from initgo.toolchain.installers import Which
from initgo.utils import print_created, print_step, print_warning

# ---------------------------------------------------------------------------
# States & errors
# ---------------------------------------------------------------------------


class WorkflowState(str, Enum):
    """Progress of a webapp workflow run."""

    START = "start"
    DIRECTORY_PREPARED = "directory_prepared"
    MATERIALIZED = "materialized"
    MODULE_READY = "module_ready"
    DEPS_INSTALLED = "deps_installed"
    DONE = "done"
    FAILED = "failed"


class WorkflowError(InitGoError):
    """Raised when a workflow step fails irrecoverably.

    ``state`` is the last state reached before the failure and ``operation``
    names the step that failed.  The underlying error is available as
    ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        cause: Exception,
        state: WorkflowState | None = None,
    ) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"{operation}: {cause}")


@dataclass
class WorkflowResult:
    """Outcome of a successful webapp run."""

    project_root: Path
    data: TemplateData
    created_new_dir: bool
    files: list[Path] = field(default_factory=list)
    installer: NodeInstaller | None = None
    module_init_skipped: bool = False
    notes: list[str] = field(default_factory=list)
    state: WorkflowState = WorkflowState.START


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@contextmanager
def working_directory(path: str | Path | None) -> Iterator[Path]:
    """Enter *path* for the duration of the block and always restore the original.

    With ``None`` the working directory is left alone.

    Raises:
        FileWriteError: If *path* cannot be entered.
    """
    original = Path.cwd()
    if path is None:
        yield original
        return

    try:
        os.chdir(path)
    except OSError as exc:
        raise FileWriteError(str(path), f"cannot enter directory: {exc}") from exc
    try:
        yield Path(path)
    finally:
        os.chdir(original)


def _create_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileWriteError(str(path), str(exc)) from exc


def _project_name_from(project_name: str | None, base_dir: Path) -> str:
    if project_name is not None:
        return project_name
    return base_dir.resolve().name


# ---------------------------------------------------------------------------
# Webapp workflow
# ---------------------------------------------------------------------------


class WebappWorkflow:
    """Creates a Go Fiber + HTMX + Alpine.js + Tailwind web application.

    Attributes:
        config: Effective configuration.
        state: Current :class:`WorkflowState`; ``FAILED`` after an error.
        go: Go toolchain wrapper used for ``go mod init`` / ``go mod tidy``.
    """

    def __init__(self, config: Config | None = None, *, which: Which | None = None) -> None:
        self.config = config or Config()
        self.state = WorkflowState.START
        self.go = GoToolchain(self.config.toolchain.go_binary)
        self._which = which

    @property
    def template_root(self) -> Traversable:
        if self.config.templates_dir is not None:
            return self.config.templates_dir
        return default_template_root()

    def _fail(self, operation: str, exc: Exception) -> WorkflowError:
        error = WorkflowError(operation, exc, state=self.state)
        self.state = WorkflowState.FAILED
        return error

    # -- Public API --------------------------------------------------------

    async def run(
        self,
        project_name: str | None = None,
        base_dir: str | Path | None = None,
    ) -> WorkflowResult:
        """Create the web application.

        Args:
            project_name: Name of the project.  When given, the application is
                created in a new ``<base_dir>/<project_name>`` directory;
                otherwise the base directory's own name is used and the
                application is created in place.
            base_dir: Directory to work from.  Defaults to the current
                working directory.

        Returns:
            A :class:`WorkflowResult` in state ``DONE``.

        Raises:
            WorkflowError: If any step before ``DONE`` fails.
        """
        base = Path(base_dir).resolve() if base_dir is not None else Path.cwd()
        created_new_dir = project_name is not None

        try:
            data = resolve_template_data(_project_name_from(project_name, base))
        except ValidationError as exc:
            raise self._fail("invalid project name", exc) from exc

        if created_new_dir:
            print_step(f"Creating web application '{data.project_name}'...")
            project_root = base / data.project_name
            try:
                _create_directory(project_root)
            except FileWriteError as exc:
                raise self._fail("failed to create project directory", exc) from exc
        else:
            print_step(
                f"Initializing web application '{data.project_name}' in current directory..."
            )
            project_root = base

        result = WorkflowResult(
            project_root=project_root,
            data=data,
            created_new_dir=created_new_dir,
        )

        with ExitStack() as stack:
            try:
                stack.enter_context(
                    working_directory(project_root if created_new_dir else None)
                )
            except FileWriteError as exc:
                raise self._fail("failed to change to project directory", exc) from exc
            self.state = WorkflowState.DIRECTORY_PREPARED

            await self._generate_files(result)
            self.state = WorkflowState.MATERIALIZED

            await self._ensure_module(result)
            self.state = WorkflowState.MODULE_READY

            await self._install_dependencies(result)
            self.state = WorkflowState.DEPS_INSTALLED

            try:
                self._activate_env_file(project_root)
            except NonFatalCleanupError as exc:
                print_warning(f"Note: {exc}")
                result.notes.append(str(exc))

            self.state = WorkflowState.DONE

        result.state = self.state
        return result

    # -- Steps ---------------------------------------------------------------

    async def _generate_files(self, result: WorkflowResult) -> None:
        print_step("Generating files from templates...")
        root = result.project_root

        def report(path: Path) -> None:
            print_created(path.relative_to(root))

        try:
            result.files = materialize(
                result.data, root, root=self.template_root, on_file=report
            )
        except (TemplateReadError, FileWriteError) as exc:
            raise self._fail("failed to generate files", exc) from exc

    async def _ensure_module(self, result: WorkflowResult) -> None:
        if self.go.has_module_descriptor(result.project_root):
            print_step("Go module already exists, skipping go mod init...")
            result.module_init_skipped = True
            return

        print_step("Initializing Go module...")
        try:
            await self.go.mod_init(result.data.module_name, cwd=result.project_root)
        except ExternalCommandError as exc:
            raise self._fail("failed to initialize go module", exc) from exc

    async def _install_dependencies(self, result: WorkflowResult) -> None:
        print_step("Installing Go dependencies...")
        try:
            await self.go.mod_tidy(cwd=result.project_root)
        except ExternalCommandError as exc:
            raise self._fail("failed to install Go dependencies", exc) from exc

        print_step("Installing Node.js dependencies...")
        installer = select_node_installer(self.config.toolchain, which=self._which)
        result.installer = installer
        try:
            await installer.install(cwd=result.project_root)
        except ExternalCommandError as exc:
            raise self._fail("failed to install Node.js dependencies", exc) from exc

    def _activate_env_file(self, project_root: Path) -> None:
        """Rename the example environment file to the active one.

        Raises:
            NonFatalCleanupError: If the example file is missing or the rename
                fails.
        """
        source = project_root / self.config.env_example
        destination = project_root / self.config.env_file
        if not source.exists():
            raise NonFatalCleanupError(f"{self.config.env_example} does not exist")
        try:
            source.rename(destination)
        except OSError as exc:
            raise NonFatalCleanupError(
                f"failed to rename {self.config.env_example} to {self.config.env_file}: {exc}"
            ) from exc


# ---------------------------------------------------------------------------
# Bare module initialization
# ---------------------------------------------------------------------------


async def init_module(
    project_name: str | None = None,
    base_dir: str | Path | None = None,
    config: Config | None = None,
    renderer: SnippetRenderer | None = None,
) -> Path:
    """Run ``go mod init`` in *base_dir* and write a starter ``main.go``.

    The module name is *project_name* or, when omitted, the base directory's
    name.  No directory is created.

    Returns:
        Path of the written ``main.go``.

    Raises:
        WorkflowError: If the name is invalid, ``go mod init`` fails, or
            ``main.go`` cannot be written.
    """
    config = config or Config()
    renderer = renderer or SnippetRenderer()
    base = Path(base_dir).resolve() if base_dir is not None else Path.cwd()

    try:
        data = resolve_template_data(_project_name_from(project_name, base))
    except ValidationError as exc:
        raise WorkflowError("invalid project name", exc) from exc

    print_step(f"Initializing Go module with name '{data.module_name}'...")
    go = GoToolchain(config.toolchain.go_binary)
    try:
        await go.mod_init(data.module_name, cwd=base)
    except ExternalCommandError as exc:
        raise WorkflowError("failed to initialize go module", exc) from exc

    print_step("Creating main.go...")
    try:
        main_go = renderer.render_to_file(
            "main.go.j2", base / "main.go", {"project_name": data.project_name}
        )
    except FileWriteError as exc:
        raise WorkflowError("failed to create main.go", exc) from exc

    print_step("Done!")
    return main_go
