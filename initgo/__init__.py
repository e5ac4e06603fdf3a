"""initgo -- scaffolds Go web applications from an embedded template tree.

The package resolves a project name into placeholder values, materializes the
bundled Go Fiber + HTMX + Alpine.js + Tailwind template tree into a target
directory, and drives the Go and Node.js toolchains to leave behind a runnable
starter application.

Quick usage::

    import asyncio
    from initgo import WebappWorkflow

    result = asyncio.run(WebappWorkflow().run("my-app"))
    print(result.project_root)
"""

from initgo._build import VERSION
from initgo.config import Config, ToolchainConfig, load_config
from initgo.errors import (
    ConfigError,
    ExternalCommandError,
    FileWriteError,
    InitGoError,
    NonFatalCleanupError,
    TemplateReadError,
    ValidationError,
)
from initgo.scaffolder import TemplateData, materialize, resolve_template_data
from initgo.workflow import WebappWorkflow, WorkflowError, WorkflowState, init_module

__version__ = VERSION

__all__ = [
    "Config",
    "ConfigError",
    "ExternalCommandError",
    "FileWriteError",
    "InitGoError",
    "NonFatalCleanupError",
    "TemplateData",
    "TemplateReadError",
    "ToolchainConfig",
    "ValidationError",
    "WebappWorkflow",
    "WorkflowError",
    "WorkflowState",
    "init_module",
    "load_config",
    "materialize",
    "resolve_template_data",
]
