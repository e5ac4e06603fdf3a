"""Command line interface for initgo.

Usage::

    initgo                      # go mod init + main.go in the current directory
    initgo init [name]          # same, with an explicit module name
    initgo webapp [name]        # scaffold a Go Fiber + HTMX web application
    initgo version              # print version and build metadata
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence
from pathlib import Path

from initgo import _build
from initgo.config import load_config
from initgo.errors import InitGoError
from initgo.scaffolder import SnippetRenderer
from initgo.utils import (
    console,
    err_console,
    print_error,
    print_success,
    print_summary_table,
    printable,
)
from initgo.workflow import WebappWorkflow, WorkflowResult, init_module


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="initgo",
        description="Initialize a new Go project with go mod init and main.go",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  initgo\n"
            "  initgo init example.com/hello\n"
            "  initgo webapp my-app\n"
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="config file (default is $HOME/.initgo.yaml)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"initgo {_build.VERSION}",
    )

    subparsers = parser.add_subparsers(dest="command")

    init_parser = subparsers.add_parser(
        "init", help="run go mod init and create main.go in the current directory"
    )
    init_parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Module name (defaults to the current directory name)",
    )

    webapp_parser = subparsers.add_parser(
        "webapp",
        help="create a web application with Go Fiber, HTMX, Alpine.js and Tailwind CSS",
        description=(
            "Create a new web application. If no project name is provided, the "
            "current directory name is used and the application is initialized "
            "in the current directory."
        ),
    )
    webapp_parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Project name; a directory with this name is created",
    )

    subparsers.add_parser("version", help="print the version information")

    return parser


def format_version() -> str:
    return "\n".join(
        [
            f"initgo {_build.VERSION}",
            f"  Commit: {_build.COMMIT}",
            f"  Date: {_build.DATE}",
            f"  Built by: {_build.BUILT_BY}",
        ]
    )


def _print_next_steps(result: WorkflowResult, renderer: SnippetRenderer) -> None:
    print_success("✅ Web application created successfully!")
    print_summary_table(
        {
            "Project": result.data.project_name,
            "Module": result.data.module_name,
            "Title": result.data.app_title,
            "Location": str(result.project_root),
            "Files": str(len(result.files)),
        },
        title="Web application",
    )
    next_steps = renderer.render(
        "next_steps.txt.j2",
        {
            "project_name": result.data.project_name,
            "created_new_dir": result.created_new_dir,
            "dev_command": result.installer.script_command("dev"),
        },
    )
    console.print(printable(next_steps), markup=False, highlight=False)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``initgo`` and ``python -m initgo``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        console.print(format_version(), markup=False, highlight=False)
        return 0

    try:
        config, used_path = load_config(args.config)
        if used_path is not None:
            err_console.print(
                printable(f"Using config file: {used_path}"), markup=False, highlight=False
            )

        if args.command == "webapp":
            renderer = SnippetRenderer()
            result = asyncio.run(WebappWorkflow(config).run(args.project_name))
            _print_next_steps(result, renderer)
        else:
            name = getattr(args, "name", None)
            asyncio.run(init_module(name, config=config))
    except InitGoError as exc:
        print_error(f"Error: {exc}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
