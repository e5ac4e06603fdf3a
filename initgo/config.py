"""initgo configuration.

Typed configuration for the scaffolding workflow.  Settings use Pydantic v2
models so a user config file (``~/.initgo.yaml`` by default) is validated at
load time, and environment variables can override individual values without
editing the file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pydantic
import yaml
from pydantic import BaseModel, Field

from initgo.errors import ConfigError

DEFAULT_CONFIG_NAME = ".initgo.yaml"


class ToolchainConfig(BaseModel):
    """Names of the external tools driven by the workflow.

    The Node.js installer is probed in order: ``node_preferred`` is used when
    it is found on ``PATH``, otherwise ``node_fallback`` is invoked.
    """

    go_binary: str = Field(default="go", min_length=1)
    node_preferred: str = Field(default="pnpm", min_length=1)
    node_fallback: str = Field(default="npm", min_length=1)


class Config(BaseModel):
    """Global initgo configuration.

    Instances are created once by the CLI entry point (or by callers using
    the library directly) and passed to the workflow.
    """

    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    templates_dir: Path | None = Field(
        default=None,
        description="Directory used instead of the bundled webapp template tree",
    )
    env_example: str = Field(default=".env.example", min_length=1)
    env_file: str = Field(default=".env", min_length=1)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> "Config":
        """Load a configuration from a YAML file.

        An empty file yields the defaults.

        Raises:
            ConfigError: If the file cannot be read, is not valid YAML, or
                does not match the configuration schema.
        """
        config_path = Path(path).expanduser()
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(str(config_path), exc.strerror or str(exc)) from exc
        except yaml.YAMLError as exc:
            raise ConfigError(str(config_path), f"malformed YAML ({exc})") from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(str(config_path), "top-level value must be a mapping")

        try:
            return cls.model_validate(raw)
        except pydantic.ValidationError as exc:
            raise ConfigError(str(config_path), str(exc)) from exc

    @classmethod
    def from_env(cls, base: "Config | None" = None) -> "Config":
        """Apply environment variable overrides on top of *base*.

        Recognised variables (all optional):
            INITGO_GO_BINARY, INITGO_NODE_PREFERRED, INITGO_NODE_FALLBACK,
            INITGO_TEMPLATES_DIR.
        """
        base = base or cls()

        toolchain_kwargs: dict[str, Any] = {}
        if os.environ.get("INITGO_GO_BINARY"):
            toolchain_kwargs["go_binary"] = os.environ["INITGO_GO_BINARY"]
        if os.environ.get("INITGO_NODE_PREFERRED"):
            toolchain_kwargs["node_preferred"] = os.environ["INITGO_NODE_PREFERRED"]
        if os.environ.get("INITGO_NODE_FALLBACK"):
            toolchain_kwargs["node_fallback"] = os.environ["INITGO_NODE_FALLBACK"]

        update: dict[str, Any] = {}
        if toolchain_kwargs:
            update["toolchain"] = base.toolchain.model_copy(update=toolchain_kwargs)
        if os.environ.get("INITGO_TEMPLATES_DIR"):
            update["templates_dir"] = Path(os.environ["INITGO_TEMPLATES_DIR"])

        return base.model_copy(update=update)


def default_config_path() -> Path:
    """Return ``$HOME/.initgo.yaml``."""
    return Path.home() / DEFAULT_CONFIG_NAME


def load_config(path: str | Path | None = None) -> tuple[Config, Path | None]:
    """Resolve the effective configuration.

    An explicit *path* must exist.  Without one, ``~/.initgo.yaml`` is used
    when present and the defaults otherwise.  Environment overrides are
    applied last.

    Returns:
        ``(config, used_path)`` where *used_path* is ``None`` when no file
        was read.
    """
    used: Path | None = None
    if path is not None:
        used = Path(path).expanduser()
    else:
        candidate = default_config_path()
        if candidate.is_file():
            used = candidate

    config = Config.load(used) if used is not None else Config()
    return Config.from_env(config), used
