"""User configuration for the entrycheck CLI."""

from __future__ import annotations

import dataclasses
import logging
import os
import typing as typ
from pathlib import Path

from cyclopts import config as cyclopts_config
from ruamel.yaml import YAML

from .errors import EntrycheckError

CONFIG_FILENAME = "config.yaml"
CONFIG_ENV = "ENTRYCHECK_CONFIG"
VALIDATE_SECTION = "validate"
DEFAULT_LOG_LEVEL = "INFO"

_yaml = YAML(typ="safe")


class _YamlConfig(cyclopts_config.ConfigFromFile):
    """Cyclopts config provider backed by ruamel.yaml."""

    def _load_config(self, path: Path) -> dict[str, typ.Any]:
        if not path.exists():
            return {}
        with path.open("r", encoding="utf-8") as handle:
            contents = _yaml.load(handle) or {}
        return dict(contents) if isinstance(contents, dict) else {}


@dataclasses.dataclass(frozen=True, slots=True)
class Settings:
    """Defaults for `entrycheck validate` read from the config file."""

    log_level: str = DEFAULT_LOG_LEVEL
    keep_going: bool = False

    @property
    def level(self) -> int:
        """Return the numeric logging level."""
        return logging.getLevelName(self.log_level.upper())


def default_config_path() -> Path:
    """Return the path to the entrycheck configuration file."""
    if explicit := os.environ.get(CONFIG_ENV):
        return Path(explicit).expanduser()
    root = os.environ.get("XDG_CONFIG_HOME")
    base = Path(root).expanduser() if root else Path.home() / ".config"
    return base / "entrycheck" / CONFIG_FILENAME


def load_settings(config_path: Path | None = None) -> Settings:
    """Load validation defaults, falling back to built-in values."""
    path = config_path or default_config_path()
    provider = _YamlConfig(path=str(path), must_exist=False)
    raw = provider.config or {}
    section = raw.get(VALIDATE_SECTION, {}) if isinstance(raw, dict) else {}
    if not isinstance(section, dict):
        message = f"{path}: {VALIDATE_SECTION!r} must be a mapping."
        raise EntrycheckError(message)

    log_level = str(section.get("log_level", DEFAULT_LOG_LEVEL)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        message = f"{path}: unknown log_level {log_level!r}."
        raise EntrycheckError(message)
    return Settings(
        log_level=log_level,
        keep_going=bool(section.get("keep_going", False)),
    )
