"""Configuration loading and typed access.

The configuration is an optional TOML file::

    [sttr]
    binary = "~/go/bin/sttr"
    engine = "fzf"
    refresh_on_start = true
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE, CONFIG_SECTION, STATE_FILE
from .models import ConfigError

if TYPE_CHECKING:
    import logging

__all__ = [
    "BOOL_FALSE_STRINGS",
    "CONFIG_SCHEMA",
    "ConfigField",
    "Configuration",
    "coerce_to_bool",
    "format_config_help",
    "load_config",
]

ConfigValueType = float | bool | str | list | dict

BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


@dataclass
class ConfigField:
    """Describes a configuration option."""

    name: str
    field_type: type = str
    default: Any = None
    description: str = ""


CONFIG_SCHEMA: list[ConfigField] = [
    ConfigField("binary", str, "", "Path of the sttr binary, probed before any lookup"),
    ConfigField("engine", str, "", "Menu engine (fzf, rofi, wofi, tofi, dmenu, bemenu, questionary)"),
    ConfigField("parameters", str, "", "Extra parameters passed to the menu engine"),
    ConfigField("state_file", str, str(STATE_FILE), "Where the discovered commands are saved"),
    ConfigField("refresh_on_start", bool, False, "Query sttr for its commands on every start"),
]


def format_config_help() -> str:
    """Describe the options of the configuration file."""
    lines = [f"Options of the [{CONFIG_SECTION}] section of {CONFIG_FILE}:"]
    for config_field in CONFIG_SCHEMA:
        default = f" (default: {config_field.default!r})" if config_field.default not in (None, "") else ""
        lines.append(f"  {config_field.name:28s} {config_field.description}{default}")
    return "\n".join(lines) + "\n"


class Configuration(dict):
    """Configuration section with schema defaults and typed getters."""

    def __init__(self, *args: Any, logger: logging.Logger, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init__(*args, **kwargs)
        self.log = logger
        self._schema_defaults = {field.name: field.default for field in CONFIG_SCHEMA if field.default is not None}

    def get(self, name: str, default: ConfigValueType | None = None) -> ConfigValueType | None:  # type: ignore[override]
        """Get a value, falling back to the schema default then to `default`."""
        if name in self:
            return dict.get(self, name)  # type: ignore[return-value]
        if name in self._schema_defaults:
            return self._schema_defaults[name]  # type: ignore[no-any-return]
        return default

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean value, see `coerce_to_bool`."""
        return coerce_to_bool(self.get(name), default)

    def get_str(self, name: str, default: str = "") -> str:
        """Get a string value."""
        value = self.get(name)
        if value is None:
            return default
        if not isinstance(value, str):
            self.log.warning("Expected a string for %s, got %r", name, value)
        return str(value)

    def get_path(self, name: str) -> Path:
        """Get a path value, expanding `~` and environment variables."""
        return Path(os.path.expandvars(self.get_str(name))).expanduser()

    def validate(self) -> list[str]:
        """Return a list of problems found in the configuration."""
        known = {field.name: field for field in CONFIG_SCHEMA}
        errors = []
        for key, value in self.items():
            config_field = known.get(key)
            if config_field is None:
                errors.append(f"Unknown option: {key}")
            elif config_field.field_type is bool:
                if not isinstance(value, bool | str):
                    errors.append(f"Invalid value for {key}: expected a boolean")
            elif not isinstance(value, config_field.field_type):
                errors.append(f"Invalid value for {key}: expected {config_field.field_type.__name__}")
        return errors


def load_config(log: logging.Logger, filename: str | Path | None = None) -> Configuration:
    """Load the `[sttr]` section of the configuration file.

    A missing file gives the defaults.

    Raises:
        ConfigError: the file isn't valid TOML
    """
    path = Path(os.path.expandvars(str(filename))).expanduser() if filename else CONFIG_FILE
    section: dict[str, Any] = {}
    if path.exists():
        log.info("Loading %s", path)
        with path.open("rb") as f:
            try:
                section = tomllib.load(f).get(CONFIG_SECTION, {})
            except tomllib.TOMLDecodeError as e:
                log.critical("Problem reading %s: %s", path, e)
                raise ConfigError(str(e)) from e
    elif filename:
        log.warning("Config file %s not found, using defaults", path)
    if not isinstance(section, dict):
        msg = f"[{CONFIG_SECTION}] must be a table in {path}"
        raise ConfigError(msg)
    config = Configuration(section, logger=log)
    for problem in config.validate():
        log.warning("%s: %s", path, problem)
    return config
