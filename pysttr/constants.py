"""Shared constants for pysttr."""

import os
from pathlib import Path

__all__ = [
    "BINARY_NAME",
    "CONFIG_FILE",
    "CONFIG_SECTION",
    "HELP_FLAG",
    "HOMEPAGE_URL",
    "INSTALL_SCRIPT_URL",
    "RELEASES_URL",
    "SNAPSHOT_KEY",
    "STATE_FILE",
]

BINARY_NAME = "sttr"
HELP_FLAG = "-h"

HOMEPAGE_URL = "https://github.com/abhimanyu003/sttr"
RELEASES_URL = f"{HOMEPAGE_URL}/releases/latest"
INSTALL_SCRIPT_URL = "https://raw.githubusercontent.com/abhimanyu003/sttr/main/install.sh"

# Storage slot holding the last successfully parsed catalog
SNAPSHOT_KEY = "sttr.commands"

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
_xdg_state_home = Path(os.environ.get("XDG_STATE_HOME") or Path.home() / ".local" / "state")

CONFIG_FILE = _xdg_config_home / "pysttr" / "config.toml"
CONFIG_SECTION = "sttr"
STATE_FILE = _xdg_state_home / "pysttr" / "state.json"
