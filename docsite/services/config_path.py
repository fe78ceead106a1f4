"""Configuration path utilities.

The config directory can be pointed elsewhere with $DOCSITE_CONFIG_DIR,
which is how the test suite keeps away from the real home directory.
"""

import os
from pathlib import Path

CONFIG_DIR_ENV = "DOCSITE_CONFIG_DIR"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns $DOCSITE_CONFIG_DIR when set, otherwise ~/.config/docsite.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()

    return Path.home() / ".config" / "docsite"
