"""User configuration path resolution.

This module centralizes detection of the per-user configuration directory
and the yarr application directory beneath it.

Platform conventions:
1. Windows: ``%APPDATA%``
2. macOS: ``$HOME/Library/Application Support``
3. Other Unix: ``$XDG_CONFIG_HOME`` when set (must be absolute), else ``$HOME/.config``
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from yarr.core.exceptions import PathCreationError


APP_NAME = "yarr"


def get_user_config_dir(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> Path:
    """Return the platform's per-user configuration directory.

    Raises:
        PathCreationError: If the directory cannot be determined from the environment.
    """
    env = os.environ if environ is None else environ
    plat = sys.platform if platform is None else platform

    if plat == "win32":
        appdata = env.get("APPDATA", "")
        if not appdata:
            raise PathCreationError("Failed to get config dir: %APPDATA% is not defined")
        return Path(appdata)

    home = env.get("HOME", "")

    if plat == "darwin":
        if not home:
            raise PathCreationError("Failed to get config dir: $HOME is not defined")
        return Path(home) / "Library" / "Application Support"

    xdg = env.get("XDG_CONFIG_HOME", "")
    if xdg:
        if not os.path.isabs(xdg):
            raise PathCreationError(
                f"Failed to get config dir: path in $XDG_CONFIG_HOME is relative: {xdg}",
                context={"XDG_CONFIG_HOME": xdg},
            )
        return Path(xdg)

    if not home:
        raise PathCreationError(
            "Failed to get config dir: neither $XDG_CONFIG_HOME nor $HOME are defined"
        )
    return Path(home) / ".config"


def get_app_config_dir(
    user_config_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Return ``<user-config-dir>/yarr`` (not created)."""
    base = user_config_dir if user_config_dir is not None else get_user_config_dir(environ)
    return Path(base) / APP_NAME


__all__ = [
    "APP_NAME",
    "get_app_config_dir",
    "get_user_config_dir",
]
