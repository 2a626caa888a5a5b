"""Path utilities for yarr.

This package provides platform-aware path resolution:
- User: per-platform user configuration directory and the yarr app directory
- Storage: default database file derivation
"""
from __future__ import annotations

from .user import (
    APP_NAME,
    get_app_config_dir,
    get_user_config_dir,
)
from .storage import (
    DEFAULT_DATABASE_NAME,
    resolve_database_path,
)

__all__ = [
    # user
    "APP_NAME",
    "get_app_config_dir",
    "get_user_config_dir",
    # storage
    "DEFAULT_DATABASE_NAME",
    "resolve_database_path",
]
