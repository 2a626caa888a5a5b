"""Default database location.

When no database path is configured, yarr keeps its storage under the app
directory: ``<user-config-dir>/yarr/storage.db``.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Optional

from yarr.core.exceptions import PathCreationError
from yarr.core.utils.io import ensure_directory

from .user import get_app_config_dir

if TYPE_CHECKING:
    from yarr.core.config.models import ResolvedConfig

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "storage.db"
APP_DIR_MODE = 0o755


def resolve_database_path(
    config: "ResolvedConfig",
    user_config_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> "ResolvedConfig":
    """Fill in the database path when the resolved config leaves it empty.

    The app directory (and any missing ancestors) is created on demand; an
    existing directory is accepted as-is, so repeated calls are no-ops. An
    explicitly configured path is returned untouched.

    Raises:
        PathCreationError: If the app directory cannot be determined or created.
    """
    if config.database:
        return config

    app_dir = get_app_config_dir(user_config_dir, environ)
    try:
        ensure_directory(app_dir, mode=APP_DIR_MODE)
    except OSError as exc:
        raise PathCreationError(
            f"Failed to create app config dir: {app_dir}: {exc}",
            context={"path": str(app_dir)},
        ) from exc

    database = str(app_dir / DEFAULT_DATABASE_NAME)
    logger.debug("derived database path %s", database)
    sources = dict(config.sources)
    sources["database"] = "derived"
    return dataclasses.replace(config, database=database, sources=sources)


__all__ = ["DEFAULT_DATABASE_NAME", "resolve_database_path"]
