"""
yarr configuration resolution (flags, environment, YAML file, defaults).
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from yarr.core.exceptions import ConfigFileIOError, ConfigParseError, PathCreationError
from yarr.core.schemas import SchemaValidationError, validate_payload
from yarr.core.utils.io import read_yaml
from yarr.core.utils.paths import get_app_config_dir

from .models import ResolvedConfig
from .options import CONFIG_FILE_NAME, OPTIONS, OptionSpec

logger = logging.getLogger(__name__)

CONFIG_SCHEMA = "config.schema.yaml"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"", "0", "false", "no", "off"}


def default_search_paths(
    cwd: Optional[Path] = None,
    user_config_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> List[Path]:
    """Return config file candidates, highest priority first.

    The user config directory is skipped when it cannot be determined; a
    missing config file is never an error.
    """
    paths = [Path(cwd or Path.cwd()) / CONFIG_FILE_NAME]
    try:
        paths.append(get_app_config_dir(user_config_dir, environ) / CONFIG_FILE_NAME)
    except PathCreationError as exc:
        logger.debug("skipping user config file lookup: %s", exc)
    return paths


class ConfigManager:
    """Merge yarr configuration into a single ResolvedConfig.

    Configuration sources (highest to lowest priority):
    1. Command-line flags
    2. Environment variables: YARR_*
    3. Config file: ./yarr.yaml, else <user-config-dir>/yarr/yarr.yaml
    4. Declared defaults

    For each option the highest-priority source that supplied a value wins.
    Absence defers to the next source; an empty string does not.
    """

    def __init__(
        self,
        *,
        environ: Optional[Mapping[str, str]] = None,
        search_paths: Optional[Iterable[Path]] = None,
        options: Tuple[OptionSpec, ...] = OPTIONS,
    ) -> None:
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        if search_paths is None:
            search_paths = default_search_paths(environ=environ)
        self.search_paths: List[Path] = [Path(p) for p in search_paths]
        self.options = options

    # ========== Config File ==========

    def find_config_file(self) -> Optional[Path]:
        """Return the first existing config file on the search path, if any."""
        for candidate in self.search_paths:
            try:
                if candidate.is_file():
                    return candidate
            except OSError as exc:
                raise ConfigFileIOError(
                    f"Failed to read config file {candidate}: {exc}",
                    context={"path": str(candidate)},
                ) from exc
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ConfigParseError(
                f"Failed to parse config file {path}: {exc}",
                context={"path": str(path)},
            ) from exc
        except OSError as exc:
            raise ConfigFileIOError(
                f"Failed to read config file {path}: {exc}",
                context={"path": str(path)},
            ) from exc

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Failed to parse config file {path}: expected a mapping at top level, "
                f"got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def validate_schema(self, data: Dict[str, Any], path: Path) -> None:
        try:
            validate_payload(data, CONFIG_SCHEMA)
        except SchemaValidationError as exc:
            raise ConfigParseError(
                f"Invalid config file {path}: {exc}",
                context={"path": str(path), "errors": exc.errors},
            ) from exc

    def load_file_values(self) -> Tuple[Dict[str, Any], Optional[Path]]:
        """Load option values from the config file, keyed by option name."""
        path = self.find_config_file()
        if path is None:
            return {}, None

        data = self.load_yaml(path)
        self.validate_schema(data, path)

        values: Dict[str, Any] = {}
        for opt in self.options:
            if opt.file_key in data:
                values[opt.name] = data[opt.file_key]
        logger.debug("loaded config file %s (%d keys)", path, len(values))
        return values, path

    # ========== Environment ==========

    def _as_bool(self, value: str, *, source: str) -> bool:
        low = value.strip().lower()
        if low in _TRUE_WORDS:
            return True
        if low in _FALSE_WORDS:
            return False
        raise ConfigParseError(
            f"Invalid boolean value {value!r} for {source} (expected true/false)",
            context={"source": source, "value": value},
        )

    def _coerce(self, opt: OptionSpec, value: Any, *, source: str) -> Any:
        if opt.kind == "bool":
            if isinstance(value, bool):
                return value
            return self._as_bool(str(value), source=source)
        return str(value)

    def env_values(self) -> Dict[str, Any]:
        """Collect option values from YARR_* environment variables."""
        values: Dict[str, Any] = {}
        for opt in self.options:
            for env_name in opt.env_names:
                if env_name in self.environ:
                    values[opt.name] = self._coerce(opt, self.environ[env_name], source=env_name)
                    break
        return values

    # ========== Merge ==========

    def resolve(self, flags: Optional[Mapping[str, Any]] = None) -> ResolvedConfig:
        """Merge every source into a ResolvedConfig.

        Args:
            flags: Option values supplied on the command line, keyed by option
                name. Options that were not passed must be absent.

        Raises:
            ConfigParseError: On malformed environment values or config file content.
            ConfigFileIOError: When an existing config file cannot be read.
        """
        flag_values = dict(flags or {})
        env_values = self.env_values()
        file_values, config_path = self.load_file_values()

        layers = (
            ("flag", flag_values),
            ("env", env_values),
            ("file", file_values),
        )

        resolved: Dict[str, Any] = {}
        sources: Dict[str, str] = {}
        for opt in self.options:
            resolved[opt.name] = opt.default
            sources[opt.name] = "default"
            for source, values in layers:
                if opt.name in values:
                    label = opt.flags[0] if source == "flag" else source
                    resolved[opt.name] = self._coerce(opt, values[opt.name], source=label)
                    sources[opt.name] = source
                    break

        return ResolvedConfig(
            **resolved,
            config_file=str(config_path) if config_path else "",
            sources=sources,
        )


__all__ = ["ConfigManager", "default_search_paths", "CONFIG_SCHEMA"]
