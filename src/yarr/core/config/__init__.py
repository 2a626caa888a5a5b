"""yarr configuration system.

Usage:
    from yarr.core.config import ConfigManager

    manager = ConfigManager()
    config = manager.resolve({"address": "0.0.0.0:9000"})
"""
from __future__ import annotations

from .arguments import build_parser, parse_flags
from .manager import ConfigManager, default_search_paths
from .models import Credential, ResolvedConfig, TLSMaterial
from .options import CONFIG_FILE_NAME, ENV_PREFIX, OPTIONS, OptionSpec, get_option
from .validation import validate_config, validate_tls_pairing

__all__ = [
    # Core
    "ConfigManager",
    "default_search_paths",
    # Command line
    "build_parser",
    "parse_flags",
    # Records
    "Credential",
    "ResolvedConfig",
    "TLSMaterial",
    # Declarations
    "CONFIG_FILE_NAME",
    "ENV_PREFIX",
    "OPTIONS",
    "OptionSpec",
    "get_option",
    # Validation
    "validate_config",
    "validate_tls_pairing",
]
