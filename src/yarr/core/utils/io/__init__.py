"""I/O utilities for yarr.

- Core: directory management, first-line text reads
- YAML: config document parsing
"""
from __future__ import annotations

from .core import (
    PathLike,
    ensure_directory,
    read_first_line,
)
from .yaml import (
    read_yaml,
)

__all__ = [
    "PathLike",
    "ensure_directory",
    "read_first_line",
    "read_yaml",
]
