"""Core I/O utilities for yarr.

Small, explicit file access helpers shared by the config, auth and path
modules. Callers translate the raised ``OSError`` into their own error types.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def ensure_directory(path: PathLike, mode: int = 0o755) -> Path:
    """Ensure a directory exists, creating it and any missing ancestors.

    Args:
        path: Directory path to check/create
        mode: Permission bits for the created leaf directory

    Returns:
        Path: The directory path (guaranteed to exist)

    Raises:
        NotADirectoryError: If path exists but is not a directory
        OSError: If directory creation fails

    Examples:
        >>> state_dir = ensure_directory(Path("~/.config/yarr").expanduser())
        >>> assert state_dir.is_dir()
    """
    path = Path(path)

    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {path}")
        return path

    path.mkdir(mode=mode, parents=True, exist_ok=True)
    return path


def read_first_line(path: PathLike) -> Optional[str]:
    """Return the first line of a text file without its line terminator.

    Only the first line is read; the rest of the file is never consumed.
    Returns None when the file is empty.
    """
    with open(path, "r", encoding="utf-8") as f:
        line = f.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


__all__ = ["PathLike", "ensure_directory", "read_first_line"]
