"""Auth file loading.

The auth file holds a single ``username:password`` pair on its first line;
any further lines are ignored.
"""

from __future__ import annotations

import logging

from yarr.core.config.models import Credential
from yarr.core.exceptions import AuthFileIOError, AuthFormatError
from yarr.core.utils.io import PathLike, read_first_line

logger = logging.getLogger(__name__)


def parse_credential_line(line: str) -> Credential:
    """Split a ``username:password`` line into a Credential.

    Raises:
        AuthFormatError: Unless the line has exactly two non-empty colon-separated parts.
    """
    parts = line.split(":")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise AuthFormatError(
            f"Invalid auth: {line} (expected `username:password`)",
            context={"line": line},
        )
    return Credential(username=parts[0], password=parts[1])


def load_credentials(path: PathLike | None) -> Credential:
    """Load the credential pair from ``path``.

    An empty or unset path disables authentication without touching the
    filesystem.

    Raises:
        AuthFileIOError: If the file cannot be opened or read.
        AuthFormatError: If the first line is missing or malformed.
    """
    if not path:
        return Credential.empty()

    try:
        line = read_first_line(path)
    except OSError as exc:
        raise AuthFileIOError(
            f"Failed to open auth file: {exc}",
            context={"path": str(path)},
        ) from exc
    except UnicodeDecodeError as exc:
        raise AuthFormatError(
            f"Invalid auth file {path}: not valid UTF-8 text",
            context={"path": str(path)},
        ) from exc

    if line is None:
        raise AuthFormatError(
            f"Invalid auth file {path}: file is empty (expected `username:password`)",
            context={"path": str(path)},
        )

    credential = parse_credential_line(line)
    logger.debug("loaded credentials for user %s from %s", credential.username, path)
    return credential


__all__ = ["load_credentials", "parse_credential_line"]
