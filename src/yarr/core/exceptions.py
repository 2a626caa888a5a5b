from __future__ import annotations

from typing import Any, Dict, Mapping


class YarrError(Exception):
    """Base exception for yarr startup failures.

    Every subclass is fatal during bootstrap: it propagates up to the CLI
    entry point, which reports it and exits non-zero.
    """

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigParseError(YarrError, ValueError):
    """Raised when a config file or environment value cannot be parsed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigFileIOError(YarrError, OSError):
    """Raised when an existing config file cannot be read."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class PathCreationError(YarrError, OSError):
    """Raised when the application state directory cannot be located or created."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class AuthFormatError(YarrError, ValueError):
    """Raised when the auth file does not hold a single `username:password` line."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class AuthFileIOError(YarrError, OSError):
    """Raised when the auth file cannot be opened."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class TLSPairingError(YarrError, ValueError):
    """Raised when only one of the certificate and key files is configured."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class StorageOpenError(YarrError, RuntimeError):
    """Raised when the storage engine fails to open the database file."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class LogSinkError(YarrError, OSError):
    """Raised when the configured log file cannot be opened."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class ServerStartError(YarrError, RuntimeError):
    """Raised by the platform start routine when the listener cannot be set up."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        YarrError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


__all__ = [
    "YarrError",
    "ConfigParseError",
    "ConfigFileIOError",
    "PathCreationError",
    "AuthFormatError",
    "AuthFileIOError",
    "TLSPairingError",
    "StorageOpenError",
    "LogSinkError",
    "ServerStartError",
]
