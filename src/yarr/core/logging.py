"""Process log sink.

The sink is an explicit handle owned by whoever bootstraps the process,
rather than hidden module state, so tests can hand in an in-memory stream.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from yarr.core.exceptions import LogSinkError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ROOT_LOGGER_NAME = "yarr"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


@dataclass
class LogSink:
    """A configured log destination: an append-mode file or a stream."""

    handler: logging.Handler
    path: Optional[Path] = None
    _loggers: list = field(default_factory=list, repr=False)

    def install(self, logger: Optional[logging.Logger] = None) -> logging.Logger:
        """Attach the sink to ``logger`` (default: the ``yarr`` logger).

        Any other LogSink handler already on that logger is detached first,
        so a logger only ever writes to one sink.
        """
        target = logger or logging.getLogger(ROOT_LOGGER_NAME)
        for h in list(target.handlers):
            if getattr(h, "_yarr_sink", False) and h is not self.handler:
                target.removeHandler(h)
        if self.handler not in target.handlers:
            target.addHandler(self.handler)
        target.setLevel(self.handler.level)
        self._loggers.append(target)
        return target

    def close(self) -> None:
        """Detach from every logger it was installed on and close the handler."""
        for target in self._loggers:
            target.removeHandler(self.handler)
        self._loggers.clear()
        self.handler.close()


def open_log_sink(
    log_path: str = "",
    *,
    stream: Optional[TextIO] = None,
    level: str = "INFO",
) -> LogSink:
    """Create the process log sink.

    With ``log_path`` set, log records are appended to that file (created if
    absent). The file stays open for the life of the sink. Otherwise records
    go to ``stream``, defaulting to stdout.

    Raises:
        LogSinkError: If the log file cannot be opened.
    """
    handler: logging.Handler
    path: Optional[Path] = None
    if log_path:
        path = Path(log_path)
        try:
            handler = logging.FileHandler(str(path), mode="a", encoding="utf-8")
        except OSError as exc:
            raise LogSinkError(
                f"Failed to open log file {path}: {exc}",
                context={"path": str(path)},
            ) from exc
    else:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)

    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._yarr_sink = True  # type: ignore[attr-defined]
    return LogSink(handler=handler, path=path)


__all__ = ["LOG_FORMAT", "LogSink", "open_log_sink"]
