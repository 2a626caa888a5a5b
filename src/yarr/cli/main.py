"""
yarr command-line entry point.

Runs the bootstrap sequence with the default collaborators and turns any
startup failure into a logged message and a non-zero exit status.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from yarr.adapters.platform import DesktopPlatform
from yarr.adapters.storage import SqliteStorage
from yarr.core.bootstrap import Bootstrapper
from yarr.core.exceptions import YarrError

logger = logging.getLogger("yarr")


def build_bootstrapper() -> Bootstrapper:
    return Bootstrapper(storage_opener=SqliteStorage.open, platform=DesktopPlatform())


def report_fatal(bootstrapper: Bootstrapper, error: YarrError) -> None:
    """Send a fatal error to the log sink, or to stderr before one exists."""
    if bootstrapper.log_sink is not None:
        logger.critical("%s", error)
    else:
        print(f"Error: {error}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None, bootstrapper: Optional[Bootstrapper] = None) -> int:
    """
    Main entry point for the yarr CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        bootstrapper: Preconfigured bootstrapper (defaults to SQLite + desktop platform)

    Returns:
        Exit code (0 for success, 1 for startup failures)
    """
    if argv is None:
        argv = sys.argv[1:]

    bootstrapper = bootstrapper or build_bootstrapper()
    try:
        return bootstrapper.run(argv)
    except YarrError as e:
        report_fatal(bootstrapper, e)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
