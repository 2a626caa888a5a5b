"""Command-line registration for the declared options."""

from __future__ import annotations

import argparse
from typing import Any, Dict, Optional, Sequence

from .options import OPTIONS, OptionSpec

PROG = "yarr"
DESCRIPTION = "yarr - yet another rss reader"


def _get_version() -> str:
    from yarr import __git_hash__, __version__

    return f"v{__version__} ({__git_hash__})"


def add_option(parser: argparse.ArgumentParser, opt: OptionSpec) -> None:
    """Register one option.

    Defaults are suppressed so the namespace only carries flags that were
    actually passed; declared defaults are applied later by the merger.
    Bool options take an optional value (`--open=false`) so a flag can
    switch off what the environment or config file switched on.
    """
    if opt.kind == "bool":
        parser.add_argument(
            *opt.flags,
            dest=opt.name,
            nargs="?",
            const=True,
            default=argparse.SUPPRESS,
            metavar=opt.metavar or "BOOL",
            help=f"{opt.help}; a bare flag means true (default: {str(opt.default).lower()})",
        )
        return

    default_text = opt.default if opt.default else "none"
    parser.add_argument(
        *opt.flags,
        dest=opt.name,
        default=argparse.SUPPRESS,
        metavar=opt.metavar,
        help=f"{opt.help} (default: {default_text})",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the yarr argument parser.

    ``--version`` and ``--help`` print and exit with status 0 while parsing,
    before anything else runs.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog="Every option can also be set via YARR_* environment variables or yarr.yaml.",
    )
    for opt in OPTIONS:
        add_option(parser, opt)
    parser.add_argument(
        "--version",
        "-version",
        action="version",
        version=_get_version(),
        help="print application version",
    )
    return parser


def parse_flags(
    argv: Optional[Sequence[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> Dict[str, Any]:
    """Parse ``argv`` and return only the options that were passed."""
    parser = parser or build_parser()
    namespace = parser.parse_args(argv)
    return dict(vars(namespace))


__all__ = ["add_option", "build_parser", "parse_flags"]
