"""Declared configuration options.

Each option is declared once with its command-line flags, environment
variable names, config-file key, default and help text. Nothing here
validates values; the declarations only describe where a value may come from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Tuple

OptionKind = Literal["str", "bool"]

ENV_PREFIX = "YARR_"
CONFIG_FILE_NAME = "yarr.yaml"


@dataclass(frozen=True)
class OptionSpec:
    name: str
    flags: Tuple[str, ...]
    env: Tuple[str, ...]
    file_key: str
    default: Any
    help: str
    kind: OptionKind = "str"
    metavar: str | None = None

    @property
    def env_names(self) -> Tuple[str, ...]:
        """Environment variable names, highest priority first."""
        return tuple(f"{ENV_PREFIX}{suffix}" for suffix in self.env)


# Order matches the --help listing. Single-dash flags keep older command
# lines working. Env names: the flag-mirroring name first, then the
# field-style alias older deployments use.
OPTIONS: Tuple[OptionSpec, ...] = (
    OptionSpec(
        name="address",
        flags=("--addr", "--address", "-addr"),
        env=("ADDR", "ADDRESS"),
        file_key="addr",
        default="127.0.0.1:7070",
        help="address to run server on",
        metavar="HOST:PORT",
    ),
    OptionSpec(
        name="auth_file",
        flags=("--auth-file", "-auth-file"),
        env=("AUTH_FILE", "AUTHFILE"),
        file_key="auth-file",
        default="",
        help="path to a file containing username:password",
        metavar="PATH",
    ),
    OptionSpec(
        name="base_path",
        flags=("--base", "-base"),
        env=("BASE", "BASEPATH"),
        file_key="base",
        default="",
        help="base path of the service url",
        metavar="PATH",
    ),
    OptionSpec(
        name="cert_file",
        flags=("--cert-file", "-cert-file"),
        env=("CERT_FILE", "CERTFILE"),
        file_key="cert-file",
        default="",
        help="path to cert file for https",
        metavar="PATH",
    ),
    OptionSpec(
        name="key_file",
        flags=("--key-file", "-key-file"),
        env=("KEY_FILE", "KEYFILE"),
        file_key="key-file",
        default="",
        help="path to key file for https",
        metavar="PATH",
    ),
    OptionSpec(
        name="database",
        flags=("--db", "-db"),
        env=("DB", "DATABASE"),
        file_key="db",
        default="",
        help="storage file path",
        metavar="PATH",
    ),
    OptionSpec(
        name="log_path",
        flags=("--log", "-log"),
        env=("LOG", "LOGPATH"),
        file_key="log",
        default="",
        help="log path",
        metavar="PATH",
    ),
    OptionSpec(
        name="open_browser",
        flags=("--open", "-open"),
        env=("OPEN", "OPENBROWSER"),
        file_key="open",
        default=False,
        help="open the server in browser",
        kind="bool",
    ),
)


def get_option(name: str) -> OptionSpec:
    for opt in OPTIONS:
        if opt.name == name:
            return opt
    raise KeyError(name)


__all__ = [
    "CONFIG_FILE_NAME",
    "ENV_PREFIX",
    "OPTIONS",
    "OptionKind",
    "OptionSpec",
    "get_option",
]
