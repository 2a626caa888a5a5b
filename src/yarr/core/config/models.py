"""Structured configuration records produced during bootstrap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class ResolvedConfig:
    """Merged runtime configuration, one value per declared option.

    ``sources`` maps each option name to the source that supplied it
    (``flag``, ``env``, ``file``, ``default`` or ``derived``).
    """

    address: str
    auth_file: str = ""
    base_path: str = ""
    cert_file: str = ""
    key_file: str = ""
    database: str = ""
    log_path: str = ""
    open_browser: bool = False
    config_file: str = ""
    sources: Dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Credential:
    username: str = ""
    password: str = ""

    @classmethod
    def empty(cls) -> "Credential":
        return cls()

    def __bool__(self) -> bool:
        return bool(self.username and self.password)


@dataclass(frozen=True)
class TLSMaterial:
    cert_file: str = ""
    key_file: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.cert_file and self.key_file)


__all__ = ["ResolvedConfig", "Credential", "TLSMaterial"]
