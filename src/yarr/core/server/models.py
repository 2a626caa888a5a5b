"""Server handle and its builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from yarr.core.config.models import Credential, TLSMaterial

from .ports import Storage


def normalize_base_path(value: str) -> str:
    """Return ``value`` as a single-leading-slash prefix, or "" for no prefix.

    >>> normalize_base_path("/foo/")
    '/foo'
    >>> normalize_base_path("foo")
    '/foo'
    """
    trimmed = value.strip("/")
    if not trimmed:
        return ""
    return "/" + trimmed


@dataclass(frozen=True)
class ServerHandle:
    storage: Storage
    address: str
    base_path: str = ""
    tls: Optional[TLSMaterial] = None
    credential: Optional[Credential] = None

    @property
    def effective_address(self) -> str:
        """URL the server is reachable at, including scheme and base path."""
        scheme = "https" if self.tls is not None else "http"
        return f"{scheme}://{self.address}{self.base_path}"


class ServerBuilder:
    """Collect optional server settings, then produce an immutable ServerHandle.

    Optional settings are applied only when present: an empty base path,
    disabled TLS material or an empty credential leave the handle unchanged.
    """

    def __init__(self, storage: Storage, address: str) -> None:
        self._storage = storage
        self._address = address
        self._base_path = ""
        self._tls: Optional[TLSMaterial] = None
        self._credential: Optional[Credential] = None

    def with_base_path(self, base_path: str) -> "ServerBuilder":
        if base_path:
            self._base_path = normalize_base_path(base_path)
        return self

    def with_tls(self, tls: Optional[TLSMaterial]) -> "ServerBuilder":
        if tls is not None and tls.enabled:
            self._tls = tls
        return self

    def with_credential(self, credential: Optional[Credential]) -> "ServerBuilder":
        if credential:
            self._credential = credential
        return self

    def build(self) -> ServerHandle:
        return ServerHandle(
            storage=self._storage,
            address=self._address,
            base_path=self._base_path,
            tls=self._tls,
            credential=self._credential,
        )


__all__ = ["ServerBuilder", "ServerHandle", "normalize_base_path"]
