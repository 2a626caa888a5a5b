"""Collaborator interfaces the bootstrap sequence depends on.

Storage, HTTP serving and desktop integration live outside the core; the
core only needs these narrow shapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import ServerHandle


@runtime_checkable
class Storage(Protocol):
    def close(self) -> None:
        ...


StorageOpener = Callable[[str], Storage]


@runtime_checkable
class Platform(Protocol):
    def open_browser(self, address: str) -> None:
        ...

    def start(self, handle: "ServerHandle") -> None:
        """Serve ``handle`` until the process is asked to stop."""
        ...


__all__ = ["Platform", "Storage", "StorageOpener"]
