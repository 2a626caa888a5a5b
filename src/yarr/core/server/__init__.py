"""Server handle construction and collaborator interfaces."""
from __future__ import annotations

from .models import ServerBuilder, ServerHandle, normalize_base_path
from .ports import Platform, Storage, StorageOpener

__all__ = [
    "Platform",
    "ServerBuilder",
    "ServerHandle",
    "Storage",
    "StorageOpener",
    "normalize_base_path",
]
