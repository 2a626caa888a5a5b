"""Test helper modules for the yarr test suite.

- fakes: in-memory stand-ins for the storage and platform collaborators
- io_utils: helpers for writing config and auth files
"""
from __future__ import annotations
