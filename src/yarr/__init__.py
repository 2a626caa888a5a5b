"""
yarr - self-hosted feed reader

This package holds the configuration resolution and startup sequence that
bring a yarr server instance to a listening state.
"""

__version__ = "2.4"
__git_hash__ = "unknown"
__all__ = ["__version__", "__git_hash__"]
