"""Shared utilities for yarr core modules."""
