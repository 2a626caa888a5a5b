"""Core configuration and bootstrap logic for yarr."""
