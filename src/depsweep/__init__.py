"""Find and remove regenerable dependency folders."""

__version__ = "0.1.0"
