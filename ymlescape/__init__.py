"""Backslash escaping for strings embedded in YAML documents."""

__version__ = "0.1.0"
__all__ = ["escape"]