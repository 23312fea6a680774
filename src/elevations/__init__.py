"""Elevation configuration, code generation and BOM matching."""

__version__ = "1.0.0"
