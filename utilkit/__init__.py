"""Colour tables, file slices, an in-memory pixel buffer with window style bits, and a message dispatcher."""

__version__ = "0.1.0"
__all__ = ["colortable", "fileslice", "screen", "systems"]