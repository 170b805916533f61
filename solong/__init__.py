"""XPM image reading, named colours, and C-style string, character, line and output helpers."""

__version__ = "1.0.0"