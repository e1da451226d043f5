"""Four small lexers for a toy C-like language."""

__version__ = "0.1.0"