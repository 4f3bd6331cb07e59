"""Character, byte-buffer and string helpers, stream writers and a printf-style formatter."""

__version__ = "1.0.0"
__all__ = ["__version__"]