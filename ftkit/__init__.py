"""ASCII, byte-buffer and string helpers, a small printf and a buffered line reader."""

__version__ = "0.1.0"
__all__ = ["chars", "lines", "memory", "output", "printf", "strings", "text"]