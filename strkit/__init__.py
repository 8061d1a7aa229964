"""C-style string and memory routines with a small printf-style formatter."""

__version__ = "0.1.0"

__all__ = ["edit", "format_spec", "formatting", "memory", "search"]