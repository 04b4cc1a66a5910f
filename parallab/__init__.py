"""Sequential and thread-parallel graph traversal, sorting and reduction routines with benchmark commands."""

__version__ = "0.1.0"