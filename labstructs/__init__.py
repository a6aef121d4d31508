"""Classic data structures, graph search, bubble-sort variants and small exercises."""

__version__ = "0.1.0"