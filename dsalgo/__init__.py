"""Classic data structures and algorithms: lists, trees, sorting, searching, heaps, deques, grids and puzzles."""

__version__ = "1.0.0"