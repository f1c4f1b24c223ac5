"""Classic algorithm drills on linked lists, trees, sequences, grids, heaps and strings."""

__version__ = "0.1.0"

__all__ = ["arrays", "backtracking", "graphs", "heaps", "linked_list", "strings", "trees"]