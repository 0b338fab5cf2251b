"""Sort integers with two stacks and a fixed set of moves, and report the moves."""

__version__ = "0.1.0"
__all__ = ["stacks", "small_sort", "chunk_sort", "cli"]