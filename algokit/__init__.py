"""Algorithm exercises on arrays, binary search and singly linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "binarysearch", "linkedlists"]