"""Small examples: shapes, bounded linked lists, binary search and a user record."""

__version__ = "0.1.0"
__all__ = ["basics", "binary_search", "linked_list", "shapes"]