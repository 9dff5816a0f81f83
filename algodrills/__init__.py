"""Solutions to classic array, string, arithmetic, linked-list and binary-tree exercises."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "linked_list", "strings", "tree"]