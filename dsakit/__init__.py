"""Classic data structures and algorithms: elementary sorts, a binary search tree, a doubly linked list, a linear-probing hash table, value counting and anagram checks."""

__version__ = "0.1.0"
__all__ = ["anagram", "bst", "frequency", "hash_table", "linked_list", "sorting"]