"""Classic data structures and algorithms: linked lists, stacks, queues, a binary search tree, a graph, a hash table, sorting and searching."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "doubly_linked",
    "graph",
    "hashtable",
    "queue_list",
    "searching",
    "singly_linked",
    "sorting",
    "stack",
]