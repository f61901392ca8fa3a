"""Small containers, wildcard matching, coloured logging, option parsing and terminal printing."""

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "cmdline",
    "dynarray",
    "fifo",
    "hashtable",
    "linkedlist",
    "log",
    "printing",
    "stack",
    "trie",
    "wildcard",
    "zstring",
]