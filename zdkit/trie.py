"""A prefix tree over lower-case ASCII words that counts insertions."""

from __future__ import annotations

from typing import Dict

ALPHABET_SIZE = 26


def _slot(char: str) -> int:
    index = ord(char) - ord("a")
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"character {char!r} is outside 'a'..'z'")
    return index


class TrieNode:
    """One node of a trie; the root is simply a node with no parent.

    ``count`` is how many times a word ending at this node was inserted,
    and ``is_end`` tells whether any word ends here.
    """

    def __init__(self) -> None:
        self.children: Dict[int, TrieNode] = {}
        self.is_end = False
        self.count = 0

    def __repr__(self) -> str:
        return f"TrieNode(is_end={self.is_end}, count={self.count})"

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word`` below this node."""
        indexes = [_slot(char) for char in word]
        node = self
        for index in indexes:
            node = node.children.setdefault(index, TrieNode())
        node.is_end = True
        node.count += 1

    def search(self, word: str) -> int:
        """Return how many times ``word`` was inserted; 0 if never."""
        node = self
        for char in word:
            child = node.children.get(_slot(char))
            if child is None:
                return 0
            node = child
        return node.count