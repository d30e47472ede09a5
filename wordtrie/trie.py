"""Prefix trie over the uppercase alphabet with prefix word enumeration."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from wordtrie.constants import ALPHABET, ALPHABET_SIZE, ROOT_CHARACTER
from wordtrie.errors import EmptyWord, InvalidCharacter


def letter_indices(text: str) -> list[int]:
    """Child slot for each character of *text*.

    Raises InvalidCharacter on the first character outside A-Z, so callers
    can validate a whole word before touching the tree.
    """
    indices: list[int] = []
    for pos, ch in enumerate(text):
        idx = ALPHABET.find(ch)
        if idx < 0:
            raise InvalidCharacter(text, pos)
        indices.append(idx)
    return indices


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("character", "children", "is_terminal", "word")

    def __init__(self, character: str):
        self.character = character
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.is_terminal: bool = False
        self.word: str | None = None

    def child_nodes(self) -> Iterable[TrieNode]:
        """Existing children in alphabetical order."""
        return (child for child in self.children if child is not None)

    def __repr__(self) -> str:
        flag = "*" if self.is_terminal else ""
        return f"TrieNode({self.character!r}{flag})"


class Trie:
    """Prefix trie for word insertion and prefix queries.

    Only the letters A-Z are accepted; anything else raises InvalidCharacter
    before the tree is modified.  Words returned by :meth:`words_by_prefix`
    come out breadth-first: shorter words first, alphabetical within the
    same length.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self.root = TrieNode(ROOT_CHARACTER)
        self._size = 0
        if words is not None:
            for word in words:
                self.insert(word)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        return cls(words)

    def insert(self, word: str) -> None:
        if not word:
            raise EmptyWord()
        indices = letter_indices(word)

        node = self.root
        for ch, idx in zip(word, indices):
            child = node.children[idx]
            if child is None:
                child = TrieNode(ch)
                node.children[idx] = child
            node = child

        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        # Re-inserting the same word overwrites it (last write wins)
        node.word = word

    def words_by_prefix(self, prefix: str, limit: int | None = None) -> list[str]:
        """All stored words starting with *prefix*, or [] if there are none.

        *limit* keeps only the first ``limit`` words in traversal order.
        An empty prefix matches every word.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        node = self._walk(prefix)
        if node is None:
            return []

        words: list[str] = []
        queue: deque[TrieNode] = deque([node])
        while queue:
            if limit is not None and len(words) >= limit:
                break
            current = queue.popleft()
            if current.is_terminal:
                words.append(current.word)
            queue.extend(current.child_nodes())

        return words

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for idx in letter_indices(s):
            node = node.children[idx]
            if node is None:
                return None
        return node
