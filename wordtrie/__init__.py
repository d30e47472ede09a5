"""Prefix trie with a word list loader."""

from wordtrie.constants import ALPHABET, DEFAULT_SOURCE_URL
from wordtrie.errors import EmptyWord, InvalidCharacter, SourceReadError, TrieError
from wordtrie.loader import LoadReport, WordLoader, load_trie
from wordtrie.trie import Trie, TrieNode

__all__ = [
    "ALPHABET",
    "DEFAULT_SOURCE_URL",
    "EmptyWord",
    "InvalidCharacter",
    "LoadReport",
    "SourceReadError",
    "Trie",
    "TrieError",
    "TrieNode",
    "WordLoader",
    "load_trie",
]
