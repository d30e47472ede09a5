"""Exceptions raised by wordtrie."""

from __future__ import annotations


class TrieError(Exception):
    """Base class for all wordtrie errors."""


class InvalidCharacter(TrieError, ValueError):
    """A word or prefix contains a character outside A-Z."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        self.character = text[position]
        super().__init__(
            f"invalid character {self.character!r} at position {position} in {text!r} "
            f"(expected A-Z)"
        )


class EmptyWord(TrieError, ValueError):
    """Raised when inserting an empty string."""

    def __init__(self):
        super().__init__("cannot insert an empty word")


class SourceReadError(TrieError):
    """The word source could not be opened, or a read failed part way through."""

    def __init__(self, source: str, lines_read: int, reason: BaseException | str):
        self.source = source
        self.lines_read = lines_read
        self.reason = reason
        super().__init__(f"could not read {source} after {lines_read} line(s): {reason}")
