"""Alphabet and loader constants for wordtrie."""

from __future__ import annotations

import string

# Trie alphabet: uppercase A-Z, one child slot per letter
ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)  # 26

# Character held by the root node, which stands for no letter at all
ROOT_CHARACTER = " "

# Word list fetched when no --source is given
DEFAULT_SOURCE_URL = "https://mcs.msudenver.edu/~gordon/cs4050/hw/words"

DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_ENCODING = "utf-8"

# Schemes handed to urllib; anything else is opened as a local path
URL_SCHEMES = ("http://", "https://", "file://")
