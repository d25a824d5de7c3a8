"""In-memory lexicographic tree over a 28-symbol alphabet."""

from lextree.codec import ALPHABET, ALPHABET_SIZE, AlphabetCodec
from lextree.errors import InvalidCharacterError
from lextree.lexicographic_tree import InsertResult, LexicographicTree
from lextree.node import Node

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "AlphabetCodec",
    "InsertResult",
    "InvalidCharacterError",
    "LexicographicTree",
    "Node",
]
