"""Mapping between accepted characters and dense child-array slots.

Slots follow ``ALPHABET``: ``a``..``z`` -> 0..25, ``-`` -> 26, ``'`` -> 27.
This is the enumeration order of every traversal, so hyphen and apostrophe
sort after ``z`` (not byte order).
"""

from lextree.errors import InvalidCharacterError

ALPHABET = "abcdefghijklmnopqrstuvwxyz-'"
ALPHABET_SIZE = len(ALPHABET)

_SLOTS = {ch: i for i, ch in enumerate(ALPHABET)}


class AlphabetCodec:
  """Stateless codec; all methods are O(1) per character."""

  @staticmethod
  def slot(ch):
    """Return the slot for `ch`, or None if it is not accepted."""
    return _SLOTS.get(ch)

  @staticmethod
  def index(ch):
    idx = _SLOTS.get(ch)
    if idx is None:
      raise InvalidCharacterError(ch)
    return idx

  @staticmethod
  def char(slot):
    if not 0 <= slot < ALPHABET_SIZE:
      raise IndexError(f"slot {slot} out of range [0, {ALPHABET_SIZE})")
    return ALPHABET[slot]

  @staticmethod
  def encode(word):
    """Validate `word` and return its list of slots.

    Raises
    ------
    InvalidCharacterError
        On the first character outside the alphabet, with its position.
    """
    slots = []
    for pos, ch in enumerate(word):
      idx = _SLOTS.get(ch)
      if idx is None:
        raise InvalidCharacterError(ch, word=word, position=pos)
      slots.append(idx)
    return slots

  @staticmethod
  def is_accepted(word):
    return all(ch in _SLOTS for ch in word)
