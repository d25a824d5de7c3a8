"""Errors raised by the lexicographic tree."""


class InvalidCharacterError(ValueError):
  """A word contains a character outside the accepted alphabet.

  `position` is the index of the offending character inside `word`, or None
  when the character was checked on its own.
  """

  def __init__(self, char, word=None, position=None):
    self.char = char
    self.word = word
    self.position = position
    if word is None:
      msg = f"invalid character {char!r}"
    else:
      msg = f"invalid character {char!r} at position {position} in {word!r}"
    super().__init__(msg)
