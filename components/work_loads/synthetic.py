"""Synthetic words for capacity probing.

`number_to_word` spells a number in base `radix` using the first `radix`
letters, so consecutive numbers fill the tree breadth first:
0 -> "a", 1 -> "b", ..., 12 -> "m", 13 -> "ba", ...
"""

from lextree import ALPHABET


def number_to_word(number, radix=13):
  if number < 0:
    raise ValueError("number must be non-negative")
  if not 2 <= radix <= 26:
    raise ValueError("radix must be between 2 and 26")
  chars = []
  while True:
    number, digit = divmod(number, radix)
    chars.append(ALPHABET[digit])
    if number == 0:
      break
  return "".join(reversed(chars))


def synthetic_words(count, radix=13, start=0):
  """Yield `count` consecutive synthetic words starting at `start`."""
  if count < 0:
    raise ValueError("count must be non-negative")
  for n in range(start, start + count):
    yield number_to_word(n, radix)
