"""
Single vertex of the lexicographic tree.

Key design choices
------------------
- **Memory:** `Node` uses `__slots__` and a *lazy* child array (`children=None`
  until the first child is added). Leaves, which are the bulk of a dictionary
  tree, never pay for the 28-slot array.
- **Dense slots:** once allocated, `children` has exactly `ALPHABET_SIZE`
  entries indexed by `AlphabetCodec`; `None` marks an absent child.
- **Ownership:** a node is referenced only by its parent's array. There are
  no back references, and nodes are never re-attached, so the structure is
  acyclic.
"""

from lextree.codec import ALPHABET, ALPHABET_SIZE, AlphabetCodec


class Node:
  __slots__ = ("letter", "children", "_end_word")

  def __init__(self, letter=""):
    self.letter = letter
    self.children = None
    self._end_word = False

  @property
  def is_end_word(self):
    return self._end_word

  def child(self, ch):
    """Return the child reached by `ch`, or None.

    Unaccepted characters simply have no child; this never raises.
    """
    children = self.children
    if children is None:
      return None
    idx = AlphabetCodec.slot(ch)
    if idx is None:
      return None
    return children[idx]

  def ensure_child(self, ch):
    """Return the child for `ch`, creating it (and the array) if missing.

    Idempotent: repeated calls with the same character return the same node.

    Raises
    ------
    InvalidCharacterError
        If `ch` is not in the alphabet.
    """
    idx = AlphabetCodec.index(ch)
    children = self.children
    if children is None:
      children = self.children = [None] * ALPHABET_SIZE
    nxt = children[idx]
    if nxt is None:
      nxt = children[idx] = Node(ch)
    return nxt

  def mark_end_word(self):
    """Flag this node as a word end. Returns True only on the transition."""
    if self._end_word:
      return False
    self._end_word = True
    return True

  def iter_children(self):
    """Yield `(letter, child)` pairs in ascending slot order."""
    children = self.children
    if children is None:
      return
    for idx, nxt in enumerate(children):
      if nxt is not None:
        yield ALPHABET[idx], nxt

  def __repr__(self):
    letters = "".join(ch for ch, _ in self.iter_children())
    return f"Node(letter={self.letter!r}, end_word={self._end_word}, children={letters!r})"
