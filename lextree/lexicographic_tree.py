"""
Lexicographic tree (character-per-edge trie) over a fixed 28-symbol alphabet.

This module provides the dictionary index used by the loader, the benchmark
and the dashboard. Words are made of ``a``-``z``, ``-`` and ``'``; anything
else is rejected at insertion time.

Key design choices
------------------
- **Dense child slots:** `Node` holds a lazily allocated 28-slot array indexed
  by `AlphabetCodec`, giving O(1) child lookup and a fixed enumeration order.
- **Cached size:** `size()` is a counter updated only when
  `Node.mark_end_word` reports a real transition, so duplicates never
  double-count.
- **Validate-then-mutate:** `insert` encodes the whole word before touching
  the tree, so a rejected word leaves no partial path behind.
- **Iterative traversals:** enumeration uses an explicit stack and a shared
  character buffer, so long words are not bound by the recursion limit.


Classes
-------
InsertResult
    Outcome of a successful insertion: `INSERTED` or `ALREADY_PRESENT`.
LexicographicTree
    Public API for insert, membership, prefix enumeration and length queries.


Complexity (typical)
--------------------
- insert / contains: O(L)
- get_words(prefix): O(L + nodes in the prefix subtree)
- get_words_of_length(n): O(nodes at depth <= n)


Conventions & Notes
-------------------
- **Enumeration order:** children are visited in ascending slot order and a
  word is emitted before its extensions, so results are sorted under the codec
  ordering (``a`` < ... < ``z`` < ``-`` < ``'``).
- **Queries never raise:** an unknown character has no child, so `contains`
  returns False and enumeration returns an empty list.
- **Empty string:** `insert("")` marks the root and counts as a word.
  `get_words("")` yields it first; `get_words_of_length(0)` does not.
- **Threading:** single writer. Finish all `insert` calls before readers
  attach; after that any number of threads may read concurrently since read
  paths never mutate. Interleaving inserts with unsynchronized reads is
  undefined behavior.
"""

from enum import Enum
from itertools import islice

from lextree.codec import AlphabetCodec
from lextree.node import Node


class InsertResult(Enum):
  INSERTED = "inserted"
  ALREADY_PRESENT = "already_present"


class LexicographicTree:
  __slots__ = ("root", "_size")

  def __init__(self, words=None):
    self.root = Node()
    self._size = 0
    if words is not None:
      self.batch_insert(words)

  def size(self):
    """Number of distinct words stored. O(1)."""
    return self._size

  def __len__(self):
    return self._size

  def __contains__(self, word):
    return self.contains(word)

  def __iter__(self):
    return self.iter_words("")

  def __repr__(self):
    return f"LexicographicTree(size={self._size})"


  def insert(self, word):
    """Insert a single word.

    Parameters
    ----------
    word : str
        Word made only of accepted characters. ``""`` marks the root.

    Returns
    -------
    InsertResult
        `INSERTED` if the word is new, `ALREADY_PRESENT` otherwise.

    Raises
    ------
    InvalidCharacterError
        If any character is outside the alphabet. The tree is unchanged.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(word).
    """
    AlphabetCodec.encode(word)
    node = self.root
    for ch in word:
      node = node.ensure_child(ch)
    return self._mark(node)


  def batch_insert(self, words):
    """Insert many words, reusing the path shared with the previous word.

    Parameters
    ----------
    words : Iterable[str]
        Words to insert, in any order. Sorted input shares the most prefix
        work between neighbours.

    Returns
    -------
    tuple[int, int]
        (inserted_count, already_present_count)

    Notes
    -----
    - Each word is validated before it is walked, so every word is inserted
      atomically.
    - The first invalid word raises `InvalidCharacterError`; words before it
      stay inserted.
    """
    inserted = 0
    present = 0

    prev = ""
    path = [self.root]

    for w in words:
      AlphabetCodec.encode(w)

      lp, lw = len(prev), len(w)
      i = 0
      while i < lp and i < lw and prev[i] == w[i]:
        i += 1

      del path[i + 1:]
      node = path[-1]
      for ch in w[i:]:
        node = node.ensure_child(ch)
        path.append(node)

      if self._mark(node) is InsertResult.INSERTED:
        inserted += 1
      else:
        present += 1
      prev = w
    return inserted, present


  def _mark(self, node):
    if node.mark_end_word():
      self._size += 1
      return InsertResult.INSERTED
    return InsertResult.ALREADY_PRESENT


  def prefix_search(self, prefix):
    """Return the node at the end of `prefix`, or None if the path is missing.

    The returned node may or may not be a word end.
    """
    node = self.root
    for ch in prefix:
      node = node.child(ch)
      if node is None:
        return None
    return node


  def contains(self, word):
    """True iff `word` was inserted. Never raises, never allocates."""
    node = self.prefix_search(word)
    return node is not None and node.is_end_word


  def iter_words(self, prefix="", k=None):
    """Yield words starting with `prefix` in codec order.

    Parameters
    ----------
    prefix : str
        Prefix to enumerate from. Use "" to export the entire tree.
    k : int | None, default=None
        If None, yield all matches; otherwise, yield up to `k` matches.
    """
    node = self.prefix_search(prefix)
    if node is None:
      return iter(())
    words = self._walk(node, list(prefix))
    return words if k is None else islice(words, k)


  def get_words(self, prefix=""):
    """Return every word starting with `prefix`, sorted under the codec order.

    An unmatched prefix gives an empty list.
    """
    return list(self.iter_words(prefix))


  def get_words_of_length(self, length):
    """Return every word of exactly `length` characters, in codec order.

    `length <= 0` gives an empty list.
    """
    if length <= 0:
      return []
    return list(self._walk(self.root, [], length))


  def _walk(self, node, buf, length=None):
    """Depth-first export of the subtree under `node`.

    `buf` holds the characters leading to `node` and is used as the shared
    mutable buffer; it is only joined into a string at yield time. With
    `length` set, nodes deeper than `length` are never visited.
    """
    base = len(buf)
    if node.is_end_word and (length is None or base == length):
      yield "".join(buf)
    if length is not None and base >= length:
      return

    stack = [(node.iter_children(), base)]
    while stack:
      it, depth = stack[-1]
      item = next(it, None)
      if item is None:
        stack.pop()
        continue

      ch, child = item
      del buf[depth:]
      buf.append(ch)
      depth += 1

      if length is not None and depth == length:
        if child.is_end_word:
          yield "".join(buf)
        continue

      if child.is_end_word and length is None:
        yield "".join(buf)
      stack.append((child.iter_children(), depth))


  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If True, return `sum(degree) / (# internal nodes)` instead.

    Complexity
    ----------
    O(#nodes) time, O(depth * alphabet) extra space.
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      deg = 0
      for _, child in node.iter_children():
        stack.append(child)
        deg += 1
      if deg:
        total_deg += deg
        internal += 1
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes
