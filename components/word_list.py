"""Word-list loader: newline-delimited text file -> LexicographicTree."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional

from lextree import InsertResult, InvalidCharacterError, LexicographicTree

log = logging.getLogger("lextree.components")


@dataclass
class LoadReport:
    """Outcome of one load.
        inserted: number of new words
        duplicates: lines whose word was already present
        rejected: words refused because of an invalid character
    """
    source: str
    inserted: int = 0
    duplicates: int = 0
    rejected: List[str] = field(default_factory=list)

    @property
    def lines(self) -> int:
        return self.inserted + self.duplicates + len(self.rejected)


def read_words(path: str | os.PathLike, encoding: str = "utf-8") -> Iterator[str]:
    """Yield each non-empty line of `path`, stripped of surrounding whitespace."""
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            word = line.strip()
            if word:
                yield word


def populate(tree: LexicographicTree,
             words: Iterable[str],
             *,
             normalize: Optional[Callable[[str], str]] = None,
             skip_invalid: bool = True,
             source: str = "<iterable>") -> LoadReport:
    """Insert `words` into `tree` one by one and report what happened.

    With `skip_invalid=False` the first InvalidCharacterError propagates and
    the words already inserted stay in the tree.
    """
    report = LoadReport(source=source)
    for word in words:
        if normalize is not None:
            word = normalize(word)
        try:
            result = tree.insert(word)
        except InvalidCharacterError as e:
            if not skip_invalid:
                raise
            log.warning("Skipping %r from %s: %s", word, source, e)
            report.rejected.append(word)
            continue
        if result is InsertResult.INSERTED:
            report.inserted += 1
        else:
            report.duplicates += 1
    return report


def load_tree(path: str | os.PathLike,
              *,
              tree: Optional[LexicographicTree] = None,
              normalize: Optional[Callable[[str], str]] = None,
              skip_invalid: bool = True,
              encoding: str = "utf-8") -> tuple[LexicographicTree, LoadReport]:
    """Build (or extend) a tree from a newline-delimited word file."""
    if tree is None:
        tree = LexicographicTree()
    source = os.fspath(path)
    try:
        report = populate(tree, read_words(path, encoding),
                          normalize=normalize, skip_invalid=skip_invalid,
                          source=source)
    except OSError as e:
        log.error("Could not read word list %s: %s", source, e)
        raise

    log.info("Loaded %s words from %s (%s duplicates, %s rejected)",
             f"{report.inserted:,}", source, report.duplicates, len(report.rejected))
    return tree, report
