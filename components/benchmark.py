#!/usr/bin/env python3
"""
Performance probes for LexicographicTree.

- `run_dictionary_benchmark`: load, hit search, miss search and length sweep,
  each repeated `repeat_count` times.
- `probe_capacity`: insert synthetic breadth-first words and record tree size
  and node count at checkpoints.

Both return a pandas DataFrame so the dashboard can chart them directly.
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np
import pandas as pd

from lextree import ALPHABET_SIZE, LexicographicTree
from components.word_list import populate, read_words
from components.work_loads import synthetic_words

log = logging.getLogger("lextree.components")


## === Config Class === ##

@dataclass
class BenchConfig:
    """
    Configuration for run_dictionary_benchmark
        repeat_count: int, times each phase is repeated
        max_length: int, longest length swept by the length phase
        miss_suffix: str, appended to every word to build guaranteed misses
        seed: int, seed used to shuffle the search order (None keeps file order)
    """
    repeat_count: int = 20
    max_length: int = ALPHABET_SIZE
    miss_suffix: str = "xx"
    seed: Optional[int] = None

    def __post_init__(self):
        if self.repeat_count <= 0:
            raise ValueError("repeat_count must be positive")
        if self.max_length < 0:
            raise ValueError("max_length must be non-negative")
        if not self.miss_suffix:
            raise ValueError("miss_suffix must not be empty")


def _timed(fn: Callable[[], object], repeat: int) -> tuple[np.ndarray, object]:
    samples = np.empty(repeat, dtype=float)
    result = None
    for i in range(repeat):
        start = time.perf_counter()
        result = fn()
        samples[i] = time.perf_counter() - start
    return samples, result


def _row(phase: str, samples: np.ndarray, operations: int, anomalies: int) -> dict:
    return {
        "phase": phase,
        "runs": len(samples),
        "operations": operations,
        "anomalies": anomalies,
        "mean_s": float(samples.mean()),
        "std_s": float(samples.std()),
        "total_s": float(samples.sum()),
    }


def run_dictionary_benchmark(words: Sequence[str],
                             config: Optional[BenchConfig] = None) -> pd.DataFrame:
    """Time the four dictionary phases over `words`.

    `anomalies` counts words missing after load, suffixed words that were
    found anyway, and length sweeps whose total differs from `size()`.
    Invalid words are skipped by the load phase and excluded from searches.
    """
    config = config or BenchConfig()
    words = list(words)

    def load():
        tree = LexicographicTree()
        populate(tree, words, source="benchmark")
        return tree

    load_samples, tree = _timed(load, config.repeat_count)
    log.info("Load: %d words in %.4fs (mean of %d)", tree.size(), load_samples.mean(), config.repeat_count)

    probe = [w for w in words if w in tree]
    if config.seed is not None:
        rng = np.random.default_rng(config.seed)
        probe = [probe[i] for i in rng.permutation(len(probe))]
    misses = [w + config.miss_suffix for w in probe]

    def search_existing():
        return sum(1 for w in probe if not tree.contains(w))

    def search_missing():
        return sum(1 for w in misses if tree.contains(w))

    def length_sweep():
        total = sum(len(tree.get_words_of_length(n)) for n in range(config.max_length + 1))
        return int(total != tree.size())

    rows = [_row("load", load_samples, len(words), len(words) - len(probe))]
    for phase, fn, ops in (("search_existing", search_existing, len(probe)),
                           ("search_missing", search_missing, len(misses)),
                           ("length_sweep", length_sweep, config.max_length + 1)):
        samples, anomalies = _timed(fn, config.repeat_count)
        if phase == "length_sweep" and anomalies:
            log.warning("Total mismatch: tree size = %d / sweep up to length %d disagrees",
                        tree.size(), config.max_length)
        elif anomalies:
            log.warning("%s: %d unexpected results", phase, anomalies)
        log.info("%s: %.4fs (mean of %d)", phase, samples.mean(), config.repeat_count)
        rows.append(_row(phase, samples, ops, anomalies))
    return pd.DataFrame(rows)


def probe_capacity(num_words: int, radix: int = 13, report_every: int = 100_000) -> pd.DataFrame:
    """Insert `num_words` synthetic words, sampling structure every `report_every`.

    Each row holds words inserted, tree size, node count and elapsed seconds.
    """
    if num_words <= 0:
        raise ValueError("num_words must be positive")
    if report_every <= 0:
        raise ValueError("report_every must be positive")

    tree = LexicographicTree()
    checkpoints: List[dict] = []
    start = time.perf_counter()
    for count, word in enumerate(synthetic_words(num_words, radix), start=1):
        tree.insert(word)
        if count % report_every == 0 or count == num_words:
            nodes = tree.count_nodes()
            checkpoints.append({
                "words": count,
                "size": tree.size(),
                "nodes": nodes,
                "avg_branch_factor": tree.count_nodes(get_avg_branch_factor=True),
                "elapsed_s": time.perf_counter() - start,
            })
            log.info("%s words -> %s nodes", f"{count:,}", f"{nodes:,}")
    return pd.DataFrame(checkpoints)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark the lexicographic tree on a word list.")
    parser.add_argument("wordlist", help="newline-delimited word file")
    parser.add_argument("--repeat", type=int, default=20, help="repetitions per phase")
    parser.add_argument("--max-length", type=int, default=ALPHABET_SIZE, help="longest length swept")
    parser.add_argument("--capacity", type=int, default=0,
                        help="also insert this many synthetic words and report structure")
    parser.add_argument("--lower", action="store_true", help="lowercase words before inserting")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")

    words = list(read_words(args.wordlist))
    if args.lower:
        words = [w.lower() for w in words]
    config = BenchConfig(repeat_count=args.repeat, max_length=args.max_length)
    print(run_dictionary_benchmark(words, config).to_string(index=False))
    if args.capacity > 0:
        print()
        print(probe_capacity(args.capacity, report_every=max(1, args.capacity // 10)).to_string(index=False))


if __name__ == "__main__":
    main()
