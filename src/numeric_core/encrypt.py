"""
Reverse solver ("encrypt").

Exhaustive search of the operand space [1, 26]^4 for every 4-letter word whose
core equals a target letter. The space is split by first operand and the
slices are mapped over a process pool; results are merged, sorted and
deduplicated once every slice is done.
"""

import os
import time
import concurrent.futures
import numpy as np
from dataclasses import dataclass
from itertools import product
from typing import List, Tuple, Dict, Optional, Union

from .core.types import ALPHABET_SIZE, Letter, Operands
from .core.codec import letter_to_number, numbers_to_word
from .decrypt import solve, solve_batch, OVERFLOW
from .errors import (
    NoSolutionError, CoreOverflowError, UnimplementedError,
    EmptyInputError, InvalidLengthError, InvalidCharacterError,
)


@dataclass(frozen=True)
class SearchConfig:
    """
    Reverse search settings.

    - workers: process count (None -> os.cpu_count(), 1 -> run inline)
    - vectorized: evaluate each slice with solve_batch instead of per-tuple solve
    - low, high: operand range, inclusive, within [1, 26]
    """
    workers: Optional[int] = None
    vectorized: bool = True
    low: int = 1
    high: int = ALPHABET_SIZE

    def __post_init__(self):
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not 1 <= self.low <= self.high <= ALPHABET_SIZE:
            raise ValueError(f"Operand range must satisfy 1 <= low <= high <= {ALPHABET_SIZE}, "
                             f"got [{self.low}, {self.high}]")

    def worker_count(self) -> int:
        return self.workers if self.workers is not None else (os.cpu_count() or 1)


DEFAULT_CONFIG = SearchConfig()

SliceResult = Tuple[List[Operands], int, int]  # (matches, candidates, skipped)


# =============================================================================
# Slice evaluation (runs in worker processes)
# =============================================================================

def _search_slice_scalar(first: int, target: int, config: SearchConfig) -> SliceResult:
    matches = []
    skipped = 0
    count = 0
    rng = range(config.low, config.high + 1)
    for rest in product(rng, repeat=3):
        nums = (first,) + rest
        count += 1
        try:
            core = solve(nums)
        except NoSolutionError:
            continue
        except CoreOverflowError:
            skipped += 1
            continue
        if core == target:
            matches.append(nums)
    return matches, count, skipped


def _search_slice_vectorized(first: int, target: int, config: SearchConfig) -> SliceResult:
    rng = np.arange(config.low, config.high + 1, dtype=np.int64)
    b, c, d = np.meshgrid(rng, rng, rng, indexing='ij')
    operands = np.column_stack([np.full(b.size, first, dtype=np.int64),
                                b.ravel(), c.ravel(), d.ravel()])
    cores = solve_batch(operands)
    hits = operands[cores == target]
    matches = [tuple(int(x) for x in row) for row in hits]
    return matches, int(operands.shape[0]), int((cores == OVERFLOW).sum())


def search_slice(first: int, target: int, config: SearchConfig = DEFAULT_CONFIG) -> SliceResult:
    """All operand tuples starting with `first` whose core equals `target`."""
    if config.vectorized:
        return _search_slice_vectorized(first, target, config)
    return _search_slice_scalar(first, target, config)


# =============================================================================
# Reverse search
# =============================================================================

def _target_value(letter: Union[str, Letter]) -> int:
    if isinstance(letter, Letter):
        return letter.value
    if not isinstance(letter, str):
        raise InvalidCharacterError(f"Invalid input : expected an alphabetic letter, got {letter!r}")
    if not letter:
        raise EmptyInputError("Invalid input : expected at least one char")
    if len(letter) != 1:
        raise InvalidLengthError("Invalid input : expected a single character")
    n = letter_to_number(letter)
    if n is None:
        raise InvalidCharacterError("Invalid input : expected an alphabetic letter")
    return n


def reverse_search(target: int, config: SearchConfig = DEFAULT_CONFIG) -> Tuple[List[Operands], Dict]:
    """
    Every operand tuple in [low, high]^4 whose core equals `target`.

    Returns:
        (matches, stats) with matches sorted ascending and unique
    """
    t_start = time.time()
    firsts = range(config.low, config.high + 1)
    workers = min(config.worker_count(), len(firsts))

    matches = set()
    stats = {"candidates": 0, "matches": 0, "skipped": 0,
             "workers": workers, "vectorized": config.vectorized}

    t_search_start = time.time()
    if workers == 1:
        results = [search_slice(a, target, config) for a in firsts]
    else:
        with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(search_slice, a, target, config) for a in firsts]
            results = [f.result() for f in concurrent.futures.as_completed(futures)]
    t_search_end = time.time()

    for slice_matches, count, skipped in results:
        stats["candidates"] += count
        stats["matches"] += len(slice_matches)
        stats["skipped"] += skipped
        matches.update(slice_matches)

    stats["timing_ms"] = {
        "search": int((t_search_end - t_search_start) * 1000),
        "total": int((time.time() - t_start) * 1000),
    }
    return sorted(matches), stats


def encrypt_letter_with_stats(letter: Union[str, Letter],
                              config: SearchConfig = DEFAULT_CONFIG) -> Tuple[List[str], Dict]:
    """encrypt_letter() plus the search statistics."""
    target = _target_value(letter)
    matches, stats = reverse_search(target, config)
    words = sorted(set(numbers_to_word(nums) for nums in matches))
    stats["unique"] = len(words)
    return words, stats


def encrypt_letter(letter: Union[str, Letter], config: SearchConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Every 4-letter word whose core is `letter`, sorted and without duplicates.

    Raises:
        EmptyInputError, InvalidLengthError, InvalidCharacterError
    """
    words, _ = encrypt_letter_with_stats(letter, config)
    return words


def encrypt_number(core: int) -> List[str]:
    """Reverse search for an arbitrary numeric core. Not implemented."""
    raise UnimplementedError()
