#!/usr/bin/env python3
"""
Consistency verification for the reverse solver.

Checks:
1. Every word returned for a letter decrypts back to that letter (A..Z)
2. Worker pool and inline searches return identical lists
3. How many operand tuples in [1, 26]^4 have several distinct valid cores
   (those are the tuples where minimum selection decides the core)

Usage:
    PYTHONPATH=src python scripts/verify_consistency.py
"""

import sys
import os
from collections import Counter
from itertools import product

# Add src to path if not already there
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from numeric_core import (
    encrypt_letter_with_stats, decrypt_word, candidates,
    number_to_letter, SearchConfig
)


def check_round_trip():
    """Every encrypted word decrypts to its letter."""
    print("Check 1: Reverse/forward round trip")
    ok = True
    total = 0
    for value in range(1, 27):
        letter = number_to_letter(value)
        words, stats = encrypt_letter_with_stats(letter)
        bad = [w for w in words if decrypt_word(w) != value]
        total += len(words)
        if bad:
            ok = False
            print(f"  {letter}: {len(bad)} mismatches, e.g. {bad[:3]}")
        else:
            print(f"  {letter}: {len(words):6d} words  ({stats['timing_ms']['total']} ms)")
    print(f"  Total words: {total}  {'PASS' if ok else 'FAIL'}")
    return ok


def check_pool_determinism(runs: int = 3):
    """Worker pool output equals inline output on every run."""
    print("\nCheck 2: Worker pool determinism")
    inline, _ = encrypt_letter_with_stats('L', SearchConfig(workers=1))
    ok = True
    for i in range(runs):
        pooled, stats = encrypt_letter_with_stats('L', SearchConfig())
        same = pooled == inline
        ok &= same
        print(f"  Run {i+1} ({stats['workers']} workers): {'PASS - identical' if same else 'FAIL - different'}")
    return ok


def report_ambiguity():
    """Count tuples whose valid chains disagree on the core."""
    print("\nCheck 3: Ambiguous tuples (informational)")
    spread = Counter()
    for nums in product(range(1, 27), repeat=4):
        cores = {core for core, _ in candidates(nums)}
        spread[len(cores)] += 1
    total = sum(spread.values())
    for n in sorted(spread):
        print(f"  {n} distinct core(s): {spread[n]:7d}  ({100 * spread[n] / total:.1f}%)")
    ambiguous = sum(v for k, v in spread.items() if k > 1)
    print(f"  Minimum selection decides {ambiguous} of {total} tuples")
    return True


def main():
    print("=" * 60)
    print("NUMERIC CORE CONSISTENCY VERIFICATION")
    print("=" * 60)

    checks = [
        check_round_trip,
        check_pool_determinism,
        report_ambiguity,
    ]

    results = [check() for check in checks]

    print("\n" + "=" * 60)
    print(f"OVERALL: {sum(results)}/{len(results)} checks passed")
    print("=" * 60)
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
