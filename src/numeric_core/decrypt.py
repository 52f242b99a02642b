"""
Forward solver ("decrypt").

Brute force over every operator-to-position assignment: the first operand
seeds the accumulator, every following operand is combined with one of the
operators still available. The core is the minimum over all complete chains.
"""

import numpy as np
from itertools import permutations
from typing import List, Tuple, Iterator, Sequence

from .core.types import CORE_MAX, CORE_LENGTH, as_operands
from .core.codec import word_to_numbers
from .operators import Operator, OperatorSet, OPERATOR_ORDER
from .errors import NoSolutionError

Chain = Tuple[Operator, Operator, Operator]

# Sentinels used by solve_batch
NO_SOLUTION = -1
OVERFLOW = -2


# =============================================================================
# Scalar solver
# =============================================================================

def _search(acc: int, numbers: Sequence[int], ops: OperatorSet,
            path: Tuple[Operator, ...]) -> Iterator[Tuple[int, Tuple[Operator, ...]]]:
    """Pull the next number and try it with every remaining operator."""
    if not numbers:
        yield acc, path
        return
    first, remain = numbers[0], numbers[1:]
    for op in ops:
        total = op.apply(acc, first)
        if total is None:
            continue  # prune every chain sharing this prefix
        yield from _search(total, remain, ops.remove(op), path + (op,))


def candidates(operands) -> List[Tuple[int, Chain]]:
    """
    Every valid complete chain as (core, (op1, op2, op3)).

    Raises:
        CoreOverflowError: a reachable multiplication exceeds CORE_MAX
    """
    nums = as_operands(operands)
    return list(_search(nums[0], nums[1:], OperatorSet.all(), ()))


def solve(operands) -> int:
    """
    Minimum core over all operator assignments.

    Raises:
        NoSolutionError: no assignment is valid for every step
        CoreOverflowError: a reachable multiplication exceeds CORE_MAX
    """
    nums = as_operands(operands)
    best = min((core for core, _ in _search(nums[0], nums[1:], OperatorSet.all(), ())),
               default=None)
    if best is None:
        raise NoSolutionError()
    return best


def decrypt_numbers(*numbers) -> int:
    """Compute the core of 4 numbers, given as 4 arguments or one 4-sequence."""
    if len(numbers) == 1 and not isinstance(numbers[0], int):
        numbers = tuple(numbers[0])
    return solve(numbers)


def decrypt_word(word: str) -> int:
    """
    Compute the core of a 4-letter word (upper or lower case).

    Raises:
        InvalidLengthError, InvalidCharacterError, NoSolutionError
    """
    return solve(word_to_numbers(word))


def chain_to_str(operands, chain: Chain) -> str:
    """Render a chain left to right, e.g. '((1000 / 200) * 11) - 2'."""
    nums = as_operands(operands)
    expr = str(nums[0])
    for i, (op, n) in enumerate(zip(chain, nums[1:])):
        expr = f"({expr} {op.symbol} {n})" if i < len(chain) - 1 else f"{expr} {op.symbol} {n}"
    return expr


# =============================================================================
# Vectorized solver
# =============================================================================

def _apply_vec(op: Operator, acc: np.ndarray, b: np.ndarray):
    """Vectorized Operator.apply. Returns (result, valid, overflow)."""
    if op is Operator.SUB:
        ok = acc >= b
        return np.where(ok, acc - b, 0), ok, np.zeros_like(ok)
    if op is Operator.MUL:
        ok = (b == 0) | (acc <= CORE_MAX // np.maximum(b, 1))
        return np.where(ok, acc, 0) * np.where(ok, b, 0), ok, ~ok
    safe_b = np.where(b == 0, 1, b)
    ok = (b != 0) & (acc % safe_b == 0)
    return np.where(ok, acc // safe_b, 0), ok, np.zeros_like(ok)


def solve_batch(operands: np.ndarray) -> np.ndarray:
    """
    Vectorized solve() over an (N, 4) array of operands.

    Returns an int64 array of N cores, NO_SOLUTION where no chain is valid and
    OVERFLOW where a reachable multiplication exceeds CORE_MAX (the scalar
    solver raises CoreOverflowError for those rows).
    """
    arr = np.asarray(operands, dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != CORE_LENGTH:
        raise ValueError(f"Expected shape (N, {CORE_LENGTH}), got {arr.shape}")
    if arr.size and (arr.min() < 0 or arr.max() > CORE_MAX):
        raise ValueError(f"Operands must be in [0, {CORE_MAX}]")

    n = arr.shape[0]
    best = np.full(n, np.iinfo(np.int64).max, dtype=np.int64)
    overflow = np.zeros(n, dtype=bool)

    for chain in permutations(OPERATOR_ORDER):
        acc = arr[:, 0].copy()
        alive = np.ones(n, dtype=bool)
        for step, op in enumerate(chain, start=1):
            acc, ok, over = _apply_vec(op, acc, arr[:, step])
            overflow |= alive & over
            alive &= ok
        best = np.where(alive, np.minimum(best, acc), best)

    out = np.where(best == np.iinfo(np.int64).max, NO_SOLUTION, best)
    return np.where(overflow, OVERFLOW, out)
