#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Numeric Core - Type Definitions
===============================

Core types used throughout the solver:
- Operands: the 4 numbers of a cypher (first one seeds the accumulator)
- Letter: alphabetic character with a value in [1, 26]
- Cypher: 4-operand chain, either as numbers or as a 4-letter word
"""

import operator
import numpy as np
from dataclasses import dataclass, field
from typing import Tuple, Optional

from ..errors import InvalidCharacterError

# =============================================================================
# Constants
# =============================================================================

CORE_LENGTH = 4            # operands per cypher
ALPHABET_SIZE = 26         # letters map to 1..26
CORE_MAX = 2 ** 32 - 1     # cores are unsigned 32-bit values

Operands = Tuple[int, int, int, int]

# =============================================================================
# Core Types
# =============================================================================

@dataclass(frozen=True, order=True)
class Letter:
    """An alphabetic letter, compared and ordered by its numeric value."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) \
                or not 1 <= self.value <= ALPHABET_SIZE:
            raise ValueError(f"Letter value must be in [1, {ALPHABET_SIZE}], got {self.value!r}")

    @classmethod
    def from_char(cls, c: str) -> "Letter":
        from .codec import letter_to_number

        n = letter_to_number(c)
        if n is None:
            raise InvalidCharacterError(f"Invalid input : expected an alphabetic letter, got {c!r}")
        return cls(n)

    @property
    def char(self) -> str:
        return chr(ord('A') - 1 + self.value)

    def __str__(self):
        return self.char


@dataclass(frozen=True)
class Cypher:
    """A 4-operand puzzle instance; `word` is set when every operand is a letter."""
    numbers: Operands
    word: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_word(cls, word: str) -> "Cypher":
        from .codec import word_to_numbers
        return cls(word_to_numbers(word), word.upper())

    @classmethod
    def from_numbers(cls, numbers) -> "Cypher":
        from .codec import numbers_to_word
        nums = as_operands(numbers)
        return cls(nums, numbers_to_word(nums))

    def __str__(self):
        return self.word if self.word is not None else " ".join(str(n) for n in self.numbers)

# =============================================================================
# Type Utilities
# =============================================================================

def as_operands(numbers) -> Operands:
    """
    Validate and freeze a 4-sequence of integers in [0, CORE_MAX].

    numpy integers are accepted and converted to int.
    """
    nums = tuple(numbers)
    if len(nums) != CORE_LENGTH:
        raise ValueError(f"Expected {CORE_LENGTH} operands, got {len(nums)}")
    out = []
    for n in nums:
        if isinstance(n, (bool, np.bool_)):
            raise TypeError(f"Operands must be integers, got {n!r}")
        try:
            n = operator.index(n)
        except TypeError:
            raise TypeError(f"Operands must be integers, got {n!r}") from None
        if not 0 <= n <= CORE_MAX:
            raise ValueError(f"Operands must be in [0, {CORE_MAX}], got {n}")
        out.append(n)
    return tuple(out)
