#!/usr/bin/env python3
"""Numeric Core - Letter <-> Number Codec"""

from typing import Optional, List, Sequence

from .types import CORE_LENGTH, ALPHABET_SIZE, Operands
from ..errors import InvalidLengthError, InvalidCharacterError


def letter_to_number(c: str) -> Optional[int]:
    """Map 'A'..'Z' / 'a'..'z' to 1..26. Anything else gives None."""
    if not isinstance(c, str) or len(c) != 1:
        return None
    if 'a' <= c <= 'z':
        return ord(c) - ord('a') + 1
    if 'A' <= c <= 'Z':
        return ord(c) - ord('A') + 1
    return None


def number_to_letter(n: int) -> Optional[str]:
    """Map 1..26 back to 'A'..'Z'. Out of range gives None."""
    if isinstance(n, bool) or not isinstance(n, int):
        return None
    if 1 <= n <= ALPHABET_SIZE:
        return chr(ord('A') + n - 1)
    return None


def word_to_numbers(word: str) -> Operands:
    """
    Convert a 4-letter word (case insensitive) to its operands.

    Raises:
        InvalidLengthError: word is not exactly 4 characters
        InvalidCharacterError: word holds a non-alphabetic character
    """
    if len(word) != CORE_LENGTH:
        raise InvalidLengthError()
    numbers: List[int] = []
    for c in word:
        n = letter_to_number(c)
        if n is None:
            raise InvalidCharacterError()
        numbers.append(n)
    return tuple(numbers)


def numbers_to_word(numbers: Sequence[int]) -> Optional[str]:
    """Convert operands to a word, or None if any operand is outside 1..26."""
    chars = [number_to_letter(n) for n in numbers]
    if any(c is None for c in chars):
        return None
    return "".join(chars)
