"""Numeric Core - Core Types & Codec"""

from .types import (
    CORE_LENGTH, ALPHABET_SIZE, CORE_MAX,
    Operands, Letter, Cypher, as_operands,
)
from .codec import (
    letter_to_number,
    number_to_letter,
    word_to_numbers,
    numbers_to_word,
)

__all__ = [
    # Types
    'CORE_LENGTH', 'ALPHABET_SIZE', 'CORE_MAX',
    'Operands', 'Letter', 'Cypher', 'as_operands',
    # Codec
    'letter_to_number', 'number_to_letter', 'word_to_numbers', 'numbers_to_word',
]
