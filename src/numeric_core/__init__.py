"""
Numeric Core Solver

Solves and inverts the numeric core cipher of the puzzle game Blue Prince:
four operands combined with SUB, MUL and DIV, each used exactly once.
"""

from .core import (
    CORE_LENGTH, ALPHABET_SIZE, CORE_MAX,
    Operands, Letter, Cypher, as_operands,
    letter_to_number, number_to_letter, word_to_numbers, numbers_to_word,
)
from .operators import Operator, OperatorSet, OPERATOR_ORDER
from .decrypt import (
    solve, solve_batch, candidates, chain_to_str,
    decrypt_numbers, decrypt_word,
    NO_SOLUTION, OVERFLOW
)
from .encrypt import (
    SearchConfig, DEFAULT_CONFIG,
    search_slice, reverse_search,
    encrypt_letter, encrypt_letter_with_stats, encrypt_number
)
from .parsing import DecryptInput, DecodeResult, parse_cypher_input, decode_text
from .errors import (
    CipherError, InputError,
    InvalidLengthError, InvalidCharacterError,
    EmptyInputError, MixedInputError, WrongCountError, NumberRangeError,
    NoSolutionError, CoreOverflowError, UnimplementedError
)

__all__ = [
    # Types
    'CORE_LENGTH', 'ALPHABET_SIZE', 'CORE_MAX',
    'Operands', 'Letter', 'Cypher', 'as_operands',

    # Codec
    'letter_to_number', 'number_to_letter', 'word_to_numbers', 'numbers_to_word',

    # Operators
    'Operator', 'OperatorSet', 'OPERATOR_ORDER',

    # Forward solver
    'solve', 'solve_batch', 'candidates', 'chain_to_str',
    'decrypt_numbers', 'decrypt_word',
    'NO_SOLUTION', 'OVERFLOW',

    # Reverse solver
    'SearchConfig', 'DEFAULT_CONFIG',
    'search_slice', 'reverse_search',
    'encrypt_letter', 'encrypt_letter_with_stats', 'encrypt_number',

    # Parsing
    'DecryptInput', 'DecodeResult', 'parse_cypher_input', 'decode_text',

    # Errors
    'CipherError', 'InputError',
    'InvalidLengthError', 'InvalidCharacterError',
    'EmptyInputError', 'MixedInputError', 'WrongCountError', 'NumberRangeError',
    'NoSolutionError', 'CoreOverflowError', 'UnimplementedError',
]
