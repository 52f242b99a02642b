"""
Error types for the numeric core solver.

Input errors (malformed text, wrong lengths) are kept apart from
NoSolutionError so callers can tell "your input was malformed" from
"no answer exists".
"""


class CipherError(ValueError):
    """Base class for every error raised by numeric_core."""
    message = "Cipher error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


# =============================================================================
# Input errors
# =============================================================================

class InputError(CipherError):
    """Raised when user supplied text cannot be turned into operands."""
    message = "Invalid input"


class InvalidLengthError(InputError):
    message = "Invalid input, expected 4 characters"


class InvalidCharacterError(InputError):
    message = "Invalid input, expected alphabetic character only"


class EmptyInputError(InputError):
    message = "Empty input"


class MixedInputError(InputError):
    message = "Invalid characters : expected 4 numbers or 4-letter words"


class WrongCountError(InputError):
    message = "Invalid input, expected exactly 4 numbers"


class NumberRangeError(InputError):
    message = "Invalid input, numbers must fit in 32 bits"


# =============================================================================
# Computation errors
# =============================================================================

class NoSolutionError(CipherError):
    message = "No solution found"


class CoreOverflowError(CipherError, ArithmeticError):
    message = "Core value overflow"


class UnimplementedError(CipherError, NotImplementedError):
    message = "unimplemented"
