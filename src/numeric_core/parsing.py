"""
Input classification and per-line decode records.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .core.types import CORE_LENGTH, CORE_MAX, Operands
from .core.codec import number_to_letter
from .decrypt import decrypt_numbers, decrypt_word
from .errors import (
    CipherError, EmptyInputError, MixedInputError, WrongCountError, NumberRangeError
)


@dataclass(frozen=True)
class DecryptInput:
    """Classified user input: kind is 'words' or 'numbers'."""
    kind: str
    words: List[str] = field(default_factory=list)
    numbers: Optional[Operands] = None


def parse_cypher_input(text: str) -> DecryptInput:
    """
    Classify free-form text as 4 numbers or one-or-more words.

    Raises:
        EmptyInputError: nothing but whitespace
        WrongCountError: only digits, but not exactly 4 numbers
        NumberRangeError: a number does not fit in 32 bits
        MixedInputError: digits mixed with letters, or other characters
    """
    tokens = text.split()
    if not tokens:
        raise EmptyInputError()

    # str.isdigit() accepts non-ASCII digits that int() rejects
    if all(t.isascii() and t.isdigit() for t in tokens):
        if len(tokens) != CORE_LENGTH:
            raise WrongCountError(f"Invalid input, expected exactly {CORE_LENGTH} numbers, got {len(tokens)}")
        numbers = tuple(int(t) for t in tokens)
        too_big = [n for n in numbers if n > CORE_MAX]
        if too_big:
            raise NumberRangeError(f"Invalid input, numbers must be at most {CORE_MAX}, got {too_big[0]}")
        return DecryptInput('numbers', numbers=numbers)

    if all(t.isascii() and t.isalpha() for t in tokens):
        return DecryptInput('words', words=tokens)

    raise MixedInputError()


@dataclass
class DecodeResult:
    """
    Record of one line of user input and its decryption.

    kind is 'words' or 'numbers', or None when the line could not be
    classified. items holds the word (or the numbers) behind each core.
    """
    input: str
    kind: Optional[str] = None
    items: List[str] = field(default_factory=list)
    cores: List[Optional[int]] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def push_core(self, core: int, item: str = None):
        self.items.append(item if item is not None else self.input)
        self.cores.append(core)

    def push_error(self, error: str, item: str = None):
        self.items.append(item if item is not None else self.input)
        self.cores.append(None)
        self.errors.append(error)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def failed(self) -> List[str]:
        return [item for item, core in zip(self.items, self.cores) if core is None]

    @property
    def text(self) -> str:
        """Each core as its letter, '?' when missing or outside 1..26."""
        return "".join(number_to_letter(c) or '?' for c in self.cores)

    def summary(self) -> str:
        parts = []
        if any(c is not None for c in self.cores):
            values = ", ".join('?' if c is None else str(c) for c in self.cores)
            parts.append(f"Value : {values} Text : {self.text}")
        if self.errors:
            header = "Error" if len(self.errors) == 1 else "Errors"
            parts.append(f"{header} : {', '.join(self.errors)}")
        return " ".join(parts)


def decode_text(text: str) -> DecodeResult:
    """Classify and decrypt one line; failures are recorded, not raised."""
    result = DecodeResult(text.strip())
    try:
        parsed = parse_cypher_input(text)
    except CipherError as e:
        result.push_error(str(e))
        return result

    result.kind = parsed.kind
    if parsed.kind == 'numbers':
        try:
            result.push_core(decrypt_numbers(parsed.numbers))
        except CipherError as e:
            result.push_error(str(e))
        return result

    for word in parsed.words:
        try:
            result.push_core(decrypt_word(word), word)
        except CipherError as e:
            result.push_error(f"{word}: {e}", word)
    return result
