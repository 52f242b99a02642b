"""
Codec and core type tests.

Letters map to 1..26 in either case and back to uppercase.
"""

import sys
import os
import numpy as np

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from numeric_core import (
    letter_to_number, number_to_letter, word_to_numbers, numbers_to_word,
    Letter, Cypher, as_operands, CORE_MAX,
    InvalidLengthError, InvalidCharacterError
)


def expect_error(exc, fn, *args):
    """Assert that fn(*args) raises exc and return the error."""
    try:
        fn(*args)
    except exc as e:
        return e
    raise AssertionError(f"{fn.__name__}{args} should raise {exc.__name__}")


def test_letter_to_number():
    assert letter_to_number('A') == 1, "A should map to 1"
    assert letter_to_number('Z') == 26, "Z should map to 26"
    assert letter_to_number('m') == 13, "m should map to 13"


def test_number_to_letter():
    assert number_to_letter(1) == 'A', "1 should map to A"
    assert number_to_letter(26) == 'Z', "26 should map to Z"


def test_round_trip():
    for i in range(26):
        upper = chr(ord('A') + i)
        lower = upper.lower()
        n = letter_to_number(upper)
        assert number_to_letter(n) == upper, f"Round trip failed for {upper}"
        assert letter_to_number(lower) == n, f"{lower} should map like {upper}"


def test_invalid_characters():
    for c in ['0', '9', ' ', '@', '[', '`', '{', 'é', '', 'AB']:
        assert letter_to_number(c) is None, f"{c!r} should not map to a number"


def test_out_of_range_numbers():
    for n in [0, 27, -1, 100]:
        assert number_to_letter(n) is None, f"{n} should not map to a letter"


def test_word_to_numbers():
    assert word_to_numbers("PEAK") == (16, 5, 1, 11)
    assert word_to_numbers("peak") == (16, 5, 1, 11), "Lowercase words are accepted"
    expect_error(InvalidLengthError, word_to_numbers, "PEA")
    expect_error(InvalidLengthError, word_to_numbers, "PEAKS")
    expect_error(InvalidCharacterError, word_to_numbers, "PE4K")


def test_numbers_to_word():
    assert numbers_to_word((4, 1, 20, 5)) == "DATE"
    assert numbers_to_word((1000, 200, 11, 2)) is None, "Out of range operands have no word"


def test_letter_value_type():
    l = Letter.from_char('l')
    assert l == Letter(12), "Letters compare by value"
    assert l.char == 'L' and str(l) == 'L'
    assert Letter(3) < Letter(4), "Letters order by value"
    expect_error(ValueError, Letter, 0)
    expect_error(ValueError, Letter, 27)
    expect_error(ValueError, Letter, True)
    expect_error(InvalidCharacterError, Letter.from_char, '7')


def test_cypher_surface_forms():
    a = Cypher.from_word("date")
    b = Cypher.from_numbers([4, 1, 20, 5])
    assert a == b, "Word and numbers forms of the same operands are equal"
    assert str(a) == "DATE"
    c = Cypher.from_numbers([1000, 200, 11, 2])
    assert c.word is None and str(c) == "1000 200 11 2"


def test_as_operands():
    assert as_operands([1, 2, 3, 4]) == (1, 2, 3, 4)
    expect_error(ValueError, as_operands, [1, 2, 3])
    expect_error(ValueError, as_operands, [1, 2, 3, -4])
    expect_error(TypeError, as_operands, [1, 2, 3, 4.0])
    expect_error(TypeError, as_operands, [1, 2, 3, True])


def test_as_operands_32_bit_range():
    assert as_operands([CORE_MAX, 0, 0, 1]) == (CORE_MAX, 0, 0, 1)
    expect_error(ValueError, as_operands, [CORE_MAX + 1, 0, 0, 1])


def test_as_operands_numpy_integers():
    nums = as_operands(np.array([1000, 200, 11, 2]))
    assert nums == (1000, 200, 11, 2)
    assert all(type(n) is int for n in nums), "numpy integers are converted to int"


def run_all_tests():
    tests = [
        ("letter_to_number", test_letter_to_number),
        ("number_to_letter", test_number_to_letter),
        ("Round trip", test_round_trip),
        ("Invalid characters", test_invalid_characters),
        ("Out of range numbers", test_out_of_range_numbers),
        ("word_to_numbers", test_word_to_numbers),
        ("numbers_to_word", test_numbers_to_word),
        ("Letter", test_letter_value_type),
        ("Cypher", test_cypher_surface_forms),
        ("as_operands", test_as_operands),
        ("as_operands 32-bit range", test_as_operands_32_bit_range),
        ("as_operands numpy", test_as_operands_numpy_integers),
    ]
    passed = 0
    failed = 0
    for name, test_fn in tests:
        try:
            test_fn()
            print(f"✓ {name}")
            passed += 1
        except AssertionError as e:
            print(f"✗ {name}: {e}")
            failed += 1
    print(f"\n{passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
