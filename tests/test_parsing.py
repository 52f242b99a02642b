"""Input classification and decode record tests."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from numeric_core import (
    parse_cypher_input, decode_text, DecodeResult,
    EmptyInputError, MixedInputError, WrongCountError, NumberRangeError, InputError,
    CORE_MAX,
)


def expect_error(exc, fn, *args):
    try:
        fn(*args)
    except exc as e:
        return e
    raise AssertionError(f"{fn.__name__}{args} should raise {exc.__name__}")


def test_numbers():
    parsed = parse_cypher_input("  156 21 9 7 ")
    assert parsed.kind == 'numbers'
    assert parsed.numbers == (156, 21, 9, 7)


def test_words():
    parsed = parse_cypher_input("CLAM tell FIND")
    assert parsed.kind == 'words'
    assert parsed.words == ["CLAM", "tell", "FIND"]


def test_words_are_not_length_checked():
    parsed = parse_cypher_input("PEA PEAKS")
    assert parsed.words == ["PEA", "PEAKS"], "Word lengths are checked when decrypting"


def test_empty():
    expect_error(EmptyInputError, parse_cypher_input, "")
    expect_error(EmptyInputError, parse_cypher_input, "   \t ")


def test_wrong_number_count():
    expect_error(WrongCountError, parse_cypher_input, "1 2 3")
    expect_error(WrongCountError, parse_cypher_input, "1 2 3 4 5")
    expect_error(WrongCountError, parse_cypher_input, "1234")


def test_numbers_must_fit_32_bits():
    parsed = parse_cypher_input(f"{CORE_MAX} 0 0 1")
    assert parsed.numbers == (CORE_MAX, 0, 0, 1)
    e = expect_error(NumberRangeError, parse_cypher_input, f"{CORE_MAX + 1} 0 0 1")
    assert isinstance(e, InputError), "Out of range numbers are an input error"


def test_decode_out_of_range_numbers():
    result = decode_text("4294967296 0 0 1")
    assert result.kind is None
    assert result.cores == [None] and not result.ok
    assert result.summary().startswith("Error : Invalid input, numbers must be at most"), result.summary()


def test_mixed():
    for text in ["12 AB 3 4", "PE4K", "1 2 3 -4", "DATE, HEAD", "٣ 1 2 3"]:
        expect_error(MixedInputError, parse_cypher_input, text)


def test_decode_numbers():
    result = decode_text("1000 200 11 2")
    assert result.ok
    assert result.cores == [53]
    assert result.text == "?", "53 is outside the alphabet"


def test_decode_words():
    result = decode_text(" peak date clam ")
    assert result.input == "peak date clam"
    assert result.cores == [1, 12, 23]
    assert result.text == "ALW"
    assert result.summary() == "Value : 1, 12, 23 Text : ALW"


def test_decode_partial_failure():
    result = decode_text("PEAK PEA DATE")
    assert not result.ok
    assert result.cores == [1, None, 12]
    assert result.text == "A?L"
    assert len(result.errors) == 1 and result.errors[0].startswith("PEA:")
    assert result.summary().startswith("Value : 1, ?, 12 Text : A?L Error : ")
    assert result.kind == 'words'
    assert result.items == ["PEAK", "PEA", "DATE"]
    assert result.failed == ["PEA"]


def test_decode_no_solution():
    result = decode_text("1 2 3 5")
    assert result.cores == [None]
    assert result.errors == ["No solution found"]
    assert result.summary() == "Error : No solution found"


def test_decode_classification_error():
    result = decode_text("12 AB")
    assert result.cores == [None] and len(result.errors) == 1


def test_decode_result_multiple_errors():
    result = DecodeResult("x")
    result.push_error("a")
    result.push_error("b")
    assert result.summary() == "Errors : a, b"


def run_all_tests():
    print("Running parsing tests...")
    test_numbers()
    test_words()
    test_words_are_not_length_checked()
    test_empty()
    test_wrong_number_count()
    test_numbers_must_fit_32_bits()
    test_mixed()
    test_decode_numbers()
    test_decode_words()
    test_decode_partial_failure()
    test_decode_no_solution()
    test_decode_classification_error()
    test_decode_out_of_range_numbers()
    test_decode_result_multiple_errors()
    print("All parsing tests passed! ✅")


if __name__ == "__main__":
    run_all_tests()
