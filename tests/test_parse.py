import pytest

from swapcheck.operations import Operation
from swapcheck.parse import (
    InputError,
    atoi,
    compare_prefix,
    has_duplicate,
    is_space,
    parse_instruction,
    parse_ints,
    parse_numbers,
    read_instructions,
)


@pytest.mark.parametrize("char", ["\t", "\n", "\v", "\f", "\r", " "])
def test_is_space_true(char):
    assert is_space(char)


@pytest.mark.parametrize("char", ["a", "0", "", "_"])
def test_is_space_false(char):
    assert not is_space(char)


def test_atoi_skips_blanks_and_stops_at_garbage():
    assert atoi(" \t 42abc") == 42
    assert atoi("-17 9") == -17
    assert atoi("+5") == 5


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("-") == 0
    assert atoi("abc") == 0


def test_atoi_limits_and_wrap():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483648") == -2147483648


def test_compare_prefix_equal():
    assert compare_prefix("sa", "sa", 3) == 0
    assert compare_prefix("rra", "rra", 4) == 0


def test_compare_prefix_limited_length():
    assert compare_prefix("rra", "rrb", 2) == 0
    assert compare_prefix("anything", "different", 0) == 0


def test_compare_prefix_sign():
    assert compare_prefix("sa", "sb", 3) < 0
    assert compare_prefix("sb", "sa", 3) > 0
    assert compare_prefix("sax", "sa", 3) > 0
    assert compare_prefix("s", "sa", 3) < 0


def test_parse_ints_reads_signed_values():
    assert parse_ints("1 -2 +3") == [1, -2, 3]
    assert parse_ints("  ") == []
    assert parse_ints("-0") == [0]


def test_parse_ints_bounds_accepted():
    assert parse_ints("2147483647 -2147483648") == [2147483647, -2147483648]


@pytest.mark.parametrize(
    "text",
    ["01", "-01", "00", "-", "+", "+a", "1a", "1-2", "x", "2147483648", "-2147483649", "1 - 2"],
)
def test_parse_ints_rejects(text):
    with pytest.raises(InputError):
        parse_ints(text)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_ints("z")


def test_has_duplicate():
    assert has_duplicate([1, 2, 1])
    assert not has_duplicate([1, 2, 3])
    assert not has_duplicate([])


def test_parse_numbers_joins_arguments():
    args = ["3 1", "2"]
    assert parse_numbers(args) == [3, 1, 2]


def test_parse_numbers_empty():
    assert parse_numbers([]) == []


def test_parse_numbers_rejects_duplicates():
    with pytest.raises(InputError):
        parse_numbers(["1", "2 1"])
    with pytest.raises(InputError):
        parse_numbers(["-0", "0"])


@pytest.mark.parametrize("operation", list(Operation))
def test_parse_instruction_accepts_all(operation):
    assert parse_instruction(operation.value) is operation


@pytest.mark.parametrize("line", ["", "sa ", "RA", "rrrr", "s", "pc", " pa"])
def test_parse_instruction_rejects(line):
    with pytest.raises(InputError):
        parse_instruction(line)


def test_read_instructions_strips_newline():
    assert read_instructions(["sa\n", "pb\n", "rrr"]) == [Operation.SA, Operation.PB, Operation.RRR]


def test_read_instructions_rejects_carriage_return():
    with pytest.raises(InputError):
        read_instructions(["sa\r\n"])