from swapcheck.display import bit_width, format_binary, render_stacks, render_stacks_binary
from swapcheck.operations import Stacks

FOOTER = ["__________a     __________b", "---------------------------"]


def test_bit_width_of_single_element_is_zero():
    assert bit_width(1) == 0


def test_bit_width_covers_all_ranks_minimally():
    for count in range(2, 600):
        bits = bit_width(count)
        assert (count - 1) < 2 ** bits
        assert (count - 1) >= 2 ** (bits - 1)


def test_format_binary_round_trip_and_width():
    for bits in range(1, 9):
        for number in range(2 ** bits):
            text = format_binary(number, bits)
            assert len(text) == 11
            assert len(text.strip()) == bits
            assert int(text.strip(), 2) == number


def test_format_binary_keeps_only_low_bits():
    text = format_binary(13, 2)
    assert int(text.strip(), 2) == 13 & 0b11


def test_render_stacks_only_a():
    stacks = Stacks.from_numbers([1, 2, 3])
    lines = render_stacks(stacks, "msg").splitlines()
    assert lines[0] == "msg"
    assert lines[-2:] == FOOTER
    rows = lines[1:-2]
    assert [row[:11].strip() for row in rows] == ["1", "2", "3"]
    assert all(len(row[:11]) == 11 for row in rows)


def test_render_stacks_aligns_shorter_stack_at_bottom():
    stacks = Stacks.from_numbers([1, 2, 3])
    stacks.b.append(9)
    lines = render_stacks(stacks, "state").splitlines()
    assert lines[0] == "state"
    assert lines[1] == ""
    rows = lines[2:-2]
    assert len(rows) == 3
    assert [row[:11].strip() for row in rows] == ["1", "2", "3"]
    assert [row[16:].strip() for row in rows] == ["", "", "9"]


def test_render_stacks_negative_numbers_right_aligned():
    stacks = Stacks.from_numbers([-2147483648, 42])
    rows = render_stacks(stacks, "m").splitlines()[1:-2]
    assert rows[0][:11] == "-2147483648"
    assert rows[1][:11].strip() == "42"
    assert rows[1][:11].endswith("42")


def test_render_stacks_binary_rows_decode():
    stacks = Stacks.from_numbers([2, 0, 3, 1])
    bits = bit_width(4)
    text = render_stacks_binary(stacks, "Init a and b", bits)
    lines = text.splitlines()
    assert lines[0] == "Init a and b"
    assert lines[-2:] == FOOTER
    assert [int(row[:11].strip(), 2) for row in lines[1:-2]] == [2, 0, 3, 1]
    assert text.endswith("\n")