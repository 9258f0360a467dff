import io
import sys

import pytest

from swapcheck.display import format_binary, render_stacks
from swapcheck.operations import Operation
from swapcheck.parse import InputError
from swapcheck.stepper import (
    CLEAR_SCREEN,
    load_instructions,
    main_bonus,
    main_radix,
    replay,
)


def test_load_instructions(tmp_path):
    path = tmp_path / "instructions"
    path.write_text("sa\npb\nrrr\n")
    assert load_instructions(path) == [Operation.SA, Operation.PB, Operation.RRR]


def test_load_instructions_rejects_unknown(tmp_path):
    path = tmp_path / "instructions"
    path.write_text("sa\nxx\n")
    with pytest.raises(InputError):
        load_instructions(path)


def test_load_instructions_missing_file(tmp_path):
    with pytest.raises(InputError):
        load_instructions(tmp_path / "absent")


def test_replay_ok():
    out = io.StringIO()
    assert replay([2, 1], [Operation.SA], render_stacks, "\n", out) is True
    text = out.getvalue()
    assert text.startswith(CLEAR_SCREEN)
    assert "Init a and b" in text
    assert "OK with 1 operations" in text


def test_replay_ko():
    out = io.StringIO()
    assert replay([2, 1], [], render_stacks, "", out) is False
    assert "KO" in out.getvalue()


def test_replay_skips_other_keys():
    out = io.StringIO()
    assert replay([2, 1], ["sa"], render_stacks, "ab\n", out) is True


def test_replay_continues_after_final_newline():
    out = io.StringIO()
    assert replay([1, 2, 3], ["sa", "sa"], render_stacks, "\n", out) is True
    assert "OK with 2 operations" in out.getvalue()


def test_replay_stops_without_newline():
    with pytest.raises(EOFError):
        replay([2, 1], ["sa"], render_stacks, "x", io.StringIO())


def test_main_bonus_ok(tmp_path, monkeypatch, capsys):
    (tmp_path / "instructions").write_text("sa\nsa\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n\n"))
    assert main_bonus(["1 2 3"]) == 0
    assert "OK with 2 operations" in capsys.readouterr().out


def test_main_bonus_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main_bonus(["1 2"]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_bonus_duplicate_numbers(tmp_path, monkeypatch, capsys):
    (tmp_path / "instructions").write_text("sa\n")
    monkeypatch.chdir(tmp_path)
    assert main_bonus(["1", "1"]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_radix_uses_ranks_in_binary(tmp_path, monkeypatch, capsys):
    (tmp_path / "radix_instructions").write_text("ra\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    assert main_radix(["30", "10", "20"]) == 0
    out = capsys.readouterr().out
    assert format_binary(2, 2) in out
    assert "OK with 1 operations" in out


def test_main_radix_ko(tmp_path, monkeypatch, capsys):
    (tmp_path / "radix_instructions").write_text("pb\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    assert main_radix(["1", "2"]) == 0
    assert "KO" in capsys.readouterr().out