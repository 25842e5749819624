import io
import sys

import pytest

from pushswap.cli import checker_main, main


def _run_checker(monkeypatch, args, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return checker_main(args)


def test_main_without_arguments_fails_quietly(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["3", "abc"], ["2147483648"], ["1", "-"[:0] + "2x"]],
)
def test_main_rejects_bad_input(capsys, args):
    assert main(args) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_prints_swap(capsys):
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["-5", "0", "7"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [
        ["5", "-3", "12", "0", "8", "-100", "2147483647", "-2147483648"],
        ["4", "3", "2", "1"],
        [str((i * 13) % 50 - 25) for i in range(50)],
    ],
)
def test_main_output_is_accepted_by_checker(capsys, monkeypatch, args):
    assert main(args) == 0
    ops = capsys.readouterr().out
    assert _run_checker(monkeypatch, args, ops) == 0
    assert capsys.readouterr().out == "OK\n"


def test_checker_ok(capsys, monkeypatch):
    assert _run_checker(monkeypatch, ["2", "1", "3"], "sa\n") == 0
    assert capsys.readouterr().out == "OK\n"


def test_checker_ko_without_operations(capsys, monkeypatch):
    assert _run_checker(monkeypatch, ["2", "1", "3"], "") == 0
    assert capsys.readouterr().out == "KO\n"


def test_checker_ko_when_b_not_empty(capsys, monkeypatch):
    assert _run_checker(monkeypatch, ["1", "2", "3"], "pb\n") == 0
    assert capsys.readouterr().out == "KO\n"


def test_checker_ignores_unterminated_last_line(capsys, monkeypatch):
    assert _run_checker(monkeypatch, ["2", "1", "3"], "sa") == 0
    assert capsys.readouterr().out == "KO\n"


@pytest.mark.parametrize("text", ["xx\n", "pa\n", "rrrr\n", "\n", "sa\nsb\n"])
def test_checker_errors(capsys, monkeypatch, text):
    assert _run_checker(monkeypatch, ["2", "1", "3"], text) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_checker_rejects_bad_arguments(capsys, monkeypatch):
    assert _run_checker(monkeypatch, ["1", "one"], "") == 1
    assert capsys.readouterr().err == "Error\n"


def test_checker_without_arguments(monkeypatch):
    assert _run_checker(monkeypatch, [], "sa\n") == 1