import builtins

import pytest

from scripts.play_hex import DEFAULT_SIZE, build_parser, main


def test_default_size():
    args = build_parser().parse_args([])
    assert args.size == DEFAULT_SIZE == 14
    assert args.ai == "none"


def test_size_flag():
    assert build_parser().parse_args(["-s", "7"]).size == 7


@pytest.mark.parametrize("argv", [["-s", "0"], ["-s", "abc"], ["-s"], ["--bogus"]])
def test_bad_arguments_exit_nonzero_with_usage(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(argv)
    assert excinfo.value.code != 0
    assert "usage: hex" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["-h", "-help", "--help"])
def test_help_flags(flag, capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([flag])
    assert excinfo.value.code == 0
    assert "-s SIZE" in capsys.readouterr().out


def test_two_humans_play_to_a_win(monkeypatch, capsys):
    lines = iter(["1 1", "2 2", "2 1"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(lines))

    assert main(["-s", "2"]) == 0

    out = capsys.readouterr().out
    assert out.rstrip().endswith("Player X won!")


def test_quit_during_game(monkeypatch, capsys):
    lines = iter(["1 1", ":q"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(lines))

    with pytest.raises(SystemExit) as excinfo:
        main(["-s", "3"])
    assert excinfo.value.code == 0
    assert "Bye." in capsys.readouterr().out


def test_computer_plays_both_sides(capsys):
    assert main(["-s", "4", "--ai", "both", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "won!" in out
    assert "Player X plays" in out
