import logging

import pytest

import rubikscube
from rubikscube_cli import parse_args, rubikscube_cli


@pytest.fixture
def cli():
    args, _ = parse_args(["--seed", "3", "--length", "10"])
    return rubikscube_cli(args)


def test_parse_args_defaults():
    args, unknown = parse_args(["--extra"])
    assert args.length == 25
    assert args.seed is None
    assert not args.no_cancel
    assert unknown == ["--extra"]


def test_move_command(cli, capsys):
    cli.onecmd("move R U R' U'")
    assert cli.cube == rubikscube.apply_algorithm(rubikscube.solved_cube(), "R U R' U'")
    assert "Skipped" not in capsys.readouterr().out


def test_move_command_reports_skipped(cli, capsys):
    cli.onecmd("move R Q")
    assert cli.cube == rubikscube.apply_move(rubikscube.solved_cube(), "R")
    assert "Skipped unknown moves: Q" in capsys.readouterr().out


def test_scramble_command_is_reproducible(capsys):
    outputs = list()
    for loop1 in range(2):
        args, _ = parse_args(["--seed", "3"])
        cli = rubikscube_cli(args)
        cli.onecmd("scramble 12")
        outputs.append(cli.cube)
    assert outputs[0] == outputs[1]
    assert outputs[0].is_valid()


def test_scramble_command_bad_length(cli, capsys):
    cli.onecmd("scramble ten")
    cli.onecmd("scramble -2")
    assert capsys.readouterr().out.count("Error") == 2
    assert cli.cube == rubikscube.solved_cube()


def test_playback_commands(cli, capsys):
    cli.onecmd("load R U")
    assert cli.prompt == "CUBE [0/2]> "

    cli.onecmd("step")
    assert cli.cube == rubikscube.apply_move(rubikscube.solved_cube(), "R")
    cli.onecmd("step")
    cli.onecmd("step")
    assert "Already at the last move" in capsys.readouterr().out
    assert cli.prompt == "CUBE [2/2]> "

    cli.onecmd("instructions")
    assert "Instructions are empty" in capsys.readouterr().out

    cli.onecmd("back")
    assert cli.cube == rubikscube.apply_move(rubikscube.solved_cube(), "R")
    cli.onecmd("seek 99")
    assert cli.playback.index == 2
    cli.onecmd("seek 0")
    assert cli.cube == rubikscube.solved_cube()


def test_playback_commands_need_a_load(cli, caplog):
    with caplog.at_level(logging.WARNING, logger="rubikscube_cli"):
        cli.onecmd("step")
    assert "No algorithm loaded" in caplog.text


def test_paint_command(cli, capsys):
    cli.onecmd("paint front 0 2 red")
    assert cli.cube.get_facelet("front", 0, 2) == rubikscube.Cube_Color.Red
    cli.onecmd("valid")
    assert "No sequence of moves" in capsys.readouterr().out

    cli.onecmd("paint front 5 2 red")
    cli.onecmd("paint front 0 2")
    out = capsys.readouterr().out
    assert "Error" in out
    assert "syntax: paint" in out


def test_solved_and_reset_commands(cli, capsys):
    cli.onecmd("move F")
    cli.onecmd("solved")
    assert "not solved" in capsys.readouterr().out
    cli.onecmd("reset")
    cli.onecmd("solved")
    assert "The cube is solved" in capsys.readouterr().out


def test_inverse_and_time_commands(cli, capsys):
    cli.onecmd("inverse R U2 F'")
    cli.onecmd("time 65432")
    out = capsys.readouterr().out
    assert "Inverse: F U2 R'" in out
    assert "01:05.432" in out


def test_debug_level_command(cli):
    cli.onecmd("debug_level error")
    assert logging.getLogger("rubikscube").level == logging.ERROR
    cli.onecmd("debug_level warning")
    assert logging.getLogger("rubikscube_playback").level == logging.WARNING

    for name in rubikscube_cli.modules:
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_quit_command(cli):
    assert cli.onecmd("quit") is True
