import io

import pytest

from ropesim.commands import (
    CommandParseError,
    Direction,
    InvalidCount,
    MissingCount,
    MoveCommand,
    UnknownDirection,
    parse_command,
    parse_commands,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("R 4", MoveCommand(Direction.R, 4)),
        ("L 1\n", MoveCommand(Direction.L, 1)),
        ("U 12\r\n", MoveCommand(Direction.U, 12)),
        ("D 3", MoveCommand(Direction.D, 3)),
    ],
)
def test_parse_command(line, expected):
    actual = parse_command(line)
    assert actual == expected, (actual, expected)


@pytest.mark.parametrize(
    "line, error",
    [
        ("X 4", UnknownDirection),
        ("r 4", UnknownDirection),
        ("RR 4", UnknownDirection),
        ("R", MissingCount),
        ("R ", MissingCount),
        ("R\t4", MissingCount),
        ("", MissingCount),
        ("R four", InvalidCount),
        ("R 0", InvalidCount),
        ("R -3", InvalidCount),
        ("R +3", InvalidCount),
        ("R 4 5", InvalidCount),
    ],
)
def test_parse_command_errors(line, error):
    with pytest.raises(error) as exc_info:
        parse_command(line)
    assert isinstance(exc_info.value, CommandParseError)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.line == line


def test_parse_commands_skips_blank_lines():
    input_ = io.StringIO("R 4\n\nU 2\n\n")
    expected = [MoveCommand(Direction.R, 4), MoveCommand(Direction.U, 2)]
    assert parse_commands(input_) == expected


def test_parse_commands_rejects_whole_input():
    with pytest.raises(UnknownDirection):
        parse_commands(io.StringIO("R 4\nQ 2\nU 1"))


def test_unit_steps():
    assert list(MoveCommand(Direction.U, 3).unit_steps()) == [Direction.U] * 3


@pytest.mark.parametrize(
    "direction, mirror, vector",
    [
        (Direction.L, Direction.R, (-1, 0)),
        (Direction.R, Direction.L, (1, 0)),
        (Direction.U, Direction.D, (0, 1)),
        (Direction.D, Direction.U, (0, -1)),
    ],
)
def test_direction_vectors_and_mirrors(direction, mirror, vector):
    assert direction.mirror is mirror
    assert direction.vector == vector
    assert MoveCommand(direction, 2).mirrored() == MoveCommand(mirror, 2)


def test_str_round_trips_through_parser():
    command = MoveCommand(Direction.D, 17)
    assert str(command) == "D 17"
    assert parse_command(str(command)) == command
