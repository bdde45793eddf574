from enum import Enum
from itertools import repeat
from typing import Iterable, Iterator, List, NamedTuple

from .util import Vector, nonblank_lines

SEPARATOR = " "


class Direction(Enum):
    L = "L"
    R = "R"
    U = "U"
    D = "D"

    @property
    def vector(self) -> Vector:
        return STEP_VECTORS[self]

    @property
    def mirror(self) -> "Direction":
        return MIRRORS[self]


STEP_VECTORS = {
    Direction.R: (1, 0),
    Direction.L: (-1, 0),
    Direction.U: (0, 1),
    Direction.D: (0, -1),
}
MIRRORS = {
    Direction.R: Direction.L,
    Direction.L: Direction.R,
    Direction.U: Direction.D,
    Direction.D: Direction.U,
}


class MoveCommand(NamedTuple):
    direction: Direction
    magnitude: int

    def unit_steps(self) -> Iterator[Direction]:
        return repeat(self.direction, self.magnitude)

    def mirrored(self) -> "MoveCommand":
        return MoveCommand(self.direction.mirror, self.magnitude)

    def __str__(self):
        return f"{self.direction.value}{SEPARATOR}{self.magnitude}"


# Parsing


class CommandParseError(ValueError):
    def __init__(self, line: str, reason: str):
        super().__init__(f"{reason}: {line!r}")
        self.line = line


class UnknownDirection(CommandParseError):
    pass


class MissingCount(CommandParseError):
    pass


class InvalidCount(CommandParseError):
    pass


def parse_direction(s: str, line: str) -> Direction:
    try:
        return Direction(s)
    except ValueError:
        raise UnknownDirection(line, f"unknown direction {s!r}") from None


def parse_count(s: str, line: str) -> int:
    # int() alone would accept "+3", " 3" and "3_000"
    if not (s.isascii() and s.isdigit()):
        raise InvalidCount(line, f"count must be a positive integer, got {s!r}")
    count = int(s)
    if count < 1:
        raise InvalidCount(line, f"count must be a positive integer, got {s!r}")
    return count


def parse_command(line: str) -> MoveCommand:
    line = line.rstrip("\r\n")
    direction, sep, count = line.partition(SEPARATOR)
    if not sep or not count:
        raise MissingCount(line, "missing count")
    return MoveCommand(parse_direction(direction, line), parse_count(count, line))


def parse_commands(input_: Iterable[str]) -> List[MoveCommand]:
    return list(map(parse_command, nonblank_lines(input_)))
