from random import Random
from typing import List

import pytest

from ropesim.commands import Direction, MoveCommand, parse_commands

SHORT_EXAMPLE = "R 4|U 4|L 3|D 1|R 4|D 1|L 5|R 2".replace("|", "\n")
LONG_EXAMPLE = "R 5|U 8|L 8|D 3|R 17|D 10|L 25|U 20".replace("|", "\n")


def _random_commands(seed: int, n: int = 200, max_magnitude: int = 6) -> List[MoveCommand]:
    rng = Random(seed)
    directions = list(Direction)
    return [MoveCommand(rng.choice(directions), rng.randint(1, max_magnitude)) for _ in range(n)]


@pytest.fixture
def random_commands():
    return _random_commands


@pytest.fixture
def short_example() -> List[MoveCommand]:
    return parse_commands(SHORT_EXAMPLE.splitlines())


@pytest.fixture
def long_example() -> List[MoveCommand]:
    return parse_commands(LONG_EXAMPLE.splitlines())
