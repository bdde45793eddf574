"""Rope bridge: a chain of knots follows its head around an unbounded grid, one cell at a time.

Every segment after the head is pulled towards the one in front of it as soon as they stop
touching (including diagonally), taking a single straight or diagonal step. The answer is the
number of distinct cells the last segment ever occupies, counting the start.

Parameters:
  n: number of segments in the chain, head included (2 and 10 are the two puzzle variants)
  verbose: print every intermediate chain to stderr
  render: draw the final chain and the cells its tail visited to stderr
"""
import sys
from typing import IO, List

from .commands import MoveCommand, parse_commands
from .render import render_chain, render_visited
from .simulate import Simulator
from .util import set_verbose

PART_1_LENGTH = 2
PART_2_LENGTH = 10


def simulate(commands: List[MoveCommand], n: int, render: bool = False) -> int:
    simulator = Simulator(commands, n)
    visited = simulator.run()
    if render:
        print(render_chain(simulator.chain), end="\n\n", file=sys.stderr)
        print(render_visited(simulator.visited), end="\n\n", file=sys.stderr)
    return visited


def run(input_: IO[str], n: int = PART_2_LENGTH, verbose: bool = False, render: bool = False) -> int:
    set_verbose(verbose)
    commands = parse_commands(input_)
    return simulate(commands, n, render)


def report(n: int, visited: int) -> str:
    if n == PART_1_LENGTH:
        return f"tail visited {visited} unique positions"
    else:
        return f"tail of {n}-segmented rope visited {visited} unique positions"


def solve(input_: IO[str], verbose: bool = False) -> str:
    set_verbose(verbose)
    commands = parse_commands(input_)
    lines = (report(n, simulate(commands, n)) for n in (PART_1_LENGTH, PART_2_LENGTH))
    return "\n".join(lines)


test_input = """R 4
U 4
L 3
D 1
R 4
D 1
L 5
R 2"""

test_input_long = """R 5
U 8
L 8
D 3
R 17
D 10
L 25
U 20"""


def test():
    import io

    actual = run(io.StringIO(test_input), n=PART_1_LENGTH, verbose=True)
    expected = 13
    assert actual == expected, (actual, expected)

    actual = run(io.StringIO(test_input), n=PART_2_LENGTH)
    expected = 1
    assert actual == expected, (actual, expected)

    actual = run(io.StringIO(test_input_long), n=PART_2_LENGTH)
    expected = 36
    assert actual == expected, (actual, expected)

    actual_report = solve(io.StringIO(test_input))
    expected_report = "tail visited 13 unique positions\ntail of 10-segmented rope visited 1 unique positions"
    assert actual_report == expected_report, (actual_report, expected_report)
