#! /usr/bin/env python
import json
import sys
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, Union

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore
from bourbaki.application.typed_io.cli_parse import cli_parser  # type: ignore

from ropesim import puzzle

INPUT_DIR = Path("inputs/")
INPUT_FILE = INPUT_DIR / "day09.txt"

Param = Union[int, float, bool, str]


@cli_parser.register(Param, as_const=True, derive_nargs=True)
def parse_param(s: str):
    return json.loads(s)


def print_solution(solution):
    print(solution)


def get_input(path: Path = INPUT_FILE) -> IO[str]:
    return open(path) if sys.stdin.isatty() else sys.stdin


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
)


@cli.definition
class RopeSim:
    """Simulate a rope of linked knots dragged around a grid and count the cells its tail visits"""

    @cli_spec.output_handler(print_solution)
    def run(self, n: int = puzzle.PART_2_LENGTH, render: bool = False, **args: Param):
        """Count the distinct cells visited by the tail of a rope of `n` segments. The default
        input is inputs/day09.txt, but input will be read from stdin if input is piped there.

        :param n: number of segments in the rope, head included
        :param render: draw the final rope and the visited cells to stderr
        :param args: extra keyword arguments passed to the solution, e.g. verbose=true.
          Run the `info` command to see the full signature.
        """
        input_ = get_input()
        print(f"Running rope simulation with {n} segments...", file=sys.stderr)
        tic = perf_counter_ns()
        solution = puzzle.run(input_, n=n, render=render, **args)
        toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return solution

    @cli_spec.output_handler(print_solution)
    def solve(self, **args: Param):
        """Report the tail's visited-cell count for both the 2-segment and the 10-segment rope

        :param args: extra keyword arguments passed to the solution, e.g. verbose=true
        """
        input_ = get_input()
        tic = perf_counter_ns()
        solution = puzzle.solve(input_, **args)
        toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return solution

    def test(self):
        """Check the solution against the worked examples"""
        puzzle.test()
        print("Tests pass!")

    def info(self):
        """Print the doc string for the solution, providing some details about methodology"""
        if puzzle.__doc__:
            print(puzzle.__doc__, end="\n\n")
        print("Signature:")
        print(signature(puzzle.run))

    def input(self):
        """Print the input text to stdout"""
        with open(INPUT_FILE, "r") as f:
            for line in f:
                print(line, file=sys.stdout, end="")


if __name__ == "__main__":
    cli.run()
