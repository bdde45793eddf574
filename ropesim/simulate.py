from enum import Enum
from itertools import chain as concat
from typing import Iterator, Sequence, Set

from .commands import Direction, MoveCommand
from .rope import Chain, apply_unit_step, is_taut, new_chain
from .util import Position, is_verbose, print_


class State(Enum):
    RUNNING = "running"
    DONE = "done"


class SimulationFinished(RuntimeError):
    pass


class SimulationRunning(RuntimeError):
    pass


def unit_steps(commands: Sequence[MoveCommand]) -> Iterator[Direction]:
    return concat.from_iterable(command.unit_steps() for command in commands)


class Simulator:
    """Replays move commands one unit step at a time against a fresh chain of
    `chain_length` segments, recording every cell the tail occupies.

    The chain starts with every segment at the origin, and the origin counts as visited
    before any move is applied. The visited count can only be read once every command has
    been consumed.
    """

    chain: Chain
    visited: Set[Position]

    def __init__(self, commands: Sequence[MoveCommand], chain_length: int):
        self.chain = new_chain(chain_length)
        self.visited = {self.chain[-1]}
        self.n_steps = 0
        self._steps = unit_steps(commands)
        self._next = next(self._steps, None)

    @property
    def state(self) -> State:
        return State.DONE if self._next is None else State.RUNNING

    @property
    def tail(self) -> Position:
        return self.chain[-1]

    def step(self) -> Position:
        direction = self._next
        if direction is None:
            raise SimulationFinished("all commands have been consumed")
        tail = apply_unit_step(self.chain, direction)
        self.visited.add(tail)
        self.n_steps += 1
        self._next = next(self._steps, None)
        if is_verbose():
            assert is_taut(self.chain), self.chain
            print_(f"{self.n_steps}: {direction.value} -> {self.chain}")
        return tail

    def __iter__(self) -> Iterator[Position]:
        while self.state is State.RUNNING:
            yield self.step()

    def run(self) -> int:
        for _ in self:
            pass
        return self.visited_count

    @property
    def visited_count(self) -> int:
        if self.state is State.RUNNING:
            raise SimulationRunning("visited count is only available once all commands are consumed")
        return len(self.visited)


def run(commands: Sequence[MoveCommand], chain_length: int) -> int:
    return Simulator(commands, chain_length).run()


def tail_trajectory(commands: Sequence[MoveCommand], chain_length: int) -> Iterator[Position]:
    """Tail position after every unit step, not including the starting position"""
    return iter(Simulator(commands, chain_length))
