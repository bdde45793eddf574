"""Rope ("chain") state and the pull rule that keeps its segments together.

A chain is a plain list of positions, head first. After the head moves one cell, each
following segment is corrected in order against the segment in front of it, which has
already been corrected for this step. A segment that has fallen 2 cells behind steps once
towards its leader, diagonally if they differ on both axes.
"""
from typing import Iterable

from .commands import Direction
from .util import ORIGIN, Position, Sprite, chebyshev, offset, sign, translate

Chain = Sprite


def new_chain(n: int) -> Chain:
    if n < 1:
        raise ValueError(f"a chain needs at least 1 segment; got {n}")
    return [ORIGIN] * n


def catch_up(leader: Position, follower: Position) -> Position:
    dx, dy = offset(follower, leader)
    if max(abs(dx), abs(dy)) <= 1:
        return follower
    else:
        return translate((sign(dx), sign(dy)), follower)


def apply_unit_step(chain: Chain, direction: Direction) -> Position:
    """Move the head one cell in `direction`, pull every other segment along in place, and
    return the resulting tail position"""
    chain[0] = translate(direction.vector, chain[0])
    for i in range(1, len(chain)):
        moved = catch_up(chain[i - 1], chain[i])
        if moved == chain[i]:
            # nothing further down the chain can move either
            break
        chain[i] = moved
    return chain[-1]


def is_taut(chain: Iterable[Position]) -> bool:
    segments = list(chain)
    return all(chebyshev(a, b) <= 1 for a, b in zip(segments, segments[1:]))
