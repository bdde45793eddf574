from string import ascii_lowercase, digits
from typing import Iterable, Optional

from .rope import Chain
from .util import ORIGIN, Position, SparseGrid

EMPTY, VISITED, START, HEAD = ".", "#", "s", "H"
SEGMENT_LABELS = digits + ascii_lowercase


def segment_label(i: int) -> str:
    return HEAD if i == 0 else SEGMENT_LABELS[i % len(SEGMENT_LABELS)]


def format_grid(grid: SparseGrid[str]) -> str:
    def cell(value: Optional[str]) -> str:
        return value or EMPTY

    return "\n".join("".join(map(cell, row)) for row in grid.rows())


def render_chain(chain: Chain) -> str:
    """Draw the chain with the head as H and segment i by its index. Where segments overlap,
    the one nearer the head is shown."""
    grid = SparseGrid[str]({}).set(START, ORIGIN)
    for i in reversed(range(len(chain))):
        grid.set(segment_label(i), chain[i])
    return format_grid(grid)


def render_visited(positions: Iterable[Position]) -> str:
    grid = SparseGrid[str]({}).set_all(VISITED, positions).set(START, ORIGIN)
    return format_grid(grid)
