import sys
from dataclasses import dataclass
from functools import reduce
from operator import add, sub
from typing import Dict, Generic, Iterable, Iterator, List, NamedTuple, Optional, Tuple, TypeVar

VERBOSE = False

T = TypeVar("T")


# Math


def sign(x: int) -> int:
    return 0 if x == 0 else (1 if x > 0 else -1)


# Grid values


class Position(NamedTuple):
    x: int
    y: int


Vector = Tuple[int, int]
Sprite = List[Position]

ORIGIN = Position(0, 0)


def translate(step: Vector, coords: Position) -> Position:
    return Position(*map(add, coords, step))


def offset(frm: Position, to: Position) -> Vector:
    """Signed vector pointing from `frm` to `to`"""
    dx, dy = map(sub, to, frm)
    return dx, dy


def chebyshev(a: Position, b: Position) -> int:
    return max(map(abs, offset(a, b)))


# Data Structures


@dataclass
class SparseGrid(Generic[T]):
    grid: Dict[Position, T]
    x_min: Optional[int] = None
    x_max: Optional[int] = None
    y_min: Optional[int] = None
    y_max: Optional[int] = None

    def __contains__(self, coords: Position):
        return coords in self.grid

    @property
    def n_rows(self) -> int:
        return 0 if self.y_min is None or self.y_max is None else (self.y_max + 1 - self.y_min)

    @property
    def n_cols(self) -> int:
        return 0 if self.x_min is None or self.x_max is None else (self.x_max + 1 - self.x_min)

    def get(self, coord: Position) -> Optional[T]:
        return self.grid.get(coord, None)

    def set(self, value: T, coord: Position) -> "SparseGrid[T]":
        x, y = coord
        self.x_min = _min(self.x_min, x)
        self.x_max = _max(self.x_max, x)
        self.y_min = _min(self.y_min, y)
        self.y_max = _max(self.y_max, y)
        self.grid[Position(x, y)] = value
        return self

    def set_all(self, value: T, coords: Iterable[Position]) -> "SparseGrid[T]":
        return reduce(lambda grid, coord: grid.set(value, coord), coords, self)

    def rows(self) -> Iterator[List[Optional[T]]]:
        """Rows from the top (largest y) down, each from smallest to largest x"""
        if not self.grid:
            return
        assert self.x_min is not None and self.x_max is not None
        assert self.y_min is not None and self.y_max is not None
        ys = range(self.y_max, self.y_min - 1, -1)
        xs = range(self.x_min, self.x_max + 1)
        for y in ys:
            yield [self.get(Position(x, y)) for x in xs]


def _min(old: Optional[int], new: int) -> int:
    return new if old is None else min(old, new)


def _max(old: Optional[int], new: int) -> int:
    return new if old is None else max(old, new)


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def is_verbose() -> bool:
    return VERBOSE


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)


def nonblank_lines(input_: Iterable[str]) -> Iterator[str]:
    return filter(None, map(str.rstrip, input_))
