"""Walk reducers.

Pure functions driving a :class:`drunken_bishop.state.WalkState`:

1. :func:`start` validates the field size and places the bishop in the center,
   marking that cell with the start sentinel.
2. :func:`step` applies a single bit pair: move (edge clamped), then drop a
   coin on the landing cell unless it holds a sentinel or is saturated.
3. :func:`consume` applies every pair of a byte chunk, with the same result
   as folding :func:`step` over them.
4. :func:`finalize` stamps the end sentinel on the last position. It overwrites
   whatever was there, including the start sentinel when the bishop never
   managed to leave the center.
"""

from dataclasses import replace

from drunken_bishop.errors import GeometryError
from drunken_bishop.grid import Grid
from drunken_bishop.moves import BitPair, bishop_move, iter_bit_pairs
from drunken_bishop.position import Position
from drunken_bishop.state import WalkState
from drunken_bishop.types import (
    GEOMETRY_LIMITS_MAX,
    GEOMETRY_LIMITS_MIN,
    VALUE_E,
    VALUE_MAX,
    VALUE_S,
)


def check_geometry(width: int, height: int) -> None:
    """Raise ``GeometryError`` unless the size is within the configured limits."""
    (min_w, min_h), (max_w, max_h) = GEOMETRY_LIMITS_MIN, GEOMETRY_LIMITS_MAX
    if not (min_w <= width <= max_w and min_h <= height <= max_h):
        raise GeometryError(
            GEOMETRY_LIMITS_MIN, GEOMETRY_LIMITS_MAX, size=(width, height)
        )


def start_position(width: int, height: int) -> Position:
    return Position((width - 1) // 2, (height - 1) // 2)


def start(width: int, height: int) -> WalkState:
    """Return a fresh walk on a ``width`` x ``height`` field.

    Raises:
        GeometryError: If the size is outside ``GEOMETRY_LIMITS_MIN`` /
            ``GEOMETRY_LIMITS_MAX``.
    """
    check_geometry(width, height)
    pos = start_position(width, height)
    grid = Grid.filled(width, height, 0).set(pos, VALUE_S)
    return WalkState(grid=grid, position=pos)


def step(state: WalkState, pair: BitPair) -> WalkState:
    """Move the bishop once and count the visit."""
    pos = bishop_move(state.position, pair, state.width, state.height)
    value = state.grid.get(pos)
    grid = state.grid
    if 0 <= value < VALUE_MAX:
        grid = grid.set(pos, value + 1)
    return replace(state, grid=grid, position=pos)


def consume(state: WalkState, data: bytes) -> WalkState:
    """Walk every byte of ``data``, four moves per byte.

    Equivalent to folding :func:`step` over ``iter_bit_pairs(data)``, but the
    whole chunk is applied to a single ``pvector`` evolver so the grid is
    copied once per call rather than once per move.
    """
    grid = state.grid
    cells = grid.cells.evolver()
    pos = state.position
    for pair in iter_bit_pairs(data):
        pos = bishop_move(pos, pair, state.width, state.height)
        index = grid.index(pos)
        value = cells[index]
        if 0 <= value < VALUE_MAX:
            cells[index] = value + 1
    return replace(
        state,
        grid=replace(grid, cells=cells.persistent()),
        position=pos,
        consumed=state.consumed + len(data),
    )


def finalize(state: WalkState) -> Grid:
    """Return the finished field with the end sentinel in place."""
    return state.grid.set(state.position, VALUE_E)
