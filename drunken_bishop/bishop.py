"""Drunken bishop walker and its finished result.

:class:`BishopArt` is the stateful front end over the pure reducers in
:mod:`drunken_bishop.step`. Feed it bytes in as many chunks as convenient, then
call :meth:`BishopArt.result` once to obtain an immutable
:class:`BishopResult` that can be drawn repeatedly.

Example::

    >>> art = BishopArt().chain(b"foo").chain(b"bar")
    >>> print(art.draw(), end="")  # doctest: +SKIP

Data is walked as-is, without hashing. On a default sized field only about the
first 64 bytes meaningfully shape the picture; hash larger inputs first.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from drunken_bishop.errors import FinalizedError
from drunken_bishop.grid import Grid
from drunken_bishop.options import DEFAULT_OPTIONS, DrawingOptions
from drunken_bishop.position import Position
from drunken_bishop.renderer.text import LineSink, iter_lines, render, render_to
from drunken_bishop.state import WalkState
from drunken_bishop.step import consume, finalize, start
from drunken_bishop.types import DEFAULT_SIZE_WH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BishopResult:
    """Finalized field, safe to draw any number of times.

    Attributes:
        field (Grid): Visit counters with start/end sentinels stamped.
    """

    field: Grid

    @property
    def width(self) -> int:
        return self.field.width

    @property
    def height(self) -> int:
        return self.field.height

    def as_array(self) -> np.ndarray:
        """Return the field as a ``(height, width)`` int64 array copy."""
        return np.array(list(self.field.cells), dtype=np.int64).reshape(
            self.height, self.width
        )

    def lines(self, options: DrawingOptions = DEFAULT_OPTIONS) -> Iterator[str]:
        return iter_lines(self.field, options)

    def draw_to(self, sink: LineSink, options: DrawingOptions = DEFAULT_OPTIONS) -> None:
        render_to(self.field, sink, options)

    def draw_with_opts(self, options: DrawingOptions) -> str:
        return render(self.field, options)

    def draw(self) -> str:
        """Draw using :data:`DEFAULT_OPTIONS`."""
        return self.draw_with_opts(DEFAULT_OPTIONS)


class BishopArt:
    """Drunken bishop walk in progress.

    Args:
        width: Field width, within ``GEOMETRY_LIMITS_MIN``/``GEOMETRY_LIMITS_MAX``.
        height: Field height, same limits.

    Raises:
        GeometryError: If the size is outside the limits.
    """

    def __init__(self, width: int = DEFAULT_SIZE_WH[0], height: int = DEFAULT_SIZE_WH[1]):
        self._state: Optional[WalkState] = start(width, height)
        self._width = width
        self._height = height
        logger.debug("Started %dx%d walk", width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def finalized(self) -> bool:
        return self._state is None

    @property
    def position(self) -> Position:
        return self._active_state().position

    def input(self, data: bytes) -> None:
        """Walk over ``data``.

        May be called any number of times before :meth:`result`; the outcome
        only depends on the concatenation of everything fed.

        Raises:
            FinalizedError: If :meth:`result` has already been called.
        """
        self._state = consume(self._active_state(), data)

    def chain(self, data: bytes) -> "BishopArt":
        """Same as :meth:`input`, returning ``self`` for chaining."""
        self.input(data)
        return self

    def write(self, data: bytes) -> int:
        """File-like alias of :meth:`input`, usable with ``shutil.copyfileobj``."""
        if data:
            self.input(data)
        return len(data)

    def flush(self) -> None:
        pass

    def result(self) -> BishopResult:
        """Finish the walk and return the field.

        The walker cannot be used afterwards.

        Raises:
            FinalizedError: If called a second time.
        """
        state = self._active_state()
        self._state = None
        logger.debug(
            "Finalized %dx%d walk after %d bytes at %s",
            self._width,
            self._height,
            state.consumed,
            state.position,
        )
        return BishopResult(finalize(state))

    def draw_with_opts(self, options: DrawingOptions) -> str:
        """Finalize and draw; use :meth:`result` to draw more than once."""
        return self.result().draw_with_opts(options)

    def draw(self) -> str:
        return self.result().draw()

    def _active_state(self) -> WalkState:
        if self._state is None:
            raise FinalizedError("BishopArt has already been finalized")
        return self._state

    def __repr__(self) -> str:
        status = "finalized" if self.finalized else "active"
        return f"BishopArt(width={self._width}, height={self._height}, {status})"
