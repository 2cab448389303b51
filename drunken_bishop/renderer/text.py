"""Character-art renderer.

Output layout for a ``w`` x ``h`` field::

    +---[top text]----+    <- frame line, ``w`` columns between the corners
    |       .=o.  .   |    <- ``h`` field lines, one char per cell
    ...
    +-----------------+    <- frame line with the bottom text (empty here)

Captions are measured in terminal columns, not code points, so wide glyphs
never push the right corner out of line. A caption that does not fit in
``w - 2`` columns (the brackets take the other two) is cut on a character
boundary. The dashes left over are split evenly, any odd one going right.
"""

from typing import Callable, Iterator, Sequence

from drunken_bishop.grid import Grid
from drunken_bishop.options import DEFAULT_OPTIONS, DrawingOptions
from drunken_bishop.types import CellValue, VALUE_E, VALUE_S
from drunken_bishop.utils.width import truncate_to_width

CORNER = "+"
SIDE = "|"
FILL = "-"

LineSink = Callable[[str], object]


def cell_char(value: CellValue, chars: Sequence[str]) -> str:
    """Map a cell value to its display char.

    Raises:
        ValueError: For negative values other than the two sentinels.
    """
    if value == VALUE_E:
        return chars[-1]
    if value == VALUE_S:
        return chars[-2]
    if value < 0:
        raise ValueError(f"Unexpected cell value: {value}")
    return chars[min(value, len(chars) - 3)]


def frame_line(width: int, text: str = "") -> str:
    """Build a top or bottom border, optionally carrying ``[text]``."""
    if not text:
        return CORNER + FILL * width + CORNER
    caption, caption_width = truncate_to_width(text, width - 2)
    fill = width - (caption_width + 2)
    dash, pad = divmod(fill, 2)
    return (
        CORNER
        + FILL * dash
        + "["
        + caption
        + "]"
        + FILL * (dash + pad)
        + CORNER
    )


def field_line(row: Sequence[CellValue], chars: Sequence[str]) -> str:
    return SIDE + "".join(cell_char(v, chars) for v in row) + SIDE


def iter_lines(
    field: Grid, options: DrawingOptions = DEFAULT_OPTIONS
) -> Iterator[str]:
    """Yield the rendered lines of ``field`` without line terminators."""
    chars = options.chars
    yield frame_line(field.width, options.top_text)
    for row in field.rows():
        yield field_line(row, chars)
    yield frame_line(field.width, options.bottom_text)


def render(field: Grid, options: DrawingOptions = DEFAULT_OPTIONS) -> str:
    """Render ``field`` to a single string, every line ending in ``\\n``."""
    return "".join(line + "\n" for line in iter_lines(field, options))


def render_to(
    field: Grid, sink: LineSink, options: DrawingOptions = DEFAULT_OPTIONS
) -> None:
    """Hand each rendered line (without terminator) to ``sink``."""
    for line in iter_lines(field, options):
        sink(line)


class TextRenderer:
    options: DrawingOptions

    def __init__(self, options: DrawingOptions = DEFAULT_OPTIONS):
        self.options = options

    def render(self, field: Grid) -> str:
        return render(field, self.options)

    def lines(self, field: Grid) -> Iterator[str]:
        return iter_lines(field, self.options)
