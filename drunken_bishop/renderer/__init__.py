"""Rendering subpackage.

Turns finalized fields into character art. Rendering is a pure function of the
field and a :class:`drunken_bishop.options.DrawingOptions`: it never mutates
its input, so one result can be drawn any number of times with different
palettes and captions.

See :mod:`drunken_bishop.renderer.text` for the frame layout and cell mapping.
"""

from .text import (
    TextRenderer,
    cell_char,
    field_line,
    frame_line,
    iter_lines,
    render,
    render_to,
)

__all__ = [
    "TextRenderer",
    "cell_char",
    "frame_line",
    "field_line",
    "iter_lines",
    "render",
    "render_to",
]
