"""Drunken bishop randomart.

Renders the visual fingerprints OpenSSH prints for host keys: a bishop walks a
small field, steered by the bits of the input, and the number of times it
visited each cell is drawn as a character.

>>> from drunken_bishop import BishopArt
>>> data = bytes.fromhex("fc94b0c1e5b0987c5843997697ee9fb7")
>>> print(BishopArt().chain(data).draw(), end="")
+-----------------+
|       .=o.  .   |
|     . *+*. o    |
|      =.*..o     |
|       o + ..    |
|        S o.     |
|         o  .    |
|          .  . . |
|              o .|
|               E.|
+-----------------+
"""

from .bishop import BishopArt, BishopResult
from .errors import (
    BishopError,
    ConfigurationError,
    FinalizedError,
    GeometryError,
    InputError,
    PaletteError,
)
from .grid import Grid
from .options import DEFAULT_CHARS, DEFAULT_OPTIONS, DrawingOptions
from .position import Position
from .types import (
    DEFAULT_SIZE_WH,
    GEOMETRY_LIMITS_MAX,
    GEOMETRY_LIMITS_MIN,
    InputType,
)

__all__ = [
    "BishopArt",
    "BishopResult",
    "BishopError",
    "ConfigurationError",
    "FinalizedError",
    "GeometryError",
    "InputError",
    "PaletteError",
    "Grid",
    "DEFAULT_CHARS",
    "DEFAULT_OPTIONS",
    "DrawingOptions",
    "Position",
    "DEFAULT_SIZE_WH",
    "GEOMETRY_LIMITS_MAX",
    "GEOMETRY_LIMITS_MIN",
    "InputType",
]
