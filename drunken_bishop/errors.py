"""Exception taxonomy.

Everything raised deliberately by this package derives from
:class:`BishopError`. Configuration problems also derive from ``ValueError``
and misuse of a finalized walker from ``RuntimeError`` so callers that only
know the builtin hierarchy still catch them. I/O failures of external byte
sources are never wrapped; ``OSError`` propagates as-is.
"""

from typing import Optional

from drunken_bishop.types import Size


class BishopError(Exception):
    """Base class for all errors raised by drunken_bishop."""


class ConfigurationError(BishopError, ValueError):
    """Invalid walker or drawing configuration."""


class GeometryError(ConfigurationError):
    """Requested field size is outside the supported limits.

    Attributes:
        min_wh: Smallest allowed (width, height).
        max_wh: Largest allowed (width, height).
        size: The rejected (width, height), if known.
    """

    def __init__(self, min_wh: Size, max_wh: Size, size: Optional[Size] = None):
        self.min_wh = min_wh
        self.max_wh = max_wh
        self.size = size
        super().__init__(
            f"Geometry must be within {min_wh[0]}x{min_wh[1]} "
            f"and {max_wh[0]}x{max_wh[1]}"
            + (f", got {size[0]}x{size[1]}" if size is not None else "")
        )


class PaletteError(ConfigurationError):
    """Char list is too short to hold background, drawing, start and end chars."""

    def __init__(self, chars: str, min_length: int):
        self.chars = chars
        self.min_length = min_length
        super().__init__(
            f"Char list must be {min_length} chars or longer, got {len(chars)}"
        )


class FinalizedError(BishopError, RuntimeError):
    """Walker was fed or finalized after its result had been taken."""


class InputError(BishopError, ValueError):
    """Malformed external input, e.g. invalid hexadecimal text."""
