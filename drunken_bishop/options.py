"""Drawing options.

``DrawingOptions.chars`` is laid out as::

    [background][drawing chars ...][start][end]

=========  =======================  =================
Index      Description              Default
=========  =======================  =================
``0``      Field background         ``' '``
``1..n``   Visit count buckets      ``.o+=*BOX@%&#/^``
``n+1``    Start position           ``S``
``n+2``    End position             ``E``
=========  =======================  =================

Each drawing char stands for how many times the bishop landed on a cell; counts
beyond the last drawing char saturate on it. Start and end chars override the
real count. A char list must have at least four entries, though a useful one is
18 chars or longer and only holds clearly distinguishable symbols.
"""

from dataclasses import dataclass

from drunken_bishop.errors import PaletteError

DEFAULT_CHARS = " .o+=*BOX@%&#/^SE"
DEFAULT_TEXT = ""
MIN_CHARS = 4


@dataclass(frozen=True)
class DrawingOptions:
    """Palette and frame captions used when rendering a field.

    Attributes:
        chars (str): Char list, see module docstring.
        top_text (str): Caption embedded in the top border ("" for none).
        bottom_text (str): Caption embedded in the bottom border ("" for none).

    Raises:
        PaletteError: If ``chars`` holds fewer than four characters.
    """

    chars: str = DEFAULT_CHARS
    top_text: str = DEFAULT_TEXT
    bottom_text: str = DEFAULT_TEXT

    def __post_init__(self) -> None:
        if len(self.chars) < MIN_CHARS:
            raise PaletteError(self.chars, MIN_CHARS)

    @property
    def background_char(self) -> str:
        return self.chars[0]

    @property
    def saturation_char(self) -> str:
        return self.chars[-3]

    @property
    def start_char(self) -> str:
        return self.chars[-2]

    @property
    def end_char(self) -> str:
        return self.chars[-1]


DEFAULT_OPTIONS = DrawingOptions()
