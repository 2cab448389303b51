"""Command-line configuration.

:class:`CliConfig` is the validated, immutable form of the ``bishop`` command's
arguments. It knows how to choose the input (hex argument, file or stdin) and
how to build the :class:`drunken_bishop.options.DrawingOptions` used for
output. Geometry and palette are checked when the walker and the options are
built, so a bad value surfaces as a ``ConfigurationError`` before any input is
read.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Optional

from drunken_bishop.errors import ConfigurationError
from drunken_bishop.options import DEFAULT_CHARS, DEFAULT_TEXT, DrawingOptions
from drunken_bishop.types import DEFAULT_SIZE_WH, InputType

STDIN_PATH = "-"


class InputSource(StrEnum):
    """Where the bytes to visualize come from."""

    STDIN = auto()
    FILE = auto()
    HEX = auto()


@dataclass(frozen=True)
class CliConfig:
    """Resolved ``bishop`` arguments.

    Attributes:
        hex (str | None): Hex string given as positional argument.
        input_path (str | None): File to read; ``"-"`` means stdin.
        use_stdin (bool): Read from stdin (shorthand for ``input_path="-"``).
        input_type (InputType | None): How to interpret file/stdin input.
        quiet (bool): Do not echo a hex argument before the art.
        chars (str): Char list for drawing.
        width (int): Field width.
        height (int): Field height.
        top (str): Top frame caption.
        bottom (str): Bottom frame caption.
        verbose (bool): Enable debug logging.
    """

    hex: Optional[str] = None
    input_path: Optional[str] = None
    use_stdin: bool = False
    input_type: Optional[InputType] = None
    quiet: bool = False
    chars: str = DEFAULT_CHARS
    width: int = DEFAULT_SIZE_WH[0]
    height: int = DEFAULT_SIZE_WH[1]
    top: str = DEFAULT_TEXT
    bottom: str = DEFAULT_TEXT
    verbose: bool = False

    @property
    def source(self) -> InputSource:
        """Pick the input source.

        Raises:
            ConfigurationError: Unless exactly one of ``(stdin | file) [type]``
                or ``hex`` was given.
        """
        match (self.use_stdin, self.input_path, self.hex):
            case (True, None, None):
                return InputSource.STDIN
            case (False, path, None) if path == STDIN_PATH:
                return InputSource.STDIN
            case (False, str(), None):
                return InputSource.FILE
            case (False, None, str()) if self.input_type is None:
                return InputSource.HEX
        raise ConfigurationError(
            "Either `(-s | -i <file>) [-I <type>]` _or_ `<hex>` should be passed"
        )

    @property
    def resolved_input_type(self) -> InputType:
        return self.input_type if self.input_type is not None else InputType.BIN

    def drawing_options(self) -> DrawingOptions:
        return DrawingOptions(chars=self.chars, top_text=self.top, bottom_text=self.bottom)
