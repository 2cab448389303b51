"""``bishop`` command line.

Visualizes keys and hashes using OpenSSH's drunken bishop algorithm::

    $ bishop fc94b0c1e5b0987c5843997697ee9fb7      # hex from argument
    $ bishop -i key.bin                           # binary file
    $ bishop -s -I hex < fingerprint.txt          # hex from stdin
    $ bishop -i big.iso -I hash                   # sha256 of a file

Errors are reported on stderr as a single line with exit status 1.
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional, TextIO

from drunken_bishop.bishop import BishopArt
from drunken_bishop.config import CliConfig, InputSource
from drunken_bishop.errors import BishopError
from drunken_bishop.input import byte_source, decode_hex
from drunken_bishop.options import DEFAULT_CHARS
from drunken_bishop.types import DEFAULT_SIZE_WH, InputType

logger = logging.getLogger(__name__)

INPUT_TYPE_HELP = """Input type for -i/-s:
 bin  - treat as binary data (default)
 hex  - treat as HEX data
 hash - hash input as binary and visualize the sha256 (use for large inputs)"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bishop",
        description="Visualizes keys and hashes using OpenSSH's Drunken Bishop algorithm",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("hex", nargs="?", help="HEX input, should have even length")
    parser.add_argument("-q", "--quiet", action="store_true", help="Don't echo hex input")
    parser.add_argument("-i", dest="input_path", metavar="FILE", help="Input file ('-' for stdin)")
    parser.add_argument("-s", "--stdin", dest="use_stdin", action="store_true",
                        help="Use stdin as input, shorthand for `-i -`")
    parser.add_argument("-I", "--input-type", type=str.lower,
                        choices=[t.value for t in InputType], help=INPUT_TYPE_HELP)
    parser.add_argument("--chars", default=DEFAULT_CHARS,
                        help="Custom char list: '[bg][char]...[start][end]'")
    parser.add_argument("-w", "--width", type=int, default=DEFAULT_SIZE_WH[0], help="Field width")
    parser.add_argument("-H", "--height", type=int, default=DEFAULT_SIZE_WH[1], help="Field height")
    parser.add_argument("-t", "--top", default="", help="Top frame text")
    parser.add_argument("-b", "--bottom", default="", help="Bottom frame text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> CliConfig:
    args = build_parser().parse_args(argv)
    return CliConfig(
        hex=args.hex,
        input_path=args.input_path,
        use_stdin=args.use_stdin,
        input_type=InputType(args.input_type) if args.input_type else None,
        quiet=args.quiet,
        chars=args.chars,
        width=args.width,
        height=args.height,
        top=args.top,
        bottom=args.bottom,
        verbose=args.verbose,
    )


def feed(art: BishopArt, stream: BinaryIO, input_type: InputType) -> None:
    """Walk everything ``stream`` yields after ``input_type`` conversion."""
    for chunk in byte_source(stream, input_type):
        art.input(chunk)


def run(
    config: CliConfig,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """Execute ``config`` and write the art to ``stdout``; returns the art.

    Raises:
        BishopError: On bad configuration or malformed input.
        OSError: If the input file cannot be read.
    """
    stdout = stdout if stdout is not None else sys.stdout

    options = config.drawing_options()
    art = BishopArt(config.width, config.height)
    source = config.source
    logger.debug("Reading %s input (%s)", source, config.resolved_input_type)

    if source == InputSource.STDIN:
        if stdin is None:
            stdin = sys.stdin.buffer
        feed(art, stdin, config.resolved_input_type)
    elif source == InputSource.FILE:
        assert config.input_path is not None
        with open(config.input_path, "rb") as f:
            feed(art, f, config.resolved_input_type)
    else:
        assert config.hex is not None
        data = decode_hex(config.hex)
        if not config.quiet:
            stdout.write(f"Fingerprint of:\n{config.hex}\n\n")
        art.input(data)

    out = art.draw_with_opts(options)
    stdout.write(out)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        run(config)
    except (BishopError, OSError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
