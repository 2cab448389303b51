"""Byte sources feeding the walker.

The walker itself only understands raw bytes. The helpers here adapt the kinds
of input the command line accepts:

* ``bin``: the stream's bytes, chunk by chunk (:func:`iter_chunks`).
* ``hex``: hexadecimal text decoded on the fly (:class:`HexReader`). A single
  line feed (or CRLF) closing the input is allowed, as produced by ``echo``
  or a text editor; a line break anywhere else is malformed input.
* ``hash``: the sha256 digest of the whole stream (:func:`hash_input`), for
  inputs too large to visualize directly.

Streams must be binary (``sys.stdin.buffer``, files opened with ``"rb"``).
``OSError`` raised while reading propagates to the caller unchanged.
"""

import binascii
import hashlib
import logging
from typing import BinaryIO, Iterator

from drunken_bishop.errors import InputError
from drunken_bishop.types import InputType

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
HEX_CHUNK_SIZE = 64


def iter_chunks(stream: BinaryIO, size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield ``stream`` in chunks of at most ``size`` bytes until EOF."""
    while chunk := stream.read(size):
        yield chunk


def decode_hex(text: str) -> bytes:
    """Decode a hex string such as a command-line argument.

    Raises:
        InputError: On odd length or any non-hex character.
    """
    try:
        return binascii.unhexlify(text)
    except ValueError as e:
        raise InputError(f"Hex parse: {e}") from e


class HexReader:
    """Streaming hexadecimal decoder with a file-like ``read``.

    Args:
        stream: Binary stream of hex text.
        chunk_size: How many hex digits to pull from ``stream`` at a time.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = HEX_CHUNK_SIZE):
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self._nibble = b""
        self._cr = False
        self._eol = False
        self._eof = False

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` decoded bytes (everything if negative).

        Returns ``b""`` once the input is exhausted.

        Raises:
            InputError: If the hex text is malformed.
        """
        while not self._eof and (size < 0 or len(self._buffer) < size):
            self._fill()
        if size < 0:
            size = len(self._buffer)
        out = bytes(self._buffer[:size])
        del self._buffer[:size]
        return out

    def __iter__(self) -> Iterator[bytes]:
        while chunk := self.read(self._chunk_size):
            yield chunk

    def _fill(self) -> None:
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            if self._cr:
                raise InputError("Hex parse: line break inside input")
            if self._nibble:
                raise InputError("Hex parse: odd number of digits")
            self._eof = True
            return
        if self._eol:
            raise InputError("Hex parse: line break inside input")

        data = self._nibble + (b"\r" if self._cr else b"") + chunk
        self._cr = False
        if data.endswith(b"\n"):
            data = data[:-1]
            if data.endswith(b"\r"):
                data = data[:-1]
            self._eol = True
        elif data.endswith(b"\r"):
            # may be the first half of a closing "\r\n"
            data = data[:-1]
            self._cr = True
        if b"\n" in data or b"\r" in data:
            raise InputError("Hex parse: line break inside input")

        if len(data) % 2:
            data, self._nibble = data[:-1], data[-1:]
        else:
            self._nibble = b""

        try:
            self._buffer += binascii.unhexlify(data)
        except binascii.Error as e:
            raise InputError(f"Hex parse: {e}") from e


def hash_input(stream: BinaryIO) -> bytes:
    """Return the sha256 digest of everything left in ``stream``."""
    digest = hashlib.sha256()
    total = 0
    for chunk in iter_chunks(stream):
        digest.update(chunk)
        total += len(chunk)
    logger.debug("Hashed %d input bytes to %s", total, digest.hexdigest())
    return digest.digest()


def byte_source(stream: BinaryIO, input_type: InputType) -> Iterator[bytes]:
    """Resolve ``input_type`` into an iterator of raw byte chunks."""
    if input_type == InputType.BIN:
        return iter_chunks(stream)
    if input_type == InputType.HEX:
        return iter(HexReader(stream))
    if input_type == InputType.HASH:
        return iter([hash_input(stream)])
    raise ValueError(f"Unknown input type: {input_type}")
