import hashlib
import io

import pytest

from drunken_bishop.errors import InputError
from drunken_bishop.input import (
    HexReader,
    byte_source,
    decode_hex,
    hash_input,
    iter_chunks,
)
from drunken_bishop.types import InputType

DATA = bytes(range(256))
HEX = DATA.hex().encode()


def test_iter_chunks() -> None:
    assert list(iter_chunks(io.BytesIO(b"abcdefg"), size=3)) == [b"abc", b"def", b"g"]
    assert list(iter_chunks(io.BytesIO(b""))) == []


@pytest.mark.parametrize("text", ["fc94", "FC94", "Fc94"])
def test_decode_hex(text: str) -> None:
    assert decode_hex(text) == b"\xfc\x94"


@pytest.mark.parametrize("text", ["abc", "zz", "ab\n", "ab cd", "日本"])
def test_decode_hex_rejects_malformed(text: str) -> None:
    with pytest.raises(InputError):
        decode_hex(text)


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 64, 4096])
def test_hex_reader_any_chunking(chunk_size: int) -> None:
    reader = HexReader(io.BytesIO(HEX), chunk_size=chunk_size)
    assert reader.read() == DATA
    assert reader.read() == b""


@pytest.mark.parametrize("chunk_size", [1, 3, 64])
def test_hex_reader_allows_single_trailing_newline(chunk_size: int) -> None:
    reader = HexReader(io.BytesIO(HEX + b"\n"), chunk_size=chunk_size)
    assert b"".join(reader) == DATA


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 64])
def test_hex_reader_allows_single_trailing_crlf(chunk_size: int) -> None:
    reader = HexReader(io.BytesIO(HEX + b"\r\n"), chunk_size=chunk_size)
    assert b"".join(reader) == DATA


@pytest.mark.parametrize(
    "payload",
    [b"abcd\r", b"ab\rcd", b"abcd\r\r\n", b"abcd\r\n\r\n", b"\rabcd", b"abcd\n\r"],
)
@pytest.mark.parametrize("chunk_size", [1, 2, 3, 64])
def test_hex_reader_stray_carriage_return(payload: bytes, chunk_size: int) -> None:
    reader = HexReader(io.BytesIO(payload), chunk_size=chunk_size)
    with pytest.raises(InputError, match="line break inside input"):
        reader.read()


@pytest.mark.parametrize("chunk_size", [1, 2, 64])
def test_hex_reader_odd_digits_before_crlf(chunk_size: int) -> None:
    reader = HexReader(io.BytesIO(b"abc\r\n"), chunk_size=chunk_size)
    with pytest.raises(InputError, match="odd number of digits"):
        reader.read()


def test_hex_reader_partial_reads() -> None:
    reader = HexReader(io.BytesIO(b"00010203"))
    assert reader.read(3) == b"\x00\x01\x02"
    assert reader.read(3) == b"\x03"
    assert reader.read(3) == b""


@pytest.mark.parametrize(
    "payload",
    [
        b"ab\ncd",
        b"abcd\n\n",
        b"\nabcd",
        b"ab cd",
        b"abzz",
        b"abc",
        b"abc\n",
    ],
)
@pytest.mark.parametrize("chunk_size", [1, 2, 64])
def test_hex_reader_rejects_malformed(payload: bytes, chunk_size: int) -> None:
    reader = HexReader(io.BytesIO(payload), chunk_size=chunk_size)
    with pytest.raises(InputError):
        reader.read()


def test_hex_reader_empty_input() -> None:
    assert HexReader(io.BytesIO(b"")).read() == b""
    assert HexReader(io.BytesIO(b"\n")).read() == b""


def test_hash_input() -> None:
    assert hash_input(io.BytesIO(DATA)) == hashlib.sha256(DATA).digest()


@pytest.mark.parametrize(
    "input_type, payload, expected",
    [
        (InputType.BIN, DATA, DATA),
        (InputType.HEX, HEX, DATA),
        (InputType.HASH, DATA, hashlib.sha256(DATA).digest()),
    ],
)
def test_byte_source(input_type: InputType, payload: bytes, expected: bytes) -> None:
    assert b"".join(byte_source(io.BytesIO(payload), input_type)) == expected


class _FailingStream(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError("disk on fire")


@pytest.mark.parametrize("input_type", list(InputType))
def test_byte_source_propagates_os_error(input_type: InputType) -> None:
    with pytest.raises(OSError, match="disk on fire"):
        b"".join(byte_source(_FailingStream(), input_type))
