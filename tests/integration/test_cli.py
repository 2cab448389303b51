import hashlib
import io
from pathlib import Path

import pytest

from drunken_bishop import BishopArt
from drunken_bishop.cli import main, parse_config, run
from drunken_bishop.config import CliConfig
from drunken_bishop.errors import ConfigurationError, InputError
from drunken_bishop.types import InputType
from tests.test_utils import REF_ARTS

HEX, ART = REF_ARTS[0]


def test_parse_config() -> None:
    config = parse_config(
        ["-i", "key.bin", "-I", "HASH", "-w", "21", "-H", "11", "-t", "top", "-q"]
    )
    assert config.input_path == "key.bin"
    assert config.input_type == InputType.HASH
    assert (config.width, config.height) == (21, 11)
    assert config.top == "top"
    assert config.bottom == ""
    assert config.quiet


def test_hex_argument_is_echoed() -> None:
    out = io.StringIO()
    run(CliConfig(hex=HEX), stdout=out)
    assert out.getvalue() == f"Fingerprint of:\n{HEX}\n\n" + ART


def test_hex_argument_quiet() -> None:
    out = io.StringIO()
    assert run(CliConfig(hex=HEX, quiet=True), stdout=out) == ART
    assert out.getvalue() == ART


def test_stdin_hex() -> None:
    out = io.StringIO()
    config = CliConfig(use_stdin=True, input_type=InputType.HEX)
    run(config, stdin=io.BytesIO(HEX.encode() + b"\n"), stdout=out)
    assert out.getvalue() == ART


def test_stdin_binary() -> None:
    out = io.StringIO()
    run(CliConfig(input_path="-"), stdin=io.BytesIO(bytes.fromhex(HEX)), stdout=out)
    assert out.getvalue() == ART


def test_file_hash(tmp_path: Path) -> None:
    data = bytes(range(256)) * 40
    path = tmp_path / "blob.bin"
    path.write_bytes(data)
    out = io.StringIO()
    run(CliConfig(input_path=str(path), input_type=InputType.HASH), stdout=out)
    assert out.getvalue() == BishopArt().chain(hashlib.sha256(data).digest()).draw()


def test_custom_geometry_and_captions() -> None:
    out = io.StringIO()
    config = CliConfig(hex=HEX, quiet=True, width=9, height=5, top="T", bottom="B")
    run(config, stdout=out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "+---[T]---+"
    assert lines[-1] == "+---[B]---+"
    assert len(lines) == 7
    assert all(len(line) == 11 for line in lines)


def test_malformed_hex_argument() -> None:
    with pytest.raises(InputError):
        run(CliConfig(hex="xyz"), stdout=io.StringIO())


def test_missing_source() -> None:
    with pytest.raises(ConfigurationError):
        run(CliConfig(), stdout=io.StringIO())


def test_main_success(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-q", HEX]) == 0
    assert capsys.readouterr().out == ART


@pytest.mark.parametrize(
    "argv, message",
    [
        (["-w", "3", HEX], "Geometry"),
        (["--chars", "abc", HEX], "Char list"),
        (["zz"], "Hex parse"),
        ([], "should be passed"),
        (["-I", "hex", HEX], "should be passed"),
    ],
)
def test_main_reports_errors(
    argv: list[str], message: str, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert message in captured.err
    assert captured.out == ""


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(tmp_path / "missing.bin")]) == 1
    assert "missing.bin" in capsys.readouterr().err
