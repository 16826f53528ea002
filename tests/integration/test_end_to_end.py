"""End-to-end tests: files packed and unpacked through the CLI and the API."""

from __future__ import annotations

import subprocess
import sys
from array import array
from pathlib import Path

import pytest

from bufpack import pack, read_layout, unpack
from bufpack.cli.main import main


def test_cli_pack_unpack_roundtrip(tmp_path: Path, sample_buffers: list[bytes]) -> None:
    """Test files survive a pack/unpack round trip through the CLI."""
    sources = []
    for index, payload in enumerate(sample_buffers):
        source = tmp_path / f"in-{index}.bin"
        source.write_bytes(payload)
        sources.append(str(source))

    packed = tmp_path / "all.pack"
    result = subprocess.run(
        [sys.executable, "-m", "bufpack.cli.main", "--pack", *sources, "-o", str(packed)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert unpack(packed.read_bytes()) == sample_buffers

    out_dir = tmp_path / "parts"
    result = subprocess.run(
        [sys.executable, "-m", "bufpack.cli.main", "--unpack", str(packed), "-d", str(out_dir)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr

    parts = [(out_dir / f"part-{i}.bin").read_bytes() for i in range(len(sample_buffers))]
    assert parts == sample_buffers
    assert not (out_dir / f"part-{len(sample_buffers)}.bin").exists()


def test_main_truncated_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test main() reports truncated packed files."""
    packed = tmp_path / "short.pack"
    packed.write_bytes(pack([b"abcdef"])[:-2])

    assert main(["--unpack", str(packed), "-d", str(tmp_path / "out")]) == 1
    assert "[payload]" in capsys.readouterr().err


@pytest.mark.parametrize("command", ["--unpack", "--inspect"])
def test_main_oversized_length_token(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], command: str
) -> None:
    """Test main() reports an unparseable length token instead of crashing."""
    packed = tmp_path / "huge.pack"
    packed.write_bytes(b"9" * 5000 + b"\x00abc")

    args = [command, str(packed)]
    if command == "--unpack":
        args += ["-d", str(tmp_path / "out")]

    assert main(args) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: [lengths]")


def test_main_verbose_logging(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Test --verbose emits debug logs from the codec."""
    source = tmp_path / "a.bin"
    source.write_bytes(b"abc")

    with caplog.at_level("DEBUG", logger="bufpack"):
        assert main(["-v", "--pack", str(source), "-o", str(tmp_path / "a.pack")]) == 0

    assert any("Packed 1 buffers" in record.getMessage() for record in caplog.records)


def test_mixed_buffer_types() -> None:
    """Test bytes, bytearray, memoryview and wide arrays packed together."""
    wide = array("H", [0xABCD, 0x1234])
    inputs = [b"head", bytearray(b"\x00\x00"), memoryview(b"view"), wide, b""]

    packed = pack(inputs)
    layout = read_layout(packed)

    assert layout.lengths == [4, 2, 4, 4, 0]
    assert unpack(packed) == [b"head", b"\x00\x00", b"view", wide.tobytes(), b""]


def test_nested_packing() -> None:
    """Test packed buffers can themselves be packed."""
    inner = pack([b"a", b"bc"])
    outer = pack([inner, b"tail"])

    first, tail = unpack(outer)
    assert tail == b"tail"
    assert unpack(first) == [b"a", b"bc"]
