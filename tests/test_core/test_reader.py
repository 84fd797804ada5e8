"""Tests for buffer acquisition from streams and paths."""

import io
import os
import subprocess
import sys
from pathlib import Path

import pytest

from media_infer.core.reader import (
    classify_file,
    classify_path,
    open_media,
    read_prefix,
)
from media_infer.formats import ContainerType
from media_infer.utils.exceptions import (
    NotIdentifiedError,
    OpenFailureError,
    ReadFailureError,
)


def _subprocess_env() -> dict[str, str]:
    src = str(Path(__file__).resolve().parents[2] / "src")
    pythonpath = os.pathsep.join(p for p in (src, os.environ.get("PYTHONPATH")) if p)
    return {**os.environ, "PYTHONPATH": pythonpath}


class _FailingStream(io.RawIOBase):
    """Binary stream whose reads always fail."""

    name = "broken.ts"

    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("device not ready")


@pytest.fixture
def mkv_file(tmp_path):
    path = tmp_path / "movie.bin"
    path.write_bytes(b"\x1a\x45\xdf\xa3" + bytes(60))
    return path


class TestReadPrefix:

    def test_short_read_zero_padded(self):
        data = read_prefix(io.BytesIO(b"TiVo"), size=16, zero_pad=True)
        assert data == b"TiVo" + bytes(12)

    def test_short_read_unpadded(self):
        data = read_prefix(io.BytesIO(b"TiVo"), size=16, zero_pad=False)
        assert data == b"TiVo"

    def test_truncates_to_size(self):
        data = read_prefix(io.BytesIO(bytes(range(32))), size=8, zero_pad=False)
        assert data == bytes(range(8))

    def test_reads_from_current_position(self):
        stream = io.BytesIO(b"junkTiVo")
        stream.seek(4)
        assert read_prefix(stream, size=4) == b"TiVo"

    def test_default_size_is_one_mebibyte(self):
        data = read_prefix(io.BytesIO(b"abc"))
        assert len(data) == 1024 * 1024

    def test_empty_stream(self):
        assert read_prefix(io.BytesIO(b""), size=4, zero_pad=False) == b""

    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_non_positive_size(self, size):
        stream = io.BytesIO(b"\x1a\x45\xdf\xa3" + bytes(64))
        with pytest.raises(ValueError, match="positive"):
            read_prefix(stream, size=size)
        assert stream.tell() == 0

    def test_read_error(self):
        with pytest.raises(ReadFailureError, match="device not ready") as exc_info:
            read_prefix(_FailingStream(), size=16)

        assert exc_info.value.path == "broken.ts"
        assert isinstance(exc_info.value.cause, OSError)
        assert exc_info.value.__cause__ is exc_info.value.cause


class TestClassifyFile:

    def test_open_stream(self, mkv_file):
        with open(mkv_file, "rb") as stream:
            assert classify_file(stream) is ContainerType.MKV

    def test_small_file_padded_is_still_identified(self):
        assert classify_file(io.BytesIO(b"\x00\x00\x01\xb3")) is ContainerType.ES

    def test_unknown_content(self):
        with pytest.raises(NotIdentifiedError):
            classify_file(io.BytesIO(b"<!DOCTYPE html><html></html>"))

    def test_read_error_is_not_identification_failure(self):
        with pytest.raises(ReadFailureError):
            classify_file(_FailingStream())


class TestClassifyPath:

    def test_path_object(self, mkv_file):
        assert classify_path(mkv_file) is ContainerType.MKV

    def test_path_string(self, mkv_file):
        assert classify_path(str(mkv_file)) is ContainerType.MKV

    def test_explicit_size(self, tmp_path):
        path = tmp_path / "clip.ts"
        buffer = bytearray(4000)
        for k in range(8):
            buffer[10 + k * 188] = 0x47
        path.write_bytes(bytes(buffer))

        assert classify_path(path, size=2048) is ContainerType.TS

    def test_not_identified_carries_path(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("plain text")

        with pytest.raises(NotIdentifiedError) as exc_info:
            classify_path(path)
        assert exc_info.value.path == str(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.bin"
        path.write_bytes(b"")

        with pytest.raises(NotIdentifiedError):
            classify_path(path)

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.mkv"

        with pytest.raises(OpenFailureError, match="Error opening file") as exc_info:
            classify_path(missing)
        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_directory(self, tmp_path):
        with pytest.raises(OpenFailureError):
            classify_path(tmp_path)

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced",
    )
    def test_permission_denied(self, tmp_path):
        path = tmp_path / "locked.mkv"
        path.write_bytes(b"\x1a\x45\xdf\xa3")
        path.chmod(0)

        with pytest.raises(OpenFailureError):
            classify_path(path)

    def test_open_media_returns_binary_stream(self, mkv_file):
        with open_media(mkv_file) as stream:
            assert stream.read(4) == b"\x1a\x45\xdf\xa3"

    def test_open_failure_keeps_stdout_clean(self, tmp_path):
        missing = tmp_path / "missing.mkv"
        script = (
            "from media_infer import OpenFailureError, classify_path\n"
            "try:\n"
            f"    classify_path({str(missing)!r})\n"
            "except OpenFailureError:\n"
            "    pass\n"
        )
        proc = subprocess.run(
            [sys.executable, "-c", script],
            capture_output=True,
            text=True,
            check=False,
            env=_subprocess_env(),
        )
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout == ""
        assert "Failed to open file" in proc.stderr
