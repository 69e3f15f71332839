"""End-to-end tests for the freq command line."""
from __future__ import annotations

import io
import logging
import os
from types import SimpleNamespace

import pytest

from freq.cli import main


class ClosedPipe(io.StringIO):
    """Text stream whose reader has exited."""

    def __init__(self, fd: int) -> None:
        super().__init__()
        self._fd = fd

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")

    def writelines(self, lines) -> None:
        raise BrokenPipeError(32, "Broken pipe")

    def fileno(self) -> int:
        return self._fd


class FailingStream(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError(5, "Input/output error")


@pytest.fixture
def stdin(monkeypatch):
    """Replace standard input with the given bytes."""
    def _set(data: bytes) -> None:
        monkeypatch.setattr("sys.stdin", SimpleNamespace(buffer=io.BytesIO(data)))
    return _set


class TestStdin:
    def test_code_points_from_stdin(self, stdin, capsys):
        stdin(b"aab")
        main([])
        captured = capsys.readouterr()
        assert captured.out == "0061 a\t2\n0062 b\t1\n"
        assert captured.err == ""

    def test_empty_stdin(self, stdin, capsys):
        stdin(b"")
        main([])
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("flag", ["-bytes", "--bytes", "-b"])
    def test_byte_flag_aliases(self, stdin, capsys, flag):
        stdin("é".encode("utf-8"))
        main([flag])
        assert capsys.readouterr().out == "a9 ©\t1\nc3 Ã\t1\n"

    def test_decode_errors(self, stdin, capsys):
        stdin(b"\x80")
        main([])
        assert capsys.readouterr().out == "error -\t1\n"

    def test_read_failure(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", SimpleNamespace(buffer=FailingStream()))
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "freq: <stdin>: [Errno 5] Input/output error\n"


class TestFiles:
    def test_files_aggregate(self, tmp_path, capsys):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_bytes(b"ab")
        b.write_bytes(b"b\n")
        main([str(a), str(b)])
        assert capsys.readouterr().out == "000a -\t1\n0061 a\t1\n0062 b\t2\n"

    def test_files_ignore_stdin(self, tmp_path, stdin, capsys):
        stdin(b"zzz")
        a = tmp_path / "a.txt"
        a.write_bytes(b"a")
        main([str(a)])
        assert capsys.readouterr().out == "0061 a\t1\n"

    def test_all_bytes_file(self, tmp_path, capsys):
        p = tmp_path / "all.bin"
        p.write_bytes(bytes(range(256)))
        main(["-bytes", str(p)])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 256
        assert lines[0] == "00 -\t1"
        assert lines[0x41] == "41 A\t1"
        assert lines[-1] == "ff ÿ\t1"

    def test_missing_file_exits(self, tmp_path, capsys):
        good = tmp_path / "good.txt"
        good.write_bytes(b"a")
        missing = tmp_path / "missing.txt"
        with pytest.raises(SystemExit) as excinfo:
            main([str(good), str(missing)])
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        # nothing is printed when the run is aborted
        assert captured.out == ""
        assert captured.err.startswith("freq: ")
        assert str(missing) in captured.err
        assert "No such file or directory" in captured.err


class TestVerbose:
    def test_logs_statistics(self, tmp_path, capsys, caplog):
        p = tmp_path / "a.txt"
        p.write_bytes("ab世".encode("utf-8"))
        with caplog.at_level(logging.DEBUG, logger="freq"):
            main(["-v", str(p)])
        assert "3 distinct keys" in caplog.text
        assert f"finished {p}: 5 bytes" in caplog.text
        # logging never mixes into the report
        assert capsys.readouterr().out == "0061 a\t1\n0062 b\t1\n4e16 世\t1\n"


class TestOutput:
    def test_utf8_regardless_of_locale(self, stdin, monkeypatch):
        out = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")
        monkeypatch.setattr("sys.stdout", out)
        stdin("世".encode("utf-8"))
        main([])
        out.flush()
        assert out.buffer.getvalue() == "4e16 世\t1\n".encode("utf-8")

    def test_byte_glyph_is_utf8(self, stdin, monkeypatch):
        out = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")
        monkeypatch.setattr("sys.stdout", out)
        stdin(b"\xe9")
        main(["-b"])
        out.flush()
        assert out.buffer.getvalue() == b"e9 \xc3\xa9\t1\n"

    def test_broken_pipe_exits_quietly(self, tmp_path, stdin, monkeypatch, capsys):
        sink = tmp_path / "sink"
        fd = os.open(sink, os.O_WRONLY | os.O_CREAT)
        try:
            monkeypatch.setattr("sys.stdout", ClosedPipe(fd))
            stdin(b"abc")
            with pytest.raises(SystemExit) as excinfo:
                main([])
        finally:
            os.close(fd)
        assert excinfo.value.code == 1
        assert capsys.readouterr().err == ""


class TestFlags:
    @pytest.mark.parametrize("flag", ["--byt", "-byt"])
    def test_abbreviated_flag_rejected(self, stdin, capsys, flag):
        stdin(b"a")
        with pytest.raises(SystemExit) as excinfo:
            main([flag])
        assert excinfo.value.code == 2
        assert capsys.readouterr().out == ""
