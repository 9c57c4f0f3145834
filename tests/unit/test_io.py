"""Tests for stream sources and sinks."""

import io
import sys

import pytest

from textr.models.errors import SinkError, SourceError, SourceNotFoundError
from textr.sinks import open_sink
from textr.sources import decode, expand_paths, open_source


def test_decode_is_lossy():
    assert decode(b"caf\xc3\xa9") == "café"
    assert decode(b"\xff\xfe") == "��"


def test_lines_drop_terminators(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"a\nb\r\nc")
    with open_source(str(path)) as source:
        assert list(source.lines()) == [b"a", b"b\r", b"c"]


def test_lines_keepends(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"a\n\nc")
    with open_source(str(path)) as source:
        assert list(source.lines(keepends=True)) == [b"a\n", b"\n", b"c"]


def test_units_reterminate_last_fragment(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"a\nb")
    with open_source(str(path)) as source:
        assert list(source.units()) == [b"a\n", b"b\n"]


def test_read_returns_all_bytes(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"x" * 100000)
    with open_source(str(path)) as source:
        assert source.read() == b"x" * 100000


def test_file_closed_after_early_exit(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"a\nb\nc\n")
    with open_source(str(path)) as source:
        next(source.lines())
        stream = source._stream
    assert stream.closed


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(SourceNotFoundError) as exc_info:
        with open_source(str(missing)):
            pass
    assert str(exc_info.value) == f"{missing}: No such file or directory"
    assert exc_info.value.name == str(missing)


def test_directory_is_source_error(tmp_path):
    with pytest.raises(SourceError) as exc_info:
        with open_source(str(tmp_path)):
            pass
    assert str(tmp_path) in str(exc_info.value)


def test_file_sink_writes_and_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("previous contents\n")
    with open_sink(str(path)) as sink:
        sink.write("a")
        sink.writeln("b")
        sink.writeln()
    assert path.read_bytes() == b"ab\n\n"


def test_file_sink_keeps_terminators(tmp_path):
    path = tmp_path / "out.txt"
    with open_sink(str(path)) as sink:
        sink.write("a\r\nb\n")
    assert path.read_bytes() == b"a\r\nb\n"


def test_sink_create_failure(tmp_path):
    target = tmp_path / "missing_dir" / "out.txt"
    with pytest.raises(SinkError) as exc_info:
        with open_sink(str(target)):
            pass
    assert str(target) in str(exc_info.value)


def test_stdout_sink(capsys):
    with open_sink() as sink:
        sink.writeln("hello")
    with open_sink("-") as sink:
        sink.write("world")
    assert capsys.readouterr().out == "hello\nworld"


def test_stdin_source_reads_binary_buffer(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"a\n\xffb")))
    with open_source("-") as source:
        assert list(source.lines()) == [b"a", b"\xffb"]
    assert not sys.stdin.closed


class FlushCountingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_stdout_sink_flushes_once_on_exit(monkeypatch):
    stream = FlushCountingStream()
    monkeypatch.setattr(sys, "stdout", stream)
    with open_sink() as sink:
        for i in range(5):
            sink.writeln(str(i))
        assert stream.flushes == 0
    assert stream.getvalue() == "0\n1\n2\n3\n4\n"
    assert stream.flushes == 1


def test_stdout_sink_flushes_when_block_raises(monkeypatch):
    stream = FlushCountingStream()
    monkeypatch.setattr(sys, "stdout", stream)
    with pytest.raises(RuntimeError):
        with open_sink() as sink:
            sink.write("partial")
            raise RuntimeError("boom")
    assert stream.flushes == 1
    assert stream.getvalue() == "partial"


def test_expand_paths(tmp_path):
    (tmp_path / "a.txt").write_text("a\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("b\n")

    missing = str(tmp_path / "missing.txt")
    assert list(expand_paths(["-", missing])) == ["-", missing]

    entries = list(expand_paths([str(tmp_path)]))
    assert len(entries) == 1
    assert isinstance(entries[0], SourceError)
    assert str(entries[0]) == f"{tmp_path}: Is a directory"

    assert list(expand_paths([str(tmp_path)], recursive=True)) == [
        str(tmp_path / "a.txt"),
        str(tmp_path / "sub" / "b.txt"),
    ]
