import io

import pytest

from pokewalk.linereader import LineReader, read_lines

TEXT = "1111\n1P01\n\nlast"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 100])
def test_lines_rejoin_to_input(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert "".join(reader) == TEXT


@pytest.mark.parametrize("size", [1, 4, 64])
def test_lines_match_splitlines(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert list(reader) == TEXT.splitlines(keepends=True)


def test_read_line_returns_none_at_end_and_stays_none():
    reader = LineReader(io.StringIO("a\n"))
    assert reader.read_line() == "a\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_no_lines():
    assert list(LineReader(io.StringIO(""))) == []


def test_every_line_but_last_ends_with_newline():
    lines = list(LineReader(io.StringIO(TEXT), 2))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")


@pytest.mark.parametrize("size", [0, -3])
def test_buffer_size_must_be_positive(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(TEXT), size)


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "map.ber"
    path.write_bytes(TEXT.encode())
    lines = read_lines(path)
    assert "".join(lines) == TEXT
    assert len(lines) == TEXT.count("\n") + 1


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.ber")