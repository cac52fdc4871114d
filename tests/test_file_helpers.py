"""Tests for the file I/O layer."""

import pytest

from minivcs.errors import RepositoryIOError
from minivcs.file_helpers import list_directory, read_file, write_file


def test_missing_file_reads_as_empty(tmp_path):
    assert read_file(tmp_path / "missing.txt") == b""


def test_write_creates_parent_directories(tmp_path):
    write_file(tmp_path / "a" / "b" / "c.txt", b"data")
    assert (tmp_path / "a" / "b" / "c.txt").read_bytes() == b"data"


def test_write_under_a_regular_file_fails(tmp_path):
    """A failed write surfaces as RepositoryIOError, not a bare OSError."""
    (tmp_path / "blocker").write_text("not a directory")
    with pytest.raises(RepositoryIOError, match="failed to write"):
        write_file(tmp_path / "blocker" / "child.txt", b"data")


def test_reading_a_directory_fails(tmp_path):
    with pytest.raises(RepositoryIOError, match="failed to read"):
        read_file(tmp_path)


def test_list_directory(tmp_path):
    (tmp_path / "b").write_text("")
    (tmp_path / "a").write_text("")
    assert list_directory(tmp_path) == ["a", "b"]
    assert list_directory(tmp_path / "missing") == []
