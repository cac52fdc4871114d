from pathlib import Path

import pytest

from minivcs import repository


@pytest.fixture
def repo(tmp_path):
    """An initialized, empty repository rooted at tmp_path."""
    return repository.init(tmp_path)


@pytest.fixture
def write(tmp_path):
    """Write a text file in the working tree and return its relative path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return Path(name)

    return _write


@pytest.fixture
def commit_file(write):
    """Stage one file and commit it, returning (state, commit)."""

    def _commit_file(state, name: str, content: str, message: str):
        state = repository.add(state, write(name, content))
        return repository.commit(state, message)

    return _commit_file
