"""Tests for commit persistence."""

import pytest

from minivcs.commit_helpers import (
    generate_commit_hash,
    get_commit_path,
    iter_history,
    load_commit,
    load_commit_chain,
    load_manifest,
    save_commit,
    save_manifest,
)
from minivcs.errors import NotFoundError, VcsError
from minivcs.models import Commit, StagedFile


def make_commit(message, files, parent=None, timestamp="Mon Jan  1 00:00:00 2024"):
    return Commit(
        hash=generate_commit_hash(message, timestamp, files, parent),
        message=message,
        timestamp=timestamp,
        files=files,
        parent=parent,
    )


def test_record_layout_for_root_commit(repo):
    """A root commit ends with a blank parent line."""
    commit = make_commit("first", ["a.txt", "b.txt"])
    save_commit(repo.root, commit)
    text = get_commit_path(repo.root, commit.hash).read_text()
    assert text == f"{commit.hash}\nfirst\nMon Jan  1 00:00:00 2024\na.txt\nb.txt\n\n"


def test_record_layout_with_parent(repo):
    root = make_commit("first", ["a.txt"])
    child = make_commit("second", ["b.txt"], parent=root.hash)
    save_commit(repo.root, child)
    lines = get_commit_path(repo.root, child.hash).read_text().splitlines()
    assert lines[-1] == root.hash
    assert lines[3:-1] == ["b.txt"]


def test_round_trip_reconstructs_chain(repo):
    """save then load gives back every commit down to the root."""
    first = make_commit("first", ["a.txt"])
    second = make_commit("second", ["a.txt", "b.txt"], parent=first.hash)
    third = make_commit("third", ["c.txt"], parent=second.hash)
    for commit in (first, second, third):
        save_commit(repo.root, commit)

    chain = load_commit_chain(repo.root, third.hash)
    assert chain == [third, second, first]
    assert load_commit(repo.root, second.hash).parent == first.hash


def test_load_missing_commit_fails(repo):
    with pytest.raises(NotFoundError, match="does not exist"):
        load_commit(repo.root, "deadbeef")


def test_chain_with_missing_ancestor_fails(repo):
    orphan = make_commit("orphan", ["a.txt"], parent="missingparent")
    save_commit(repo.root, orphan)
    with pytest.raises(NotFoundError):
        load_commit_chain(repo.root, orphan.hash)


def test_corrupt_record_is_rejected(repo):
    get_commit_path(repo.root, "abc").write_text("abc\nonly two\n")
    with pytest.raises(VcsError, match="corrupt"):
        load_commit(repo.root, "abc")


def test_commit_hash_depends_on_timestamp():
    a = generate_commit_hash("msg", "Mon Jan  1 00:00:00 2024", ["a.txt"], None)
    b = generate_commit_hash("msg", "Mon Jan  1 00:00:01 2024", ["a.txt"], None)
    assert a != b


def test_commit_hash_depends_on_parent():
    a = generate_commit_hash("msg", "same", ["a.txt"], None)
    b = generate_commit_hash("msg", "same", ["a.txt"], a)
    assert a != b


def test_iter_history_is_lazy(repo):
    """Only the commits actually consumed are loaded."""
    first = make_commit("first", ["a.txt"])
    second = make_commit("second", ["a.txt"], parent=first.hash)
    save_commit(repo.root, second)   # first is never saved

    history = iter_history(repo.root, second.hash)
    assert next(history) == second
    with pytest.raises(NotFoundError):
        next(history)


def test_iter_history_detects_loops(repo):
    looping = Commit(hash="aaa", message="m", timestamp="t", files=["a.txt"], parent="aaa")
    save_commit(repo.root, looping)
    with pytest.raises(VcsError, match="loops"):
        list(iter_history(repo.root, "aaa"))


def test_manifest_round_trip(repo):
    save_manifest(repo.root, "abc", [StagedFile(path="a.txt", hash="111"), StagedFile(path="b.txt", hash="222")])
    assert load_manifest(repo.root, "abc") == {"a.txt": "111", "b.txt": "222"}
    assert load_manifest(repo.root, "missing") == {}


def test_long_chain_loads_without_recursion_limit(repo):
    """Histories longer than the interpreter's recursion limit still load."""
    parent = None
    for i in range(1500):
        commit = make_commit(f"commit {i}", ["a.txt"], parent=parent)
        save_commit(repo.root, commit)
        parent = commit.hash

    chain = load_commit_chain(repo.root, parent)
    assert len(chain) == 1500
    assert chain[0].message == "commit 1499"
    assert chain[-1].parent is None


def test_chain_with_loop_fails(repo):
    looping = Commit(hash="aaa", message="m", timestamp="t", files=["a.txt"], parent="aaa")
    save_commit(repo.root, looping)
    with pytest.raises(VcsError, match="loops"):
        load_commit_chain(repo.root, "aaa")
