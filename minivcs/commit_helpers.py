from pathlib import Path
from typing import Iterator
from .errors import NotFoundError, VcsError
from .file_helpers import file_exists, read_text, write_text
from .hashing import hash_content
from .models import Commit, StagingInfo
from .repo_utils import get_manifests_dir, get_objects_dir
from .staging_helpers import format_entries, parse_entries

def get_commit_path(vcs_root: Path, commit_hash: str) -> Path:
    return get_objects_dir(vcs_root) / commit_hash

def commit_exists(vcs_root: Path, commit_hash: str) -> bool:
    return bool(commit_hash) and file_exists(get_commit_path(vcs_root, commit_hash))

def generate_commit_hash(message: str, timestamp: str, files: list[str], parent: str | None) -> str:
    """Hash a commit from its message, timestamp, file list and parent hash.

    The parent hash is included on top of the other fields. Timestamps only
    resolve to the second, so without it two quick commits with the same
    message and files would share a hash and name themselves as parent.
    """
    payload = "\n".join([message, timestamp, *files, parent or ""])
    return hash_content(payload.encode("utf-8"))

def serialize_commit(commit: Commit) -> str:
    lines = [commit.hash, commit.message, commit.timestamp, *commit.files, commit.parent or ""]
    return "\n".join(lines) + "\n"

def parse_commit(commit_hash: str, text: str) -> Commit:
    lines = text.splitlines()
    # hash, message, timestamp, zero or more files, parent (possibly blank)
    if len(lines) < 4:
        raise VcsError(f"commit {commit_hash} is corrupt")
    if lines[0] != commit_hash:
        raise VcsError(f"commit {commit_hash} records a different hash: {lines[0]}")
    return Commit(
        hash=lines[0],
        message=lines[1],
        timestamp=lines[2],
        files=lines[3:-1],
        parent=lines[-1] or None,
    )

def save_commit(vcs_root: Path, commit: Commit) -> None:
    write_text(get_commit_path(vcs_root, commit.hash), serialize_commit(commit))

def load_commit(vcs_root: Path, commit_hash: str) -> Commit:
    if not commit_exists(vcs_root, commit_hash):
        raise NotFoundError(f"commit {commit_hash} does not exist")
    return parse_commit(commit_hash, read_text(get_commit_path(vcs_root, commit_hash)))

def load_commit_chain(vcs_root: Path, commit_hash: str) -> list[Commit]:
    """Load a commit together with every one of its ancestors, newest first.

    Each call re-reads the whole chain down to the root commit, so the cost
    grows with the length of history. ``iter_history`` is the lazy variant.
    Raises ``NotFoundError`` if the commit or any ancestor is missing.
    """
    if not commit_exists(vcs_root, commit_hash):
        raise NotFoundError(f"commit {commit_hash} does not exist")
    return list(iter_history(vcs_root, commit_hash))

def iter_history(vcs_root: Path, commit_hash: str | None) -> Iterator[Commit]:
    seen = set()
    while commit_hash:
        if commit_hash in seen:
            raise VcsError(f"commit history loops back to {commit_hash}")
        seen.add(commit_hash)
        commit = load_commit(vcs_root, commit_hash)
        yield commit
        commit_hash = commit.parent

def get_manifest_path(vcs_root: Path, commit_hash: str) -> Path:
    return get_manifests_dir(vcs_root) / commit_hash

def save_manifest(vcs_root: Path, commit_hash: str, entries: StagingInfo) -> None:
    write_text(get_manifest_path(vcs_root, commit_hash), format_entries(entries))

def load_manifest(vcs_root: Path, commit_hash: str) -> dict[str, str]:
    entries = parse_entries(read_text(get_manifest_path(vcs_root, commit_hash)))
    return {entry.path: entry.hash for entry in entries}
