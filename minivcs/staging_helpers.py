from pathlib import Path
from .errors import NotFoundError, VcsError
from .file_helpers import file_exists, read_file, read_text, write_text
from .hashing import hash_content
from .models import StagedFile, StagingInfo

def get_staging_path(vcs_root: Path) -> Path:
    return vcs_root / ".vcs" / "staging"

def parse_entries(text: str) -> StagingInfo:
    entries = []
    for line in text.splitlines():
        if not line.strip():
            continue
        path, sep, file_hash = line.rpartition(":")
        if not sep:
            continue    # malformed line, no hash recorded
        entries.append(StagedFile(path=path, hash=file_hash))
    return entries

def format_entries(entries: StagingInfo) -> str:
    return "".join(f"{entry.path}:{entry.hash}\n" for entry in entries)

def get_staging_info(vcs_root: Path) -> StagingInfo:
    return parse_entries(read_text(get_staging_path(vcs_root)))

def update_staging_info(vcs_root: Path, entries: StagingInfo) -> None:
    write_text(get_staging_path(vcs_root), format_entries(entries))

def relative_repo_path(vcs_root: Path, path: Path) -> str:
    full_path = path if path.is_absolute() else vcs_root / path
    try:
        return full_path.resolve().relative_to(vcs_root.resolve()).as_posix()
    except ValueError:
        raise VcsError(f"{path} is outside the repository")

def stage_file(vcs_root: Path, path: Path) -> StagedFile:
    full_path = path if path.is_absolute() else vcs_root / path
    if not file_exists(full_path):
        raise NotFoundError(f"file does not exist: {path}")
    relative_path = relative_repo_path(vcs_root, full_path)
    new_entry = StagedFile(path=relative_path, hash=hash_content(read_file(full_path)))

    entries = get_staging_info(vcs_root)
    for i, entry in enumerate(entries):
        if entry.path == relative_path:
            entries[i] = new_entry
            break
    else:
        entries.append(new_entry)
    update_staging_info(vcs_root, entries)
    return new_entry

def clear_staging(vcs_root: Path) -> None:
    update_staging_info(vcs_root, [])

def is_staged(entries: StagingInfo, path: str) -> bool:
    return any(entry.path == path for entry in entries)
