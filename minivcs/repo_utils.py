from pathlib import Path
from .errors import NotInitializedError
from .file_helpers import read_text, write_text
from .models import HeadInfo, RepoState
from .staging_helpers import get_staging_info

VCS_DIR_NAME = ".vcs"
DEFAULT_BRANCH = "master"

def find_vcs_root(start: Path | None = None) -> Path | None:
    if start is None:
        start = Path.cwd()
    start = start.resolve()
    for directory in [start] + list(start.parents):
        if (directory / VCS_DIR_NAME).is_dir():
            return directory
        if directory == Path.home():    # won't look past home directory
            return None
    return None

def require_vcs_root(start: Path | None = None) -> Path:
    vcs_root = find_vcs_root(start)
    if vcs_root is None:
        raise NotInitializedError("not in a vcs repository")
    return vcs_root

def get_vcs_dir(vcs_root: Path) -> Path:
    return vcs_root / VCS_DIR_NAME

def get_head_path(vcs_root: Path) -> Path:
    return get_vcs_dir(vcs_root) / "HEAD"

def get_current_branch_path(vcs_root: Path) -> Path:
    return get_vcs_dir(vcs_root) / "CURRENT_BRANCH"

def get_objects_dir(vcs_root: Path) -> Path:
    return get_vcs_dir(vcs_root) / "objects"

def get_manifests_dir(vcs_root: Path) -> Path:
    return get_vcs_dir(vcs_root) / "manifests"

def get_branches_dir(vcs_root: Path) -> Path:
    return get_vcs_dir(vcs_root) / "branches"

def get_head_info(vcs_root: Path) -> HeadInfo:
    content = read_text(get_head_path(vcs_root)).strip()
    if content:
        return HeadInfo(type="commit", value=content)
    return HeadInfo(type="empty", value="")

def update_head(vcs_root: Path, commit_hash: str | None) -> None:
    write_text(get_head_path(vcs_root), commit_hash or "")

def get_current_branch(vcs_root: Path) -> str:
    # a missing or blank CURRENT_BRANCH falls back to the default branch
    return read_text(get_current_branch_path(vcs_root)).strip() or DEFAULT_BRANCH

def update_current_branch(vcs_root: Path, branch_name: str) -> None:
    write_text(get_current_branch_path(vcs_root), branch_name)

def load_state(vcs_root: Path) -> RepoState:
    if not get_vcs_dir(vcs_root).is_dir():
        raise NotInitializedError(f"no vcs repository at {vcs_root}")
    head_info = get_head_info(vcs_root)
    return RepoState(
        root=vcs_root,
        head=head_info.value if head_info.type == "commit" else None,
        currentBranch=get_current_branch(vcs_root),
        staging=get_staging_info(vcs_root),
    )
