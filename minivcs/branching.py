from pathlib import Path
from .errors import AlreadyExistsError, NotFoundError, VcsError
from .commit_helpers import load_commit
from .file_helpers import file_exists, list_directory, read_text, write_text
from .models import BranchEntry, BranchInfo, RepoState
from .repo_utils import (
    get_branches_dir,
    update_current_branch,
    update_head,
)

def validate_branch_name(branch_name: str) -> None:
    if not branch_name or branch_name.startswith(".") or "/" in branch_name or "\\" in branch_name:
        raise VcsError(f"invalid branch name '{branch_name}'")

def get_branch_path(vcs_root: Path, branch_name: str) -> Path:
    validate_branch_name(branch_name)
    return get_branches_dir(vcs_root) / branch_name

def branch_exists(vcs_root: Path, branch_name: str) -> bool:
    return file_exists(get_branch_path(vcs_root, branch_name))

def get_branch_head(vcs_root: Path, branch_name: str) -> str:
    if not branch_exists(vcs_root, branch_name):
        raise NotFoundError(f"branch '{branch_name}' does not exist")
    return read_text(get_branch_path(vcs_root, branch_name)).strip()

def get_branch_heads(vcs_root: Path) -> BranchInfo:
    branches_dir = get_branches_dir(vcs_root)
    return {
        name: read_text(branches_dir / name).strip()
        for name in list_directory(branches_dir)
        if file_exists(branches_dir / name)
    }

def update_branch_head(vcs_root: Path, branch_name: str, new_commit_hash: str | None) -> None:
    write_text(get_branch_path(vcs_root, branch_name), new_commit_hash or "")

def create_branch(state: RepoState, branch_name: str) -> None:
    if branch_exists(state.root, branch_name):
        raise AlreadyExistsError(f"branch '{branch_name}' already exists")
    update_branch_head(state.root, branch_name, state.head)

def switch_branch(state: RepoState, branch_name: str) -> RepoState:
    target = get_branch_head(state.root, branch_name)
    if target:
        load_commit(state.root, target)     # branch must point at a stored commit
    update_head(state.root, target or None)
    update_current_branch(state.root, branch_name)
    return state.model_copy(update={"head": target or None, "currentBranch": branch_name})

def list_branches(state: RepoState) -> list[BranchEntry]:
    return [
        BranchEntry(name=name, target=target, current=name == state.currentBranch)
        for name, target in get_branch_heads(state.root).items()
    ]
