from pathlib import Path
from typing import Iterator
from .errors import AlreadyExistsError, EmptyStagingError, RepositoryIOError
from .file_helpers import file_exists, now, read_file
from .hashing import hash_content
from .commit_helpers import (
    generate_commit_hash,
    iter_history,
    load_commit,
    load_commit_chain,
    load_manifest,
    save_commit,
    save_manifest,
)
from .staging_helpers import clear_staging, is_staged, stage_file, update_staging_info
from .branching import update_branch_head
from .repo_utils import (
    DEFAULT_BRANCH,
    get_branches_dir,
    get_head_info,
    get_manifests_dir,
    get_objects_dir,
    find_vcs_root,
    get_vcs_dir,
    load_state,
    require_vcs_root,
    update_current_branch,
    update_head,
)
from .models import CheckoutResult, Commit, RepoState, StagedFile, StatusReport

def init(vcs_root: Path, force: bool = False) -> RepoState:
    existing_root = find_vcs_root(vcs_root)
    if existing_root is not None:
        if not force:
            raise AlreadyExistsError(f"repository already exists at {get_vcs_dir(existing_root)}")
        vcs_root = existing_root    # --force resets the enclosing repository
    vcs_dir = get_vcs_dir(vcs_root)
    try:
        for directory in (get_objects_dir(vcs_root), get_manifests_dir(vcs_root), get_branches_dir(vcs_root)):
            directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RepositoryIOError(f"failed to create {vcs_dir}: {e}") from e
    update_head(vcs_root, None)
    update_staging_info(vcs_root, [])
    update_branch_head(vcs_root, DEFAULT_BRANCH, None)
    update_current_branch(vcs_root, DEFAULT_BRANCH)
    return load_state(vcs_root)

def open_repository(start: Path | None = None) -> RepoState:
    return load_state(require_vcs_root(start))

def add(state: RepoState, path: Path) -> RepoState:
    stage_file(state.root, path)
    return load_state(state.root)

def commit(state: RepoState, message: str) -> tuple[RepoState, Commit]:
    if not state.staging:
        raise EmptyStagingError("no files staged for commit")

    message = " ".join(message.splitlines())
    files = [entry.path for entry in state.staging]
    timestamp = now()
    new_commit = Commit(
        hash=generate_commit_hash(message, timestamp, files, state.head),
        message=message,
        timestamp=timestamp,
        files=files,
        parent=state.head,
    )
    save_commit(state.root, new_commit)
    save_manifest(state.root, new_commit.hash, state.staging)
    update_head(state.root, new_commit.hash)
    update_branch_head(state.root, state.currentBranch, new_commit.hash)
    clear_staging(state.root)
    return state.model_copy(update={"head": new_commit.hash, "staging": []}), new_commit

def checkout(state: RepoState, commit_hash: str) -> tuple[RepoState, CheckoutResult]:
    chain = load_commit_chain(state.root, commit_hash)
    target = chain[0]
    update_head(state.root, target.hash)
    # file contents are not stored, so restoring is limited to reporting
    # which snapshot files the working tree should hold
    result = CheckoutResult(
        commit=target,
        restored=list(target.files),
        missing=[path for path in target.files if not file_exists(state.root / path)],
    )
    return state.model_copy(update={"head": target.hash}), result

def log(state: RepoState) -> Iterator[Commit]:
    head_info = get_head_info(state.root)
    return iter_history(state.root, head_info.value or None)

def status(state: RepoState) -> StatusReport:
    modified = []
    if state.head:
        head_commit = load_commit(state.root, state.head)
        recorded = load_manifest(state.root, state.head)
        for path in head_commit.files:
            file_path = state.root / path
            if not file_exists(file_path) or is_staged(state.staging, path):
                continue
            # commits without a manifest have no hash to compare against
            if path not in recorded or hash_content(read_file(file_path)) != recorded[path]:
                modified.append(path)
    return StatusReport(
        branch=state.currentBranch,
        head=state.head,
        staged=list(state.staging),
        modified=modified,
    )

def diff(state: RepoState) -> list[StagedFile]:
    return list(state.staging)
