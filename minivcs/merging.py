from .commit_helpers import load_commit
from .branching import get_branch_head, update_branch_head
from .file_helpers import read_file, write_file
from .models import RepoState
from .repo_utils import update_head

def merge_branch(state: RepoState, branch_name: str) -> tuple[RepoState, bool]:
    """Fast-forward the current branch to the tip of ``branch_name``.

    This is not a real merge. HEAD and the current branch are moved to the
    other branch's commit without looking for a common ancestor, so commits
    only reachable from the current branch are dropped from its history and
    no conflict is ever detected.

    Returns the new state and whether anything moved. A branch with no
    commits is a no-op.
    """
    target = get_branch_head(state.root, branch_name)
    if not target:
        return state, False
    load_commit(state.root, target)
    update_head(state.root, target)
    update_branch_head(state.root, state.currentBranch, target)
    return state.model_copy(update={"head": target}), True

def conflict_markers(content: bytes, branch_name: str) -> bytes:
    return b"<<<<<<< HEAD\n" + content + b"\n=======\n" + content + f"\n>>>>>>> {branch_name}\n".encode("utf-8")

def handle_merge_conflicts(state: RepoState, paths: list[str]) -> list[str]:
    """Wrap each file in conflict markers for manual resolution.

    Only one version of a file is ever available (commits record paths, not
    contents), so the same content appears on both sides of the markers.
    """
    marked = []
    for path in paths:
        file_path = state.root / path
        write_file(file_path, conflict_markers(read_file(file_path), state.currentBranch))
        marked.append(path)
    return marked
