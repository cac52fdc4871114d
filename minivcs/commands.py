from pathlib import Path
from typing import Callable
from .errors import VcsError
from . import repository
from .branching import create_branch, list_branches, switch_branch
from .merging import handle_merge_conflicts, merge_branch
from .staging_helpers import relative_repo_path

def map_command(command: str) -> Callable:
    commandsMap = {
        "init": init,
        "add": add,
        "status": status,
        "commit": commit,
        "checkout": checkout,
        "switch": switch,
        "merge": merge,
        "log": log,
        "diff": diff,
        "branch": branch,
    }
    if command not in commandsMap:
        raise VcsError(f"Unknown command: {command}")
    return commandsMap[command]

def init(args):
    state = repository.init(Path.cwd(), force=args.force)
    print(f"Initialized empty vcs repository in {state.root / '.vcs'}")

def add(args):
    state = repository.open_repository()
    repository.add(state, Path.cwd() / args.file)
    print(f"Added {args.file} to staging area.")

def commit(args):
    state = repository.open_repository()
    _, new_commit = repository.commit(state, args.message)
    print(f"Committed changes as commit {new_commit.hash}")

def log(args):
    state = repository.open_repository()
    for entry in repository.log(state):
        print(f"Commit: {entry.hash}")
        print(f"Message: {entry.message}")
        print(f"Timestamp: {entry.timestamp}")
        print(f"Files: {' '.join(entry.files)}")
        print()

def checkout(args):
    state = repository.open_repository()
    _, result = repository.checkout(state, args.hash)
    for path in result.restored:
        note = " (missing from working tree)" if path in result.missing else ""
        print(f"Restoring {path}{note}")
    print(f"Checked out to {result.commit.hash}.")

def status(args):
    state = repository.open_repository()
    report = repository.status(state)
    print(f"On branch '{report.branch}'")
    print("Staged files:")
    if not report.staged:
        print("  (none)")
    for entry in report.staged:
        print(f"  {entry.path} ({entry.hash})")
    print()
    print("Modified files (not staged):")
    if report.head is None:
        print("  (none - no commits yet)")
    elif not report.modified:
        print("  (none)")
    for path in report.modified:
        print(f"  {path} (modified)")

def diff(args):
    state = repository.open_repository()
    entries = repository.diff(state)
    print("Staged changes:")
    if not entries:
        print("  (no staged changes)")
    for entry in entries:
        print(f"  {entry.path}:")
        print(f"    Hash: {entry.hash}")

def branch(args):
    state = repository.open_repository()
    if args.name:
        create_branch(state, args.name)
        print(f"Created branch '{args.name}'.")
        return
    print("Branches:")
    for entry in list_branches(state):
        prefix = "*" if entry.current else " "
        print(f"{prefix} {entry.name}")

def switch(args):
    state = repository.open_repository()
    switch_branch(state, args.name)
    print(f"Switched to branch '{args.name}'.")

def merge(args):
    state = repository.open_repository()
    state, moved = merge_branch(state, args.name)
    if not moved:
        print(f"Nothing to merge from '{args.name}'.")
    else:
        print(f"Merged '{args.name}' into '{state.currentBranch}'.")
    if args.conflicts:
        paths = [relative_repo_path(state.root, Path.cwd() / path) for path in args.conflicts]
        marked = handle_merge_conflicts(state, paths)
        print("Conflict markers written to:")
        for path in marked:
            print(f"  {path}")
        print("Please resolve conflicts manually and commit.")
