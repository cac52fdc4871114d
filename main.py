import sys

import argparse
from minivcs.commands import map_command
from minivcs.errors import VcsError

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minivcs", description="minivcs CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init command
    init_parser = subparsers.add_parser("init", help="Initialize a new repository")
    init_parser.add_argument("--force", action="store_true", help="Reset HEAD, staging and branches of an existing repository")

    # add command
    add_parser = subparsers.add_parser("add", help="Add a file to staging")
    add_parser.add_argument("file", help="File to add")

    # commit command
    commit_parser = subparsers.add_parser("commit", help="Commit staged changes")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message")

    # log command
    subparsers.add_parser("log", help="Show commit logs")

    # checkout command
    checkout_parser = subparsers.add_parser("checkout", help="Checkout a commit")
    checkout_parser.add_argument("hash", help="Commit hash to checkout")

    # status command
    subparsers.add_parser("status", help="Show the status of the repository")

    # diff command
    subparsers.add_parser("diff", help="Show staged changes")

    # branch command
    branch_parser = subparsers.add_parser("branch", help="List branches, or create one")
    branch_parser.add_argument("name", nargs="?", help="Name of the branch to create")

    # switch command
    switch_parser = subparsers.add_parser("switch", help="Switch to an existing branch")
    switch_parser.add_argument("name", help="Branch name to switch to")

    # merge command
    merge_parser = subparsers.add_parser("merge", help="Fast-forward the current branch to another branch")
    merge_parser.add_argument("name", help="Branch name to merge from")
    merge_parser.add_argument("--conflicts", nargs="+", metavar="PATH", help="Files to wrap in conflict markers")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        map_command(args.command)(args)
    except VcsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
