"""External tool integrations for gitgre."""

from .git_tools import (
    BranchList,
    GitCommandError,
    checkout_branch,
    list_branches,
    parse_branch_output,
    run_git_command,
)

__all__ = [
    "BranchList",
    "GitCommandError",
    "checkout_branch",
    "list_branches",
    "parse_branch_output",
    "run_git_command",
]
