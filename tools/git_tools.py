"""Git operations used around the branch picker.

Branches are read from ``git branch`` before the picker starts, and the
chosen branch is checked out after it closes. Both run as asyncio
subprocesses; nothing here touches the terminal.
"""

import asyncio
import os
from dataclasses import dataclass, field
from typing import List, Optional

from config import Config
from utils import get_logger

logger = get_logger(__name__)


class GitCommandError(RuntimeError):
    """A git invocation failed, timed out, or git is not installed."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        self.returncode = returncode
        super().__init__(message)


@dataclass
class BranchList:
    """Local branches split into the checked-out one and the rest."""

    current: Optional[str] = None
    others: List[str] = field(default_factory=list)


async def run_git_command(args: List[str], cwd: Optional[str] = None) -> str:
    """Execute a git command and return its stdout.

    Args:
        args: Git command arguments (without 'git' prefix)
        cwd: Working directory (default: current directory)

    Returns:
        Command stdout with surrounding whitespace removed

    Raises:
        GitCommandError: On a non-zero exit, a timeout, or a missing binary
    """
    command = [Config.GIT_BINARY, *args]
    logger.debug(f"Running {' '.join(command)}")
    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=cwd or os.getcwd(),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise GitCommandError(f"{Config.GIT_BINARY} command not found. Is git installed?") from e

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=Config.GIT_TIMEOUT)
    except TimeoutError as e:
        process.kill()
        await process.communicate()
        raise GitCommandError(f"git {args[0]} timed out after {Config.GIT_TIMEOUT:g}s") from e

    stdout_text = stdout.decode(errors="replace") if stdout else ""
    stderr_text = stderr.decode(errors="replace") if stderr else ""

    if process.returncode != 0:
        message = stderr_text.strip() or stdout_text.strip() or f"git {args[0]} failed"
        logger.warning(f"git {' '.join(args)} exited with {process.returncode}: {message}")
        raise GitCommandError(message, returncode=process.returncode)
    return stdout_text.strip()


def parse_branch_output(output: str) -> BranchList:
    """Parse ``git branch`` output.

    The line marked with ``*`` is the checked-out branch and is kept out of
    ``others``. A ``+`` marker (branch checked out in another worktree) is
    dropped; the branch itself stays selectable.
    """
    branches = BranchList()
    for line in output.splitlines():
        if line.startswith("*"):
            branches.current = line[1:].strip()
            continue
        name = line.strip()
        if name.startswith("+ "):
            name = name[2:].strip()
        if name:
            branches.others.append(name)
    return branches


async def list_branches(cwd: Optional[str] = None) -> BranchList:
    """List local branches of the repository at ``cwd``."""
    output = await run_git_command(["branch", "--no-color"], cwd=cwd)
    branches = parse_branch_output(output)
    logger.debug(f"Found {len(branches.others)} branches besides current={branches.current!r}")
    return branches


async def checkout_branch(name: str, cwd: Optional[str] = None) -> str:
    """Check out ``name`` and return git's output."""
    return await run_git_command(["checkout", name], cwd=cwd)
