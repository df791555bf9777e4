"""Main entry point for the gitgre branch picker."""

import argparse
import asyncio
import importlib.metadata

from rich.markup import escape

from config import Config
from tools.git_tools import GitCommandError, checkout_branch, list_branches
from utils import get_log_file_path, get_logger, setup_logger, terminal_ui
from utils.runtime import ensure_runtime_dirs
from utils.tui.picker_ui import pick_candidate

logger = get_logger(__name__)


async def run_picker(initial_query: str = "") -> None:
    """List branches, let the user pick one and check it out."""
    try:
        branches = await list_branches()
    except GitCommandError as e:
        terminal_ui.print_error(escape(str(e)), title="Git Error")
        return

    if not branches.others:
        if branches.current is None:
            terminal_ui.print_info("You don't have any branches")
        else:
            terminal_ui.print_info(f"You only have the current branch {escape(branches.current)}")
        return

    result = await pick_candidate(
        branches.others,
        title="GITGRE",
        current=branches.current,
        initial_query=initial_query,
    )
    if not result.confirmed:
        logger.debug("Picker cancelled")
        return

    try:
        await checkout_branch(result.candidate)
    except GitCommandError as e:
        terminal_ui.print_error(escape(str(e)), title="Checkout Failed")
        return
    terminal_ui.print_success(f"Switched to branch {escape(result.candidate)}")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pick a git branch by typing a few characters of its name"
    )

    try:
        version = importlib.metadata.version("gitgre")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"gitgre {version}")

    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Initial search text (the list starts ranked by it)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging to ~/.gitgre/logs/",
    )

    args = parser.parse_args()

    # Initialize runtime directories (create logs dir only in verbose mode)
    ensure_runtime_dirs(create_logs=args.verbose)

    # Initialize logging only in verbose mode
    if args.verbose:
        setup_logger()

    try:
        Config.validate()
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Configuration Error")
        return

    asyncio.run(run_picker(args.query))

    log_file = get_log_file_path()
    if args.verbose and log_file:
        terminal_ui.print_log_location(log_file)


if __name__ == "__main__":
    main()
