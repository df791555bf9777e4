"""Terminal UI utilities using Rich library for output outside the picker.

This module provides a unified interface for terminal messages, integrating
with the TUI theme system for consistent styling.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel

from config import Config
from utils.tui.theme import Theme, set_theme

# Initialize theme from config; an unknown name is reported by Config.validate()
try:
    set_theme(Config.TUI_THEME)
except ValueError:
    pass

# Global console instance with theme support
console = Console(theme=Theme.get_rich_theme())


def _get_colors():
    """Get current theme colors."""
    return Theme.get_colors()


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message.

    Args:
        message: Error message
        title: Error title (default: "Error")
    """
    colors = _get_colors()
    console.print(
        Panel(
            f"[{colors.error}]{message}[/{colors.error}]",
            title=f"[bold {colors.error}]{title}[/bold {colors.error}]",
            border_style=colors.error,
            box=box.ROUNDED,
        )
    )


def print_success(message: str) -> None:
    colors = _get_colors()
    console.print(f"[{colors.success}]✓ {message}[/{colors.success}]")


def print_info(message: str) -> None:
    colors = _get_colors()
    console.print(f"[{colors.primary}]ℹ {message}[/{colors.primary}]")


def print_log_location(log_file: str) -> None:
    """Print log file location.

    Args:
        log_file: Path to log file
    """
    colors = _get_colors()
    console.print(f"[{colors.text_muted}]Detailed logs: {log_file}[/{colors.text_muted}]")
