"""TUI (Terminal User Interface) package for gitgre.

Theme support lives here; the branch picker application is in
utils.tui.picker_ui and is imported directly by main.
"""

from utils.tui.theme import Theme, set_theme

__all__ = [
    "Theme",
    "set_theme",
]
