"""Theme system for the picker with dark and light mode support."""

from dataclasses import dataclass
from typing import Dict

from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class ThemeColors:
    """Color palette for a TUI theme."""

    # Accents
    primary: str  # Title, caret and selected row
    secondary: str  # Current branch label
    success: str
    warning: str
    error: str

    # Backgrounds
    bg_primary: str  # Main background
    bg_highlight: str  # Caret block

    # Text
    text_primary: str  # Candidate rows
    text_secondary: str  # Hints
    text_muted: str  # Dividers and counters
    query: str  # Query text


# Dark theme - Professional, high contrast
DARK_THEME = ThemeColors(
    primary="#00D9FF",  # Bright cyan
    secondary="#A78BFA",  # Soft purple
    success="#10B981",  # Emerald green
    warning="#F59E0B",  # Amber
    error="#EF4444",  # Red
    bg_primary="#0D1117",  # Deep blue-black
    bg_highlight="#8B949E",  # Gray caret
    text_primary="#F0F6FC",  # Bright white
    text_secondary="#8B949E",  # Gray
    text_muted="#484F58",  # Dark gray
    query="#00D9FF",  # Cyan
)

# Light theme - Clean, professional
LIGHT_THEME = ThemeColors(
    primary="#0969DA",  # Blue
    secondary="#8250DF",  # Purple
    success="#1A7F37",  # Green
    warning="#9A6700",  # Amber
    error="#CF222E",  # Red
    bg_primary="#FFFFFF",  # White
    bg_highlight="#57606A",  # Medium gray caret
    text_primary="#1F2328",  # Near black
    text_secondary="#57606A",  # Medium gray
    text_muted="#8C959F",  # Light gray
    query="#0969DA",  # Blue
)


class Theme:
    """TUI Theme manager."""

    _current_theme: str = "dark"
    _themes: Dict[str, ThemeColors] = {
        "dark": DARK_THEME,
        "light": LIGHT_THEME,
    }

    @classmethod
    def get_colors(cls) -> ThemeColors:
        """Get the current theme colors."""
        return cls._themes[cls._current_theme]

    @classmethod
    def set_theme(cls, name: str) -> None:
        """Set the current theme.

        Args:
            name: Theme name ('dark' or 'light')

        Raises:
            ValueError: If theme name is invalid
        """
        if name not in cls._themes:
            raise ValueError(f"Unknown theme: {name}. Available: {list(cls._themes.keys())}")
        cls._current_theme = name

    @classmethod
    def get_rich_theme(cls) -> RichTheme:
        """Get a Rich Theme object for the current theme."""
        colors = cls.get_colors()
        return RichTheme(
            {
                "primary": Style(color=colors.primary),
                "secondary": Style(color=colors.secondary),
                "success": Style(color=colors.success),
                "warning": Style(color=colors.warning),
                "error": Style(color=colors.error),
                "text": Style(color=colors.text_primary),
                "text.secondary": Style(color=colors.text_secondary),
                "text.muted": Style(color=colors.text_muted),
            }
        )

    @classmethod
    def get_prompt_toolkit_style(cls) -> Dict[str, str]:
        """Get the picker style dict for prompt_toolkit."""
        colors = cls.get_colors()
        return {
            "": colors.text_primary,  # Default text
            "title": f"{colors.primary} bold",
            "current": f"{colors.secondary} bold",
            "query": colors.query,
            "caret": f"bg:{colors.bg_highlight}",
            "item": colors.text_primary,
            "selected": f"bg:{colors.primary} {colors.bg_primary}",
            "hint": colors.text_secondary,
            "hint.key": f"{colors.primary} bold",
            "muted": colors.text_muted,
        }


def set_theme(name: str) -> None:
    """Set the current theme (convenience function)."""
    Theme.set_theme(name)
