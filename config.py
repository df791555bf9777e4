"""Configuration management for gitgre."""

import os

# Define path constants directly to avoid circular imports with utils
# (utils.terminal_ui imports Config, and utils.runtime is in the utils package)
_RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".gitgre")
_CONFIG_FILE = os.path.join(_RUNTIME_DIR, "config")

# Default configuration template
_DEFAULT_CONFIG = """\
# gitgre Configuration

# Git executable and per-command timeout in seconds
GIT_BINARY=git
GIT_TIMEOUT=30

# Picker appearance
TUI_THEME=dark
PICKER_MAX_ROWS=20

# Log level used with --verbose
LOG_LEVEL=DEBUG
"""

_THEMES = ("dark", "light")


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            # Strip inline comments (# ...) from the value
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


def _ensure_config():
    """Ensure ~/.gitgre/config exists, create with defaults if not."""
    if not os.path.exists(_CONFIG_FILE):
        os.makedirs(_RUNTIME_DIR, exist_ok=True)
        with open(_CONFIG_FILE, "w", encoding="utf-8") as f:
            f.write(_DEFAULT_CONFIG)


# Ensure config exists and load it
_ensure_config()
_cfg = _load_config(_CONFIG_FILE)


class Config:
    """Configuration for gitgre.

    All configuration is centralized here. Access config values directly via Config.XXX.
    """

    # Git Configuration
    GIT_BINARY = _cfg.get("GIT_BINARY") or "git"
    GIT_TIMEOUT = float(_cfg.get("GIT_TIMEOUT", "30"))

    # Logging Configuration
    # Logging is only written when --verbose is passed (see utils.logger)
    LOG_LEVEL = _cfg.get("LOG_LEVEL", "DEBUG").upper()

    # TUI Configuration
    TUI_THEME = _cfg.get("TUI_THEME", "dark")  # "dark" or "light"
    PICKER_MAX_ROWS = int(_cfg.get("PICKER_MAX_ROWS", "20"))

    @classmethod
    def validate(cls):
        """Validate configuration values.

        Raises:
            ValueError: If a value is out of range
        """
        if cls.TUI_THEME not in _THEMES:
            raise ValueError(
                f"Unknown TUI_THEME '{cls.TUI_THEME}' in {_CONFIG_FILE}. "
                f"Available: {', '.join(_THEMES)}"
            )
        if cls.PICKER_MAX_ROWS <= 0:
            raise ValueError(f"PICKER_MAX_ROWS must be positive (got {cls.PICKER_MAX_ROWS}).")
        if cls.GIT_TIMEOUT <= 0:
            raise ValueError(f"GIT_TIMEOUT must be positive (got {cls.GIT_TIMEOUT}).")
