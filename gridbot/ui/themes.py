"""
Visual themes for gridbot.

Available themes:
- classic: Blue and cyan on the default background
- matrix: Green on black, Matrix style
- minimal: Clean and simple
- retro: Vintage CRT colors
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Definition of a visual theme."""

    name: str
    primary: str  # Main color (Rich markup)
    secondary: str  # Secondary color
    accent: str  # Accent color, used for the robot marker
    success: str  # Success color
    error: str  # Error color
    warning: str  # Warning color
    dim: str  # Dimmed color, used for empty cells

    # Symbols
    success_symbol: str = "✅"
    error_symbol: str = "✗"
    warning_symbol: str = "⚠️ "
    arrival_symbol: str = "🎯"


# Predefined themes
THEMES = {
    "classic": Theme(
        name="classic",
        primary="bold blue",
        secondary="cyan",
        accent="bold bright_yellow",
        success="green",
        error="red",
        warning="yellow",
        dim="dim white",
    ),
    "matrix": Theme(
        name="matrix",
        primary="bold green",
        secondary="bright_green",
        accent="bold white",
        success="bright_green",
        error="red",
        warning="yellow",
        dim="dim green",
    ),
    "minimal": Theme(
        name="minimal",
        primary="bold white",
        secondary="white",
        accent="bold",
        success="green",
        error="red",
        warning="yellow",
        dim="dim",
        success_symbol="✓",
        warning_symbol="!",
        arrival_symbol="*",
    ),
    "retro": Theme(
        name="retro",
        primary="bold magenta",
        secondary="cyan",
        accent="bold yellow",
        success="green",
        error="red",
        warning="bright_yellow",
        dim="dim magenta",
    ),
}

DEFAULT_THEME = "classic"


def get_theme(name: str) -> Theme:
    """Get a theme by name, falling back to the default."""
    return THEMES.get(name, THEMES[DEFAULT_THEME])


def list_themes() -> list[str]:
    """List the available theme names."""
    return list(THEMES.keys())
