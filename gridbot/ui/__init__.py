"""UI components for gridbot."""

from gridbot.ui.terminal import Terminal
from gridbot.ui.themes import Theme, get_theme, list_themes

__all__ = ["Terminal", "Theme", "get_theme", "list_themes"]
