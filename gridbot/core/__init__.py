"""Core components of gridbot."""

from gridbot.core.commands import Command, Simulator, parse_command
from gridbot.core.config import Config
from gridbot.core.robot import GRID_HEIGHT, GRID_WIDTH, Direction, Mission, Robot

__all__ = [
    "Command",
    "Config",
    "Direction",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "Mission",
    "Robot",
    "Simulator",
    "parse_command",
]
