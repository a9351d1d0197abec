"""
Pytest fixtures for gridbot.

Provides a terminal that writes to memory so tests can read what the
robot reported.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console

from gridbot.core.commands import Simulator
from gridbot.core.robot import Robot
from gridbot.ui.terminal import Terminal

# === Terminal Fixtures ===


@pytest.fixture
def console() -> Console:
    """Console writing to an in-memory buffer, without colors."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def terminal(console: Console) -> Terminal:
    """Terminal bound to the in-memory console."""
    return Terminal(theme="classic", console=console)


@pytest.fixture
def output(console: Console):
    """Return everything printed so far."""

    def read() -> str:
        return console.file.getvalue()

    return read


# === Robot Fixtures ===


@pytest.fixture
def robot(terminal: Terminal) -> Robot:
    """Fresh robot at (0, 0) facing North."""
    return Robot(terminal)


@pytest.fixture
def simulator(robot: Robot) -> Simulator:
    """Simulator driving the fresh robot."""
    return Simulator(robot=robot)


# === Config Fixtures ===


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Temporary configuration file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
ui:
  theme: matrix
  show_banner: false
logging:
  level: debug
"""
    )
    return config_path


@pytest.fixture
def missing_config(tmp_path: Path) -> str:
    """Path of a config file that does not exist."""
    return str(tmp_path / "absent.yaml")
