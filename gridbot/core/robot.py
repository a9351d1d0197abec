"""
Robot model for gridbot.

Holds the robot's position, facing and optional mission, and implements
every operation the command loop can dispatch:
- Rotation (left/right through the compass)
- Bounded forward movement
- Status and grid rendering
- Two-leg navigation to a target cell
- Mission assignment and completion
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gridbot.ui.terminal import Terminal

logger = logging.getLogger(__name__)

GRID_WIDTH = 10
GRID_HEIGHT = 10

ROBOT_CELL = " R "
EMPTY_CELL = " . "


class Direction(Enum):
    """Compass facing. Values are clockwise ordinals."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def left(self) -> "Direction":
        return Direction((self.value - 1) % 4)

    def right(self) -> "Direction":
        return Direction((self.value + 1) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) of one step forward."""
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def in_bounds(x: int, y: int) -> bool:
    """Check if (x, y) is a cell of the grid."""
    return 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT


@dataclass
class Mission:
    """A single pending objective."""

    target_x: int
    target_y: int
    description: str
    completed: bool = False

    def is_target(self, x: int, y: int) -> bool:
        return self.target_x == x and self.target_y == y


class Robot:
    """
    Robot on a GRID_WIDTH x GRID_HEIGHT grid.

    Every operation reports through the terminal and leaves the robot
    inside the grid. Nothing here raises for bad moves; rejected moves are
    reported and the state is left unchanged.

    Usage:
    ```python
    robot = Robot()
    robot.turn_right()
    robot.move_forward()
    robot.goto(5, 5)
    ```
    """

    def __init__(self, terminal: Optional[Terminal] = None):
        self.terminal = terminal or Terminal()
        self.x = 0
        self.y = 0
        self.facing = Direction.NORTH
        self.mission: Optional[Mission] = None

    def turn_left(self) -> None:
        self.facing = self.facing.left()
        logger.debug(f"Turned left, now facing {self.facing.label}")

    def turn_right(self) -> None:
        self.facing = self.facing.right()
        logger.debug(f"Turned right, now facing {self.facing.label}")

    def move_forward(self) -> bool:
        """
        Move one cell in the facing direction.

        Returns:
            True if the robot moved, False if the move would leave the grid
        """
        dx, dy = self.facing.delta
        new_x, new_y = self.x + dx, self.y + dy

        if not in_bounds(new_x, new_y):
            logger.info(f"Rejected move from ({self.x}, {self.y}) to ({new_x}, {new_y})")
            self.terminal.print_warning("Cannot move forward — would exit the grid!")
            return False

        self.x, self.y = new_x, new_y
        logger.debug(f"Moved to ({self.x}, {self.y})")
        return True

    def status(self) -> None:
        self.terminal.print_status(self.x, self.y, self.facing.label)

    def render_grid(self) -> list[str]:
        """Grid rows from the top (y = GRID_HEIGHT - 1) down to y = 0."""
        rows = []
        for y in range(GRID_HEIGHT - 1, -1, -1):
            cells = [
                ROBOT_CELL if (x, y) == (self.x, self.y) else EMPTY_CELL
                for x in range(GRID_WIDTH)
            ]
            rows.append("".join(cells))
        return rows

    def draw_grid(self) -> None:
        self.terminal.print_grid(self.render_grid(), ROBOT_CELL.strip())

    def goto(self, target_x: int, target_y: int) -> bool:
        """
        Walk to (target_x, target_y): first along x, then along y.

        Status is reported after every step. On arrival a mission targeting
        the final cell is marked completed.

        Returns:
            False if the target is outside the grid (no movement), else True
        """
        if not in_bounds(target_x, target_y):
            logger.info(f"Rejected goto target ({target_x}, {target_y})")
            self.terminal.print_error("Target out of bounds!")
            return False

        logger.debug(f"Navigating from ({self.x}, {self.y}) to ({target_x}, {target_y})")

        while self.x != target_x:
            self.facing = Direction.EAST if self.x < target_x else Direction.WEST
            self.move_forward()
            self.status()

        while self.y != target_y:
            self.facing = Direction.NORTH if self.y < target_y else Direction.SOUTH
            self.move_forward()
            self.status()

        self.terminal.print_arrival(self.x, self.y)

        if self.mission is not None and self.mission.is_target(self.x, self.y):
            self.mission.completed = True
            logger.info(f"Mission completed: {self.mission.description}")
            self.terminal.print_success(f"Mission completed: {self.mission.description}")

        return True

    def assign_mission(self, x: int, y: int, description: str) -> Mission:
        """Replace the current mission. The target is not bounds-checked."""
        self.mission = Mission(x, y, description)
        logger.info(f"Mission assigned: {description} at ({x}, {y})")
        self.terminal.print(f"New mission assigned: {self.mission.description}")
        return self.mission

    def describe(self) -> dict:
        """Snapshot of the robot state."""
        mission = None
        if self.mission is not None:
            mission = {
                "target_x": self.mission.target_x,
                "target_y": self.mission.target_y,
                "description": self.mission.description,
                "completed": self.mission.completed,
            }
        return {
            "x": self.x,
            "y": self.y,
            "facing": self.facing.label,
            "mission": mission,
        }

    def __repr__(self) -> str:
        return f"Robot(x={self.x}, y={self.y}, facing={self.facing.label}, mission={self.mission!r})"
