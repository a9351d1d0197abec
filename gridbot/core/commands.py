"""
Command loop for gridbot.

Turns one line of text into a robot operation:
- parse_command splits the line into a verb and its arguments
- Simulator dispatches the verb to the robot and reports problems
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from gridbot.core.exceptions import (
    CommandError,
    CommandUsageError,
    CoordinateParseError,
    UnknownCommandError,
)
from gridbot.core.robot import Robot
from gridbot.ui.terminal import Terminal

logger = logging.getLogger(__name__)

COMMANDS_HINT = "FORWARD, LEFT, RIGHT, STATUS, MAP, GOTO x y, MISSION x y description, or QUIT"
FAREWELL = "Exiting the simulator. Goodbye!"

_INTEGER = re.compile(r"[+-]?[0-9]+")

COORDINATE_MIN = -(2**31)
COORDINATE_MAX = 2**31 - 1


@dataclass
class Command:
    """A parsed command line."""

    verb: str
    args: list[str] = field(default_factory=list)


def parse_command(line: str) -> Optional[Command]:
    """
    Split a line into an upper-cased verb and its arguments.

    Returns:
        The command, or None for a blank line
    """
    tokens = line.split()
    if not tokens:
        return None
    return Command(tokens[0].upper(), tokens[1:])


def parse_coordinate(token: str) -> int:
    """Parse a signed decimal integer that fits in 32 bits."""
    if not _INTEGER.fullmatch(token):
        raise CoordinateParseError(token)
    value = int(token)
    if not COORDINATE_MIN <= value <= COORDINATE_MAX:
        raise CoordinateParseError(token)
    return value


class Simulator:
    """
    Read-parse-dispatch cycle around a single robot.

    Usage:
    ```python
    sim = Simulator()
    sim.execute("RIGHT")
    sim.execute("GOTO 3 4")
    sim.run(["MISSION 2 2 patrol area", "GOTO 2 2", "QUIT"])
    ```
    """

    def __init__(self, robot: Optional[Robot] = None, terminal: Optional[Terminal] = None):
        self.terminal = terminal or (robot.terminal if robot else Terminal())
        self.robot = robot or Robot(self.terminal)
        self.running = True

        self._handlers = {
            "FORWARD": self._forward,
            "LEFT": self._left,
            "RIGHT": self._right,
            "STATUS": self._status,
            "MAP": self._map,
            "GOTO": self._goto,
            "MISSION": self._mission,
            "QUIT": self._quit,
        }

    def dispatch(self, command: Command) -> None:
        """Run a parsed command. Raises CommandError on bad input."""
        handler = self._handlers.get(command.verb)
        if handler is None:
            raise UnknownCommandError(command.verb, COMMANDS_HINT)
        logger.debug(f"Dispatching {command.verb} {command.args}")
        handler(command.args)

    def execute(self, line: str) -> bool:
        """
        Run one line of input.

        Returns:
            False once QUIT has been executed, True otherwise
        """
        command = parse_command(line)
        if command is None:
            return self.running

        try:
            self.dispatch(command)
        except CommandError as e:
            logger.debug(f"Rejected {line!r}: {e}")
            self.terminal.print_error(str(e))

        return self.running

    def run(self, lines: Iterable[str]) -> bool:
        """
        Run lines until they are exhausted or QUIT is executed.

        Returns:
            True if QUIT was executed
        """
        for line in lines:
            if not self.execute(line):
                return True
        return False

    # =========================================================================
    # Handlers
    # =========================================================================

    def _forward(self, args: list[str]) -> None:
        self.robot.move_forward()

    def _left(self, args: list[str]) -> None:
        self.robot.turn_left()

    def _right(self, args: list[str]) -> None:
        self.robot.turn_right()

    def _status(self, args: list[str]) -> None:
        self.robot.status()

    def _map(self, args: list[str]) -> None:
        self.robot.draw_grid()

    def _goto(self, args: list[str]) -> None:
        if len(args) != 2:
            raise CommandUsageError("GOTO x y")
        x, y = parse_coordinate(args[0]), parse_coordinate(args[1])
        self.robot.goto(x, y)

    def _mission(self, args: list[str]) -> None:
        if len(args) < 3:
            raise CommandUsageError("MISSION x y description")
        x, y = parse_coordinate(args[0]), parse_coordinate(args[1])
        self.robot.assign_mission(x, y, " ".join(args[2:]))

    def _quit(self, args: list[str]) -> None:
        self.terminal.print(FAREWELL)
        self.running = False
