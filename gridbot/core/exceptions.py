"""
Exceptions for gridbot.
"""


class GridbotError(Exception):
    """Base gridbot exception."""


class CommandError(GridbotError):
    """A command line could not be turned into a robot operation."""


class CommandUsageError(CommandError):
    """Wrong number of arguments for a command."""

    def __init__(self, usage: str):
        super().__init__(f"Usage: {usage}")


class CoordinateParseError(CommandError):
    """A coordinate argument is not an integer."""

    def __init__(self, token: str):
        self.token = token
        super().__init__("Invalid coordinates. Please enter integers.")


class UnknownCommandError(CommandError):
    """The verb does not name any command."""

    def __init__(self, verb: str, hint: str):
        self.verb = verb
        super().__init__(f"Unknown command. Try {hint}.")


class ConfigError(GridbotError):
    """Configuration file could not be read or validated."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Invalid configuration in {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
