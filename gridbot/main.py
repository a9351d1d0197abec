"""
gridbot - Main entry point.

Usage:
    gridbot                          # Start interactive mode
    gridbot exec RIGHT FORWARD MAP   # Run commands and exit
    gridbot config                   # Show configuration
    gridbot --help                   # Show help
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from gridbot import __version__
from gridbot.core.commands import COMMANDS_HINT, FAREWELL, Simulator
from gridbot.core.config import DEFAULT_CONFIG_PATH, LOG_LEVELS, Config
from gridbot.core.exceptions import ConfigError
from gridbot.ui.terminal import Terminal
from gridbot.ui.themes import list_themes

console = Console()
logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str]) -> Config:
    """Load configuration, turning config errors into CLI errors."""
    try:
        return Config.load(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def setup_logging(level: str) -> None:
    """Send log records to stderr so they stay apart from the prompt."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option("--theme", "-t", type=click.Choice(list_themes()), default=None, help="Visual theme")
@click.option("--config", "config_path", default=None, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None, help="Logging level")
@click.pass_context
def cli(ctx, version: bool, theme: Optional[str], config_path: Optional[str], log_level: Optional[str]):
    """
    gridbot - Robot simulator on a 10x10 grid.

    Examples:
        gridbot                              # Interactive mode
        gridbot exec "GOTO 3 4" MAP          # Run commands directly
        gridbot --theme matrix               # Interactive mode, green theme
    """
    if version:
        console.print(f"gridbot v{__version__}")
        sys.exit(0)

    config = load_config(config_path)
    if theme:
        config.ui.theme = theme
    if log_level:
        config.logging.level = log_level.upper()

    setup_logging(config.logging.level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path

    # If no subcommand, start interactive mode
    if ctx.invoked_subcommand is None:
        interactive_mode(config)


@cli.command("exec")
@click.argument("commands", nargs=-1, required=True)
@click.option("--summary", is_flag=True, help="Show the final robot state")
@click.pass_context
def exec_command(ctx, commands: tuple, summary: bool):
    """Run each argument as a command line, then exit."""
    config = ctx.obj["config"]
    term = Terminal(theme=config.ui.theme)

    simulator = Simulator(terminal=term)
    simulator.run(commands)

    if summary:
        term.print_summary(simulator.robot.describe())


@cli.command("config")
@click.option("--init", is_flag=True, help="Write the default configuration file if missing")
@click.pass_context
def config_command(ctx, init: bool):
    """Show current configuration."""
    config = ctx.obj["config"]
    config_path = ctx.obj["config_path"] or DEFAULT_CONFIG_PATH
    term = Terminal(theme=config.ui.theme)

    if init:
        path = Path(os.path.expanduser(config_path))
        if path.exists():
            term.print_warning(f"Config already exists: {path}")
        else:
            Config().save(str(path))
            term.print_success(f"Config written to {path}")

    term.print_config(config.as_rows())


def interactive_mode(config: Config):
    """Main interactive mode."""
    term = Terminal(theme=config.ui.theme)
    simulator = Simulator(terminal=term)

    if config.ui.show_banner:
        term.print_welcome(COMMANDS_HINT)

    logger.info("Interactive session started")

    # Main loop
    while True:
        try:
            line = term.get_input()
        except KeyboardInterrupt:
            term.print()
            term.print(FAREWELL)
            sys.exit(130)
        except EOFError:
            logger.error("Input stream closed before QUIT")
            term.print_error("Input stream closed before QUIT.")
            sys.exit(1)

        if not simulator.execute(line):
            break

    logger.info("Interactive session ended")


def main():
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
