"""
gridbot - Robot simulator on a 10x10 grid
=========================================

A single robot driven from a line-oriented command prompt.

Commands:
- FORWARD, LEFT, RIGHT: move and turn
- STATUS, MAP: report position and draw the grid
- GOTO x y: walk to a cell, first along x then along y
- MISSION x y description: set a target that completes on arrival
- QUIT: leave the simulator

Usage:
    gridbot                          # Interactive mode
    gridbot exec "GOTO 3 4" MAP      # Run commands directly
    gridbot --help                   # Show help
"""

__version__ = "0.1.0"

from gridbot.main import cli

__all__ = ["__version__", "cli"]
