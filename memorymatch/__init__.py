"""Top-level package for the memory match game engine."""

from . import board, config, controller, faces, game, scheduler

__all__ = [
    "board",
    "config",
    "controller",
    "faces",
    "game",
    "scheduler",
]
