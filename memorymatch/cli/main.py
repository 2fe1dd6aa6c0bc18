"""Typer entry-point wiring for the memory match CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import autoplay
from ..config import DEFAULT_REVERT_DELAY, BoardLayout, GameConfig
from ..game import Game
from .render import render_board
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(level: str, log_file: Path | None, *, console_output: bool) -> None:
    """Route log records to a file and/or a Rich console handler."""

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise typer.BadParameter(f"unknown log level '{level}'")

    handlers: list[logging.Handler] = []
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)
    if console_output:
        handlers.append(RichHandler(console=err_console, show_path=False))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(level=numeric_level, format="%(message)s", handlers=handlers, force=True)


def _build_config(seed: int | None, revert_delay: float) -> GameConfig:
    if revert_delay < 0:
        raise typer.BadParameter("--revert-delay must not be negative")
    return GameConfig(layout=BoardLayout(), revert_delay=revert_delay, seed=seed)


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for a reproducible deal (omit for randomness)."),
    revert_delay: float = typer.Option(
        DEFAULT_REVERT_DELAY, min=0.0, help="Seconds a mismatched pair stays visible."
    ),
    log_level: str = typer.Option("WARNING", help="Logging level."),
    log_file: Path | None = typer.Option(None, help="Write log records to this file."),
) -> None:
    """Play the game in the terminal with the mouse."""

    _configure_logging(log_level, log_file, console_output=False)
    run_textual_app(config=_build_config(seed, revert_delay))


@app.command()
def show(
    seed: int | None = typer.Option(None, help="Random seed for the deal."),
    revert_delay: float = typer.Option(
        DEFAULT_REVERT_DELAY, min=0.0, help="Seconds a mismatched pair stays visible."
    ),
    reveal: bool = typer.Option(False, "--reveal", help="Show every face."),
    log_level: str = typer.Option("WARNING", help="Logging level."),
    log_file: Path | None = typer.Option(None, help="Write log records to this file."),
) -> None:
    """Deal a board and print it."""

    _configure_logging(log_level, log_file, console_output=True)
    game = Game.new(_build_config(seed, revert_delay))
    console.print(render_board(game, reveal=reveal))


@app.command()
def simulate(
    games: int = typer.Option(100, min=1, help="Number of games to play."),
    strategy: str = typer.Option("memory", help="Simulated player: random or memory."),
    seed: int = typer.Option(123, help="Random seed for the simulation."),
    revert_delay: float = typer.Option(
        DEFAULT_REVERT_DELAY, min=0.0, help="Seconds a mismatched pair stays visible."
    ),
    log_level: str = typer.Option("WARNING", help="Logging level."),
    log_file: Path | None = typer.Option(None, help="Write log records to this file."),
) -> None:
    """Play many headless games and summarise the turn counts."""

    if strategy not in autoplay.STRATEGIES:
        choices = ", ".join(sorted(autoplay.STRATEGIES))
        raise typer.BadParameter(f"strategy must be one of: {choices}")

    _configure_logging(log_level, log_file, console_output=True)
    config = _build_config(None, revert_delay)
    report = autoplay.run_simulation(games, strategy, seed=seed, config=config)

    table = Table(title=f"Simulation ({report.strategy})", box=box.SIMPLE_HEAVY)
    table.add_column("Games", justify="right")
    table.add_column("Mean turns", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Mean mismatches", justify="right")
    table.add_row(
        str(report.games),
        f"{report.mean_turns:.2f}",
        str(report.min_turns),
        f"{report.percentile_turns(50):.1f}",
        str(report.max_turns),
        f"{report.mean_mismatches:.2f}",
    )
    console.print(table)


def main() -> None:
    """Entry-point for ``python -m memorymatch.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
