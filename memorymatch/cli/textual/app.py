"""Textual-powered interactive memory match interface."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from ...config import GameConfig
from ...controller import PressResult
from ...game import CardView, Game
from ..render import CARD_BACK_COLOR

logger = logging.getLogger(__name__)

MAX_EVENT_LINES = 12

# Surface pixels covered by one terminal cell.
CELL_WIDTH = 8
CELL_HEIGHT = 16

BACKGROUND_COLOR = "#228b22"
CARD_FACE_COLOR = "#ffffff"
BANNER_STYLE = "bold #000000 on #ffff00"


def surface_point(column: int, row: int) -> tuple[float, float]:
    """Return the surface coordinate at the center of a terminal cell."""

    return (column + 0.5) * CELL_WIDTH, (row + 0.5) * CELL_HEIGHT


def _cell_style(views: Sequence[CardView], x: float, y: float) -> str:
    for view in views:
        if not view.contains(x, y):
            continue
        if not view.revealed:
            return f"on {CARD_BACK_COLOR}"
        cx, cy = view.center
        rx, ry = view.width * 0.3, view.height * 0.3
        if ((x - cx) / rx) ** 2 + ((y - cy) / ry) ** 2 <= 1.0:
            return f"on {view.face_color}"
        return f"on {CARD_FACE_COLOR}"
    return f"on {BACKGROUND_COLOR}"


def rasterize(
    views: Sequence[CardView],
    surface_width: int,
    surface_height: int,
    *,
    won: bool = False,
) -> Text:
    """Paint the board surface onto a grid of terminal cells."""

    columns = surface_width // CELL_WIDTH
    rows = surface_height // CELL_HEIGHT
    text = Text(no_wrap=True)
    banner_row = rows // 2
    for row in range(rows):
        if won and banner_row - 1 <= row <= banner_row + 1:
            label = "YOU WIN!" if row == banner_row else ""
            text.append(label.center(columns), style=BANNER_STYLE)
        else:
            for column in range(columns):
                x, y = surface_point(column, row)
                text.append(" ", style=_cell_style(views, x, y))
        if row < rows - 1:
            text.append("\n")
    return text


class BoardCanvas(Static):
    """Rasterized game surface that reports clicks in surface coordinates."""

    class Pressed(Message):
        def __init__(self, x: float, y: float) -> None:
            super().__init__()
            self.x = x
            self.y = y

    def draw_game(self, game: Game) -> None:
        layout = game.board.layout
        self.update(
            rasterize(
                game.card_views(),
                layout.surface_width,
                layout.surface_height,
                won=game.is_won(),
            )
        )

    def on_click(self, event: events.Click) -> None:
        event.stop()
        x, y = surface_point(event.x, event.y)
        self.post_message(self.Pressed(x, y))


class EventLog(Static):
    """Last few match and revert outcomes, newest at the bottom."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Flip two cards to find a pair[/dim]"))
        self.update(Panel(content, title="Turns", border_style="magenta"))


class StatusStrip(Static):
    """Pair count, or the lock and win notices."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Dealing…[/dim]"), border_style="green"))


class MemoryTextualApp(App):
    """Textual memory match UI."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    BoardCanvas {
        width: 50;
        height: 25;
        margin: 1 2;
    }

    #right {
        layout: vertical;
        width: 1fr;
        padding: 0 1;
    }

    StatusStrip, EventLog {
        width: 100%;
        min-height: 3;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, *, config: GameConfig) -> None:
        super().__init__()
        self.game_config = config
        self.game = Game.new(config, scheduler=self._schedule_revert)

        # Widgets initialised in compose
        self.board_canvas: BoardCanvas | None = None
        self.status_strip: StatusStrip | None = None
        self.event_log: EventLog | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.board_canvas = BoardCanvas(id="board")
        self.status_strip = StatusStrip(id="status")
        self.event_log = EventLog(id="events")
        right = Vertical(self.status_strip, self.event_log, id="right")
        yield Horizontal(self.board_canvas, right, id="main")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Memory Match"
        self._refresh_ui()

    def _schedule_revert(self, delay: float, callback: Callable[[], None]) -> object:
        def fire() -> None:
            callback()
            self._add_event("[dim]Cards flipped back[/dim]")
            self._refresh_ui()

        return self.set_timer(delay, fire)

    def on_board_canvas_pressed(self, message: BoardCanvas.Pressed) -> None:
        result = self.game.on_pointer_press(message.x, message.y)
        logger.debug("Press at (%.1f, %.1f): %s", message.x, message.y, result.value)
        if result is PressResult.MATCHED:
            self._add_event(f"[green]Match![/green] {self.game.pairs_found}/{self.game.total_pairs} pairs")
            if self.game.is_won():
                self._add_event("[bold yellow]All pairs found[/bold yellow]")
        elif result is PressResult.MISMATCHED:
            self._add_event("[red]No match[/red]")
        if result.accepted:
            self._refresh_ui()

    def _add_event(self, message: str) -> None:
        if self.event_log:
            self.event_log.add(message)

    def _refresh_ui(self) -> None:
        if self.board_canvas:
            self.board_canvas.draw_game(self.game)
        if self.status_strip:
            self.status_strip.message = _status_message(self.game)
        self.sub_title = f"{self.game.pairs_found}/{self.game.total_pairs} pairs"


def _status_message(game: Game) -> str:
    if game.is_won():
        return "[bold yellow]YOU WIN![/bold yellow] Press [bold]Q[/bold] to quit."
    if game.locked:
        return "[red]Not a match[/red], hold on…"
    return f"[cyan]Pairs found[/cyan]: {game.pairs_found}/{game.total_pairs}"


def run_textual_app(*, config: GameConfig) -> None:
    """Launch the Textual UI."""

    app = MemoryTextualApp(config=config)
    app.run()
