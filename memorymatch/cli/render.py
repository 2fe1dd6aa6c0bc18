"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from ..game import CardView, Game
from .views import BoardGridView

CARD_BACK_COLOR = "#4169e1"


def format_card(view: CardView, reveal: bool = False) -> str:
    """Return a Rich-rendered label for a single card."""

    color = view.face_color
    if view.is_matched:
        return f"[{color}]●[/{color}] [green]✓[/green]"
    if view.is_face_up or reveal:
        return f"[{color}]●[/{color}] {view.face.value}"
    return f"[{CARD_BACK_COLOR}]▒▒▒[/{CARD_BACK_COLOR}]"


def render_board(game: Game, *, reveal: bool = False, title: str = "Memory Match") -> RenderableType:
    """Return a Rich panel describing the current board."""

    view = BoardGridView(
        views=game.card_views(),
        columns=game.board.layout.columns,
        reveal=reveal,
        card_formatter=format_card,
    )
    status = f"[cyan]Pairs[/cyan]: {game.pairs_found}/{game.total_pairs}"
    if game.is_won():
        status += "  [bold yellow]YOU WIN![/bold yellow]"
    body = Group(view.render(), Text.from_markup(status))
    return Panel(body, title=title, padding=(0, 1), border_style="cyan", expand=False)
