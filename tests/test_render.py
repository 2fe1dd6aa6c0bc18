from __future__ import annotations

from rich.console import Console

from memorymatch.config import GameConfig
from memorymatch.game import Game
from memorymatch.cli.render import format_card, render_board
from memorymatch.cli.textual.app import CELL_HEIGHT, CELL_WIDTH, _cell_style, rasterize, surface_point


def _plain(renderable) -> str:
    console = Console(width=120, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_format_card_hides_face_until_revealed() -> None:
    game = Game.new(GameConfig(seed=1))
    view = game.card_views()[0]

    assert view.face.value not in format_card(view)
    assert view.face.value in format_card(view, reveal=True)


def test_render_board_reports_progress() -> None:
    game = Game.new(GameConfig(seed=1))
    text = _plain(render_board(game))

    assert "Memory Match" in text
    assert "0/8" in text
    assert "YOU WIN" not in text


def test_surface_point_maps_cells_back_to_cards() -> None:
    game = Game.new(GameConfig(seed=6))
    for view in game.card_views():
        cx, cy = view.center
        column, row = int(cx // CELL_WIDTH), int(cy // CELL_HEIGHT)
        x, y = surface_point(column, row)
        card = game.board.card_at(x, y)
        assert card is not None
        assert card.index == view.index


def test_rasterize_covers_surface() -> None:
    game = Game.new(GameConfig(seed=6))
    text = rasterize(game.card_views(), 400, 400)

    lines = text.plain.split("\n")
    assert len(lines) == 400 // CELL_HEIGHT
    assert all(len(line) == 400 // CELL_WIDTH for line in lines)
    assert "YOU WIN!" in rasterize(game.card_views(), 400, 400, won=True).plain


def test_cell_style_draws_face_disc_only_when_revealed() -> None:
    game = Game.new(GameConfig(seed=6))
    view = game.card_views()[0]
    cx, cy = view.center

    assert _cell_style(game.card_views(), cx, cy) == "on #4169e1"
    assert _cell_style(game.card_views(), 1, 1) == "on #228b22"

    game.on_pointer_press(cx, cy)
    views = game.card_views()
    assert _cell_style(views, cx, cy) == f"on {view.face_color}"
    assert _cell_style(views, view.x + 2, view.y + 2) == "on #ffffff"
