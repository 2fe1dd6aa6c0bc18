"""Composable view primitives for the memory match CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import RenderableType
from rich.table import Table

from ..game import CardView


@dataclass(slots=True)
class BoardGridView:
    """Renderable laying cards out in their grid positions."""

    views: Sequence[CardView]
    columns: int
    reveal: bool
    card_formatter: Callable[[CardView, bool], str]

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, show_header=False, show_lines=True, expand=False)
        for _ in range(self.columns):
            table.add_column(justify="center", min_width=9)

        row: list[str] = []
        for view in self.views:
            row.append(self.card_formatter(view, self.reveal))
            if len(row) == self.columns:
                table.add_row(*row)
                row = []
        if row:
            table.add_row(*row)
        return table
