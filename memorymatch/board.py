"""Card grid, shuffling and geometric queries."""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from .config import BoardLayout
from .faces import Face

__all__ = ["Card", "Board", "deal_board"]

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Card:
    """One grid cell with a hidden face."""

    index: int
    row: int
    column: int
    x: float
    y: float
    width: float
    height: float
    face: Face
    face_up: bool = False
    matched: bool = False

    def contains(self, px: float, py: float) -> bool:
        """Return ``True`` when the point lies strictly inside the card bounds."""

        return self.x < px < self.x + self.width and self.y < py < self.y + self.height

    def flip_up(self) -> None:
        if self.matched:
            raise ValueError("cannot flip a matched card")
        self.face_up = True

    def flip_down(self) -> None:
        if self.matched:
            raise ValueError("cannot flip down a matched card")
        self.face_up = False

    def mark_matched(self) -> None:
        if not self.face_up:
            raise ValueError("only face-up cards can be matched")
        self.matched = True


class Board:
    """
    Fixed collection of cards laid out on a grid.

    Cards are stored in row-major order. Geometry only matters for
    ``card_at``; game rules live in the match controller.
    """

    def __init__(self, layout: BoardLayout, faces: Sequence[Face]) -> None:
        if len(faces) != layout.card_count:
            raise ValueError("face count must equal columns*rows")
        counts = Counter(faces)
        if any(count != 2 for count in counts.values()):
            raise ValueError("every face must appear exactly twice")

        self.layout = layout
        start_x, start_y = layout.origin()
        step = layout.card_size + layout.padding
        cards: list[Card] = []
        for index, face in enumerate(faces):
            row, column = divmod(index, layout.columns)
            cards.append(
                Card(
                    index=index,
                    row=row,
                    column=column,
                    x=start_x + column * step,
                    y=start_y + row * step,
                    width=layout.card_size,
                    height=layout.card_size,
                    face=face,
                )
            )
        self._cards = tuple(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def total_pairs(self) -> int:
        return len(self._cards) // 2

    @property
    def matched_count(self) -> int:
        return sum(1 for card in self._cards if card.matched)

    def card(self, index: int) -> Card:
        return self._cards[index]

    def faces(self) -> list[Face]:
        """Return the faces in index order."""

        return [card.face for card in self._cards]

    def card_at(self, x: float, y: float) -> Card | None:
        """Return the card whose bounds contain ``(x, y)``, if any."""

        for card in self._cards:
            if card.contains(x, y):
                return card
        return None

    def is_won(self) -> bool:
        return self.matched_count == len(self._cards)


def deal_board(
    layout: BoardLayout | None = None,
    rng: random.Random | None = None,
    faces: Iterable[Face] = Face,
) -> Board:
    """Shuffle face pairs and deal them onto a fresh board."""

    layout = layout or BoardLayout()
    available = list(faces)
    if len(available) < layout.total_pairs:
        raise ValueError(
            f"{layout.total_pairs} pairs requested but only {len(available)} faces available"
        )

    deck = available[: layout.total_pairs] * 2
    (rng or random.Random()).shuffle(deck)
    board = Board(layout, deck)
    logger.info(
        "Dealt %dx%d board with %d pairs", layout.columns, layout.rows, layout.total_pairs
    )
    return board
