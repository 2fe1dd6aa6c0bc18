"""Game session object tying the board to the match controller."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .board import Board, Card, deal_board
from .config import GameConfig
from .controller import MatchController, PressResult, TurnPhase
from .faces import Face
from .scheduler import ManualScheduler, Scheduler

__all__ = ["CardView", "Game"]


@dataclass(frozen=True, slots=True)
class CardView:
    """Read-only snapshot of a card for renderers."""

    index: int
    x: float
    y: float
    width: float
    height: float
    is_face_up: bool
    is_matched: bool
    face: Face
    face_color: str

    def contains(self, px: float, py: float) -> bool:
        return self.x < px < self.x + self.width and self.y < py < self.y + self.height

    @property
    def revealed(self) -> bool:
        return self.is_face_up or self.is_matched

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @classmethod
    def of(cls, card: Card) -> "CardView":
        return cls(
            index=card.index,
            x=card.x,
            y=card.y,
            width=card.width,
            height=card.height,
            is_face_up=card.face_up,
            is_matched=card.matched,
            face=card.face,
            face_color=card.face.color,
        )


class Game:
    """A single memory match session."""

    def __init__(
        self,
        config: GameConfig,
        board: Board,
        controller: MatchController,
        scheduler: Scheduler,
    ) -> None:
        self.config = config
        self.board = board
        self.controller = controller
        self.scheduler = scheduler

    @classmethod
    def new(
        cls,
        config: GameConfig | None = None,
        *,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> "Game":
        """Deal a board and wire a controller.

        Without ``scheduler`` the session runs on a :class:`ManualScheduler`;
        advance it through ``game.scheduler`` to fire pending reverts.
        """

        config = config or GameConfig()
        if rng is None:
            rng = random.Random(config.seed)
        board = deal_board(config.layout, rng)
        if scheduler is None:
            scheduler = ManualScheduler()
        controller = MatchController(board, scheduler, revert_delay=config.revert_delay)
        return cls(config, board, controller, scheduler)

    def on_pointer_press(self, x: float, y: float) -> PressResult:
        return self.controller.on_pointer_press(x, y)

    def card_views(self) -> tuple[CardView, ...]:
        return tuple(CardView.of(card) for card in self.board.cards)

    def is_won(self) -> bool:
        return self.controller.is_won()

    @property
    def pairs_found(self) -> int:
        return self.controller.pairs_found

    @property
    def total_pairs(self) -> int:
        return self.board.total_pairs

    @property
    def locked(self) -> bool:
        return self.controller.locked

    @property
    def phase(self) -> TurnPhase:
        return self.controller.phase

    @property
    def pending_indices(self) -> tuple[int, ...]:
        return tuple(card.index for card in self.controller.pending)
