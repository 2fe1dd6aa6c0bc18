"""Turn-by-turn state machine gating input and resolving pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .board import Board, Card
from .config import DEFAULT_REVERT_DELAY
from .scheduler import Scheduler

__all__ = [
    "MatchController",
    "PressResult",
    "RevertTask",
    "TurnPhase",
    "TurnStateError",
]

logger = logging.getLogger(__name__)


class TurnStateError(RuntimeError):
    """Raised when the controller's internal bookkeeping is violated."""


class TurnPhase(str, Enum):
    """Observable phases of the current turn."""

    IDLE = "idle"
    ONE_PENDING = "one_pending"
    EVALUATING = "evaluating"
    REVERTING = "reverting"
    WON = "won"


class PressResult(str, Enum):
    """Outcome of a single pointer press."""

    IGNORED_WON = "ignored_won"
    IGNORED_LOCKED = "ignored_locked"
    MISSED = "missed"
    IGNORED_CARD = "ignored_card"
    FLIPPED = "flipped"
    MATCHED = "matched"
    MISMATCHED = "mismatched"

    @property
    def accepted(self) -> bool:
        return self in (PressResult.FLIPPED, PressResult.MATCHED, PressResult.MISMATCHED)


@dataclass(slots=True)
class RevertTask:
    """Pending flip-back of a mismatched pair."""

    first: Card
    second: Card
    fired: bool = False


class MatchController:
    """Owns the pending cards, the input lock and the revert timer."""

    def __init__(
        self,
        board: Board,
        scheduler: Scheduler,
        *,
        revert_delay: float = DEFAULT_REVERT_DELAY,
    ) -> None:
        self.board = board
        self.revert_delay = revert_delay
        self._scheduler = scheduler
        self._pending: list[Card] = []
        self._revert: RevertTask | None = None
        self.locked = False
        self.pairs_found = 0

    @property
    def pending(self) -> tuple[Card, ...]:
        return tuple(self._pending)

    @property
    def revert_task(self) -> RevertTask | None:
        return self._revert

    @property
    def total_pairs(self) -> int:
        return self.board.total_pairs

    def is_won(self) -> bool:
        return self.pairs_found == self.total_pairs

    @property
    def phase(self) -> TurnPhase:
        if self.is_won():
            return TurnPhase.WON
        if self._revert is not None:
            return TurnPhase.REVERTING
        if len(self._pending) == 2:
            return TurnPhase.EVALUATING
        if len(self._pending) == 1:
            return TurnPhase.ONE_PENDING
        return TurnPhase.IDLE

    def accepts_input(self) -> bool:
        return len(self._pending) < 2 and not self.locked and not self.is_won()

    def on_pointer_press(self, x: float, y: float) -> PressResult:
        """Handle a press at surface coordinates ``(x, y)``."""

        if self.is_won():
            return PressResult.IGNORED_WON
        if self.locked:
            logger.debug("Press at (%.1f, %.1f) ignored while locked", x, y)
            return PressResult.IGNORED_LOCKED

        card = self.board.card_at(x, y)
        if card is None:
            return PressResult.MISSED
        if card.face_up or card.matched:
            logger.debug("Card %d already revealed", card.index)
            return PressResult.IGNORED_CARD
        if len(self._pending) >= 2:
            raise TurnStateError("more than two cards pending")

        card.flip_up()
        self._pending.append(card)
        logger.debug("Flipped card %d (%s)", card.index, card.face.value)

        if len(self._pending) < 2:
            return PressResult.FLIPPED
        self.locked = True
        return self._evaluate()

    def _evaluate(self) -> PressResult:
        first, second = self._pending
        if first.face == second.face:
            first.mark_matched()
            second.mark_matched()
            self.pairs_found += 1
            self._pending.clear()
            self.locked = False
            logger.debug(
                "Matched %s with cards %d and %d (%d/%d)",
                first.face.value,
                first.index,
                second.index,
                self.pairs_found,
                self.total_pairs,
            )
            if self.is_won():
                logger.info("All %d pairs found", self.total_pairs)
            return PressResult.MATCHED

        self._schedule_revert(first, second)
        logger.debug("Mismatch between cards %d and %d", first.index, second.index)
        return PressResult.MISMATCHED

    def _schedule_revert(self, first: Card, second: Card) -> None:
        if self._revert is not None:
            raise TurnStateError("a revert is already outstanding")
        task = RevertTask(first, second)
        self._revert = task
        self._scheduler(self.revert_delay, lambda: self._run_revert(task))

    def _run_revert(self, task: RevertTask) -> None:
        if task.fired:
            return
        task.fired = True
        task.first.flip_down()
        task.second.flip_down()
        self._pending.clear()
        self._revert = None
        self.locked = False
        logger.debug("Reverted cards %d and %d", task.first.index, task.second.index)
