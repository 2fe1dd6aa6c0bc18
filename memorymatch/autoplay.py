"""Headless simulated players for exercising full games."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, Sequence

import numpy as np

from .config import GameConfig
from .controller import PressResult
from .faces import Face
from .game import CardView, Game
from .scheduler import ManualScheduler

__all__ = [
    "STRATEGIES",
    "GameRecord",
    "SimulationReport",
    "make_player",
    "play_game",
    "run_simulation",
]

MAX_PRESSES = 10_000


class Player(Protocol):
    def choose(self, views: Sequence[CardView]) -> int: ...

    def observe(self, views: Sequence[CardView]) -> None: ...


def _hidden(views: Sequence[CardView]) -> list[int]:
    return [view.index for view in views if not view.revealed]


class RandomPlayer:
    """Presses a random face-down card with no recollection."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def choose(self, views: Sequence[CardView]) -> int:
        return self.rng.choice(_hidden(views))

    def observe(self, views: Sequence[CardView]) -> None:
        return None


class MemoryPlayer:
    """Remembers every face it has seen and cashes in known pairs."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.known: dict[int, Face] = {}

    def choose(self, views: Sequence[CardView]) -> int:
        hidden = _hidden(views)
        pending = [view for view in views if view.is_face_up and not view.is_matched]

        if pending:
            face = pending[0].face
            for index in hidden:
                if self.known.get(index) is face:
                    return index
        else:
            by_face: dict[Face, list[int]] = {}
            for index in hidden:
                if index in self.known:
                    by_face.setdefault(self.known[index], []).append(index)
            for indices in by_face.values():
                if len(indices) == 2:
                    return indices[0]

        unknown = [index for index in hidden if index not in self.known]
        return self.rng.choice(unknown or hidden)

    def observe(self, views: Sequence[CardView]) -> None:
        for view in views:
            if view.is_matched:
                self.known.pop(view.index, None)
            elif view.is_face_up:
                self.known[view.index] = view.face


STRATEGIES = {
    "random": RandomPlayer,
    "memory": MemoryPlayer,
}


def make_player(strategy: str, rng: random.Random) -> Player:
    try:
        factory = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy '{strategy}'") from None
    return factory(rng)


@dataclass(frozen=True, slots=True)
class GameRecord:
    """Statistics collected while playing one game to completion."""

    turns: int
    mismatches: int
    presses: int


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Aggregate over many simulated games."""

    strategy: str
    records: tuple[GameRecord, ...]

    @property
    def games(self) -> int:
        return len(self.records)

    def _turns(self) -> np.ndarray:
        return np.array([record.turns for record in self.records], dtype=np.int64)

    @property
    def mean_turns(self) -> float:
        return float(self._turns().mean())

    @property
    def min_turns(self) -> int:
        return int(self._turns().min())

    @property
    def max_turns(self) -> int:
        return int(self._turns().max())

    def percentile_turns(self, q: float) -> float:
        return float(np.percentile(self._turns(), q))

    @property
    def mean_mismatches(self) -> float:
        return float(np.mean([record.mismatches for record in self.records]))


def play_game(
    strategy: str,
    config: GameConfig | None = None,
    rng: random.Random | None = None,
) -> GameRecord:
    """Play one game with ``strategy`` using a virtual clock."""

    config = config or GameConfig()
    rng = rng or random.Random(config.seed)
    scheduler = ManualScheduler()
    game = Game.new(config, scheduler=scheduler, rng=rng)
    player = make_player(strategy, rng)

    turns = mismatches = presses = 0
    while not game.is_won():
        if presses >= MAX_PRESSES:
            raise RuntimeError("simulated game did not finish")
        views = game.card_views()
        target = views[player.choose(views)]
        result = game.on_pointer_press(*target.center)
        presses += 1
        player.observe(game.card_views())

        if result is PressResult.MATCHED:
            turns += 1
        elif result is PressResult.MISMATCHED:
            turns += 1
            mismatches += 1
            scheduler.advance(config.revert_delay)
        elif not result.accepted:
            raise RuntimeError(f"simulated press was rejected: {result.value}")

    return GameRecord(turns=turns, mismatches=mismatches, presses=presses)


def run_simulation(
    games: int,
    strategy: str = "memory",
    *,
    seed: int = 123,
    config: GameConfig | None = None,
) -> SimulationReport:
    """Play ``games`` independent games and summarise them."""

    if games <= 0:
        raise ValueError("games must be positive")
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy '{strategy}'")

    rng = random.Random(seed)
    records = tuple(play_game(strategy, config, rng) for _ in range(games))
    return SimulationReport(strategy=strategy, records=records)
