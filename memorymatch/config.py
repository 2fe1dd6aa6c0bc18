"""Runtime configuration for a memory match session."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_REVERT_DELAY = 1.0


@dataclass(frozen=True, slots=True)
class BoardLayout:
    """Grid geometry used to place cards on the rendering surface."""

    columns: int = 4
    rows: int = 4
    card_size: int = 80
    padding: int = 12
    surface_width: int = 400
    surface_height: int = 400

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError("columns/rows must be positive")
        if (self.columns * self.rows) % 2:
            raise ValueError("grid must hold an even number of cards")
        if self.card_size <= 0:
            raise ValueError("card_size must be positive")
        if self.padding < 0:
            raise ValueError("padding must not be negative")
        if self.grid_width > self.surface_width or self.grid_height > self.surface_height:
            raise ValueError("grid does not fit on the surface")

    @property
    def card_count(self) -> int:
        return self.columns * self.rows

    @property
    def total_pairs(self) -> int:
        return self.card_count // 2

    @property
    def grid_width(self) -> int:
        return self.columns * self.card_size + (self.columns - 1) * self.padding

    @property
    def grid_height(self) -> int:
        return self.rows * self.card_size + (self.rows - 1) * self.padding

    def origin(self) -> tuple[float, float]:
        """Return the top-left corner that centers the grid on the surface."""

        start_x = (self.surface_width - self.grid_width) / 2
        start_y = (self.surface_height - self.grid_height) / 2
        return start_x, start_y


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Settings for a single game session."""

    layout: BoardLayout = field(default_factory=BoardLayout)
    revert_delay: float = DEFAULT_REVERT_DELAY
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.revert_delay < 0:
            raise ValueError("revert_delay must not be negative")
