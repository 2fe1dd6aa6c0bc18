from __future__ import annotations

import pytest

from memorymatch.config import BoardLayout, GameConfig


def test_default_layout_geometry() -> None:
    layout = BoardLayout()

    assert layout.card_count == 16
    assert layout.total_pairs == 8
    assert layout.grid_width == 4 * 80 + 3 * 12
    assert layout.origin() == (22.0, 22.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"columns": 0},
        {"columns": 3, "rows": 3},
        {"card_size": 0},
        {"padding": -1},
        {"card_size": 120},
    ],
)
def test_layout_rejects_invalid_values(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        BoardLayout(**kwargs)


def test_game_config_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        GameConfig(revert_delay=-0.5)

    assert GameConfig().revert_delay == 1.0
