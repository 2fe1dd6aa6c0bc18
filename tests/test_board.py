from __future__ import annotations

import random
from collections import Counter

import numpy as np
import pytest

from memorymatch.board import Board, Card, deal_board
from memorymatch.config import BoardLayout
from memorymatch.faces import Face


def _paired_faces(layout: BoardLayout | None = None) -> list[Face]:
    layout = layout or BoardLayout()
    faces: list[Face] = []
    for face in list(Face)[: layout.total_pairs]:
        faces.extend([face, face])
    return faces


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
def test_deal_board_uses_each_face_exactly_twice(seed: int) -> None:
    board = deal_board(BoardLayout(), random.Random(seed))

    counts = Counter(board.faces())
    assert len(board.cards) == 16
    assert len(counts) == 8
    assert set(counts.values()) == {2}
    assert board.total_pairs == 8


def test_deal_board_is_reproducible_with_seeded_rng() -> None:
    first = deal_board(BoardLayout(), random.Random(99)).faces()
    second = deal_board(BoardLayout(), random.Random(99)).faces()

    assert first == second


def test_deal_board_rejects_insufficient_faces() -> None:
    with pytest.raises(ValueError):
        deal_board(BoardLayout(), random.Random(1), faces=[Face.RED, Face.GREEN])


def test_board_validates_face_pairs() -> None:
    faces = _paired_faces()
    faces[0] = Face.GREEN
    with pytest.raises(ValueError):
        Board(BoardLayout(), faces)
    with pytest.raises(ValueError):
        Board(BoardLayout(), faces[:-2])


def test_cards_are_centered_on_surface() -> None:
    board = Board(BoardLayout(), _paired_faces())

    first = board.card(0)
    last = board.card(15)
    assert (first.x, first.y) == (22, 22)
    assert (board.card(1).x, board.card(4).y) == (114, 114)
    assert last.x + last.width == 400 - 22
    assert last.y + last.height == 400 - 22
    assert (last.row, last.column) == (3, 3)


def test_card_at_uses_strict_containment() -> None:
    board = Board(BoardLayout(), _paired_faces())

    assert board.card_at(23, 50) is board.card(0)
    assert board.card_at(22, 50) is None
    assert board.card_at(102, 50) is None
    assert board.card_at(50, 22) is None
    assert board.card_at(108, 50) is None
    assert board.card_at(0, 0) is None
    assert board.card_at(120, 120) is board.card(5)


def test_card_at_is_idempotent() -> None:
    board = deal_board(BoardLayout(), random.Random(3))

    assert board.card_at(250, 330) is board.card_at(250, 330)
    assert board.card_at(250, 330) is not None


def test_card_transitions_enforce_matched_invariant() -> None:
    card = Card(index=0, row=0, column=0, x=0, y=0, width=10, height=10, face=Face.RED)

    with pytest.raises(ValueError):
        card.mark_matched()

    card.flip_up()
    card.mark_matched()
    assert card.face_up and card.matched

    with pytest.raises(ValueError):
        card.flip_down()
    with pytest.raises(ValueError):
        card.flip_up()


def test_is_won_requires_every_card_matched() -> None:
    board = Board(BoardLayout(), _paired_faces())
    for card in board.cards[:-1]:
        card.flip_up()
        card.mark_matched()
    assert not board.is_won()
    assert board.matched_count == 15

    board.cards[-1].flip_up()
    board.cards[-1].mark_matched()
    assert board.is_won()


def test_shuffle_places_faces_uniformly() -> None:
    rng = random.Random(2024)
    trials = 4000
    first_slot = Counter()
    red_positions = np.zeros(16, dtype=np.int64)
    for _ in range(trials):
        faces = deal_board(BoardLayout(), rng).faces()
        first_slot[faces[0]] += 1
        for index, face in enumerate(faces):
            if face is Face.RED:
                red_positions[index] += 1

    observed = np.array([first_slot[face] for face in Face], dtype=np.float64)
    expected = trials / 8
    chi_square = float(((observed - expected) ** 2 / expected).sum())
    assert chi_square < 30.0

    expected_red = trials * 2 / 16
    chi_square_red = float(((red_positions - expected_red) ** 2 / expected_red).sum())
    assert chi_square_red < 45.0


def test_shuffle_covers_small_layout_permutations_evenly() -> None:
    layout = BoardLayout(columns=2, rows=2)
    rng = random.Random(11)
    trials = 6000
    arrangements = Counter(tuple(deal_board(layout, rng).faces()) for _ in range(trials))

    assert len(arrangements) == 6
    observed = np.array(list(arrangements.values()), dtype=np.float64)
    expected = trials / 6
    assert float(((observed - expected) ** 2 / expected).sum()) < 25.0
