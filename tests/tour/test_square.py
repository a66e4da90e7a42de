"""Unit tests for /src/tour/square.py"""

import pytest

from src.tour.square import (
    BOARD_SIZE,
    NUM_SQUARES,
    SquareColor,
    from_algebraic,
    is_valid_square,
    is_within_bounds,
    square_color,
    to_algebraic,
    to_rank_file,
    to_square,
)


@pytest.mark.parametrize(
    "square, rank, file",
    [(0, 0, 0), (7, 0, 7), (8, 1, 0), (17, 2, 1), (36, 4, 4), (63, 7, 7)],
)
def test_to_rank_file(square: int, rank: int, file: int) -> None:
    assert to_rank_file(square) == (rank, file)


def test_to_square_is_inverse_of_to_rank_file() -> None:
    """Every square survives the trip through (rank, file) coordinates"""
    for square in range(NUM_SQUARES):
        assert to_square(*to_rank_file(square)) == square


def test_square_within_bounds() -> None:
    """happy case: coordinates within the dimensions of the board"""
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            assert is_within_bounds(rank, file)


@pytest.mark.parametrize(
    "rank, file", [(-1, 0), (0, -1), (8, 0), (0, 8), (-2, 9), (10, 10)]
)
def test_square_out_of_bounds(rank: int, file: int) -> None:
    assert not is_within_bounds(rank, file)


@pytest.mark.parametrize("value", [-1, 64, 100, "a1", 3.0, None, True])
def test_invalid_square_values(value: object) -> None:
    assert not is_valid_square(value)


def test_square_color_parity() -> None:
    """Light iff rank + file is even."""
    assert square_color(0) == SquareColor.LIGHT
    assert square_color(1) == SquareColor.DARK
    assert square_color(8) == SquareColor.DARK
    assert square_color(9) == SquareColor.LIGHT
    assert square_color(63) == SquareColor.LIGHT


def test_half_the_board_is_light() -> None:
    light = [sq for sq in range(NUM_SQUARES) if square_color(sq) == SquareColor.LIGHT]
    assert len(light) == NUM_SQUARES // 2


@pytest.mark.parametrize(
    "notation, square", [("a1", 0), ("h1", 7), ("a2", 8), ("b3", 17), ("h8", 63)]
)
def test_algebraic_notation(notation: str, square: int) -> None:
    assert from_algebraic(notation) == square
    assert to_algebraic(square) == notation


def test_algebraic_notation_is_case_insensitive() -> None:
    assert from_algebraic("H8") == 63


@pytest.mark.parametrize("notation", ["", "a", "a9", "i1", "a0", "11", "a10"])
def test_invalid_algebraic_notation(notation: str) -> None:
    with pytest.raises(ValueError):
        from_algebraic(notation)
