"""
Knight movement rules

The knight is the only piece on the board. A move is legal when it lands on the board
and on a square that has not been visited yet.
"""

from typing import Iterable

from src.tour.square import Square, is_within_bounds, to_rank_file, to_square

Vector = tuple[int, int]

# Knights always move such that |delta_rank| + |delta_file| = 3
KNIGHT_DELTAS: tuple[Vector, ...] = (
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
)


def knight_targets(square: Square) -> tuple[Square, ...]:
    """All squares a knight on `square` could jump to on an empty board, ascending."""
    rank, file = to_rank_file(square)
    targets: list[Square] = []
    for d_rank, d_file in KNIGHT_DELTAS:
        new_rank = rank + d_rank
        new_file = file + d_file
        if not is_within_bounds(new_rank, new_file):
            continue
        targets.append(to_square(new_rank, new_file))
    return tuple(sorted(targets))


def is_knight_move(from_square: Square, to_square: Square) -> bool:
    return to_square in knight_targets(from_square)


def legal_moves(position: Square, visited: Iterable[Square]) -> tuple[Square, ...]:
    """
    Squares the knight may move to next
    ----

    1. enumerate the 8 knight offsets from the current position
    2. drop the ones that fall off the board
    3. drop the squares that were already visited
    4. sort ascending (rendering order and the tests rely on this)
    """
    visited_squares = set(visited)
    return tuple(
        target for target in knight_targets(position) if target not in visited_squares
    )
