"""
A square on the board

Squares are plain integers 0-63 in row-major order: square = 8 * rank + file.
(placed in its own module as multiple other modules need to import it)
"""

from enum import StrEnum

# The puzzle is always played on an 8x8 board
BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE

FILE_NAMES = "abcdefgh"

Square = int


class SquareColor(StrEnum):
    LIGHT = "light"
    DARK = "dark"


def to_rank_file(square: Square) -> tuple[int, int]:
    return divmod(square, BOARD_SIZE)


def to_square(rank: int, file: int) -> Square:
    """Inverse of to_rank_file. Bounds are the caller's problem (see is_within_bounds)."""
    return BOARD_SIZE * rank + file


def is_within_bounds(rank: int, file: int) -> bool:
    return (0 <= rank < BOARD_SIZE) and (0 <= file < BOARD_SIZE)


def is_valid_square(square: object) -> bool:
    # bool is an int subclass, but True is not a square
    return (
        isinstance(square, int)
        and not isinstance(square, bool)
        and 0 <= square < NUM_SQUARES
    )


def square_color(square: Square) -> SquareColor:
    """Light iff rank + file is even, so square 0 (a1) is light."""
    rank, file = to_rank_file(square)
    return SquareColor.LIGHT if (rank + file) % 2 == 0 else SquareColor.DARK


def from_algebraic(notation: str) -> Square:
    """Algebraic notation: 'a1' - 'h8' get converted to 0 - 63"""
    if len(notation) != 2:
        raise ValueError(f"Cannot interpret {notation!r} as a square name.")
    file_char, rank_char = notation[0].lower(), notation[1]
    if file_char not in FILE_NAMES or not rank_char.isdigit():
        raise ValueError(f"Cannot interpret {notation!r} as a square name.")
    rank = int(rank_char) - 1
    file = FILE_NAMES.index(file_char)
    if not is_within_bounds(rank, file):
        raise ValueError(f"Square {notation!r} is not on the board.")
    return to_square(rank, file)


def to_algebraic(square: Square) -> str:
    rank, file = to_rank_file(square)
    return f"{FILE_NAMES[file]}{rank + 1}"
