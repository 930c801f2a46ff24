"""Position types and coordinate helpers.

Two equivalent ways to address a square:

    Normal (column, row):           Index (i, j):

      a b c d e f g h > column        0 1 2 3 4 5 6 7 > j
    8 . . . . . . . .               7 . . . . . . . .
    ...                             ...
    1 . . . . . . . .               0 . . . . . . . .
    v                               v
    row                             i

``i`` is the row ordinal (row 1 -> 0) and ``j`` the column ordinal (a -> 0).
None of the conversions clamp their input; see :func:`is_on_board`.
"""

from __future__ import annotations

from typing import Final, NamedTuple

COLUMNS: Final = ("a", "b", "c", "d", "e", "f", "g", "h")
ROWS: Final = (1, 2, 3, 4, 5, 6, 7, 8)
BOARD_SIZE: Final = len(COLUMNS)

_FIRST_COLUMN_CODE: Final = ord(COLUMNS[0])


class NormalPosition(NamedTuple):
    """Algebraic position, e.g. ``NormalPosition("e", 4)``."""

    column: str
    row: int


class IndexPosition(NamedTuple):
    """Zero-based array position: ``i`` = row ordinal, ``j`` = column ordinal."""

    i: int
    j: int


def relative_position(
    column: str, row: int, column_incr: int = 0, row_incr: int = 0
) -> NormalPosition:
    """Shift a position by a column/row increment.

    The result is not validated: shifting past ``h`` yields letters beyond
    the board and rows may leave 1..8.
    """
    column_ordinal = ord(column.lower()) - _FIRST_COLUMN_CODE + column_incr
    return NormalPosition(chr(_FIRST_COLUMN_CODE + column_ordinal), row + row_incr)


def _ordinal(values: tuple, value: object) -> int:
    try:
        return values.index(value)
    except ValueError:
        return -1


def normal_to_index(column: str, row: int) -> IndexPosition:
    """Convert a normal position to indices; unknown components map to -1."""
    return IndexPosition(i=_ordinal(ROWS, row), j=_ordinal(COLUMNS, column.lower()))


def index_to_normal(i: int, j: int) -> NormalPosition:
    """Convert array indices back to a normal position."""
    if not (0 <= i < BOARD_SIZE and 0 <= j < BOARD_SIZE):
        raise IndexError(f"Index position out of range: ({i}, {j})")
    return NormalPosition(COLUMNS[j], ROWS[i])


def is_on_board(column: str, row: int) -> bool:
    """Whether *column*/*row* name a square of the 8x8 board."""
    return column.lower() in COLUMNS and row in ROWS


def square_name(column: str, row: int) -> str:
    """Human-readable name, e.g. ('e', 4) -> 'e4'."""
    return f"{column.lower()}{row}"


def parse_square(name: str) -> NormalPosition:
    """Parse square name, e.g. 'e4' -> NormalPosition('e', 4)."""
    if len(name) != 2 or name[0].lower() not in COLUMNS or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return NormalPosition(name[0].lower(), int(name[1]))
