"""Square value type and coordinate helpers.

Board layout follows KIF convention:
    file 1–9 counts from the right edge (9 is the leftmost column),
    rank 1–9 counts from the top (後手's back rank is rank 1).

Cells are addressed as ``[rank - 1][file - 1]``.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 9


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_valid_coordinate(self.file, self.rank):
            raise ValueError(f"Square out of range: ({self.file}, {self.rank})")

    @property
    def row(self) -> int:
        """Row index 0–8 into the board grid."""
        return self.rank - 1

    @property
    def col(self) -> int:
        """Column index 0–8 into the board grid."""
        return self.file - 1

    def __str__(self) -> str:
        """ASCII digit pair, e.g. '76'."""
        return f"{self.file}{self.rank}"


def is_valid_coordinate(file: int, rank: int) -> bool:
    """Check whether a file/rank pair lies on the board."""
    return 1 <= file <= BOARD_SIZE and 1 <= rank <= BOARD_SIZE


def all_squares() -> list[Square]:
    """Every square in display order: rank 1→9, file 9→1."""
    return [
        Square(file, rank)
        for rank in range(1, BOARD_SIZE + 1)
        for file in range(BOARD_SIZE, 0, -1)
    ]
