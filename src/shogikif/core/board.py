"""Board - piece placement on a 9x9 grid."""

from __future__ import annotations

from collections.abc import Iterator

from shogikif.core.enums import PieceKind, Side
from shogikif.core.piece import Piece
from shogikif.core.types import BOARD_SIZE, Square, all_squares

_FILE_LABELS = "９８７６５４３２１"
_RANK_LABELS = "一二三四五六七八九"

_BACK_RANK = (
    PieceKind.LANCE,
    PieceKind.KNIGHT,
    PieceKind.SILVER,
    PieceKind.GOLD,
    None,  # king, side dependent
    PieceKind.GOLD,
    PieceKind.SILVER,
    PieceKind.KNIGHT,
    PieceKind.LANCE,
)


class Board:
    """Mutable 81-cell board addressed by :class:`Square`."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        # [rank - 1][file - 1]
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._cells[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in display order (rank 1→9, file 9→1)."""
        for sq in all_squares():
            piece = self[sq]
            if piece is not None:
                yield sq, piece

    def piece_count(self, side: Side | None = None) -> int:
        return sum(1 for _, p in self.pieces() if side is None or p.side == side)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [
            [p.copy() if p is not None else None for p in row] for row in self._cells
        ]
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard even-game starting position (平手)."""
        b = cls()
        for file in range(1, BOARD_SIZE + 1):
            b[Square(file, 3)] = Piece(Side.SECOND, PieceKind.PAWN)
            b[Square(file, 7)] = Piece(Side.FIRST, PieceKind.PAWN)

        for idx, kind in enumerate(_BACK_RANK):
            file = idx + 1
            gote_kind = kind if kind is not None else PieceKind.RIVAL_KING
            sente_kind = kind if kind is not None else PieceKind.KING
            b[Square(file, 1)] = Piece(Side.SECOND, gote_kind)
            b[Square(file, 9)] = Piece(Side.FIRST, sente_kind)

        b[Square(8, 2)] = Piece(Side.SECOND, PieceKind.ROOK)
        b[Square(2, 2)] = Piece(Side.SECOND, PieceKind.BISHOP)
        b[Square(2, 8)] = Piece(Side.FIRST, PieceKind.ROOK)
        b[Square(8, 8)] = Piece(Side.FIRST, PieceKind.BISHOP)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = ["  " + " ".join(f" {label}" for label in _FILE_LABELS)]
        for rank in range(1, BOARD_SIZE + 1):
            row = []
            for file in range(BOARD_SIZE, 0, -1):
                p = self._cells[rank - 1][file - 1]
                row.append(str(p) if p is not None else " ・")
            rows.append(f"{' '.join(row)} {_RANK_LABELS[rank - 1]}")
        return "\n".join(rows)
