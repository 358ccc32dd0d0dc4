"""Piece object."""

from __future__ import annotations

from dataclasses import dataclass

from shogikif.core.enums import PieceKind, Side, demote_kind, promote_kind


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``side`` never changes after creation.  ``kind`` is rewritten in place
    when a replayed move promotes or demotes the piece, so the replay reducer
    always works on a :meth:`copy` rather than a piece owned by another board.
    """

    side: Side
    kind: PieceKind

    def copy(self) -> Piece:
        return Piece(self.side, self.kind)

    def promote(self) -> None:
        self.kind = promote_kind(self.kind)

    def demote(self) -> None:
        self.kind = demote_kind(self.kind)

    @property
    def is_promoted(self) -> bool:
        return self.kind.is_promoted

    def __str__(self) -> str:
        """Glyph prefixed with 'v' for 後手 pieces, the usual KIF board style."""
        prefix = "v" if self.side == Side.SECOND else " "
        return f"{prefix}{self.kind.glyph}"
