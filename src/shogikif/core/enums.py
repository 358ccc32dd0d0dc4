"""Core enumerations for the shogi domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(IntEnum):
    """Side to move. FIRST is 先手 (sente), SECOND is 後手 (gote)."""

    FIRST = 0
    SECOND = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @classmethod
    def for_move_number(cls, n: int) -> Side:
        """Odd move numbers belong to FIRST, even ones to SECOND."""
        return cls.FIRST if n % 2 == 1 else cls.SECOND

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(Enum):
    """Piece identifiers, valued by their KIF glyph."""

    PAWN = "歩"
    LANCE = "香"
    KNIGHT = "桂"
    SILVER = "銀"
    GOLD = "金"
    BISHOP = "角"
    ROOK = "飛"
    KING = "玉"
    RIVAL_KING = "王"
    TOKIN = "と"
    PROMOTED_LANCE = "成香"
    PROMOTED_KNIGHT = "成桂"
    PROMOTED_SILVER = "成銀"
    HORSE = "馬"
    DRAGON = "龍"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def is_promoted(self) -> bool:
        return self in _DEMOTE

    @property
    def promoted(self) -> PieceKind:
        return promote_kind(self)

    @property
    def demoted(self) -> PieceKind:
        return demote_kind(self)

    @classmethod
    def from_token(cls, token: str) -> PieceKind:
        """Strict lookup by glyph, e.g. '成銀' → PROMOTED_SILVER."""
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Invalid piece token: {token!r}") from None

    def __str__(self) -> str:
        return self.value


_PROMOTE: dict[PieceKind, PieceKind] = {
    PieceKind.PAWN: PieceKind.TOKIN,
    PieceKind.LANCE: PieceKind.PROMOTED_LANCE,
    PieceKind.KNIGHT: PieceKind.PROMOTED_KNIGHT,
    PieceKind.SILVER: PieceKind.PROMOTED_SILVER,
    PieceKind.BISHOP: PieceKind.HORSE,
    PieceKind.ROOK: PieceKind.DRAGON,
}
_DEMOTE: dict[PieceKind, PieceKind] = {v: k for k, v in _PROMOTE.items()}


def promote_kind(kind: PieceKind) -> PieceKind:
    """Promoted counterpart of *kind*; identity when it has none."""
    return _PROMOTE.get(kind, kind)


def demote_kind(kind: PieceKind) -> PieceKind:
    """Base counterpart of *kind*; identity for base kinds."""
    return _DEMOTE.get(kind, kind)
