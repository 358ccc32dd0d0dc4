"""Hands - each side's pool of captured pieces."""

from __future__ import annotations

from shogikif.core.enums import PieceKind, Side, demote_kind

HAND_PIECE_ORDER: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.GOLD,
    PieceKind.SILVER,
    PieceKind.KNIGHT,
    PieceKind.LANCE,
    PieceKind.PAWN,
    PieceKind.KING,
    PieceKind.RIVAL_KING,
)


class Hands:
    """Captured pieces per side, kept in capture order and always demoted."""

    __slots__ = ("_pieces",)

    def __init__(self) -> None:
        self._pieces: dict[Side, list[PieceKind]] = {Side.FIRST: [], Side.SECOND: []}

    def add(self, side: Side, kind: PieceKind) -> None:
        self._pieces[side].append(demote_kind(kind))

    def take(self, side: Side, kind: PieceKind) -> bool:
        """Remove one *kind* from *side*'s hand. Returns False if none held."""
        hand = self._pieces[side]
        try:
            hand.remove(kind)
        except ValueError:
            return False
        return True

    def pieces(self, side: Side) -> list[PieceKind]:
        return list(self._pieces[side])

    def count(self, side: Side, kind: PieceKind | None = None) -> int:
        hand = self._pieces[side]
        if kind is None:
            return len(hand)
        return sum(1 for k in hand if k == kind)

    def counts(self, side: Side) -> list[tuple[PieceKind, int]]:
        """(kind, count) pairs in conventional display order."""
        tally: dict[PieceKind, int] = {}
        for kind in self._pieces[side]:
            tally[kind] = tally.get(kind, 0) + 1
        ordered = [(k, tally.pop(k)) for k in HAND_PIECE_ORDER if k in tally]
        ordered.extend(tally.items())
        return ordered

    def copy(self) -> Hands:
        h = Hands()
        h._pieces = {side: list(kinds) for side, kinds in self._pieces.items()}
        return h

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hands):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        parts = []
        for side in Side:
            text = "".join(
                f"{k.glyph}{n if n > 1 else ''}" for k, n in self.counts(side)
            )
            parts.append(f"{side}: {text or '-'}")
        return f"Hands({', '.join(parts)})"
