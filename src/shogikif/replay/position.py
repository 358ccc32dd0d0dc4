"""Replay reducer: board and hands derived from a move sequence."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from shogikif.core.board import Board
from shogikif.core.enums import PieceKind, Side, demote_kind
from shogikif.core.hands import Hands
from shogikif.core.notation.models import ParsedMove
from shogikif.core.piece import Piece
from shogikif.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ReplaySnapshot:
    """Disposable position derived by :func:`replay_moves`."""

    board: Board = field(default_factory=Board.initial)
    hands: Hands = field(default_factory=Hands)
    last_from: Square | None = None
    last_to: Square | None = None
    latest_move: ParsedMove | None = None
    # Moves whose board effect was skipped (missing source piece).
    skipped: list[ParsedMove] = field(default_factory=list)


def _lift(snapshot: ReplaySnapshot, move: ParsedMove, side: Side) -> Piece | None:
    """Take the moving piece off the board or out of the hand."""
    if move.drop:
        kind = demote_kind(move.kind or PieceKind.PAWN)
        if not snapshot.hands.take(side, kind):
            _LOGGER.debug("Move %d drops %s not held in hand", move.n, kind.glyph)
        snapshot.last_from = None
        return Piece(side, kind)

    if move.from_sq is None:
        return None
    source = snapshot.board[move.from_sq]
    if source is None:
        return None
    snapshot.board[move.from_sq] = None
    snapshot.last_from = move.from_sq
    return source.copy()


def apply_move(snapshot: ReplaySnapshot, move: ParsedMove) -> None:
    """Apply one move to *snapshot* in place, tolerating inconsistencies."""
    side = Side.for_move_number(move.n)
    moving = _lift(snapshot, move, side)

    if moving is None:
        _LOGGER.debug("Move %d has no piece at its source; board unchanged", move.n)
        snapshot.skipped.append(move)
        snapshot.last_from = None
    else:
        target = snapshot.board[move.to]
        if target is not None and target.side != side:
            snapshot.hands.add(side, target.kind)

        if not move.drop and move.promoted:
            moving.promote()
        if not move.drop and move.promotion_declined and move.kind is None:
            moving.demote()
        # The parsed kind already encodes the resulting piece and wins outright.
        if move.kind is not None:
            moving.kind = move.kind
        snapshot.board[move.to] = moving

    snapshot.last_to = move.to
    snapshot.latest_move = move


def replay_moves(moves: Iterable[ParsedMove]) -> ReplaySnapshot:
    """Replay *moves* from the starting layout."""
    snapshot = ReplaySnapshot()
    for move in moves:
        apply_move(snapshot, move)
    return snapshot
