"""Core domain layer — pure shogi data and KIF notation, no Qt.

Quick start::

    from shogikif.core import parse_kif

    kif = parse_kif(text)
    print(kif.header.get("先手"), len(kif.root.moves))
"""

from shogikif.core.board import Board
from shogikif.core.enums import PieceKind, Side, demote_kind, promote_kind
from shogikif.core.hands import HAND_PIECE_ORDER, Hands
from shogikif.core.notation import (
    ParsedKif,
    ParsedMove,
    VariationLine,
    VariationParent,
    find_start_move,
    format_move_label,
    line_label,
    parse_kif,
)
from shogikif.core.piece import Piece
from shogikif.core.types import Square

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    "demote_kind",
    "promote_kind",
    # Types
    "Square",
    # Domain objects
    "Board",
    "HAND_PIECE_ORDER",
    "Hands",
    "Piece",
    # Notation
    "ParsedKif",
    "ParsedMove",
    "VariationLine",
    "VariationParent",
    "find_start_move",
    "format_move_label",
    "line_label",
    "parse_kif",
]
