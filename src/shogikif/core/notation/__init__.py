"""Notation package: KIF parsing and move labels."""

from shogikif.core.notation.kif import (
    PieceToken,
    find_start_move,
    parse_kif,
    parse_piece_token,
)
from shogikif.core.notation.labels import (
    format_move_label,
    line_label,
    square_to_text,
)
from shogikif.core.notation.models import (
    ParsedKif,
    ParsedMove,
    VariationLine,
    VariationParent,
)
from shogikif.core.notation.numerals import decode_ascii_square, decode_square, digit_value

__all__ = [
    "ParsedKif",
    "ParsedMove",
    "PieceToken",
    "VariationLine",
    "VariationParent",
    "decode_ascii_square",
    "decode_square",
    "digit_value",
    "find_start_move",
    "format_move_label",
    "line_label",
    "parse_kif",
    "parse_piece_token",
    "square_to_text",
]
