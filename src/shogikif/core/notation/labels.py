"""Display labels for squares, moves and variation lines."""

from __future__ import annotations

from shogikif.core.notation.models import SAME_SQUARE, ParsedMove, VariationLine
from shogikif.core.notation.numerals import full_width
from shogikif.core.types import Square

MAIN_LINE_LABEL = "本筋"
VARIATION_LABEL = "変化"


def square_to_text(square: Square) -> str:
    """Full-width coordinate, e.g. Square(7, 6) → '７６'."""
    return f"{full_width(square.file)}{full_width(square.rank)}"


def format_move_label(move: ParsedMove) -> str:
    """KIF-style move text as written, e.g. '７六歩(77)' or '同歩成(23)'."""
    square_text = SAME_SQUARE if move.is_same_square else square_to_text(move.to)
    kind_text = move.raw_kind or (move.kind.glyph if move.kind is not None else "")
    drop_text = "打" if move.drop else ""
    from_text = f"({move.from_sq})" if not move.drop and move.from_sq else ""
    return f"{square_text}{kind_text}{drop_text}{from_text}"


def line_label(line: VariationLine) -> str:
    """'本筋' for the root, else '変化 N手: <first move>'."""
    if line.parent is None:
        return MAIN_LINE_LABEL
    if line.moves:
        return (
            f"{VARIATION_LABEL} {line.start_move_number}手: "
            f"{format_move_label(line.moves[0])}"
        )
    return f"{VARIATION_LABEL} {line.start_move_number}手"
