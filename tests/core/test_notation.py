"""Tests for numeral decoding, piece tokens and move labels."""

import pytest

from shogikif.core.enums import PieceKind
from shogikif.core.notation import (
    decode_ascii_square,
    decode_square,
    digit_value,
    format_move_label,
    line_label,
    parse_kif,
    parse_piece_token,
    square_to_text,
)
from shogikif.core.types import Square


class TestNumerals:
    @pytest.mark.parametrize("ch", ["7", "７", "七"])
    def test_three_alphabets(self, ch: str) -> None:
        assert digit_value(ch) == 7

    @pytest.mark.parametrize("ch", ["0", "０", "十", "a", "", "77"])
    def test_unknown_is_none(self, ch: str) -> None:
        assert digit_value(ch) is None

    def test_decode_mixed_square(self) -> None:
        assert decode_square("７六") == Square(7, 6)
        assert decode_square("76") == Square(7, 6)
        assert decode_square("７6") == Square(7, 6)

    def test_decode_bad_square(self) -> None:
        assert decode_square("７") is None
        assert decode_square("７零") is None

    def test_decode_ascii_source(self) -> None:
        assert decode_ascii_square("77") == Square(7, 7)
        assert decode_ascii_square("07") is None
        assert decode_ascii_square("７７") is None


class TestPieceToken:
    def test_plain(self) -> None:
        tok = parse_piece_token("歩")
        assert tok is not None
        assert tok.kind == PieceKind.PAWN
        assert not tok.promoted
        assert not tok.promotion_declined

    def test_promotion(self) -> None:
        tok = parse_piece_token("角成")
        assert tok is not None
        assert tok.kind == PieceKind.HORSE
        assert tok.promoted

    def test_declined(self) -> None:
        tok = parse_piece_token("銀不成")
        assert tok is not None
        assert tok.kind == PieceKind.SILVER
        assert tok.promotion_declined
        assert not tok.promoted

    def test_directions_stripped(self) -> None:
        tok = parse_piece_token("金右上")
        assert tok is not None
        assert tok.kind == PieceKind.GOLD
        assert tok.raw == "金右上"

    def test_promoted_name(self) -> None:
        tok = parse_piece_token("成香")
        assert tok is not None
        assert tok.kind == PieceKind.PROMOTED_LANCE
        assert not tok.promoted

    def test_redundant_promotion_clears_flag(self) -> None:
        tok = parse_piece_token("金成")
        assert tok is not None
        assert tok.kind == PieceKind.GOLD
        assert not tok.promoted

    def test_unknown(self) -> None:
        assert parse_piece_token("竜") is None
        assert parse_piece_token("") is None


class TestLabels:
    def test_square_text(self) -> None:
        assert square_to_text(Square(7, 6)) == "７６"

    def test_move_label(self) -> None:
        kif = parse_kif("1 ７六歩(77)\n2 ３四歩(33)\n3 ２二角成(88)\n4 同　銀(31)\n5 ４五角打\n")
        labels = [format_move_label(m) for m in kif.root.moves]
        assert labels == [
            "７６歩(77)",
            "３４歩(33)",
            "２２角成(88)",
            "同銀(31)",
            "４５角打",
        ]

    def test_line_labels(self, sample_kif_text: str) -> None:
        root = parse_kif(sample_kif_text).root
        branch = root.moves[1].variations[0]
        assert line_label(root) == "本筋"
        assert line_label(branch) == "変化 3手: ２６歩(27)"

    def test_empty_variation_label(self) -> None:
        kif = parse_kif("1 ７六歩(77)\n変化：2手\n")
        assert line_label(kif.root.moves[0].variations[0]) == "変化 2手"
