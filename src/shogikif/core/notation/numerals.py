"""Digit alphabets used by KIF coordinates."""

from __future__ import annotations

from shogikif.core.types import Square

FULL_WIDTH_DIGITS = "１２３４５６７８９"
KANJI_DIGITS = "一二三四五六七八九"
ASCII_DIGITS = "123456789"


def digit_value(ch: str) -> int | None:
    """Map one digit in any of the three alphabets to 1–9, else ``None``."""
    if len(ch) != 1:
        return None
    for alphabet in (FULL_WIDTH_DIGITS, KANJI_DIGITS, ASCII_DIGITS):
        idx = alphabet.find(ch)
        if idx >= 0:
            return idx + 1
    return None


def decode_square(token: str) -> Square | None:
    """Decode a two-digit destination token such as '７六', '76' or '７6'."""
    if len(token) != 2:
        return None
    file = digit_value(token[0])
    rank = digit_value(token[1])
    if file is None or rank is None:
        return None
    return Square(file, rank)


def decode_ascii_square(token: str) -> Square | None:
    """Decode a source coordinate, which KIF always writes as plain digits."""
    if len(token) != 2 or not all(ch in ASCII_DIGITS for ch in token):
        return None
    return Square(int(token[0]), int(token[1]))


def full_width(n: int) -> str:
    """1–9 as a full-width digit; anything else as plain text."""
    if 1 <= n <= 9:
        return FULL_WIDTH_DIGITS[n - 1]
    return str(n)
