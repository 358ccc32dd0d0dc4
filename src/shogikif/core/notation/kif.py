"""KIF parsing: header fields, moves, comments and nested variations."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from shogikif.core.enums import PieceKind, promote_kind
from shogikif.core.notation.models import (
    SAME_SQUARE,
    ParsedKif,
    ParsedMove,
    VariationLine,
    VariationParent,
)
from shogikif.core.notation.numerals import (
    FULL_WIDTH_DIGITS,
    KANJI_DIGITS,
    decode_ascii_square,
    decode_square,
)
from shogikif.core.types import Square

_LOGGER = logging.getLogger(__name__)

HEADER_SEPARATOR = "："
COMMENT_MARKER = "*"
DROP_MARKER = "打"
PROMOTE_SUFFIX = "成"
DECLINE_SUFFIX = "不成"

_PIECE_NAMES = "成香|成桂|成銀|馬|龍|と|歩|香|桂|銀|金|角|飛|玉|王"
_DIRECTIONS = "右|左|直|上|引|寄"
_DIRECTIONS_RE = re.compile(_DIRECTIONS)
_PIECE_PATTERN = rf"((?:{_PIECE_NAMES})(?:{_DIRECTIONS})*(?:{PROMOTE_SUFFIX}|{DECLINE_SUFFIX})?)"
_MOVE_RE = re.compile(
    rf"^\s*([0-9]+)\s+"
    rf"((?:{SAME_SQUARE}[\s　]?)|[{FULL_WIDTH_DIGITS}1-9{KANJI_DIGITS}]{{2}})"
    rf"{_PIECE_PATTERN}"
    rf"({DROP_MARKER}?)"
    r"(?:\(([0-9]{2})\))?"
    r"(?:\s*\(([^)]*)\))?"
)
_VARIATION_RE = re.compile(r"^変化：([0-9]+)手")
_IGNORED_PREFIXES = ("#", "----")
_START_MOVE_RE = re.compile(
    r"^[\t ]*(?:[#;]|//)?[\t ]*"
    r"(?:start(?:-?move)?|開始手(?:数)?|表示開始手(?:数)?|初期表示手(?:数)?)"
    r"[\t ]*[:：=][\t ]*([0-9]+)",
    re.IGNORECASE | re.MULTILINE,
)


@dataclass(frozen=True, slots=True)
class PieceToken:
    """Decoded piece text of a move line."""

    kind: PieceKind
    raw: str
    promoted: bool = False
    promotion_declined: bool = False


@dataclass(slots=True)
class _ParseContext:
    line: VariationLine
    prev_move: ParsedMove | None = None


def parse_piece_token(token: str) -> PieceToken | None:
    """Decode e.g. '銀右不成' or '歩成'. Returns ``None`` for unknown pieces."""
    if not token:
        return None

    working = token
    promoted = False
    declined = False
    if working.endswith(DECLINE_SUFFIX):
        declined = True
        working = working[: -len(DECLINE_SUFFIX)]
    elif working.endswith(PROMOTE_SUFFIX):
        promoted = True
        working = working[: -len(PROMOTE_SUFFIX)]

    working = _DIRECTIONS_RE.sub("", working)
    try:
        base = PieceKind.from_token(working)
    except ValueError:
        return None

    kind = base
    if promoted:
        kind = promote_kind(base)
        # 成 on a piece that cannot promote further is redundant notation.
        promoted = kind is not base

    return PieceToken(
        kind=kind,
        raw=token,
        promoted=promoted,
        promotion_declined=declined,
    )


def _parse_move_line(
    line: str, prev_move: ParsedMove | None
) -> ParsedMove | None:
    match = _MOVE_RE.match(line)
    if match is None:
        return None
    number, to_text, piece_text, drop_text, from_text, time_text = match.groups()

    to_token = re.sub(r"[\s　]", "", to_text)
    to: Square | None
    if to_token == SAME_SQUARE:
        to = prev_move.to if prev_move is not None else None
    else:
        to = decode_square(to_token)
    if to is None:
        _LOGGER.debug("Unresolvable destination, skipping: %r", line)
        return None

    token = parse_piece_token(piece_text)
    if token is None:
        _LOGGER.debug("Unknown piece token, skipping: %r", line)
        return None

    from_sq: Square | None = None
    if from_text:
        from_sq = decode_ascii_square(from_text)
        if from_sq is None:
            _LOGGER.debug("Invalid source square, skipping: %r", line)
            return None

    timestamp = time_text.strip() if time_text is not None else None
    return ParsedMove(
        n=int(number),
        to=to,
        kind=token.kind,
        raw_kind=token.raw,
        from_sq=from_sq,
        promoted=token.promoted,
        promotion_declined=token.promotion_declined,
        drop=drop_text == DROP_MARKER,
        timestamp=timestamp or None,
        raw_to=to_token or None,
    )


def _open_variation(
    start: int, stack: list[_ParseContext], root_context: _ParseContext
) -> None:
    """Attach a new branch starting at move *start* and make it current."""
    target = start - 1
    anchor_context = root_context
    anchor_move: ParsedMove | None = None
    if start != 1:
        for ctx in reversed(stack):
            idx = ctx.line.index_of_number(target)
            if idx >= 0:
                anchor_context = ctx
                anchor_move = ctx.line.moves[idx]
                break
        else:
            _LOGGER.debug("No anchor for variation at move %d; using root", start)

    # The root context never leaves the bottom of the stack.
    while stack[-1] is not anchor_context:
        stack.pop()

    anchor_count = 0
    if anchor_move is not None:
        anchor_count = anchor_context.line.moves.index(anchor_move) + 1

    variation = VariationLine(
        start_move_number=start,
        parent=VariationParent(anchor_context.line, anchor_count),
    )
    if anchor_move is not None:
        anchor_move.variations.append(variation)
    else:
        anchor_context.line.lead_variations.append(variation)
    stack.append(_ParseContext(variation, prev_move=anchor_move))


def parse_kif(text: str) -> ParsedKif:
    """Parse a KIF document into header fields and a variation tree.

    Malformed lines are skipped; this never raises for document content.
    """
    header: dict[str, str] = {}
    root = VariationLine(start_move_number=1)
    root_context = _ParseContext(root)
    stack: list[_ParseContext] = [root_context]

    for raw_line in re.split(r"\r?\n", text):
        line = raw_line.rstrip()
        stripped = line.strip()
        if not stripped or stripped.startswith(_IGNORED_PREFIXES):
            continue

        variation_match = _VARIATION_RE.match(stripped)
        if variation_match is not None:
            _open_variation(int(variation_match.group(1)), stack, root_context)
            continue

        if HEADER_SEPARATOR in stripped:
            key, _, value = stripped.partition(HEADER_SEPARATOR)
            key, value = key.strip(), value.strip()
            if key and value:
                header[key] = value
            continue

        context = stack[-1]
        if stripped.startswith(COMMENT_MARKER):
            if context.prev_move is not None:
                context.prev_move.append_comment(stripped[1:].strip())
            continue

        move = _parse_move_line(line, context.prev_move)
        if move is None:
            continue
        context.line.moves.append(move)
        context.prev_move = move

    return ParsedKif(header=header, root=root)


def find_start_move(text: str) -> int | None:
    """Initial move requested by a ``開始手数：N`` / ``start: N`` directive."""
    match = _START_MOVE_RE.search(text)
    if match is None:
        return None
    return int(match.group(1))
