"""Pure queries over the variation tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from shogikif.core.notation.models import ParsedMove, VariationLine


@dataclass(frozen=True, slots=True)
class MoveRef:
    """A move together with its position inside its owning line."""

    line: VariationLine
    move_index: int
    move: ParsedMove


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


def gather_move_refs(line: VariationLine, upto: int) -> list[MoveRef]:
    """Moves realised by playing *line* up to its *upto*-th move, with origins.

    The ancestor chain contributes its moves up to each anchor point.
    """
    chain: list[tuple[VariationLine, int]] = []
    node: VariationLine | None = line
    count = _clamp(upto, len(line.moves))
    while node is not None:
        chain.append((node, count))
        parent = node.parent
        if parent is None:
            break
        count = _clamp(parent.anchor_move_count, len(parent.line.moves))
        node = parent.line

    refs: list[MoveRef] = []
    for owner, owner_count in reversed(chain):
        refs.extend(
            MoveRef(owner, idx, owner.moves[idx]) for idx in range(owner_count)
        )
    return refs


def gather_moves(line: VariationLine, upto: int) -> list[ParsedMove]:
    """Effective move sequence for the cursor ``(line, upto)``."""
    return [ref.move for ref in gather_move_refs(line, upto)]


def find_move_by_number(
    line: VariationLine, move_number: int
) -> tuple[VariationLine, int] | None:
    """Depth-first search for the first move numbered *move_number*.

    Order: the line itself, then each move's variations, then lead variations.
    """
    idx = line.index_of_number(move_number)
    if idx >= 0:
        return line, idx
    for mv in line.moves:
        for variation in mv.variations:
            found = find_move_by_number(variation, move_number)
            if found is not None:
                return found
    for variation in line.lead_variations:
        found = find_move_by_number(variation, move_number)
        if found is not None:
            return found
    return None


def available_variations(line: VariationLine) -> list[VariationLine]:
    """Branches reachable from *line*: lead variations, then per-move ones."""
    variations = list(line.lead_variations)
    for mv in line.moves:
        variations.extend(mv.variations)
    return variations


def ancestors(line: VariationLine) -> list[VariationLine]:
    """Lines from the root down to *line*, inclusive."""
    chain: list[VariationLine] = []
    node: VariationLine | None = line
    while node is not None:
        chain.append(node)
        node = node.parent.line if node.parent is not None else None
    chain.reverse()
    return chain


def iter_lines(root: VariationLine) -> Iterator[VariationLine]:
    """Every line in the tree, depth-first in search order."""
    yield root
    for mv in root.moves:
        for variation in mv.variations:
            yield from iter_lines(variation)
    for variation in root.lead_variations:
        yield from iter_lines(variation)


def has_any_moves(line: VariationLine) -> bool:
    if line.moves:
        return True
    return any(has_any_moves(lead) for lead in line.lead_variations)
