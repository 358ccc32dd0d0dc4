"""UI-owned expansion flags for list/tree views.

Kept in side tables keyed by object identity so that parsed lines and moves
stay free of presentation state.
"""

from __future__ import annotations

from shogikif.core.notation.models import ParsedMove, VariationLine


class ExpansionState:
    """``is_expanded`` per line and ``are_variations_expanded`` per move."""

    __slots__ = ("_collapsed_lines", "_expanded_moves")

    def __init__(self) -> None:
        self._collapsed_lines: set[VariationLine] = set()
        self._expanded_moves: set[ParsedMove] = set()

    def is_expanded(self, line: VariationLine) -> bool:
        return line not in self._collapsed_lines

    def set_expanded(self, line: VariationLine, expanded: bool) -> None:
        if expanded:
            self._collapsed_lines.discard(line)
        else:
            self._collapsed_lines.add(line)

    def are_variations_expanded(self, move: ParsedMove) -> bool:
        return move in self._expanded_moves

    def toggle_variations(self, move: ParsedMove) -> bool:
        if move in self._expanded_moves:
            self._expanded_moves.discard(move)
            return False
        self._expanded_moves.add(move)
        return True

    def clear(self) -> None:
        self._collapsed_lines.clear()
        self._expanded_moves.clear()
