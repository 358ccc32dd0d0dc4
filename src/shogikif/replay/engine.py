"""ReplayEngine — the navigation cursor over a parsed KIF tree.

Owns the cursor ``(current line, move index)`` and rebuilds the board and
hands from scratch on every move of the cursor.  Emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from shogikif.core.board import Board
from shogikif.core.hands import Hands
from shogikif.core.notation.labels import line_label
from shogikif.core.notation.models import ParsedKif, ParsedMove, VariationLine
from shogikif.core.types import Square
from shogikif.replay.lines import (
    ancestors,
    available_variations,
    find_move_by_number,
    gather_moves,
)
from shogikif.replay.position import ReplaySnapshot, replay_moves

_LOGGER = logging.getLogger(__name__)

PositionCallback = Callable[["ReplayEngine"], None]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Where the replay currently is: a line and a count of its moves played."""

    line: VariationLine
    move_index: int


@dataclass
class ReplayEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position_changed: list[PositionCallback] = field(default_factory=list)


class ReplayEngine:
    """Deterministic, branch-aware replay of a parsed KIF record.

    Thread-safety: a single logical actor (the UI thread) drives navigation;
    nothing here blocks or suspends.
    """

    __slots__ = (
        "_kif",
        "_line",
        "_index",
        "_last_visited",
        "_snapshot",
        "events",
    )

    def __init__(self, kif: ParsedKif | None = None) -> None:
        self.events = ReplayEvents()
        self._kif = kif if kif is not None else ParsedKif({}, VariationLine())
        self._line = self._kif.root
        self._index = 0
        self._last_visited: dict[VariationLine, int] = {}
        self._snapshot = ReplaySnapshot()

    def load(self, kif: ParsedKif) -> None:
        """Adopt a freshly parsed tree and show its starting position."""
        self._kif = kif
        self._line = kif.root
        self._index = 0
        self._last_visited = {}
        self.apply_current(0)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def header(self) -> dict[str, str]:
        return self._kif.header

    @property
    def root(self) -> VariationLine:
        return self._kif.root

    @property
    def current_line(self) -> VariationLine:
        return self._line

    @property
    def current_move_index(self) -> int:
        return self._index

    @property
    def cursor(self) -> Cursor:
        return Cursor(self._line, self._index)

    @property
    def is_at_end(self) -> bool:
        return self._index >= len(self._line.moves)

    @property
    def board(self) -> Board:
        return self._snapshot.board

    @property
    def hands(self) -> Hands:
        return self._snapshot.hands

    @property
    def last_from(self) -> Square | None:
        return self._snapshot.last_from

    @property
    def last_to(self) -> Square | None:
        return self._snapshot.last_to

    @property
    def latest_move(self) -> ParsedMove | None:
        return self._snapshot.latest_move

    @property
    def comment(self) -> str | None:
        mv = self._snapshot.latest_move
        return mv.comment if mv is not None else None

    @property
    def timestamp(self) -> str | None:
        mv = self._snapshot.latest_move
        return mv.timestamp if mv is not None else None

    def last_visited(self, line: VariationLine) -> int | None:
        return self._last_visited.get(line)

    # ── Snapshot accessors ───────────────────────────────────────────────

    @staticmethod
    def initial_position() -> Board:
        return Board.initial()

    def position_at(self, cursor: Cursor) -> ReplaySnapshot:
        """Replay an arbitrary cursor without moving the engine."""
        return replay_moves(gather_moves(cursor.line, cursor.move_index))

    def hands_at(self, cursor: Cursor) -> Hands:
        return self.position_at(cursor).hands

    # ── Core replay ──────────────────────────────────────────────────────

    def apply_current(self, target_index: int) -> None:
        """Clamp *target_index* into the current line and replay up to it."""
        clamped = max(0, min(target_index, len(self._line.moves)))
        self._index = clamped
        self._last_visited[self._line] = clamped
        self._snapshot = replay_moves(gather_moves(self._line, clamped))
        self._emit_position_changed()

    # ── Stepping ─────────────────────────────────────────────────────────

    def step_first(self) -> None:
        self.apply_current(0)

    def step_back(self) -> None:
        self.apply_current(self._index - 1)

    def step_forward(self) -> None:
        self.apply_current(self._index + 1)

    def step_last(self) -> None:
        self.apply_current(len(self._line.moves))

    # ── Jumps and line switching ─────────────────────────────────────────

    def jump_to_move_number(self, move_number: int) -> bool:
        """Show move *move_number* wherever it first occurs in the tree.

        Returns False (state unchanged) when no such move exists.
        """
        if move_number < 0:
            return False
        if move_number == 0:
            self.apply_current(0)
            return True
        found = find_move_by_number(self._kif.root, move_number)
        if found is None:
            _LOGGER.debug("Move number %d not found", move_number)
            return False
        line, move_index = found
        if line is self._line:
            self.apply_current(move_index + 1)
        else:
            self.jump_to(line, move_index)
        return True

    def jump_to(self, line: VariationLine, move_index: int) -> None:
        """Switch to *line* and show its move at *move_index* (0-based)."""
        self._remember_current()
        self._line = line
        self.apply_current(move_index + 1)

    def available_variations(
        self, line: VariationLine | None = None
    ) -> list[VariationLine]:
        return available_variations(line if line is not None else self._line)

    def switch_to(self, variation: VariationLine) -> None:
        """Enter *variation*, restoring where it was last left (or its start)."""
        self._remember_current()
        self._line = variation
        saved = self._last_visited.get(variation)
        self.apply_current(saved if saved is not None else 0)

    def go_to_parent(self) -> bool:
        """Return to the parent line. False when already on the root line."""
        parent = self._line.parent
        if parent is None:
            return False
        self._remember_current()
        self._line = parent.line
        saved = self._last_visited.get(parent.line)
        self.apply_current(saved if saved is not None else parent.anchor_move_count)
        return True

    def line_path(self) -> list[str]:
        """Labels of the lines from the root down to the current line."""
        return [line_label(line) for line in ancestors(self._line)]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _remember_current(self) -> None:
        self._last_visited[self._line] = self._index

    def _emit_position_changed(self) -> None:
        for cb in self.events.on_position_changed:
            cb(self)
