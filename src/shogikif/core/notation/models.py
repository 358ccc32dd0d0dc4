"""Parsed KIF data models.

A record parses into a tree of :class:`VariationLine` objects.  Lines and
moves use identity semantics: two separately parsed lines are never equal,
which lets them key side tables (last visited index, UI flags) directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shogikif.core.enums import PieceKind, Side
from shogikif.core.types import Square

SAME_SQUARE = "同"


@dataclass(eq=False, slots=True)
class ParsedMove:
    """A single resolved move line."""

    n: int
    to: Square
    kind: PieceKind | None = None
    raw_kind: str = ""
    from_sq: Square | None = None
    promoted: bool = False
    promotion_declined: bool = False
    drop: bool = False
    comment: str | None = None
    timestamp: str | None = None
    raw_to: str | None = None
    variations: list[VariationLine] = field(default_factory=list)

    @property
    def side(self) -> Side:
        return Side.for_move_number(self.n)

    @property
    def is_same_square(self) -> bool:
        """Destination was written as 同 (same as the previous move)."""
        return self.raw_to == SAME_SQUARE

    def append_comment(self, text: str) -> None:
        self.comment = f"{self.comment}\n{text}" if self.comment else text


@dataclass(eq=False, slots=True)
class VariationParent:
    """Back-link from a branch to the line it diverges from."""

    line: VariationLine
    # Number of parent moves played before the branch; 0 replaces move 1.
    anchor_move_count: int


@dataclass(eq=False, slots=True)
class VariationLine:
    """A maximal straight run of moves."""

    start_move_number: int = 1
    moves: list[ParsedMove] = field(default_factory=list)
    parent: VariationParent | None = None
    lead_variations: list[VariationLine] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __len__(self) -> int:
        return len(self.moves)

    def index_of_number(self, n: int) -> int:
        """Index of the move numbered *n*, or -1."""
        for idx, mv in enumerate(self.moves):
            if mv.n == n:
                return idx
        return -1

    def __repr__(self) -> str:
        return (
            f"VariationLine(start={self.start_move_number}, "
            f"moves={len(self.moves)}, root={self.is_root})"
        )


@dataclass(slots=True)
class ParsedKif:
    """Header fields plus the root line of the move tree."""

    header: dict[str, str]
    root: VariationLine
