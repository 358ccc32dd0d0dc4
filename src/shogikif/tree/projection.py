"""Move tree projection — one node per move, for display and navigation.

The projection is rebuilt wholesale from the :class:`VariationLine` tree and is
never the source of truth.  Rendering flags ("current", "done") are derived
separately by :func:`mark_nodes` from the live replay cursor.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shogikif.core.notation.labels import format_move_label
from shogikif.core.notation.models import VariationLine
from shogikif.replay.lines import gather_move_refs

START_POSITION_LABEL = "開始局面"


@dataclass(frozen=True, slots=True)
class MoveJumpRef:
    """Navigation target of a node. ``move_index`` is -1 for the root."""

    line: VariationLine
    move_index: int
    move_number: int


@dataclass(slots=True)
class MoveNode:
    id: str
    label: str
    ply: int
    parent_id: str | None
    jump_ref: MoveJumpRef
    child_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class MoveTree:
    root_id: str
    nodes: dict[str, MoveNode]

    @property
    def root(self) -> MoveNode:
        return self.nodes[self.root_id]

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True, slots=True)
class NodeMarks:
    """Per-render flags derived from the replay cursor."""

    current_id: str
    done_ids: frozenset[str]


class _TreeBuilder:
    __slots__ = ("nodes", "_counter")

    def __init__(self) -> None:
        self.nodes: dict[str, MoveNode] = {}
        self._counter = 0

    def create(
        self, label: str, ply: int, parent_id: str | None, jump_ref: MoveJumpRef
    ) -> str:
        node_id = f"move-node-{self._counter}"
        self._counter += 1
        self.nodes[node_id] = MoveNode(node_id, label, ply, parent_id, jump_ref)
        return node_id

    def build_line(self, line: VariationLine, parent_id: str) -> str | None:
        """Create nodes for *line* under *parent_id*; return its first node.

        The line's own continuation is always the first child it adds, so the
        main line precedes any branch under the same parent.  Lead variations
        are therefore attached after the continuation rather than ahead of it;
        the lane layout relies on the first child being the main line.
        """
        move_ids: list[str] = []
        for idx, mv in enumerate(line.moves):
            prev_id = move_ids[-1] if move_ids else parent_id
            node_id = self.create(
                format_move_label(mv), mv.n, prev_id, MoveJumpRef(line, idx, mv.n)
            )
            self.nodes[prev_id].child_ids.append(node_id)
            move_ids.append(node_id)

        for mv, node_id in zip(line.moves, move_ids):
            for variation in mv.variations:
                self.build_line(variation, node_id)

        for lead in line.lead_variations:
            self.build_line(lead, parent_id)

        return move_ids[0] if move_ids else None


def build_move_tree(root: VariationLine) -> MoveTree:
    """Flatten the variation tree under a synthetic start-position node."""
    builder = _TreeBuilder()
    root_id = builder.create(
        START_POSITION_LABEL, 0, None, MoveJumpRef(root, -1, 0)
    )
    builder.build_line(root, root_id)
    return MoveTree(root_id=root_id, nodes=builder.nodes)


def mark_nodes(tree: MoveTree, line: VariationLine, move_index: int) -> NodeMarks:
    """Current and already-played nodes for the cursor ``(line, move_index)``."""
    by_ref: dict[tuple[VariationLine, int], str] = {}
    for node in tree.nodes.values():
        if node.jump_ref.move_index >= 0:
            by_ref[(node.jump_ref.line, node.jump_ref.move_index)] = node.id

    done = frozenset(
        by_ref[key]
        for ref in gather_move_refs(line, move_index)
        if (key := (ref.line, ref.move_index)) in by_ref
    )
    current_id = tree.root_id
    if move_index > 0:
        current_id = by_ref.get((line, move_index - 1), tree.root_id)
    return NodeMarks(current_id=current_id, done_ids=done)
