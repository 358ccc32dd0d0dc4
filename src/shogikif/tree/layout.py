"""Lane layout for a :class:`MoveTree`.

Columns are plies; rows are "lanes".  A node's first child stays in the
node's lane and every later child starts below the space taken by the
subtrees before it.
"""

from __future__ import annotations

from dataclasses import dataclass

from shogikif.tree.projection import MoveTree


@dataclass(frozen=True, slots=True)
class LayoutOptions:
    node_width: float = 120
    node_height: float = 28
    col_gap: float = 48
    row_gap: float = 16


@dataclass(frozen=True, slots=True)
class LayoutNode:
    id: str
    label: str
    ply: int
    lane: int
    subtree_height: int
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LayoutBounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return max(0.0, self.max_x - self.min_x)

    @property
    def height(self) -> float:
        return max(0.0, self.max_y - self.min_y)


@dataclass(frozen=True, slots=True)
class MoveTreeLayout:
    nodes: dict[str, LayoutNode]
    edges: list[tuple[str, str]]
    bounds: LayoutBounds


def node_position(ply: int, lane: int, options: LayoutOptions) -> tuple[float, float]:
    x = (ply - 1) * (options.node_width + options.col_gap)
    y = lane * (options.node_height + options.row_gap)
    return x, y


def _subtree_heights(tree: MoveTree) -> dict[str, int]:
    heights: dict[str, int] = {}

    # Post-order without recursion; variation trees can be long lines.
    stack: list[tuple[str, bool]] = [(tree.root_id, False)]
    while stack:
        node_id, expanded = stack.pop()
        children = tree.nodes[node_id].child_ids
        if not expanded and children:
            stack.append((node_id, True))
            stack.extend((child, False) for child in children)
            continue
        if not children:
            heights[node_id] = 1
            continue
        first, *rest = children
        heights[node_id] = max(1, heights[first]) + sum(heights[c] for c in rest)
    return heights


def _assign_lanes(tree: MoveTree, heights: dict[str, int]) -> dict[str, int]:
    lanes: dict[str, int] = {}
    stack: list[tuple[str, int]] = [(tree.root_id, 0)]
    while stack:
        node_id, lane = stack.pop()
        lanes[node_id] = lane
        next_lane = lane
        for child in tree.nodes[node_id].child_ids:
            stack.append((child, next_lane))
            next_lane += max(1, heights.get(child, 1))
    return lanes


def layout_move_tree(
    tree: MoveTree, options: LayoutOptions | None = None
) -> MoveTreeLayout:
    """Place every node of *tree* on the ply/lane grid."""
    opts = options if options is not None else LayoutOptions()
    heights = _subtree_heights(tree)
    lanes = _assign_lanes(tree, heights)

    nodes: dict[str, LayoutNode] = {}
    edges: list[tuple[str, str]] = []
    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")

    for node_id, node in tree.nodes.items():
        lane = lanes.get(node_id, 0)
        x, y = node_position(node.ply, lane, opts)
        nodes[node_id] = LayoutNode(
            id=node_id,
            label=node.label,
            ply=node.ply,
            lane=lane,
            subtree_height=heights.get(node_id, 1),
            x=x,
            y=y,
        )
        min_x = min(min_x, x)
        min_y = min(min_y, y)
        max_x = max(max_x, x + opts.node_width)
        max_y = max(max_y, y + opts.node_height)
        edges.extend((node_id, child) for child in node.child_ids)

    if not nodes:
        min_x = min_y = max_x = max_y = 0.0

    return MoveTreeLayout(
        nodes=nodes,
        edges=edges,
        bounds=LayoutBounds(min_x, min_y, max_x, max_y),
    )
