"""Variation tree projection and its lane layout."""

from shogikif.tree.layout import (
    LayoutBounds,
    LayoutNode,
    LayoutOptions,
    MoveTreeLayout,
    layout_move_tree,
)
from shogikif.tree.projection import (
    MoveJumpRef,
    MoveNode,
    MoveTree,
    NodeMarks,
    build_move_tree,
    mark_nodes,
)

__all__ = [
    "LayoutBounds",
    "LayoutNode",
    "LayoutOptions",
    "MoveJumpRef",
    "MoveNode",
    "MoveTree",
    "MoveTreeLayout",
    "NodeMarks",
    "build_move_tree",
    "layout_move_tree",
    "mark_nodes",
]
