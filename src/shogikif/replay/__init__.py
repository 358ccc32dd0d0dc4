"""Replay layer — cursor navigation, board reconstruction and autoplay.

Quick start::

    from shogikif.core import parse_kif
    from shogikif.replay import ReplayEngine

    engine = ReplayEngine()
    engine.load(parse_kif(text))
    engine.jump_to_move_number(20)
    print(engine.board)
"""

from shogikif.replay.engine import Cursor, ReplayEngine, ReplayEvents
from shogikif.replay.lines import (
    MoveRef,
    available_variations,
    find_move_by_number,
    gather_move_refs,
    gather_moves,
)
from shogikif.replay.position import ReplaySnapshot, apply_move, replay_moves

__all__ = [
    # Engine
    "Cursor",
    "ReplayEngine",
    "ReplayEvents",
    # Tree queries
    "MoveRef",
    "available_variations",
    "find_move_by_number",
    "gather_move_refs",
    "gather_moves",
    # Reducer
    "ReplaySnapshot",
    "apply_move",
    "replay_moves",
]
