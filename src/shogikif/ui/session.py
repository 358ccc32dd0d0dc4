"""ViewerSession — headless presentation model for a KIF viewer.

Binds a :class:`ReplayEngine`, its :class:`Autoplay` and the cosmetic
:class:`ViewerSettings`, and turns engine state into the display text a
widget layer needs.  Manual navigation always stops autoplay first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtCore import QObject

from shogikif.core.enums import Side
from shogikif.core.notation.kif import find_start_move, parse_kif
from shogikif.core.notation.labels import line_label
from shogikif.core.notation.models import VariationLine
from shogikif.replay.autoplay import Autoplay
from shogikif.replay.engine import ReplayEngine
from shogikif.replay.lines import has_any_moves
from shogikif.tree.projection import MoveTree, NodeMarks, build_move_tree, mark_nodes
from shogikif.ui.expansion import ExpansionState
from shogikif.ui.i18n import set_language, t
from shogikif.ui.settings import ViewerSettings, button_caption

_LOGGER = logging.getLogger(__name__)

_NAME_KEYS = {Side.FIRST: "先手", Side.SECOND: "後手"}
_TIME_KEYS = {
    Side.FIRST: ("先手持ち時間", "先手持時間"),
    Side.SECOND: ("後手持ち時間", "後手持時間"),
}
_SHARED_TIME_KEY = "持ち時間"


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    name: str | None
    time: str | None


@dataclass(frozen=True, slots=True)
class VariationOption:
    label: str
    line: VariationLine
    reached: bool


class ViewerSession:
    """Everything a viewer widget needs, without any widgets."""

    __slots__ = (
        "_settings",
        "_engine",
        "_autoplay",
        "_expansion",
        "_jump_feedback",
    )

    def __init__(
        self,
        settings: ViewerSettings | None = None,
        *,
        parent: QObject | None = None,
    ) -> None:
        self._settings = settings if settings is not None else ViewerSettings()
        self._engine = ReplayEngine()
        self._autoplay = Autoplay(
            self._engine,
            interval_ms=self._settings.autoplay_interval_ms,
            parent=parent,
        )
        self._expansion = ExpansionState()
        self._jump_feedback = ""
        set_language(self._settings.language)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> ReplayEngine:
        return self._engine

    @property
    def autoplay(self) -> Autoplay:
        return self._autoplay

    @property
    def expansion(self) -> ExpansionState:
        return self._expansion

    @property
    def settings(self) -> ViewerSettings:
        return self._settings

    @property
    def jump_feedback(self) -> str:
        """Inline error text for the last jump request ('' when fine)."""
        return self._jump_feedback

    # ── Loading / settings ───────────────────────────────────────────────

    def load_text(self, text: str) -> None:
        """Parse *text*, reset navigation and honour a start-move directive."""
        self._autoplay.stop()
        self._expansion.clear()
        self._jump_feedback = ""
        self._engine.load(parse_kif(text))

        requested = find_start_move(text)
        if requested is not None and not self._engine.jump_to_move_number(requested):
            _LOGGER.info("Requested start move %d not found", requested)
            self._jump_feedback = t().jump_not_found

    def apply_settings(self, settings: ViewerSettings) -> None:
        self._settings = settings
        set_language(settings.language)
        self._autoplay.set_interval(settings.autoplay_interval_ms)

    def caption(self, action: str) -> str:
        if action == "btn_play" and self._autoplay.is_playing:
            action = "btn_pause"
        return button_caption(action, self._settings)

    # ── Navigation ───────────────────────────────────────────────────────

    def go_first(self) -> None:
        self._autoplay.stop()
        self._engine.step_first()

    def go_back(self) -> None:
        self._autoplay.stop()
        self._engine.step_back()

    def go_forward(self) -> None:
        self._autoplay.stop()
        self._engine.step_forward()

    def go_last(self) -> None:
        self._autoplay.stop()
        self._engine.step_last()

    def toggle_autoplay(self) -> None:
        self._autoplay.toggle()

    def go_to_parent(self) -> bool:
        self._autoplay.stop()
        return self._engine.go_to_parent()

    def select_variation(self, index: int) -> bool:
        """Switch to the *index*-th entry of :meth:`variation_options`."""
        options = self._engine.available_variations()
        if not 0 <= index < len(options):
            return False
        self._autoplay.stop()
        self._engine.switch_to(options[index])
        return True

    def submit_jump(self, raw: str) -> bool:
        """Handle the move-number input box. Sets :attr:`jump_feedback`."""
        text = raw.strip()
        if not text:
            self._jump_feedback = ""
            return False
        try:
            move_number = int(text)
        except ValueError:
            self._jump_feedback = t().jump_not_a_number
            return False

        self._autoplay.stop()
        ok = self._engine.jump_to_move_number(move_number)
        self._jump_feedback = "" if ok else t().jump_not_found
        return ok

    def click_node(self, tree: MoveTree, node_id: str) -> bool:
        node = tree.nodes.get(node_id)
        if node is None:
            return False
        self._autoplay.stop()
        self._engine.jump_to(node.jump_ref.line, node.jump_ref.move_index)
        return True

    # ── Derived display state ────────────────────────────────────────────

    @property
    def can_go_to_parent(self) -> bool:
        return self._engine.current_line.parent is not None

    def path_text(self) -> str:
        return t().path_prefix + " → ".join(self._engine.line_path())

    def meta_text(self) -> str:
        s = t()
        header = self._engine.header
        parts = []
        if header.get("棋戦"):
            parts.append(f"{s.meta_event}: {header['棋戦']}")
        if header.get("戦型"):
            parts.append(f"{s.meta_opening}: {header['戦型']}")
        if self._engine.timestamp:
            parts.append(f"{s.meta_elapsed}: {self._engine.timestamp}")
        return " / ".join(parts)

    def comment_text(self) -> str:
        return self._engine.comment or ""

    def hand_text(self, side: Side) -> str:
        counts = self._engine.hands.counts(side)
        if not counts:
            return t().hands_empty
        return " ".join(f"{k.glyph}{n if n > 1 else ''}" for k, n in counts)

    def player_info(self, side: Side) -> PlayerInfo:
        header = self._engine.header
        time = next((header[k] for k in _TIME_KEYS[side] if header.get(k)), None)
        if time is None and side == Side.FIRST:
            time = header.get(_SHARED_TIME_KEY) or None
        return PlayerInfo(name=header.get(_NAME_KEYS[side]) or None, time=time)

    def jump_prompt(self) -> tuple[str, str]:
        """Label and button caption for the move-number input."""
        s = t()
        return s.jump_label, s.jump_apply

    def variation_placeholder(self) -> str:
        return t().variation_placeholder

    def variation_options(self) -> list[VariationOption]:
        current = self._engine.current_line
        index = self._engine.current_move_index
        options = []
        for variation in self._engine.available_variations():
            label = line_label(variation)
            parent = variation.parent
            reached = not (
                parent is not None
                and parent.line is current
                and parent.anchor_move_count > index
            )
            if not reached:
                label += t().variation_unreached
            options.append(VariationOption(label, variation, reached))
        return options

    def move_tree(self) -> MoveTree:
        """Fresh projection of the current record."""
        return build_move_tree(self._engine.root)

    def tree_empty_text(self) -> str | None:
        """Placeholder for the tree view, or ``None`` when there are moves."""
        if has_any_moves(self._engine.root):
            return None
        return t().tree_empty

    def tree_marks(self, tree: MoveTree) -> NodeMarks:
        return mark_nodes(
            tree, self._engine.current_line, self._engine.current_move_index
        )
