"""Tests for the headless ViewerSession."""

from __future__ import annotations

import pytest

from shogikif.core.enums import Side
from shogikif.ui.session import PlayerInfo, ViewerSession
from shogikif.ui.settings import ViewerSettings


@pytest.fixture
def session(qapp: object, sample_kif_text: str) -> ViewerSession:
    s = ViewerSession()
    s.load_text(sample_kif_text)
    return s


class TestLoading:
    def test_starts_at_zero(self, session: ViewerSession) -> None:
        assert session.engine.current_move_index == 0
        assert session.jump_feedback == ""

    def test_start_move_directive(self, qapp: object, sample_kif_text: str) -> None:
        s = ViewerSession()
        s.load_text("開始手数：3\n" + sample_kif_text)
        assert s.engine.current_move_index == 3

    def test_start_move_missing(self, qapp: object, sample_kif_text: str) -> None:
        s = ViewerSession()
        s.load_text("開始手数：40\n" + sample_kif_text)
        assert s.engine.current_move_index == 0
        assert s.jump_feedback == "That move could not be found."

    def test_reload_stops_autoplay(self, session: ViewerSession, sample_kif_text: str) -> None:
        session.toggle_autoplay()
        assert session.autoplay.is_playing
        session.load_text(sample_kif_text)
        assert not session.autoplay.is_playing

    def test_settings_apply_language(self, qapp: object) -> None:
        s = ViewerSession(ViewerSettings(language="日本語"))
        assert s.caption("btn_next") == "次へ ▶"

    def test_apply_settings(self, session: ViewerSession) -> None:
        session.apply_settings(
            ViewerSettings(control_button_label_mode="icon-only", autoplay_interval_ms=300)
        )
        assert session.caption("btn_first") == "⏮"
        assert session.autoplay.interval_ms == 300


class TestNavigation:
    def test_steps(self, session: ViewerSession) -> None:
        session.go_forward()
        session.go_forward()
        session.go_back()
        assert session.engine.current_move_index == 1
        session.go_last()
        assert session.engine.current_move_index == 5
        session.go_first()
        assert session.engine.current_move_index == 0

    def test_manual_navigation_stops_autoplay(self, session: ViewerSession) -> None:
        session.toggle_autoplay()
        session.go_forward()
        assert not session.autoplay.is_playing

    def test_play_caption_flips(self, session: ViewerSession) -> None:
        assert session.caption("btn_play") == "Start autoplay ▶"
        session.toggle_autoplay()
        assert session.caption("btn_play") == "Pause autoplay ⏸"
        session.toggle_autoplay()

    def test_select_variation(self, session: ViewerSession) -> None:
        assert session.select_variation(0)
        assert session.can_go_to_parent
        assert session.go_to_parent()
        assert not session.can_go_to_parent

    def test_select_variation_out_of_range(self, session: ViewerSession) -> None:
        assert not session.select_variation(5)
        assert not session.select_variation(-1)


class TestJumpInput:
    def test_valid(self, session: ViewerSession) -> None:
        assert session.submit_jump(" 3 ")
        assert session.engine.current_move_index == 3
        assert session.jump_feedback == ""

    def test_not_found(self, session: ViewerSession) -> None:
        assert not session.submit_jump("42")
        assert session.jump_feedback == "That move could not be found."

    def test_not_a_number(self, session: ViewerSession) -> None:
        assert not session.submit_jump("三")
        assert session.jump_feedback == "Enter the move number as digits."

    def test_blank_clears_feedback(self, session: ViewerSession) -> None:
        session.submit_jump("42")
        assert not session.submit_jump("  ")
        assert session.jump_feedback == ""

    def test_feedback_localised(self, session: ViewerSession) -> None:
        session.apply_settings(ViewerSettings(language="日本語"))
        session.submit_jump("42")
        assert session.jump_feedback == "指定した手が見つかりません。"


class TestDisplay:
    def test_path_text(self, session: ViewerSession) -> None:
        assert session.path_text() == "Current: 本筋"
        session.select_variation(0)
        assert session.path_text() == "Current: 本筋 → 変化 3手: ２６歩(27)"

    def test_meta_text(self, session: ViewerSession) -> None:
        assert session.meta_text() == "Event: 練習対局 / Opening: 相掛かり"
        session.go_forward()
        assert session.meta_text().endswith("Time used: 0:01/00:00:01")

    def test_comment_text(self, session: ViewerSession) -> None:
        assert session.comment_text() == ""
        session.go_forward()
        assert session.comment_text() == "角道を開ける"

    def test_hand_text(self, session: ViewerSession) -> None:
        session.submit_jump("5")
        assert session.hand_text(Side.FIRST) == "None"
        assert session.hand_text(Side.SECOND) == "角"

    def test_player_info(self, session: ViewerSession) -> None:
        assert session.player_info(Side.FIRST) == PlayerInfo("先手太郎", "各10分")
        assert session.player_info(Side.SECOND) == PlayerInfo("後手花子", None)

    def test_player_info_per_side_time(self, qapp: object) -> None:
        s = ViewerSession()
        s.load_text("先手持ち時間：5分\n後手持時間：7分\n")
        assert s.player_info(Side.FIRST) == PlayerInfo(None, "5分")
        assert s.player_info(Side.SECOND) == PlayerInfo(None, "7分")

    def test_variation_options_reached(self, session: ViewerSession) -> None:
        (option,) = session.variation_options()
        assert not option.reached
        assert option.label == "変化 3手: ２６歩(27) (not reached)"
        session.submit_jump("2")
        (option,) = session.variation_options()
        assert option.reached
        assert option.label == "変化 3手: ２６歩(27)"


class TestTree:
    def test_click_node(self, session: ViewerSession) -> None:
        tree = session.move_tree()
        assert session.click_node(tree, "move-node-6")
        branch = session.engine.root.moves[1].variations[0]
        assert session.engine.current_line is branch
        assert session.engine.current_move_index == 1
        assert session.tree_marks(tree).current_id == "move-node-6"

    def test_click_root_node(self, session: ViewerSession) -> None:
        session.go_last()
        tree = session.move_tree()
        assert session.click_node(tree, tree.root_id)
        assert session.engine.current_move_index == 0

    def test_click_unknown_node(self, session: ViewerSession) -> None:
        assert not session.click_node(session.move_tree(), "move-node-999")

    def test_tree_empty_text(self, session: ViewerSession) -> None:
        assert session.tree_empty_text() is None
        session.load_text("先手：A\n")
        assert session.tree_empty_text() == "No moves recorded."

    def test_tree_with_only_lead_variation_is_not_empty(
        self, session: ViewerSession
    ) -> None:
        session.load_text("変化：1手\n1 ２六歩(27)\n")
        assert session.tree_empty_text() is None


class TestPrompts:
    def test_jump_prompt(self, session: ViewerSession) -> None:
        assert session.jump_prompt() == ("Jump to move:", "Jump!")

    def test_variation_placeholder_localised(self, session: ViewerSession) -> None:
        assert session.variation_placeholder() == "Select a variation"
        session.apply_settings(ViewerSettings(language="日本語"))
        assert session.variation_placeholder() == "変化を選択"
        assert session.jump_prompt() == ("手数へ移動:", "移動")
