"""Internationalisation strings for viewer captions and feedback.

Usage::

    from shogikif.ui.i18n import t, set_language

    set_language("日本語")
    print(t().btn_next)          # "次へ ▶"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Toolbar ──────────────────────────────────────────────────────────
    btn_first: str
    btn_prev: str
    btn_next: str
    btn_last: str
    btn_play: str
    btn_pause: str
    btn_parent: str

    # ── Move jump ────────────────────────────────────────────────────────
    jump_label: str
    jump_apply: str
    jump_not_found: str
    jump_not_a_number: str

    # ── Variations ───────────────────────────────────────────────────────
    variation_placeholder: str
    variation_unreached: str  # suffix for branches past the cursor
    path_prefix: str  # e.g. "Current: "

    # ── Panels ───────────────────────────────────────────────────────────
    hands_empty: str
    meta_event: str
    meta_opening: str
    meta_elapsed: str
    tree_empty: str


# Icon-only captions are language independent.
ICONS: dict[str, str] = {
    "btn_first": "⏮",
    "btn_prev": "◀",
    "btn_next": "▶",
    "btn_last": "⏭",
    "btn_play": "▶",
    "btn_pause": "⏸",
    "btn_parent": "↩",
}

_EN = Strings(
    btn_first="Go to start ⏮",
    btn_prev="Step back ◀",
    btn_next="Step forward ▶",
    btn_last="Go to end ⏭",
    btn_play="Start autoplay ▶",
    btn_pause="Pause autoplay ⏸",
    btn_parent="Return to parent line ↩",
    jump_label="Jump to move:",
    jump_apply="Jump!",
    jump_not_found="That move could not be found.",
    jump_not_a_number="Enter the move number as digits.",
    variation_placeholder="Select a variation",
    variation_unreached=" (not reached)",
    path_prefix="Current: ",
    hands_empty="None",
    meta_event="Event",
    meta_opening="Opening",
    meta_elapsed="Time used",
    tree_empty="No moves recorded.",
)

_JA = Strings(
    btn_first="最初へ ⏮",
    btn_prev="前へ ◀",
    btn_next="次へ ▶",
    btn_last="最後へ ⏭",
    btn_play="自動再生 ▶",
    btn_pause="一時停止 ⏸",
    btn_parent="親の変化へ戻る ↩",
    jump_label="手数へ移動:",
    jump_apply="移動",
    jump_not_found="指定した手が見つかりません。",
    jump_not_a_number="手数は数字で入力してください。",
    variation_placeholder="変化を選択",
    variation_unreached="（未到達）",
    path_prefix="現在: ",
    hands_empty="なし",
    meta_event="棋戦",
    meta_opening="戦型",
    meta_elapsed="消費時間",
    tree_empty="棋譜はありません。",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "日本語": _JA,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
