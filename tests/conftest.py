"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


SAMPLE_KIF = """\
# ---- Kifu for Windows V7 棋譜ファイル ----
開始日時：2024/01/02 10:00:00
棋戦：練習対局
戦型：相掛かり
持ち時間：各10分
先手：先手太郎
後手：後手花子
手数----指手---------消費時間--
   1 ７六歩(77)   ( 0:01/00:00:01)
*角道を開ける
   2 ３四歩(33)   ( 0:02/00:00:02)
   3 ２二角成(88) ( 0:03/00:00:04)
   4 同　銀(31)   ( 0:01/00:00:03)
   5 ４五角打     ( 0:05/00:00:09)
   6 投了
まで5手で先手の勝ち

変化：3手
   3 ２六歩(27)   ( 0:02/00:00:03)
*穏やかに
   4 ８四歩(83)   ( 0:01/00:00:03)

変化：4手
   4 ８八角成(22) ( 0:01/00:00:04)
   5 同　銀(79)   ( 0:01/00:00:05)
"""


@pytest.fixture
def sample_kif_text() -> str:
    """A short record with nested variations, comments and timestamps."""
    return SAMPLE_KIF


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for timer-driven tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from shogikif.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")
