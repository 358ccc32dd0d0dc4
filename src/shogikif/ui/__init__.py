"""Presentation support: settings, captions and the headless viewer session."""

from shogikif.ui.expansion import ExpansionState
from shogikif.ui.i18n import LANGUAGES, set_language, t
from shogikif.ui.session import PlayerInfo, VariationOption, ViewerSession
from shogikif.ui.settings import ViewerSettings, button_caption

__all__ = [
    "ExpansionState",
    "LANGUAGES",
    "PlayerInfo",
    "VariationOption",
    "ViewerSession",
    "ViewerSettings",
    "button_caption",
    "set_language",
    "t",
]
