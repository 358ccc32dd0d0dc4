"""Viewer settings: cosmetic choices only, never read by parse or replay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from shogikif.replay.autoplay import DEFAULT_INTERVAL_MS
from shogikif.ui.i18n import ICONS, t

ControlButtonLabelMode = Literal["text-with-icon", "icon-only"]

LABEL_MODES: tuple[ControlButtonLabelMode, ...] = ("text-with-icon", "icon-only")


@dataclass
class ViewerSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Toolbar
    control_button_label_mode: ControlButtonLabelMode = "text-with-icon"

    # Playback
    autoplay_interval_ms: int = DEFAULT_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.control_button_label_mode not in LABEL_MODES:
            raise ValueError(
                f"Unknown button label mode: {self.control_button_label_mode!r}"
            )
        if self.autoplay_interval_ms <= 0:
            raise ValueError("autoplay_interval_ms must be positive")


def button_caption(action: str, settings: ViewerSettings) -> str:
    """Caption for toolbar button *action* (e.g. ``"btn_next"``)."""
    if settings.control_button_label_mode == "icon-only":
        return ICONS[action]
    return getattr(t(), action)
