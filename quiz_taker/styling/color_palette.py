"""Color palette for the QuizTaker window, with light and dark variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """One color in both themes."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the participant client."""

    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F5F5")
    TEXT_MUTED = ThemeColors(light="#6B7280", dark="#AAAAAA")

    BACKGROUND = ThemeColors(light="#F5F7FF", dark="#1E1E1E")
    SURFACE = ThemeColors(light="#FFFFFF", dark="#2D2D2D")
    BORDER = ThemeColors(light="#D1D5DB", dark="#555555")

    # Indigo accent carried over from the web front end
    ACCENT = ThemeColors(light="#4F46E5", dark="#818CF8")
    ACCENT_TEXT = ThemeColors(light="#FFFFFF", dark="#111827")
    ACCENT_HOVER = ThemeColors(light="#4338CA", dark="#6366F1")

    ANSWERED = ThemeColors(light="#10B981", dark="#34D399")
    SUBMIT = ThemeColors(light="#059669", dark="#10B981")

    TIMER_NORMAL = ThemeColors(light="#4F46E5", dark="#818CF8")
    TIMER_LOW = ThemeColors(light="#DC2626", dark="#FF6B6B")

    NOTICE_BG = ThemeColors(light="#FFF7E6", dark="#4A3B12")
    ERROR = ThemeColors(light="#D13438", dark="#FF6B6B")
