"""Color palette for the quiz window supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")
    TEXT_MUTED = ThemeColors(light="#6B7280", dark="#9CA3AF")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#111827")
    BACKGROUND_CARD = ThemeColors(light="#F9FAFB", dark="#1F2937")

    ACCENT_PRIMARY = ThemeColors(light="#2563EB", dark="#60A5FA")
    ACCENT_SOFT = ThemeColors(light="#EFF6FF", dark="#1E3A5F")

    SUCCESS = ThemeColors(light="#15803D", dark="#4ADE80")
    WARNING = ThemeColors(light="#CA8A04", dark="#FACC15")
    ERROR = ThemeColors(light="#DC2626", dark="#F87171")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#374151")

    BUTTON_PRIMARY_BG = ThemeColors(light="#2563EB", dark="#60A5FA")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#0B1120")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F3F4F6", dark="#374151")
    BUTTON_HOVER_BG = ThemeColors(light="#E5E7EB", dark="#4B5563")
    BUTTON_SUBMIT_BG = ThemeColors(light="#16A34A", dark="#22C55E")

    # Question difficulty badges
    DIFFICULTY_EASY = ThemeColors(light="#166534", dark="#BBF7D0")
    DIFFICULTY_MEDIUM = ThemeColors(light="#854D0E", dark="#FEF08A")
    DIFFICULTY_HARD = ThemeColors(light="#991B1B", dark="#FECACA")
    DIFFICULTY_UNKNOWN = ThemeColors(light="#1F2937", dark="#E5E7EB")
