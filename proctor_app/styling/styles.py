"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_MUTED.get(theme)};
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
            QRadioButton {{
                border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 12px;
            }}
            QRadioButton:checked {{
                border: 2px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
                background-color: {ColorPalette.ACCENT_SOFT.get(theme)};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
            f"color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};"
            "font-weight: bold;"
        )

    @staticmethod
    def get_submit_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_SUBMIT_BG.get(theme)};"
            "color: #FFFFFF; font-weight: bold;"
        )

    @staticmethod
    def get_status_label_style(success: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS if success else ColorPalette.ERROR
        return f"color: {color.get(theme)}; font-size: 18pt; font-weight: bold;"

    @staticmethod
    def get_warning_heading_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_difficulty_badge_style(difficulty: str | None, theme: Theme = Theme.LIGHT) -> str:
        colors = {
            "easy": ColorPalette.DIFFICULTY_EASY,
            "medium": ColorPalette.DIFFICULTY_MEDIUM,
            "hard": ColorPalette.DIFFICULTY_HARD,
        }
        color = colors.get((difficulty or "").lower(), ColorPalette.DIFFICULTY_UNKNOWN)
        return (
            f"color: {color.get(theme)}; border: 1px solid {color.get(theme)};"
            "border-radius: 10px; padding: 2px 10px;"
        )

    @staticmethod
    def get_timer_badge_style(seconds_left: int, theme: Theme = Theme.LIGHT) -> str:
        if seconds_left <= 30:
            color = ColorPalette.ERROR
        elif seconds_left <= 60:
            color = ColorPalette.WARNING
        else:
            color = ColorPalette.TEXT_PRIMARY
        return (
            f"color: {color.get(theme)}; border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};"
            "border-radius: 10px; padding: 2px 10px; font-weight: bold;"
        )
