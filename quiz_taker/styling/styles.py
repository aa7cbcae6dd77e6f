"""Qt stylesheets built from the color palette."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.SURFACE.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 6px;
                padding: 6px 14px;
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_MUTED.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QComboBox {{
                background-color: {ColorPalette.SURFACE.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 6px;
                padding: 4px;
            }}
            QProgressBar {{
                border: none;
                border-radius: 4px;
                background-color: {ColorPalette.BORDER.get(theme)};
                max-height: 8px;
            }}
            QProgressBar::chunk {{
                border-radius: 4px;
                background-color: {ColorPalette.ACCENT.get(theme)};
            }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.ACCENT.get(theme)}; "
            f"color: {ColorPalette.ACCENT_TEXT.get(theme)}; font-weight: bold; }}"
            f"QPushButton:hover {{ background-color: {ColorPalette.ACCENT_HOVER.get(theme)}; }}"
        )

    @staticmethod
    def get_submit_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.SUBMIT.get(theme)}; "
            f"color: #FFFFFF; font-weight: bold; }}"
        )

    @staticmethod
    def get_nav_button_style(current: bool, answered: bool, theme: Theme = Theme.LIGHT) -> str:
        if current:
            background = ColorPalette.ACCENT.get(theme)
            color = ColorPalette.ACCENT_TEXT.get(theme)
        elif answered:
            background = ColorPalette.ANSWERED.get(theme)
            color = "#FFFFFF"
        else:
            background = ColorPalette.SURFACE.get(theme)
            color = ColorPalette.TEXT_PRIMARY.get(theme)
        return f"QPushButton {{ background-color: {background}; color: {color}; min-width: 32px; }}"

    @staticmethod
    def get_timer_style(low_on_time: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.TIMER_LOW.get(theme) if low_on_time else ColorPalette.TIMER_NORMAL.get(theme)
        return f"font-size: 16pt; font-weight: bold; color: {color};"

    @staticmethod
    def get_notice_style(theme: Theme = Theme.LIGHT) -> str:
        return f"background-color: {ColorPalette.NOTICE_BG.get(theme)}; padding: 6px; border-radius: 4px;"

    @staticmethod
    def get_error_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
