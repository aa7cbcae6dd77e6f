"""Settings dialog for display preferences of the quiz client."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from quiz_taker.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring font sizes and the color theme."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        question_font_size: int = 14,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(380)

        self._ui_font_size = ui_font_size
        self._question_font_size = question_font_size
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        self.ui_font_spinbox = self._add_font_row(
            font_layout, "UI Font Size (buttons, forms):", 8, 24, self._ui_font_size
        )
        self.question_font_spinbox = self._add_font_row(
            font_layout, "Question Font Size (questions, results):", 10, 32, self._question_font_size
        )
        layout.addWidget(font_group)

        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)
        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._theme == Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)
        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    @staticmethod
    def _add_font_row(layout: QVBoxLayout, text: str, minimum: int, maximum: int, value: int) -> QSpinBox:
        row = QHBoxLayout()
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        spinbox.setSuffix(" pt")
        row.addWidget(QLabel(text))
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_question_font_size(self) -> int:
        return self.question_font_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT
