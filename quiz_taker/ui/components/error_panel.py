"""Component shown when a quiz or result cannot be loaded."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_taker.constants.ui_constants import ERROR_HOME_BUTTON
from quiz_taker.styling.styles import Styles


class ErrorPanel(QWidget):
    def __init__(self, on_home: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_home = on_home

        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel("Error", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet(Styles.get_error_style())
        layout.addWidget(self.message_label)

        self.home_button = QPushButton(ERROR_HOME_BUTTON, self)
        self.home_button.clicked.connect(self.on_home)
        layout.addWidget(self.home_button, alignment=Qt.AlignCenter)
        layout.addStretch()

    def show_error(self, message: str, detail: str | None = None) -> None:
        text = message if not detail else f"{message}\n\n{detail}"
        self.message_label.setText(text)
