"""Component for reviewing a scored quiz."""

from __future__ import annotations

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from quiz_taker.constants.ui_constants import RESULT_HOME_BUTTON
from quiz_taker.core.models import QuizResult
from quiz_taker.core.result_renderer import render_result_html


class ResultPanel(QWidget):
    """UI component rendering the server's verdict for a submitted session."""

    def __init__(self, on_home: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_home = on_home
        self._font_size: int = 14
        self._result: QuizResult | None = None
        self._loading = False
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.result_view = QWebEngineView(self)
        layout.addWidget(self.result_view, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.home_button = QPushButton(RESULT_HOME_BUTTON, self)
        self.home_button.clicked.connect(self.on_home)
        button_row.addWidget(self.home_button)
        layout.addLayout(button_row)

    def show_loading(self) -> None:
        self._result = None
        self._loading = True
        self._render()

    def show_result(self, result: QuizResult | None) -> None:
        self._result = result
        self._loading = False
        self._render()

    def set_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        if self._result is not None or self._loading:
            self._render()

    def _render(self) -> None:
        self.result_view.setHtml(
            render_result_html(self._result, loading=self._loading, font_size=self._font_size)
        )
