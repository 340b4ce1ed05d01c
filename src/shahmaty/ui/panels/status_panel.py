"""StatusPanel — whose turn it is, and whether they are in check."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from shahmaty.core.enums import Color
from shahmaty.game.state import GameState
from shahmaty.ui.i18n import t


class StatusPanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._turn = Color.WHITE
        self._in_check = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._heading = QLabel()
        self._heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._heading.setFont(QFont("Georgia", 18, QFont.Weight.Bold))
        layout.addWidget(self._heading)

        self._turn_label = QLabel()
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._turn_label.setFont(QFont("Georgia", 16, QFont.Weight.Bold))
        layout.addWidget(self._turn_label)

        self._check_label = QLabel()
        self._check_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._check_label.setFont(QFont("Georgia", 16, QFont.Weight.Bold))
        self._check_label.setStyleSheet(
            "background: #dc2626; color: white; border-radius: 6px; padding: 6px;"
        )
        layout.addWidget(self._check_label)

    def retranslate_ui(self) -> None:
        s = t()
        self._heading.setText(s.turn_heading)
        self._check_label.setText(s.check_banner)
        self._refresh()

    def set_state(self, state: GameState) -> None:
        self._turn = state.turn
        self._in_check = state.in_check
        self._refresh()

    # ── Query helpers (used by tests) ────────────────────────────────────

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    @property
    def check_visible(self) -> bool:
        return not self._check_label.isHidden()

    def _refresh(self) -> None:
        s = t()
        if self._turn == Color.WHITE:
            self._turn_label.setText(s.color_white)
            self._turn_label.setStyleSheet(
                "background: #f3f4f6; color: #111827; border-radius: 6px; padding: 6px;"
            )
        else:
            self._turn_label.setText(s.color_black)
            self._turn_label.setStyleSheet(
                "background: #451a03; color: #fef08a; border-radius: 6px; padding: 6px;"
            )
        self._check_label.setVisible(self._in_check)
