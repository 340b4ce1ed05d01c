"""ControlPanel — chess page action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from shahmaty.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for: new game, shuffle heavy pieces, back to tic-tac-toe."""

    new_game_clicked = pyqtSignal()
    randomize_clicked = pyqtSignal()
    tictactoe_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(10)

        self._btn_new = QPushButton()
        self._btn_new.setMinimumHeight(44)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

        self._btn_random = QPushButton()
        self._btn_random.setMinimumHeight(44)
        self._btn_random.setStyleSheet(
            "QPushButton { background-color: #7e22ce; border-color: #c084fc; }"
            "QPushButton:hover { background-color: #9333ea; }"
        )
        self._btn_random.clicked.connect(self.randomize_clicked)
        layout.addWidget(self._btn_random)

        self._btn_ttt = QPushButton()
        self._btn_ttt.setMinimumHeight(40)
        self._btn_ttt.setStyleSheet(
            "QPushButton { background-color: #44403c; color: #fde047; }"
            "QPushButton:hover { background-color: #57534e; }"
        )
        self._btn_ttt.clicked.connect(self.tictactoe_clicked)
        layout.addWidget(self._btn_ttt)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_new.setText(s.btn_new_game)
        self._btn_random.setText(s.btn_randomize)
        self._btn_ttt.setText(s.btn_to_tictactoe)
