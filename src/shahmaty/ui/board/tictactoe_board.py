"""TicTacToeWidget — the 3x3 game page."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QGridLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from shahmaty.tictactoe import BOARD_CELLS, Mark, Outcome, TicTacToeGame
from shahmaty.ui.i18n import t

_CELL_PX = 96

_MARK_COLORS: dict[Mark, str] = {
    Mark.X: "#2563eb",
    Mark.O: "#dc2626",
}


class TicTacToeWidget(QWidget):
    """Owns a :class:`TicTacToeGame` and renders it as a button grid."""

    chess_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._game = TicTacToeGame()
        self._cells: list[QPushButton] = []
        self._setup_ui()
        self.retranslate_ui()

    @property
    def game(self) -> TicTacToeGame:
        return self._game

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(16)

        self._title = QLabel()
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._title.setFont(QFont("Georgia", 28, QFont.Weight.Bold))
        layout.addWidget(self._title)

        self._status = QLabel()
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status.setFont(QFont("Georgia", 16))
        layout.addWidget(self._status)

        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        grid.setSpacing(6)
        cell_font = QFont("Georgia", 36, QFont.Weight.Bold)
        for index in range(BOARD_CELLS):
            btn = QPushButton()
            btn.setFixedSize(_CELL_PX, _CELL_PX)
            btn.setFont(cell_font)
            btn.clicked.connect(lambda _checked=False, i=index: self.play(i))
            grid.addWidget(btn, index // 3, index % 3)
            self._cells.append(btn)
        layout.addWidget(grid_host, alignment=Qt.AlignmentFlag.AlignCenter)

        self._btn_new = QPushButton()
        self._btn_new.clicked.connect(self.reset)
        layout.addWidget(self._btn_new)

        self._btn_chess = QPushButton()
        self._btn_chess.clicked.connect(self.chess_requested)
        layout.addWidget(self._btn_chess)

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.ttt_title)
        self._btn_new.setText(s.btn_ttt_new_game)
        self._btn_chess.setText(s.btn_to_chess)
        self._refresh()

    # ── Actions ──────────────────────────────────────────────────────────

    def play(self, index: int) -> None:
        if self._game.play(index):
            self._refresh()

    def reset(self) -> None:
        self._game.reset()
        self._refresh()

    # ── Rendering ────────────────────────────────────────────────────────

    def status_text(self) -> str:
        s = t()
        outcome = self._game.outcome
        if outcome == Outcome.X_WINS:
            return s.ttt_wins.format(mark=Mark.X)
        if outcome == Outcome.O_WINS:
            return s.ttt_wins.format(mark=Mark.O)
        if outcome == Outcome.DRAW:
            return s.ttt_draw
        return s.ttt_turn.format(mark=self._game.current)

    def _refresh(self) -> None:
        self._status.setText(self.status_text())
        winning = self._game.winning_line or ()
        for index, (btn, mark) in enumerate(zip(self._cells, self._game.cells)):
            btn.setText(str(mark) if mark is not None else "")
            color = _MARK_COLORS[mark] if mark is not None else "#ffffff"
            background = "#fde68a" if index in winning else "#ffffff"
            btn.setStyleSheet(
                f"QPushButton {{ background: {background}; color: {color};"
                " border: 2px solid #6366f1; border-radius: 8px; }"
            )
