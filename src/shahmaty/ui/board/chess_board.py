"""ChessBoardWidget — an 8x8 grid of clickable squares."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QWidget

from shahmaty.core.enums import Color
from shahmaty.core.types import BOARD_SIZE, Position
from shahmaty.game.state import GameState
from shahmaty.ui.styles.theme import BoardTheme

_SQUARE_PX = 72


class ChessBoardWidget(QWidget):
    """Renders a :class:`GameState` and reports clicks as ``(row, col)``.

    The widget holds no game logic; the owner feeds it states.
    """

    square_clicked = pyqtSignal(int, int)

    def __init__(
        self,
        theme: BoardTheme | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme or BoardTheme.amber()
        self._show_legal_moves = True
        self._state: GameState | None = None
        self._buttons: dict[Position, QPushButton] = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        grid = QGridLayout(self)
        grid.setSpacing(0)
        grid.setContentsMargins(0, 0, 0, 0)

        font = QFont("DejaVu Sans", int(_SQUARE_PX * 0.5))
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                btn = QPushButton()
                btn.setFixedSize(_SQUARE_PX, _SQUARE_PX)
                btn.setFont(font)
                btn.clicked.connect(
                    lambda _checked=False, r=row, c=col: self.square_clicked.emit(r, c)
                )
                grid.addWidget(btn, row, col)
                self._buttons[Position(row, col)] = btn
        self._restyle_all()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        self._state = state
        self._restyle_all()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._restyle_all()

    def set_show_legal_moves(self, show: bool) -> None:
        self._show_legal_moves = show
        self._restyle_all()

    def button(self, pos: Position) -> QPushButton:
        return self._buttons[pos]

    # ── Rendering ────────────────────────────────────────────────────────

    def _restyle_all(self) -> None:
        for pos, btn in self._buttons.items():
            self._restyle(pos, btn)

    def _restyle(self, pos: Position, btn: QPushButton) -> None:
        theme = self._theme
        light = (pos.row + pos.col) % 2 == 0
        background = theme.light_square if light else theme.dark_square
        foreground = theme.white_piece
        ring: QColor | None = None
        text = ""

        state = self._state
        if state is not None:
            piece = state.board[pos]
            if piece is not None:
                text = piece.symbol
                if piece.color == Color.BLACK:
                    foreground = theme.black_piece
            if pos == state.checked_king:
                ring = theme.highlight_check
                # selected and in check: both show
                if pos == state.selected:
                    background = theme.highlight_selected
            elif pos == state.selected:
                ring = theme.highlight_selected
            elif self._show_legal_moves and state.is_valid_target(pos):
                ring = theme.highlight_target
                if piece is None:
                    text = "•"
                    foreground = theme.highlight_target

        border = f"4px solid {ring.name()}" if ring is not None else "none"
        btn.setText(text)
        btn.setStyleSheet(
            "QPushButton {"
            f" background: {background.name()};"
            f" color: {foreground.name()};"
            f" border: {border};"
            " border-radius: 0px;"
            " padding: 0px;"
            " }"
        )
