"""MainWindow — top-level window with the tic-tac-toe and chess pages."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from shahmaty.core.types import Position
from shahmaty.game.controller import GameController
from shahmaty.game.interfaces import ClickOutcome
from shahmaty.game.state import GameState
from shahmaty.ui.board.chess_board import ChessBoardWidget
from shahmaty.ui.board.tictactoe_board import TicTacToeWidget
from shahmaty.ui.i18n import set_language, t
from shahmaty.ui.panels.control_panel import ControlPanel
from shahmaty.ui.panels.status_panel import StatusPanel
from shahmaty.ui.settings import AppSettings
from shahmaty.ui.styles.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)

TICTACTOE_PAGE = 0
CHESS_PAGE = 1


class MainWindow(QMainWindow):
    """Main application window for Shahmaty."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self._controller = controller or GameController()
        self._rng = random.Random(self._settings.shuffle_seed)

        set_language(self._settings.language)
        self.setMinimumSize(900, 700)

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()
        self.retranslate_ui()
        self._on_state_changed(self._controller.state)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def current_page(self) -> int:
        return self._pages.currentIndex()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._pages = QStackedWidget()
        self.setCentralWidget(self._pages)

        # Tic-tac-toe is the landing page.
        self._tictactoe = TicTacToeWidget()
        self._pages.insertWidget(TICTACTOE_PAGE, self._tictactoe)

        chess_page = QWidget()
        root = QVBoxLayout(chess_page)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(12)

        self._chess_title = QLabel()
        self._chess_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._chess_title.setFont(QFont("Georgia", 32, QFont.Weight.Bold))
        self._chess_title.setStyleSheet("color: #facc15;")
        root.addWidget(self._chess_title)

        body = QHBoxLayout()
        body.setSpacing(16)

        self._board = ChessBoardWidget()
        body.addWidget(self._board, alignment=Qt.AlignmentFlag.AlignTop)

        right = QVBoxLayout()
        right.setSpacing(12)

        self._status_panel = StatusPanel()
        right.addWidget(self._status_panel)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        self._rules_heading = QLabel()
        self._rules_heading.setFont(QFont("Georgia", 14, QFont.Weight.Bold))
        right.addWidget(self._rules_heading)
        self._rules_text = QLabel()
        self._rules_text.setWordWrap(True)
        right.addWidget(self._rules_text)
        right.addStretch(1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(320)
        body.addWidget(right_widget)

        root.addLayout(body)
        self._pages.insertWidget(CHESS_PAGE, chess_page)
        self._pages.setCurrentIndex(TICTACTOE_PAGE)

    def _connect_signals(self) -> None:
        self._board.square_clicked.connect(self._on_square_clicked)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.randomize_clicked.connect(self._on_randomize)
        self._control_panel.tictactoe_clicked.connect(self.show_tictactoe)
        self._tictactoe.chess_requested.connect(self.show_chess)
        self._controller.events.on_state_changed.append(self._on_state_changed)

    def _apply_settings(self) -> None:
        s = self._settings
        self._board.set_theme(theme_by_name(s.board_theme))
        self._board.set_show_legal_moves(s.show_legal_moves)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._chess_title.setText(s.chess_title)
        self._rules_heading.setText(s.rules_heading)
        self._rules_text.setText(s.rules_text)
        self._status_panel.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._tictactoe.retranslate_ui()

    # ── Navigation ───────────────────────────────────────────────────────

    def show_chess(self) -> None:
        self._pages.setCurrentIndex(CHESS_PAGE)

    def show_tictactoe(self) -> None:
        self._pages.setCurrentIndex(TICTACTOE_PAGE)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        outcome = self._controller.click_square(Position(row, col))
        if outcome == ClickOutcome.REJECTED:
            _LOGGER.debug("Move refused: it would leave the king in check")

    def _on_new_game(self) -> None:
        self._controller.new_game()

    def _on_randomize(self) -> None:
        self._controller.randomize_heavy_pieces(self._rng)

    def _on_state_changed(self, state: GameState) -> None:
        self._board.set_state(state)
        self._status_panel.set_state(state)
