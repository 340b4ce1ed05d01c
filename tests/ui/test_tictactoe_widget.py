"""Tests for the tic-tac-toe page."""

from __future__ import annotations

from shahmaty.tictactoe import Mark, Outcome
from shahmaty.ui.board.tictactoe_board import TicTacToeWidget
from shahmaty.ui.i18n import set_language


def test_clicks_place_marks() -> None:
    widget = TicTacToeWidget()
    widget._cells[4].click()
    widget._cells[0].click()

    assert widget._cells[4].text() == "X"
    assert widget._cells[0].text() == "O"
    assert widget.status_text() == "Player X's turn"


def test_win_reported_and_reset() -> None:
    widget = TicTacToeWidget()
    for index in (0, 3, 1, 4, 2):
        widget.play(index)

    assert widget.game.outcome == Outcome.X_WINS
    assert widget.status_text() == "X wins!"

    widget.reset()
    assert widget.game.current == Mark.X
    assert all(btn.text() == "" for btn in widget._cells)


def test_chess_request_signal() -> None:
    widget = TicTacToeWidget()
    fired: list[bool] = []
    widget.chess_requested.connect(lambda: fired.append(True))

    widget._btn_chess.click()

    assert fired == [True]


def test_ukrainian_strings() -> None:
    set_language("Ukrainian")
    widget = TicTacToeWidget()
    assert widget.status_text() == "Хід гравця X"
