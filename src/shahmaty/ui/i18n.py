"""Internationalisation strings for Shahmaty UI.

Usage::

    from shahmaty.ui.i18n import t, set_language

    set_language("Ukrainian")
    print(t().btn_new_game)          # "Нова гра"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    window_title: str

    # ── Chess page ───────────────────────────────────────────────────────
    chess_title: str
    turn_heading: str
    color_white: str
    color_black: str
    check_banner: str
    btn_new_game: str
    btn_randomize: str
    btn_to_tictactoe: str
    rules_heading: str
    rules_text: str

    # ── Tic-tac-toe page ─────────────────────────────────────────────────
    ttt_title: str
    ttt_turn: str  # "Player {mark}'s turn"
    ttt_wins: str  # "{mark} wins!"
    ttt_draw: str
    btn_ttt_new_game: str
    btn_to_chess: str


_EN = Strings(
    window_title="Shahmaty",
    chess_title="Chess",
    turn_heading="To move",
    color_white="White",
    color_black="Black",
    check_banner="Check!",
    btn_new_game="New game",
    btn_randomize="Shuffle heavy pieces",
    btn_to_tictactoe="Back to tic-tac-toe",
    rules_heading="Rules",
    rules_text=(
        "• Click a piece to select it\n"
        "• Highlighted squares show possible moves\n"
        "• White moves first\n"
        "• You may not leave your own king in check"
    ),
    ttt_title="Tic-tac-toe",
    ttt_turn="Player {mark}'s turn",
    ttt_wins="{mark} wins!",
    ttt_draw="It's a draw!",
    btn_ttt_new_game="New game",
    btn_to_chess="Play chess",
)

_UK = Strings(
    window_title="Шахмати",
    chess_title="Шахмати",
    turn_heading="Хід гравця",
    color_white="Білі",
    color_black="Чорні",
    check_banner="Шах!",
    btn_new_game="Нова гра",
    btn_randomize="Рандом важких фігур",
    btn_to_tictactoe="Повернутися до хрестиків-ноликів",
    rules_heading="Правила",
    rules_text=(
        "• Натисніть на фігуру, щоб вибрати її\n"
        "• Підсвічені клітинки показують можливі ходи\n"
        "• Білі ходять першими\n"
        "• Не можна залишати свого короля під шахом"
    ),
    ttt_title="Хрестики-нолики",
    ttt_turn="Хід гравця {mark}",
    ttt_wins="Переможець: {mark}!",
    ttt_draw="Нічия!",
    btn_ttt_new_game="Нова гра",
    btn_to_chess="Грати в шахи",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Ukrainian": _UK,
}

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
