"""Visual theme constants and QSS styles for Shahmaty."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # picked-up piece
    highlight_target: QColor  # legal move targets
    highlight_check: QColor  # king in check
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def amber(cls) -> BoardTheme:
        return cls(
            light_square=QColor(253, 230, 138),
            dark_square=QColor(146, 64, 14),
            highlight_selected=QColor(250, 204, 21),  # yellow ring
            highlight_target=QColor(74, 222, 128),  # green ring
            highlight_check=QColor(220, 38, 38),
            white_piece=QColor(243, 244, 246),
            black_piece=QColor(69, 26, 3),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(246, 246, 105),
            highlight_target=QColor(106, 168, 79),
            highlight_check=QColor(255, 0, 0),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
        )


THEMES: dict[str, BoardTheme] = {
    "Amber": BoardTheme.amber(),
    "Classic": BoardTheme.classic(),
}


def theme_by_name(name: str) -> BoardTheme:
    """Theme for a settings value; unknown names fall back to Amber."""
    return THEMES.get(name, THEMES["Amber"])


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #451a03;
}

QLabel {
    color: #fef3c7;
    font-family: "Georgia", serif;
}

QPushButton {
    background: #b45309;
    color: #ffffff;
    border: 2px solid #ca8a04;
    border-radius: 8px;
    padding: 8px 16px;
    font-size: 15px;
    font-weight: bold;
}
QPushButton:hover {
    background: #d97706;
}
QPushButton:pressed {
    background: #92400e;
}
QPushButton:disabled {
    color: #a8a29e;
    background: #44403c;
}
"""
