"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Amber"
    show_legal_moves: bool = True

    # Heavy-piece shuffle; a fixed seed gives the same layout every time.
    shuffle_seed: int | None = None
