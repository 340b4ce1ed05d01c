"""Shahmaty — chess with legality and check enforcement, plus tic-tac-toe."""

__version__ = "0.1.0"
