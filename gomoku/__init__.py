"""Two-player grid game engine (Gomoku / tic-tac-toe family)."""

from gomoku.core.board import Board, BoardView, Cell, Marker, RowView
from gomoku.core.decisions import Concede, Decision, Place
from gomoku.core.errors import (
    BoardIndexError,
    GameError,
    GameIsOverError,
    InvalidStepError,
    UnboundDecisionSourceError,
)
from gomoku.core.events import Draw, Outcome, TurnRecord, Winner
from gomoku.engine import TurnEngine

__all__ = [
    "Board",
    "BoardIndexError",
    "BoardView",
    "Cell",
    "Concede",
    "Decision",
    "Draw",
    "GameError",
    "GameIsOverError",
    "InvalidStepError",
    "Marker",
    "Outcome",
    "Place",
    "RowView",
    "TurnEngine",
    "TurnRecord",
    "UnboundDecisionSourceError",
    "Winner",
]
