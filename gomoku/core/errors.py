from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gomoku.core.board import Cell, Marker


class GameError(Exception):
    """Base class for recoverable gameplay failures.

    The engine state is unchanged whenever one of these is raised.
    """


class GameIsOverError(GameError):
    def __init__(self) -> None:
        super().__init__("Game is over")


class InvalidStepError(GameError):
    def __init__(self, *, cell: "Cell", marker: "Marker") -> None:
        self.cell = cell
        self.marker = marker
        super().__init__(f"Invalid step: cell (row={cell.row}, col={cell.col}) is already occupied")


class BoardIndexError(IndexError):
    """Out-of-range board access. A caller defect, not a gameplay condition."""


class UnboundDecisionSourceError(RuntimeError):
    """No decision source is bound for the marker about to act."""

    def __init__(self, marker: "Marker") -> None:
        self.marker = marker
        super().__init__(f'Player "{marker.value}" undefined')
