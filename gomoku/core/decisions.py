from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from gomoku.core.board import Cell


@dataclass(frozen=True, slots=True)
class Place:
    cell: Cell

    @staticmethod
    def at(row: int, col: int) -> "Place":
        return Place(cell=Cell(row=row, col=col))


@dataclass(frozen=True, slots=True)
class Concede:
    pass


Decision: TypeAlias = Place | Concede
