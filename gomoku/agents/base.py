from __future__ import annotations

from typing import Protocol

from gomoku.core.board import BoardView, Marker
from gomoku.core.decisions import Decision


class DecisionSource(Protocol):
    name: str

    def decide(self, *, board: BoardView, marker: Marker) -> Decision:  # pragma: no cover
        ...
