from __future__ import annotations

import random

from gomoku.core.board import BoardView, Marker
from gomoku.core.decisions import Concede, Decision, Place


class RandomSource:
    """Programmed opponent that plays a uniformly random free cell.

    Concedes when the board has no free cell left. Pass `seed` for
    reproducible games.
    """

    def __init__(self, *, seed: int | None = None, name: str = "random") -> None:
        self.name = name
        self._rng = random.Random(seed)

    def decide(self, *, board: BoardView, marker: Marker) -> Decision:
        free = list(board.empty_cells())
        if not free:
            return Concede()
        return Place(cell=self._rng.choice(free))
