from __future__ import annotations

import re
from collections.abc import Callable

from gomoku.core.board import BoardView, Cell, Marker
from gomoku.core.decisions import Concede, Decision, Place

CONCEDE_WORDS = frozenset({"q", "quit", "concede"})

_MOVE_RE = re.compile(r"^\s*(\d+)\s*[, ]\s*(\d+)\s*$")


class MoveParseError(ValueError):
    pass


def parse_move(text: str) -> Decision:
    """Parse console input into a decision.

    Accepts `row,col` (or `row col`) and any of the concede words.
    Bounds are not checked here.
    """

    cleaned = text.strip().casefold()
    if cleaned in CONCEDE_WORDS:
        return Concede()
    m = _MOVE_RE.match(cleaned)
    if m is None:
        raise MoveParseError("Use row,col (e.g. 0,0 or 3,4), or q to concede.")
    return Place(cell=Cell(row=int(m.group(1)), col=int(m.group(2))))


class ConsoleSource:
    """Human player typing moves on a console.

    Keeps prompting until the input parses and names a cell on the board.
    Occupancy is left to the engine, which rejects the step and asks again.
    End of input counts as conceding.
    """

    def __init__(
        self,
        *,
        name: str = "human",
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.name = name
        self._input = input_fn if input_fn is not None else input
        self._output = output_fn if output_fn is not None else print

    def decide(self, *, board: BoardView, marker: Marker) -> Decision:
        prompt = (
            f"Your turn ({marker.value}). Enter move row,col "
            f"(0-{board.row_count - 1},0-{board.col_count - 1}) or q to concede: "
        )
        while True:
            try:
                text = self._input(prompt)
            except EOFError:
                return Concede()

            try:
                decision = parse_move(text)
            except MoveParseError as e:
                self._output(f"!! {e}")
                continue

            if isinstance(decision, Place) and not board.is_valid(decision.cell):
                self._output(
                    f"!! Cell ({decision.cell.row},{decision.cell.col}) is off the board "
                    f"({board.row_count}x{board.col_count})."
                )
                continue
            return decision
