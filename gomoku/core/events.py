from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from gomoku.core.board import Marker
from gomoku.core.decisions import Concede, Decision, Place


@dataclass(frozen=True, slots=True)
class Winner:
    marker: Marker


@dataclass(frozen=True, slots=True)
class Draw:
    pass


Outcome: TypeAlias = Winner | Draw


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """What happened on one completed turn.

    - `figure`: the marker that acted.
    - `action`: the decision that was applied.
    - `outcome`: the game result if the game ended on this turn, else None.
    - `turn_id`: zero-based count of successful turns before this one.
    """

    figure: Marker
    action: Decision
    outcome: Outcome | None = None
    turn_id: int = 0

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"turn_id": self.turn_id, "figure": self.figure.value}
        if isinstance(self.action, Place):
            payload["action"] = "place"
            payload["row"] = self.action.cell.row
            payload["col"] = self.action.cell.col
        elif isinstance(self.action, Concede):
            payload["action"] = "concede"
        if isinstance(self.outcome, Winner):
            payload["outcome"] = "winner"
            payload["winner"] = self.outcome.marker.value
        elif isinstance(self.outcome, Draw):
            payload["outcome"] = "draw"
        return payload
