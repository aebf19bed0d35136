from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from gomoku.core.board import BoardView, Marker
from gomoku.core.decisions import Concede, Decision


@dataclass(frozen=True, slots=True)
class FixedSource:
    """Always answers with the same decision."""

    decision: Decision
    name: str = "fixed"

    def decide(self, *, board: BoardView, marker: Marker) -> Decision:
        return self.decision


@dataclass(slots=True)
class ScriptedSource:
    """Plays a prepared list of decisions in order, then concedes.

    `calls` counts how many times the source was consulted, including
    consultations whose decision the engine rejected.
    """

    decisions: list[Decision] = field(default_factory=list)
    name: str = "scripted"
    calls: int = 0

    def __post_init__(self) -> None:
        self.decisions = list(self.decisions)

    @classmethod
    def of(cls, decisions: Iterable[Decision], *, name: str = "scripted") -> "ScriptedSource":
        return cls(decisions=list(decisions), name=name)

    @property
    def remaining(self) -> int:
        return len(self.decisions)

    def decide(self, *, board: BoardView, marker: Marker) -> Decision:
        self.calls += 1
        if not self.decisions:
            return Concede()
        return self.decisions.pop(0)
