from __future__ import annotations

import logging
from collections.abc import Mapping

from gomoku.agents.base import DecisionSource
from gomoku.core.board import Board, BoardView, Marker
from gomoku.core.decisions import Concede, Decision, Place
from gomoku.core.errors import GameIsOverError, InvalidStepError, UnboundDecisionSourceError
from gomoku.core.events import Outcome, TurnRecord, Winner
from gomoku.fsm import GameFSM, GamePhase

logger = logging.getLogger(__name__)


class TurnEngine:
    """Owns the board and sequences turns between two decision sources.

    The board passed in is copied, so later writes through the caller's
    Board never reach the game.

    Sources can be bound up front (`sources=` / `set_source`) or handed to
    each `advance_turn` call. A per-call source wins over a bound one.
    """

    def __init__(
        self,
        board: Board,
        first_marker: Marker,
        *,
        sources: Mapping[Marker, DecisionSource] | None = None,
    ) -> None:
        self._board = board.copy()
        self._view = self._board.view()
        self._current = first_marker
        self._outcome: Outcome | None = None
        self._fsm = GameFSM()
        self._sources: dict[Marker, DecisionSource] = dict(sources or {})
        self._history: list[TurnRecord] = []

    @property
    def board(self) -> BoardView:
        return self._view

    @property
    def current_marker(self) -> Marker:
        return self._current

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    @property
    def phase(self) -> GamePhase:
        return self._fsm.phase

    @property
    def history(self) -> tuple[TurnRecord, ...]:
        return tuple(self._history)

    def is_over(self) -> bool:
        return self._fsm.is_over

    def set_source(self, marker: Marker, source: DecisionSource) -> None:
        self._sources[marker] = source

    def _source_for(self, marker: Marker, sources: Mapping[Marker, DecisionSource] | None) -> DecisionSource:
        source = None
        if sources is not None:
            source = sources.get(marker)
        if source is None:
            source = self._sources.get(marker)
        if source is None:
            raise UnboundDecisionSourceError(marker)
        return source

    def advance_turn(self, sources: Mapping[Marker, DecisionSource] | None = None) -> TurnRecord:
        """Play one turn for the current marker.

        Raises GameIsOverError / InvalidStepError without touching any state.
        UnboundDecisionSourceError and BoardIndexError are caller defects and
        are never caught here.
        """

        if self._fsm.is_over:
            raise GameIsOverError()

        marker = self._current
        source = self._source_for(marker, sources)
        decision: Decision = source.decide(board=self._view, marker=marker)

        if isinstance(decision, Concede):
            self._outcome = Winner(marker.opponent())
            self._fsm.finish()
        elif isinstance(decision, Place):
            if self._board.get(decision.cell) is not None:
                logger.info(
                    "Rejected step by %s (%s) at row=%d col=%d: cell occupied",
                    marker.value,
                    getattr(source, "name", type(source).__name__),
                    decision.cell.row,
                    decision.cell.col,
                )
                raise InvalidStepError(cell=decision.cell, marker=marker)
            self._board.set(decision.cell, marker)
        else:
            raise TypeError(f"Decision source returned {decision!r}, expected Place or Concede")

        return self._turn_over(decision)

    def _turn_over(self, decision: Decision) -> TurnRecord:
        record = TurnRecord(
            figure=self._current,
            action=decision,
            outcome=self._outcome,
            turn_id=len(self._history),
        )
        self._history.append(record)
        if self._outcome is None:
            self._current = self._current.opponent()
        logger.debug("Turn applied: %s", record.to_payload())
        return record
