from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from gomoku.agents.base import DecisionSource
from gomoku.core.board import Marker
from gomoku.core.errors import InvalidStepError
from gomoku.core.events import TurnRecord
from gomoku.engine import TurnEngine

logger = logging.getLogger(__name__)


def play(
    engine: TurnEngine,
    *,
    sources: Mapping[Marker, DecisionSource] | None = None,
    max_attempts: int | None = None,
    on_turn: Callable[[TurnRecord], None] | None = None,
    on_rejected: Callable[[InvalidStepError], None] | None = None,
) -> list[TurnRecord]:
    """Advance `engine` until the game is over.

    A rejected step does not consume the turn: the same marker is asked
    again on the next attempt. `max_attempts` caps the number of
    `advance_turn` calls (accepted and rejected) so a source that keeps
    repeating an occupied cell cannot spin forever.

    Returns the records produced by this call, in order.
    """

    records: list[TurnRecord] = []
    attempts = 0

    while not engine.is_over():
        if max_attempts is not None and attempts >= max_attempts:
            logger.info("Stopping after %d attempts; game still in progress", attempts)
            break
        attempts += 1

        try:
            record = engine.advance_turn(sources)
        except InvalidStepError as e:
            logger.info("Step rejected, %s moves again: %s", e.marker.value, e)
            if on_rejected is not None:
                on_rejected(e)
            continue

        records.append(record)
        if on_turn is not None:
            on_turn(record)

    return records
