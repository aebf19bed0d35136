from __future__ import annotations

import logging

import pytest

from gomoku.agents.random_source import RandomSource
from gomoku.agents.scripted import FixedSource, ScriptedSource
from gomoku.core.board import Board, Marker
from gomoku.core.decisions import Concede, Place
from gomoku.core.errors import InvalidStepError
from gomoku.core.events import TurnRecord, Winner
from gomoku.engine import TurnEngine
from gomoku.game_loop import play


def test_play_runs_until_concession_and_retries_rejected_steps() -> None:
    engine = TurnEngine(
        Board(5, 5),
        Marker.X,
        sources={
            Marker.X: ScriptedSource.of([Place.at(2, 2), Place.at(0, 0)]),
            Marker.O: ScriptedSource.of([Place.at(2, 2), Place.at(1, 1), Concede()]),
        },
    )
    rejected: list[InvalidStepError] = []
    seen: list[TurnRecord] = []

    records = play(engine, on_turn=seen.append, on_rejected=rejected.append)

    assert engine.is_over()
    assert engine.outcome == Winner(Marker.X)
    assert records == seen
    assert [(r.figure, r.action) for r in records] == [
        (Marker.X, Place.at(2, 2)),
        (Marker.O, Place.at(1, 1)),
        (Marker.X, Place.at(0, 0)),
        (Marker.O, Concede()),
    ]
    assert len(rejected) == 1
    assert rejected[0].marker is Marker.O


def test_play_stops_after_max_attempts() -> None:
    engine = TurnEngine(Board(3, 3), Marker.X)
    engine.advance_turn({Marker.X: FixedSource(Place.at(0, 0))})

    records = play(
        engine,
        sources={Marker.O: FixedSource(Place.at(0, 0)), Marker.X: FixedSource(Place.at(1, 1))},
        max_attempts=5,
    )

    assert records == []
    assert not engine.is_over()
    assert engine.current_marker is Marker.O


def test_random_players_fill_the_board_then_concede() -> None:
    engine = TurnEngine(
        Board(3, 3),
        Marker.X,
        sources={Marker.X: RandomSource(seed=3), Marker.O: RandomSource(seed=4)},
    )

    records = play(engine)

    assert len(records) == 10
    assert all(isinstance(r.action, Place) for r in records[:9])
    assert records[-1].action == Concede()
    # X moved on turns 0, 2, ..., 8 so O is left facing a full board.
    assert records[-1].figure is Marker.O
    assert engine.outcome == Winner(Marker.X)
    assert list(engine.board.empty_cells()) == []


def test_play_on_finished_game_returns_nothing() -> None:
    engine = TurnEngine(Board(3, 3), Marker.X)
    engine.advance_turn({Marker.X: FixedSource(Concede())})

    assert play(engine) == []


def test_rejected_steps_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    engine = TurnEngine(
        Board(3, 3),
        Marker.X,
        sources={
            Marker.X: ScriptedSource.of([Place.at(0, 0)]),
            Marker.O: ScriptedSource.of([Place.at(0, 0), Concede()]),
        },
    )

    with caplog.at_level(logging.INFO, logger="gomoku.game_loop"):
        play(engine)

    rejected = [r for r in caplog.records if r.name == "gomoku.game_loop" and "rejected" in r.getMessage()]
    assert len(rejected) == 1
    assert "O moves again" in rejected[0].getMessage()
