from __future__ import annotations

from pathlib import Path

import pytest

from gomoku.core.board import Board, Marker
from gomoku.engine import TurnEngine


@pytest.fixture()
def board() -> Board:
    return Board(10, 10)


@pytest.fixture()
def engine(board: Board) -> TurnEngine:
    """10x10 engine with X to move and no sources bound."""

    return TurnEngine(board, Marker.X)


@pytest.fixture(autouse=True)
def _clear_gomoku_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep config tests hermetic: no GOMOKU_* vars and no stray .env in cwd."""

    import os

    for key in list(os.environ):
        if key.startswith("GOMOKU_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
