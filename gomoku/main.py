from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from gomoku.agents.base import DecisionSource
from gomoku.agents.console import ConsoleSource
from gomoku.agents.random_source import RandomSource
from gomoku.config import GameSettings, load_settings
from gomoku.core.board import Board, Marker
from gomoku.core.errors import InvalidStepError
from gomoku.core.events import Draw, TurnRecord, Winner
from gomoku.engine import TurnEngine
from gomoku.game_loop import play
from gomoku.render import describe_record, render_board

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gomoku", description="Play a two-player grid game on the console.")
    parser.add_argument("--rows", type=int, help="number of board rows")
    parser.add_argument("--cols", type=int, help="number of board columns")
    parser.add_argument("--first", choices=[m.value for m in Marker], help="marker that moves first")
    parser.add_argument("--opponent", choices=["random", "human"], help="who plays O")
    parser.add_argument("--seed", type=int, help="seed for the random opponent")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, ...)")
    return parser


def resolve_settings(args: argparse.Namespace, base: GameSettings) -> GameSettings:
    overrides = {
        "rows": args.rows,
        "cols": args.cols,
        "first_marker": args.first,
        "opponent": args.opponent,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    data = base.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return GameSettings.model_validate(data)


def build_sources(
    settings: GameSettings,
    *,
    input_fn: Callable[[str], str] | None = None,
    output_fn: Callable[[str], None] = print,
) -> dict[Marker, DecisionSource]:
    sources: dict[Marker, DecisionSource] = {
        Marker.X: ConsoleSource(name="player-x", input_fn=input_fn, output_fn=output_fn),
    }
    if settings.opponent == "human":
        sources[Marker.O] = ConsoleSource(name="player-o", input_fn=input_fn, output_fn=output_fn)
    else:
        sources[Marker.O] = RandomSource(seed=settings.seed, name="random-o")
    return sources


def run_console_game(
    settings: GameSettings,
    *,
    input_fn: Callable[[str], str] | None = None,
    output_fn: Callable[[str], None] = print,
) -> TurnEngine:
    engine = TurnEngine(
        Board(settings.rows, settings.cols),
        settings.first_marker,
        sources=build_sources(settings, input_fn=input_fn, output_fn=output_fn),
    )

    def _on_turn(record: TurnRecord) -> None:
        output_fn(describe_record(record))
        output_fn(render_board(engine.board))

    def _on_rejected(err: InvalidStepError) -> None:
        output_fn(f"!! Cell ({err.cell.row},{err.cell.col}) already taken. Try again.")

    output_fn(render_board(engine.board))
    play(engine, on_turn=_on_turn, on_rejected=_on_rejected)

    output_fn("--- Game Over ---")
    if isinstance(engine.outcome, Winner):
        output_fn(f"{engine.outcome.marker.value} wins!")
    elif isinstance(engine.outcome, Draw):
        output_fn("It's a draw!")
    return engine


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args, load_settings())
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(level=settings.log_level)
    logger.debug("Starting game with %s", settings.model_dump())

    run_console_game(settings)
    return 0
