from __future__ import annotations

import pytest

from gomoku.agents.console import ConsoleSource, MoveParseError, parse_move
from gomoku.core.board import Board, Marker
from gomoku.core.decisions import Concede, Place


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5,5", Place.at(5, 5)),
        (" 1 , 2 ", Place.at(1, 2)),
        ("3 4", Place.at(3, 4)),
        ("q", Concede()),
        ("QUIT", Concede()),
        ("concede", Concede()),
    ],
)
def test_parse_move(text: str, expected: object) -> None:
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "5", "a,b", "1,2,3", "-1,2"])
def test_parse_move_rejects_garbage(text: str) -> None:
    with pytest.raises(MoveParseError):
        parse_move(text)


def _scripted_input(lines: list[str]):
    it = iter(lines)

    def _input(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


def test_console_source_reprompts_until_valid() -> None:
    out: list[str] = []
    src = ConsoleSource(input_fn=_scripted_input(["nope", "10,0", "2,3"]), output_fn=out.append)

    decision = src.decide(board=Board(10, 10).view(), marker=Marker.X)

    assert decision == Place.at(2, 3)
    assert len(out) == 2
    assert "row,col" in out[0]
    assert "off the board" in out[1]


def test_console_source_concede_and_eof() -> None:
    view = Board(3, 3).view()
    assert ConsoleSource(input_fn=_scripted_input(["q"]), output_fn=lambda s: None).decide(
        board=view, marker=Marker.O
    ) == Concede()
    assert ConsoleSource(input_fn=_scripted_input([]), output_fn=lambda s: None).decide(
        board=view, marker=Marker.O
    ) == Concede()


def test_console_prompt_mentions_marker_and_range() -> None:
    prompts: list[str] = []

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        return "0,0"

    ConsoleSource(input_fn=_input, output_fn=lambda s: None).decide(board=Board(4, 6).view(), marker=Marker.O)

    assert "(O)" in prompts[0]
    assert "0-3,0-5" in prompts[0]
