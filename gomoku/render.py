from __future__ import annotations

from gomoku.core.board import BoardView
from gomoku.core.decisions import Concede, Place
from gomoku.core.events import Draw, TurnRecord, Winner

EMPTY_SYMBOL = "."


def render_board(board: BoardView) -> str:
    """Text grid with column indices on top and row indices on the left."""

    width = max(len(str(max(board.row_count, board.col_count) - 1)), 1) + 1
    header = " " * width + "".join(f"{c:>{width}}" for c in range(board.col_count))
    lines = [header]
    for row in board.rows():
        cells = "".join(f"{(m.value if m is not None else EMPTY_SYMBOL):>{width}}" for m in row)
        lines.append(f"{row.index:>{width}}{cells}")
    return "\n".join(lines)


def describe_record(record: TurnRecord) -> str:
    if isinstance(record.action, Place):
        text = f"{record.figure.value} placed at ({record.action.cell.row},{record.action.cell.col})"
    elif isinstance(record.action, Concede):
        text = f"{record.figure.value} conceded"
    else:
        text = f"{record.figure.value} did {record.action!r}"

    if isinstance(record.outcome, Winner):
        text += f"; {record.outcome.marker.value} wins"
    elif isinstance(record.outcome, Draw):
        text += "; draw"
    return text
