from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import overload

from gomoku.core.errors import BoardIndexError


class Marker(StrEnum):
    X = "X"
    O = "O"

    def opponent(self) -> "Marker":
        return Marker.O if self is Marker.X else Marker.X


@dataclass(frozen=True, slots=True)
class Cell:
    row: int
    col: int


class RowView(Sequence[Marker | None]):
    """Read-only window over one row of a board's backing list.

    Nothing is copied: later writes to the board show up through the view.
    """

    __slots__ = ("_cells", "_start", "_length", "_index")

    def __init__(self, cells: list[Marker | None], *, index: int, length: int) -> None:
        self._cells = cells
        self._index = index
        self._start = index * length
        self._length = length

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return self._length

    @overload
    def __getitem__(self, i: int) -> Marker | None: ...

    @overload
    def __getitem__(self, i: slice) -> list[Marker | None]: ...

    def __getitem__(self, i: int | slice) -> Marker | None | list[Marker | None]:
        if isinstance(i, slice):
            return [self[j] for j in range(*i.indices(self._length))]
        if not 0 <= i < self._length:
            # BoardIndexError is an IndexError, which also ends Sequence iteration.
            raise BoardIndexError(f"Column {i} out of range for row of length {self._length}")
        return self._cells[self._start + i]

    def __repr__(self) -> str:
        return f"RowView(index={self._index}, cells={list(self)!r})"


class Board:
    """Fixed-size grid of optional markers, stored flat in row-major order."""

    def __init__(self, row_count: int, col_count: int) -> None:
        if row_count < 0 or col_count < 0:
            raise ValueError(f"Board dimensions must be non-negative (rows={row_count}, cols={col_count})")
        self._row_count = row_count
        self._col_count = col_count
        self._cells: list[Marker | None] = [None] * (row_count * col_count)

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def col_count(self) -> int:
        return self._col_count

    def is_valid(self, cell: Cell) -> bool:
        return 0 <= cell.row < self._row_count and 0 <= cell.col < self._col_count

    def _offset(self, cell: Cell) -> int:
        if not self.is_valid(cell):
            raise BoardIndexError(
                f"Board index (row={cell.row}, col={cell.col}) out of bounds "
                f"(rows={self._row_count}, cols={self._col_count})"
            )
        return cell.row * self._col_count + cell.col

    def get(self, cell: Cell) -> Marker | None:
        return self._cells[self._offset(cell)]

    def set(self, cell: Cell, marker: Marker | None) -> None:
        self._cells[self._offset(cell)] = marker

    def row(self, index: int) -> RowView:
        if not 0 <= index < self._row_count:
            raise BoardIndexError(f"Row {index} out of bounds (rows={self._row_count})")
        return RowView(self._cells, index=index, length=self._col_count)

    def rows(self) -> Iterator[RowView]:
        for index in range(self._row_count):
            yield self.row(index)

    def copy(self) -> "Board":
        clone = Board(self._row_count, self._col_count)
        clone._cells[:] = self._cells
        return clone

    def view(self) -> "BoardView":
        return BoardView(self)

    def __repr__(self) -> str:
        return f"Board(row_count={self._row_count}, col_count={self._col_count})"


class BoardView:
    """Live read-only facade over a Board.

    Handed to decision sources and presentation code so they can inspect the
    grid without being able to write to it.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def row_count(self) -> int:
        return self._board.row_count

    @property
    def col_count(self) -> int:
        return self._board.col_count

    def is_valid(self, cell: Cell) -> bool:
        return self._board.is_valid(cell)

    def get(self, cell: Cell) -> Marker | None:
        return self._board.get(cell)

    def row(self, index: int) -> RowView:
        return self._board.row(index)

    def rows(self) -> Iterator[RowView]:
        return self._board.rows()

    def empty_cells(self) -> Iterator[Cell]:
        for row in self.rows():
            for col, value in enumerate(row):
                if value is None:
                    yield Cell(row=row.index, col=col)
