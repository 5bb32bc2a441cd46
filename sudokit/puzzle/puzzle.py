"""The grid of cells and its row/column/block topology."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Sequence, Tuple

from sudokit.common.constants import BLANK_SYMBOL, BLANK_VALUE
from sudokit.common.exceptions import (
    CellCountMismatchError,
    PuzzleError,
    ValueOutOfRangeError,
)
from sudokit.puzzle.cell import Cell

Region = List[Cell]


@dataclass(frozen=True)
class Topology:
    """Region membership as index lists into the flat, row-major cell list."""

    rows: Tuple[Tuple[int, ...], ...]
    columns: Tuple[Tuple[int, ...], ...]
    blocks: Tuple[Tuple[int, ...], ...]
    peers: Tuple[Tuple[int, ...], ...]  # per cell, every other cell sharing a region


def block_index(row: int, column: int, dimension: int) -> int:
    return (row // dimension) * dimension + (column // dimension)


@lru_cache(maxsize=None)
def build_topology(dimension: int) -> Topology:
    """Topology of an (N*N)x(N*N) grid; shared by every puzzle of that dimension."""
    size = dimension * dimension
    rows = tuple(tuple(r * size + c for c in range(size)) for r in range(size))
    columns = tuple(tuple(r * size + c for r in range(size)) for c in range(size))

    blocks: List[List[int]] = [[] for _ in range(size)]
    for r in range(size):
        for c in range(size):
            blocks[block_index(r, c, dimension)].append(r * size + c)

    peers = []
    for index in range(size * size):
        r, c = divmod(index, size)
        members = set(rows[r]) | set(columns[c]) | set(blocks[block_index(r, c, dimension)])
        members.discard(index)
        peers.append(tuple(sorted(members)))

    return Topology(
        rows=rows,
        columns=columns,
        blocks=tuple(tuple(block) for block in blocks),
        peers=tuple(peers),
    )


class Puzzle:
    """
    A sudoku puzzle of block width `dimension` (grid side `dimension ** 2`).

    The puzzle owns its cells in a single row-major list. Rows, columns and
    blocks are views over that list built from a shared `Topology`.
    """

    def __init__(self, dimension: int, values: Sequence[int]):
        """
        Args:
            dimension (`int`): Block width N; the grid is N*N cells wide.
            values (`Sequence[int]`): N**4 givens in row-major order; 0 leaves
                a cell unconstrained.

        Raises:
            `PuzzleError`: `dimension` is not positive.
            `CellCountMismatchError`: Wrong number of values.
            `ValueOutOfRangeError`: A value outside [0, N*N].
        """
        if not isinstance(dimension, int) or dimension < 1:
            raise PuzzleError(f"Invalid puzzle dimension: {dimension}")
        self.dimension = dimension
        self.size = dimension * dimension
        self.cell_min = 1
        self.cell_max = self.size
        self._topology = build_topology(dimension)

        values = list(values)
        cell_count = self.size * self.size
        if len(values) != cell_count:
            raise CellCountMismatchError(len(values), cell_count)
        for value in values:
            if not isinstance(value, int) or not BLANK_VALUE <= value <= self.cell_max:
                raise ValueOutOfRangeError(value, self.cell_max)

        self._cells: List[Cell] = []
        for index, value in enumerate(values):
            row, column = divmod(index, self.size)
            cell = Cell(
                min_value=self.cell_min,
                max_value=self.cell_max,
                row=row,
                column=column,
                block=block_index(row, column, dimension),
            )
            if value != BLANK_VALUE:
                cell.restrict_to(value)
            self._cells.append(cell)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Puzzle":
        """Build a puzzle from a square board given as a list of rows."""
        dimension = math.isqrt(len(rows))
        if dimension == 0 or dimension * dimension != len(rows):
            raise PuzzleError(f"Invalid board size: {len(rows)}. Only perfect squares are supported.")
        return cls(dimension, [value for row in rows for value in row])

    def clone(self) -> "Puzzle":
        """Deep copy: same candidates, independent cells."""
        other = Puzzle.__new__(Puzzle)
        other.dimension = self.dimension
        other.size = self.size
        other.cell_min = self.cell_min
        other.cell_max = self.cell_max
        other._topology = self._topology
        other._cells = [cell.copy() for cell in self._cells]
        return other

    # regions

    @property
    def cells(self) -> List[Cell]:
        return list(self._cells)

    def cell(self, row: int, column: int) -> Cell:
        if not (0 <= row < self.size and 0 <= column < self.size):
            raise IndexError(f"Cell ({row}, {column}) is outside a {self.size}x{self.size} grid")
        return self._cells[row * self.size + column]

    def _view(self, regions: Tuple[Tuple[int, ...], ...]) -> List[Region]:
        return [[self._cells[index] for index in region] for region in regions]

    @property
    def rows(self) -> List[Region]:
        return self._view(self._topology.rows)

    @property
    def columns(self) -> List[Region]:
        return self._view(self._topology.columns)

    @property
    def blocks(self) -> List[Region]:
        return self._view(self._topology.blocks)

    def regions(self) -> Iterator[Region]:
        """Every row, then every column, then every block."""
        for regions in (self._topology.rows, self._topology.columns, self._topology.blocks):
            for region in regions:
                yield [self._cells[index] for index in region]

    def peers_of(self, cell: Cell) -> List[Cell]:
        peers = self._topology.peers[cell.row * self.size + cell.column]
        return [self._cells[index] for index in peers]

    def all_allowed_values(self) -> List[int]:
        return list(range(self.cell_min, self.cell_max + 1))

    # whole-grid queries

    def refresh(self) -> bool:
        """Eliminate resolved peer values from every cell until nothing changes.

        Returns:
            `bool`: Whether any cell changed during the call.
        """
        changed = False
        while True:
            pass_changed = False
            for cell in self._cells:
                if cell.eliminate_from_peers(self):
                    pass_changed = True
            if not pass_changed:
                return changed
            changed = True

    def is_valid(self) -> bool:
        """No region holds two cells solved to the same value."""
        for regions in (self._topology.rows, self._topology.columns, self._topology.blocks):
            for region in regions:
                seen = 0
                for index in region:
                    cell = self._cells[index]
                    if not cell.is_solved():
                        continue
                    if seen & cell.mask:
                        return False
                    seen |= cell.mask
        return True

    def is_solved(self) -> bool:
        return all(cell.is_solved() for cell in self._cells)

    def values(self) -> List[int]:
        """Row-major resolved values, 0 for unsolved cells."""
        return [cell.resolved_value() if cell.is_solved() else BLANK_VALUE for cell in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return self.dimension == other.dimension and all(
            mine.mask == theirs.mask for mine, theirs in zip(self._cells, other._cells)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        width = len(str(self.cell_max))
        lines = []
        values = self.values()
        for r in range(self.size):
            row = values[r * self.size : (r + 1) * self.size]
            lines.append(
                " ".join(
                    (str(v) if v != BLANK_VALUE else BLANK_SYMBOL).rjust(width) for v in row
                )
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Puzzle(dimension={self.dimension}, solved={self.is_solved()})"
