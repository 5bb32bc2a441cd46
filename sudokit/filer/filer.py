"""Reads puzzles from, and writes them to, the plain-text puzzle layout.

The layout has three sections::

    9                      <- grid side N*N
    1 2 3 4 5 6 7 8 9      <- symbol table, one symbol per value 1..N*N
    5 3 - - 7 - - - -      <- N*N rows of N*N symbols, `-` for a blank
    ...
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

from sudokit.common.constants import BLANK_SYMBOL, BLANK_VALUE
from sudokit.common.exceptions import PuzzleFormatError
from sudokit.puzzle import Puzzle


class SymbolTable:
    """Bidirectional mapping between single-character symbols and cell values."""

    def __init__(self, symbols: Sequence[str]):
        self.symbols: List[str] = list(symbols)
        self._values: Dict[str, int] = {}
        for value, symbol in enumerate(self.symbols, start=1):
            if len(symbol) != 1 or symbol.isspace():
                raise PuzzleFormatError(f"Symbol {symbol!r} is not a single character")
            if symbol == BLANK_SYMBOL:
                raise PuzzleFormatError(f"Symbol {BLANK_SYMBOL!r} is reserved for blank cells")
            if symbol in self._values:
                raise PuzzleFormatError(f"Symbol {symbol!r} is listed twice")
            self._values[symbol] = value

    @classmethod
    def default(cls, size: int) -> "SymbolTable":
        """Digits 1-9, then A, B, ... for 10 and up."""
        if size > 9 + 26:
            raise PuzzleFormatError(f"No default symbols for a grid of side {size}")
        return cls([str(v) if v <= 9 else chr(ord("A") + v - 10) for v in range(1, size + 1)])

    def to_value(self, symbol: str) -> int:
        if symbol == BLANK_SYMBOL:
            return BLANK_VALUE
        try:
            return self._values[symbol]
        except KeyError:
            raise PuzzleFormatError(f"Unknown symbol {symbol!r}")

    def to_symbol(self, value: int) -> str:
        if value == BLANK_VALUE:
            return BLANK_SYMBOL
        if not 1 <= value <= len(self.symbols):
            raise PuzzleFormatError(f"No symbol for value {value}")
        return self.symbols[value - 1]

    def __len__(self) -> int:
        return len(self.symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolTable):
            return NotImplemented
        return self.symbols == other.symbols

    __hash__ = None  # type: ignore[assignment]


class SudokuFiler:
    """A puzzle as read from (or destined for) the text layout."""

    def __init__(self, dimension: int, symbols: SymbolTable, values: Sequence[int]):
        self.dimension = dimension
        self.size = dimension * dimension
        if len(symbols) != self.size:
            raise PuzzleFormatError(
                f"Symbol table has {len(symbols)} symbols, expected {self.size}"
            )
        self.symbols = symbols
        self.values = list(values)

    @classmethod
    def from_file(cls, filepath: str) -> "SudokuFiler":
        with open(filepath, "r", encoding="utf-8") as f:
            return cls.from_text(f.read())

    @classmethod
    def from_text(cls, text: str) -> "SudokuFiler":
        """Parse the three-section layout.

        Raises:
            `PuzzleFormatError`: The text does not follow the layout.
        """
        lines = [line.strip() for line in text.splitlines()]
        while lines and not lines[-1]:
            lines.pop()
        if len(lines) < 2:
            raise PuzzleFormatError("Missing size or symbol line")

        try:
            size = int(lines[0])
        except ValueError:
            raise PuzzleFormatError(f"Invalid size line: {lines[0]!r}")
        dimension = math.isqrt(size) if size > 0 else 0
        if dimension == 0 or dimension * dimension != size:
            raise PuzzleFormatError(f"Grid side {size} is not a positive perfect square")

        symbols = SymbolTable(lines[1].split())

        rows = [line for line in lines[2:] if line]
        if len(rows) != size:
            raise PuzzleFormatError(f"Expected {size} grid rows, found {len(rows)}")
        values: List[int] = []
        for row_number, row in enumerate(rows, start=1):
            tokens = row.split()
            if len(tokens) != size:
                raise PuzzleFormatError(
                    f"Row {row_number} has {len(tokens)} symbols, expected {size}"
                )
            values.extend(symbols.to_value(token) for token in tokens)
        return cls(dimension, symbols, values)

    @classmethod
    def for_puzzle(cls, puzzle: Puzzle, symbols: Optional[SymbolTable] = None) -> "SudokuFiler":
        """Wrap a puzzle built in code, using default symbols unless given."""
        return cls(puzzle.dimension, symbols or SymbolTable.default(puzzle.size), puzzle.values())

    def create_puzzle(self) -> Puzzle:
        return Puzzle(self.dimension, self.values)

    def to_lines(self, puzzle: Optional[Puzzle] = None) -> List[str]:
        """Render `puzzle`, or the values that were read, in the text layout."""
        values = puzzle.values() if puzzle is not None else self.values
        lines = [str(self.size), " ".join(self.symbols.symbols)]
        for r in range(self.size):
            row = values[r * self.size : (r + 1) * self.size]
            lines.append(" ".join(self.symbols.to_symbol(v) for v in row))
        return lines

    def to_text(self, puzzle: Optional[Puzzle] = None) -> str:
        return "\n".join(self.to_lines(puzzle)) + "\n"
