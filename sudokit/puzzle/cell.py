"""A single square of a sudoku grid and its candidate domain."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, FrozenSet, Iterable, Iterator, Optional

from sudokit.common.exceptions import (
    DuplicateValueError,
    EmptyDomainError,
    OutOfRangeError,
    UnresolvedCellError,
    ValueNotPresentError,
    WouldEmptyDomainError,
)

if TYPE_CHECKING:
    from sudokit.puzzle.puzzle import Puzzle


def iter_values(mask: int) -> Iterator[int]:
    """Yield the values whose bits are set in `mask`, smallest first."""
    while mask:
        lowest = mask & -mask
        yield lowest.bit_length() - 1
        mask ^= lowest


def range_mask(min_value: int, max_value: int) -> int:
    """Bits min_value..max_value set."""
    return ((1 << (max_value + 1)) - 1) ^ ((1 << min_value) - 1)


class Cell:
    """
    The values a cell could still take, drawn from [min_value, max_value].

    The domain is kept as a bitmask (bit v set <=> v is a candidate) and is
    never empty. A cell with a single candidate is solved.

    Mutation policy:
        * `add` of a value that is already a candidate raises.
        * `remove` of a value that is not a candidate is a no-op, but any
          `remove` on a solved cell raises.
        * `restrict_to` a value that is not a candidate raises.

    `row`, `column` and `block` are indices of the regions the cell belongs
    to inside its owning `Puzzle`; the puzzle holds the region topology.
    """

    def __init__(
        self,
        values: Optional[Iterable[int]] = None,
        min_value: int = 1,
        max_value: int = 9,
        row: int = 0,
        column: int = 0,
        block: int = 0,
    ):
        if min_value < 0 or min_value > max_value:
            raise ValueError(f"Invalid cell range [{min_value}, {max_value}]")
        self.min_value = min_value
        self.max_value = max_value
        self.row = row
        self.column = column
        self.block = block

        if values is None:
            self._mask = range_mask(min_value, max_value)
            return

        mask = 0
        for value in values:
            self._check_range(value)
            bit = 1 << value
            if mask & bit:
                raise DuplicateValueError(value)
            mask |= bit
        if not mask:
            raise EmptyDomainError("Given list of values was empty")
        self._mask = mask

    def _check_range(self, value: int) -> None:
        if not isinstance(value, int) or not self.min_value <= value <= self.max_value:
            raise OutOfRangeError(value, self.min_value, self.max_value)

    @property
    def mask(self) -> int:
        return self._mask

    def candidates(self) -> FrozenSet[int]:
        return frozenset(iter_values(self._mask))

    def size(self) -> int:
        return self._mask.bit_count()

    def is_solved(self) -> bool:
        return self.size() == 1

    def resolved_value(self) -> int:
        if not self.is_solved():
            raise UnresolvedCellError(
                f"Cell ({self.row}, {self.column}) has {self.size()} candidates"
            )
        return self._mask.bit_length() - 1

    def add(self, value: int) -> None:
        self._check_range(value)
        bit = 1 << value
        if self._mask & bit:
            raise DuplicateValueError(value)
        self._mask |= bit

    def remove(self, value: int) -> None:
        if self.is_solved():
            raise WouldEmptyDomainError(value)
        self._check_range(value)
        self._mask &= ~(1 << value)

    def restrict_to(self, value: int) -> None:
        self._check_range(value)
        bit = 1 << value
        if not self._mask & bit:
            raise ValueNotPresentError(value)
        self._mask = bit

    def eliminate_from_peers(self, puzzle: "Puzzle") -> bool:
        """Drop the values already resolved elsewhere in this cell's regions.

        If the peers claim every candidate, the smallest one is kept so the
        domain stays non-empty; the resulting duplicate makes the puzzle
        invalid.

        Returns:
            `bool`: Whether any candidate was removed.
        """
        if self.is_solved():
            return False

        claimed = 0
        for peer in puzzle.peers_of(self):
            if peer.is_solved():
                claimed |= peer.mask

        remaining = self._mask & ~claimed
        if remaining == self._mask:
            return False
        if not remaining:
            remaining = self._mask & -self._mask
        self._mask = remaining
        return True

    def copy(self) -> "Cell":
        return copy.copy(self)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[int]:
        return iter_values(self._mask)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or value < 0:
            return False
        return bool(self._mask >> value & 1)

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, column={self.column}, candidates={list(self)})"
