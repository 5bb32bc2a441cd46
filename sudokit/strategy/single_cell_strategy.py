from typing import List

from sudokit.puzzle import Cell, Puzzle
from sudokit.puzzle.cell import iter_values
from sudokit.strategy.strategy import Strategy


class SingleCellStrategy(Strategy):
    """
    Hidden singles: when only one cell of a row, column or block still admits
    a value, that cell must take it.
    """

    name = "single_cell"
    description = "Single Cell Strategy"

    def advance(self, puzzle: Puzzle) -> bool:
        changed = False
        for region in puzzle.regions():
            if self._advance_region(region):
                changed = True
        return changed

    def _advance_region(self, region: List[Cell]) -> bool:
        seen_once = 0
        seen_more = 0
        for cell in region:
            seen_more |= seen_once & cell.mask
            seen_once |= cell.mask
        singles = seen_once & ~seen_more

        changed = False
        for value in iter_values(singles):
            holder = next((cell for cell in region if value in cell), None)
            # an earlier single may already have pinned the same cell
            if holder is None or holder.is_solved():
                continue
            holder.restrict_to(value)
            changed = True
        return changed
