from typing import List

from sudokit.puzzle import Cell, Puzzle
from sudokit.puzzle.cell import iter_values
from sudokit.strategy.strategy import Strategy


class SharedSubgroupStrategy(Strategy):
    """
    Locked candidates. For every block and every row or column crossing it,
    a value that the line can only hold inside the block must sit in that
    segment, so it is removed from the rest of the block.
    """

    name = "shared_subgroup"
    description = "Shared Subgroup Strategy"

    def advance(self, puzzle: Puzzle) -> bool:
        changed = False
        rows = puzzle.rows
        columns = puzzle.columns
        for block_index, block in enumerate(puzzle.blocks):
            for row in sorted({cell.row for cell in block}):
                if self._advance_line(block, block_index, rows[row], "row", row):
                    changed = True
            for column in sorted({cell.column for cell in block}):
                if self._advance_line(block, block_index, columns[column], "column", column):
                    changed = True
        return changed

    def _advance_line(
        self,
        block: List[Cell],
        block_index: int,
        line: List[Cell],
        axis: str,
        line_index: int,
    ) -> bool:
        inside = 0
        outside = 0
        for cell in line:
            if cell.block == block_index:
                inside |= cell.mask
            else:
                outside |= cell.mask
        required = inside & ~outside
        if not required:
            return False

        changed = False
        for cell in block:
            if getattr(cell, axis) == line_index:
                continue
            for value in iter_values(cell.mask & required):
                if cell.is_solved():
                    break
                cell.remove(value)
                changed = True
        return changed
