from sudokit.puzzle import Puzzle
from sudokit.strategy.strategy import Strategy


class BasicStrategy(Strategy):
    """Remove the values of solved peers from every unsolved cell."""

    name = "basic"
    description = "Basic Strategy"

    def advance(self, puzzle: Puzzle) -> bool:
        changed = False
        for cell in puzzle.cells:
            if cell.is_solved():
                continue
            if cell.eliminate_from_peers(puzzle):
                changed = True
        return changed
