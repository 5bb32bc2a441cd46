from sudokit.puzzle.cell import Cell
from sudokit.puzzle.puzzle import Puzzle

__all__ = ["Cell", "Puzzle"]
