from abc import ABC, abstractmethod

from sudokit.puzzle import Puzzle


class Strategy(ABC):
    """
    A propagation rule that removes impossible candidates from a puzzle.

    Implementations only perform legal cell mutations (membership and size
    are checked first), so `advance` never raises on a contradictory puzzle;
    the contradiction is left for `Puzzle.is_valid` to report.
    """

    name: str = ""  # registry key
    description: str = "Strategy"

    @abstractmethod
    def advance(self, puzzle: Puzzle) -> bool:
        """Run one pass of the rule over `puzzle`.

        Args:
            puzzle (`Puzzle`): The puzzle to narrow, mutated in place.

        Returns:
            `bool`: Whether any cell changed.
        """

    def __str__(self) -> str:
        return self.description
