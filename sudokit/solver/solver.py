"""Propagation to a fixed point plus worklist backtracking."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from sudokit.common.config import SolverConfig
from sudokit.common.constants import MAX_SOLUTIONS, SearchOrder, SolveStatus
from sudokit.common.exceptions import CellDomainError
from sudokit.puzzle import Cell, Puzzle
from sudokit.strategy import STRATEGIES, Strategy
from sudokit.utils.log import get_logger


@dataclass
class SolveStats:
    """Counters collected during one `Solver.run` call."""

    branches: int = 0  # branches taken off the worklist
    contradictions: int = 0  # branches discarded as invalid
    strategy_uses: Dict[str, int] = field(default_factory=dict)  # advancing passes per strategy


@dataclass
class SolveResult:
    status: SolveStatus
    solutions: List[Puzzle]
    stats: SolveStats

    @property
    def solution(self) -> Optional[Puzzle]:
        """The solution when it is unique."""
        if self.status == SolveStatus.SOLVED:
            return self.solutions[0]
        return None


class Solver:
    """
    Classifies a puzzle as unsolvable, uniquely solvable or multiply solvable.

    Each branch is propagated with the configured strategies until none makes
    progress. An invalid branch is dropped, a solved one is recorded, and any
    other branch is split on the unsolved cell with the fewest candidates
    (first in row-major order on ties), one clone per candidate. The search
    stops as soon as `MAX_SOLUTIONS` solutions are known.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self.logger = get_logger(__name__)
        self.search_order = SearchOrder(self.config.search_order)
        self.strategies: List[Strategy] = [
            STRATEGIES.get(name)() for name in self.config.strategies
        ]

    def solve(self, puzzle: Puzzle) -> List[Puzzle]:
        """Return 0, 1 or 2 solutions of `puzzle` (2 meaning "at least 2")."""
        return self.run(puzzle).solutions

    def run(self, puzzle: Puzzle) -> SolveResult:
        """Search `puzzle` without mutating it.

        Args:
            puzzle (`Puzzle`): The puzzle to classify.

        Returns:
            `SolveResult`: The status, the solutions found and search counters.
        """
        stats = SolveStats(strategy_uses={str(s.name): 0 for s in self.strategies})
        solutions: List[Puzzle] = []

        start = puzzle.clone()
        if self.config.warm_start:
            start.refresh()

        worklist: Deque[Puzzle] = deque([start])
        while worklist and len(solutions) < MAX_SOLUTIONS:
            if self.search_order == SearchOrder.DFS:
                branch = worklist.pop()
            else:
                branch = worklist.popleft()
            stats.branches += 1

            try:
                self.propagate(branch, stats)
            except CellDomainError as e:
                # strategies check before mutating, so this is a bug; drop the branch
                self.logger.warning(f"Discarding branch after domain error: {e}")
                stats.contradictions += 1
                continue

            if not branch.is_valid():
                self.logger.debug(f"Branch {stats.branches} is contradictory")
                stats.contradictions += 1
                continue
            if branch.is_solved():
                self.logger.debug(f"Branch {stats.branches} is a solution")
                solutions.append(branch)
                continue

            children = self._split(branch)
            if self.search_order == SearchOrder.DFS:
                # smallest candidate is popped first
                worklist.extend(reversed(children))
            else:
                worklist.extend(children)

        if not solutions:
            status = SolveStatus.UNSOLVABLE
        elif len(solutions) == 1:
            status = SolveStatus.SOLVED
        else:
            status = SolveStatus.MULTIPLE
        self.logger.info(
            f"Puzzle is {status.value}: {len(solutions)} solution(s) after "
            f"{stats.branches} branch(es), strategy uses {stats.strategy_uses}"
        )
        return SolveResult(status=status, solutions=solutions, stats=stats)

    def propagate(self, puzzle: Puzzle, stats: Optional[SolveStats] = None) -> bool:
        """Run every strategy in order, round after round, until a round changes nothing.

        Returns:
            `bool`: Whether any strategy changed the puzzle.
        """
        changed = False
        while True:
            round_changed = False
            for strategy in self.strategies:
                if strategy.advance(puzzle):
                    round_changed = True
                    if stats is not None:
                        stats.strategy_uses[str(strategy.name)] += 1
            if not round_changed:
                return changed
            changed = True

    @staticmethod
    def select_branch_cell(puzzle: Puzzle) -> Optional[Cell]:
        """The unsolved cell with the fewest candidates, or None if every cell is solved."""
        best = None
        for cell in puzzle.cells:
            if cell.is_solved():
                continue
            if best is None or cell.size() < best.size():
                best = cell
        return best

    def _split(self, puzzle: Puzzle) -> List[Puzzle]:
        cell = self.select_branch_cell(puzzle)
        self.logger.debug(f"Branching on ({cell.row}, {cell.column}) with candidates {list(cell)}")
        children = []
        for value in cell:
            child = puzzle.clone()
            child.cell(cell.row, cell.column).restrict_to(value)
            children.append(child)
        return children
