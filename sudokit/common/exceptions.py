"""Exceptions raised by the sudokit engine and its file layer."""


class SudokuError(Exception):
    """Base class of every sudokit error."""


# cell domain contract


class CellDomainError(SudokuError, ValueError):
    """A mutation would break a cell's candidate-domain invariants."""


class OutOfRangeError(CellDomainError):
    def __init__(self, value: int, min_value: int, max_value: int):
        super().__init__(f"{value} is not between {min_value} and {max_value}")
        self.value = value


class DuplicateValueError(CellDomainError):
    def __init__(self, value: int):
        super().__init__(f"{value} is already a candidate")
        self.value = value


class WouldEmptyDomainError(CellDomainError):
    def __init__(self, value: int):
        super().__init__(f"Removal of {value} would leave the cell with no candidates")
        self.value = value


class ValueNotPresentError(CellDomainError):
    def __init__(self, value: int):
        super().__init__(f"Cell does not contain {value}")
        self.value = value


class UnresolvedCellError(CellDomainError):
    """The cell has more than one candidate, so it has no resolved value."""


class EmptyDomainError(CellDomainError):
    """A cell was created without any candidate."""


# puzzle construction


class PuzzleError(SudokuError, ValueError):
    """The givens cannot form a puzzle."""


class CellCountMismatchError(PuzzleError):
    def __init__(self, actual: int, expected: int):
        super().__init__(f"List of values has length {actual}. Puzzle has {expected} cells")
        self.actual = actual
        self.expected = expected


class ValueOutOfRangeError(PuzzleError):
    def __init__(self, value: int, max_value: int):
        super().__init__(f"List contained cell value {value}. Not in range 0 - {max_value}")
        self.value = value


# text format


class PuzzleFormatError(SudokuError, ValueError):
    """A puzzle file does not follow the text layout."""
