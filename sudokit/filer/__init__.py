from sudokit.filer.filer import SudokuFiler, SymbolTable

__all__ = [
    "SudokuFiler",
    "SymbolTable",
]
