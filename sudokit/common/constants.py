# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

# env var names

LOG_LEVEL_ENV_VAR = "SUDOKIT_LOG_LEVEL"  # global log level
CONFIG_PATH_ENV_VAR = "SUDOKIT_CONFIG"  # default config file for the cli


# constants

# the search only needs to tell "one solution" from "more than one"
MAX_SOLUTIONS = 2

BLANK_SYMBOL = "-"  # an unconstrained cell in the text format
BLANK_VALUE = 0

DEFAULT_STRATEGIES = ["basic", "single_cell", "shared_subgroup"]

# trailing tags of the cli output file
UNSOLVABLE_TAG = "Unsolvable Puzzle"
SOLVED_TAG = "Solved"
MULTIPLE_SOLUTIONS_TAG = "Multiple Solutions"
BAD_PUZZLE_TAG = "Bad Puzzle"


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    name_aliases = {}

    def __getitem__(cls, name):
        name = cls.name_aliases.get(name.lower(), name)
        return super().__getitem__(name.upper())

    def __getattr__(cls, name):
        if not name.startswith("_"):
            return cls[name.upper()]
        return super().__getattr__(name)

    def __call__(cls, value, *args, **kwargs):
        value = cls.name_aliases.get(value.lower(), value)
        return super().__call__(value.lower(), *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class SolveStatus(CaseInsensitiveEnum):
    """How many solutions the solver found."""

    UNSOLVABLE = "unsolvable"  # no solution
    SOLVED = "solved"  # exactly one solution
    MULTIPLE = "multiple"  # at least two solutions


class SearchOrderEnumMeta(CaseInsensitiveEnumMeta):
    name_aliases = {
        "stack": "dfs",
        "queue": "bfs",
    }


class SearchOrder(CaseInsensitiveEnum, metaclass=SearchOrderEnumMeta):
    """Order in which the solver pops branches off its worklist."""

    DFS = "dfs"  # last in, first out
    BFS = "bfs"  # first in, first out
