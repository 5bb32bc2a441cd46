# -*- coding: utf-8 -*-
"""Configs for the solver."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from omegaconf import OmegaConf

from sudokit.common.constants import (
    DEFAULT_STRATEGIES,
    LOG_LEVEL_ENV_VAR,
    SearchOrder,
)
from sudokit.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class SolverConfig:
    """Configs for the search engine."""

    # strategy registry keys, run in this order every propagation round
    strategies: List[str] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    # `dfs` pops the newest branch first, `bfs` the oldest
    search_order: str = "dfs"
    # run `Puzzle.refresh()` once before the first propagation round
    warm_start: bool = True


@dataclass
class LogConfig:
    """Configs for logger."""

    level: str = "INFO"  # default log level (DEBUG, INFO, WARNING, ERROR)


@dataclass
class Config:
    """Global Configuration"""

    solver: SolverConfig = field(default_factory=SolverConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def _check_solver(self) -> None:
        from sudokit.strategy import STRATEGIES, Strategy

        if not self.solver.strategies:
            raise ValueError("At least one strategy is required.")
        # resolved class -> first configured name
        seen = {}
        for name in self.solver.strategies:
            try:
                strategy_cls = STRATEGIES.get(name)
            except (ImportError, ValueError):
                raise ValueError(
                    f"Invalid strategy: {name}. Available: {', '.join(STRATEGIES.names())}"
                )
            if not (isinstance(strategy_cls, type) and issubclass(strategy_cls, Strategy)):
                raise ValueError(f"Invalid strategy: {name} is not a Strategy.")
            if strategy_cls in seen:
                raise ValueError(
                    f"Strategy `{name}` is listed more than once "
                    f"(first as `{seen[strategy_cls]}`)."
                )
            seen[strategy_cls] = name
        try:
            self.solver.search_order = SearchOrder(self.solver.search_order).value
        except ValueError:
            raise ValueError(f"Invalid search order: {self.solver.search_order}")

    def _check_log(self) -> None:
        env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if env_level and self.log.level == LogConfig.level:
            self.log.level = env_level
        self.log.level = self.log.level.upper()
        if self.log.level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {self.log.level}")

    def check_and_update(self) -> Config:
        """Check and update the config."""
        self._check_solver()
        self._check_log()
        logger.debug(f"Using strategies {self.solver.strategies}, order {self.solver.search_order}")
        return self


def load_config(config_path: Optional[str] = None) -> Config:
    """Load the configuration from the given path, or the defaults when no path is given."""
    schema = OmegaConf.structured(Config)
    if config_path is None:
        return OmegaConf.to_object(schema)
    try:
        yaml_config = OmegaConf.load(config_path)
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
