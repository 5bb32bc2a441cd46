from sudokit.strategy.strategy import Strategy
from sudokit.utils.registry import Registry

STRATEGIES: Registry = Registry(
    "strategy",
    default_mapping={
        "basic": "sudokit.strategy.basic_strategy.BasicStrategy",
        "single_cell": "sudokit.strategy.single_cell_strategy.SingleCellStrategy",
        "shared_subgroup": "sudokit.strategy.shared_subgroup_strategy.SharedSubgroupStrategy",
    },
)

__all__ = [
    "STRATEGIES",
    "Strategy",
]
