"""
Strategy implementations for the computer opponent.
"""
from .base import Strategy, StrategyConfig
from .greedy import GreedyStrategy
from .keeper import KeeperStrategy
from .random_choice import RandomStrategy

__all__ = [
    "Strategy",
    "StrategyConfig",
    "GreedyStrategy",
    "KeeperStrategy",
    "RandomStrategy",
]
