"""
Greedy strategy implementation.
"""
from typing import List
from ...core.scoring import Category
from ...core.game_state import DecisionState
from .base import Strategy, StrategyConfig


class GreedyStrategy(Strategy):
    """Take the first roll and score it where it is worth the most."""

    def setup(self, **kwargs):
        pass

    def should_reroll(self, game_state: DecisionState) -> bool:
        return False

    def select_holds(self, game_state: DecisionState) -> List[bool]:
        return [True] * len(game_state.held)

    def select_category(self, game_state: DecisionState) -> Category:
        return game_state.best_category

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Greedy",
            description="Never re-roll, score the highest open category",
            parameters={}
        )
