"""
Random strategy implementation.
"""
import random
from typing import List, Optional
from ...core.scoring import Category
from ...core.game_state import DecisionState
from .base import Strategy, StrategyConfig


class RandomStrategy(Strategy):
    """Baseline that holds and scores at random."""

    def setup(self, reroll_probability: float = 0.5, seed: Optional[int] = None):
        self.reroll_probability = reroll_probability
        self.rng = random.Random(seed)

    def should_reroll(self, game_state: DecisionState) -> bool:
        return game_state.can_reroll and self.rng.random() < self.reroll_probability

    def select_holds(self, game_state: DecisionState) -> List[bool]:
        return [self.rng.random() < 0.5 for _ in game_state.held]

    def select_category(self, game_state: DecisionState) -> Category:
        if not game_state.available_categories:
            raise ValueError("No categories left to choose from")
        return self.rng.choice(game_state.available_categories)

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Random",
            description="Random holds and categories (baseline)",
            parameters={"reroll_probability": 0.5, "seed": None}
        )
