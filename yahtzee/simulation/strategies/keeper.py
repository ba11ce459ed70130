"""
Keeper strategy implementation.
"""
from typing import Dict, List
from ...core.scoring import Category
from ...core.game_state import DecisionState
from .base import Strategy, StrategyConfig


# Rough average a category is worth when kept for later. Used to avoid burning
# valuable rows on poor hands.
EXPECTED_CATEGORY_VALUE: Dict[Category, float] = {
    Category.ACES: 2.1,
    Category.TWOS: 5.3,
    Category.THREES: 8.6,
    Category.FOURS: 12.2,
    Category.FIVES: 15.7,
    Category.SIXES: 19.2,
    Category.THREE_OF_A_KIND: 21.7,
    Category.FOUR_OF_A_KIND: 13.1,
    Category.FULL_HOUSE: 22.6,
    Category.SMALL_STRAIGHT: 29.5,
    Category.LARGE_STRAIGHT: 32.7,
    Category.YAHTZEE: 16.9,
    Category.CHANCE: 22.0,
}

MADE_HANDS = (Category.YAHTZEE, Category.LARGE_STRAIGHT, Category.FULL_HOUSE)


class KeeperStrategy(Strategy):
    """
    Keep the most common face (or a straight draw) and use both re-rolls.
    Scores where the hand beats what the category is usually worth.
    """

    def setup(self, expectation_weight: float = 0.5, upper_bonus_weight: float = 5.0):
        self.expectation_weight = expectation_weight
        self.upper_bonus_weight = upper_bonus_weight

    def should_reroll(self, game_state: DecisionState) -> bool:
        if not game_state.can_reroll:
            return False
        # A made fixed-score hand cannot improve
        for category in MADE_HANDS:
            if category in game_state.available_categories and game_state.potential_scores[category] > 0:
                return False
        return True

    def _straight_draw(self, game_state: DecisionState) -> List[bool]:
        """Hold one die of each face in the longest run, or [] if there is no draw."""
        values = game_state.dice.values
        faces = sorted(set(values))
        best_run: List[int] = []
        run: List[int] = []
        for face in faces:
            if run and face == run[-1] + 1:
                run.append(face)
            else:
                run = [face]
            if len(run) > len(best_run):
                best_run = list(run)

        if len(best_run) < 4:
            return []

        holds = [False] * len(values)
        wanted = set(best_run)
        for i, value in enumerate(values):
            if value in wanted:
                holds[i] = True
                wanted.discard(value)
        return holds

    def select_holds(self, game_state: DecisionState) -> List[bool]:
        available = game_state.available_categories
        if Category.LARGE_STRAIGHT in available or Category.SMALL_STRAIGHT in available:
            holds = self._straight_draw(game_state)
            if holds:
                return holds

        counts = game_state.dice.value_counts
        # Most copies first, higher face breaks ties
        face = max(counts, key=lambda v: (counts[v], v))
        return [value == face for value in game_state.dice.values]

    def category_value(self, category: Category, score: int) -> float:
        value = score - self.expectation_weight * EXPECTED_CATEGORY_VALUE[category]
        if category.is_upper and score >= 3 * category.face:
            value += self.upper_bonus_weight
        return value

    def select_category(self, game_state: DecisionState) -> Category:
        if not game_state.available_categories:
            raise ValueError("No categories left to choose from")
        best = None
        best_value = float("-inf")
        for category, score in game_state.available_scores.items():
            value = self.category_value(category, score)
            if value >= best_value:
                best, best_value = category, value
        return best

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Keeper",
            description="Hold the most common face or a straight draw, score by value",
            parameters={"expectation_weight": 0.5, "upper_bonus_weight": 5.0}
        )
