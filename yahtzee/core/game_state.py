"""Game state classes for Yahtzee."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from .dice import DiceRoll
from .scoring import Category


@dataclass
class GameContext:
    """Context information about the overall game state."""
    player_scores: Dict[str, int]
    current_player: str
    round_number: int
    num_rounds: int

    @property
    def max_opponent_score(self) -> int:
        """Get the highest opponent score."""
        opponent_scores = [score for name, score in self.player_scores.items()
                           if name != self.current_player]
        return max(opponent_scores) if opponent_scores else 0

    @property
    def current_player_score(self) -> int:
        return self.player_scores.get(self.current_player, 0)

    @property
    def lead_margin(self) -> int:
        """Get lead margin (positive if leading, negative if behind)."""
        return self.current_player_score - self.max_opponent_score

    @property
    def rounds_left(self) -> int:
        return self.num_rounds - self.round_number


@dataclass
class DecisionState:
    """Complete state information for decision making."""
    dice: DiceRoll
    held: List[bool]
    rolls_left: int
    potential_scores: Dict[Category, int]
    available_categories: List[Category]
    upper_sum: int = 0
    got_upper_bonus: bool = False
    turn_status: str = "rolling"
    game_context: Optional[GameContext] = None
    recorded_scores: Dict[Category, int] = field(default_factory=dict)

    @property
    def can_reroll(self) -> bool:
        return self.rolls_left > 0 and self.turn_status == "rolling"

    @property
    def available_scores(self) -> Dict[Category, int]:
        """Potential scores restricted to categories still open."""
        return {c: self.potential_scores[c] for c in self.available_categories}

    @property
    def best_category(self) -> Category:
        """Open category with the highest immediate score; ties go to the later one."""
        if not self.available_categories:
            raise ValueError("No categories left to choose from")
        best = self.available_categories[0]
        for category in self.available_categories[1:]:
            if self.potential_scores[category] >= self.potential_scores[best]:
                best = category
        return best

    def to_dict(self) -> dict:
        result = {
            "dice": list(self.dice.values),
            "held": list(self.held),
            "rolls_left": self.rolls_left,
            "potential_scores": {c.display_name: s for c, s in self.potential_scores.items()},
            "available_categories": [c.display_name for c in self.available_categories],
            "upper_sum": self.upper_sum,
            "got_upper_bonus": self.got_upper_bonus,
            "turn_status": self.turn_status,
        }

        if self.game_context:
            result["game_context"] = {
                "player_scores": self.game_context.player_scores,
                "current_player": self.game_context.current_player,
                "round_number": self.game_context.round_number,
                "num_rounds": self.game_context.num_rounds,
            }

        return result
