"""Player management for Yahtzee."""
from dataclasses import dataclass, field
from typing import List, Tuple
from enum import Enum
from .scorecard import Scorecard
from .scoring import Category


class PlayerType(Enum):
    """Types of players."""
    HUMAN = "human"
    AI = "ai"


@dataclass
class Player:
    """Represents a player in the game."""
    name: str
    player_type: PlayerType = PlayerType.HUMAN
    scorecard: Scorecard = field(default_factory=Scorecard)
    turn_history: List[Tuple[Category, int]] = field(default_factory=list)

    @property
    def score(self) -> int:
        return self.scorecard.total

    @property
    def is_human(self) -> bool:
        return self.player_type == PlayerType.HUMAN

    def record_turn(self, category: Category, points: int):
        """Record the category chosen at the end of a turn."""
        self.scorecard.record(category, points)
        self.turn_history.append((category, points))

    @property
    def total_turns(self) -> int:
        """Number of turns played."""
        return len(self.turn_history)

    @property
    def average_score_per_turn(self) -> float:
        """Average category score per turn, bonus excluded."""
        if not self.turn_history:
            return 0.0
        return sum(points for _, points in self.turn_history) / len(self.turn_history)

    def __str__(self):
        return f"{self.name} ({self.score} points)"
