"""Per-player scorecard for Yahtzee."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from .scoring import Category, UPPER_BONUS, UPPER_BONUS_THRESHOLD


@dataclass
class Scorecard:
    """Scores recorded so far, one slot per category."""
    scores: Dict[Category, int] = field(default_factory=dict)
    got_upper_bonus: bool = False

    def has_used(self, category: Category) -> bool:
        return category in self.scores

    def score_for(self, category: Category) -> Optional[int]:
        """Recorded score for a category, or None if still open."""
        return self.scores.get(category)

    def record(self, category: Category, points: int):
        """Cross out a category with the given points.

        The upper bonus is granted the first time an upper category brings the
        upper sum to the threshold.
        """
        if self.has_used(category):
            raise ValueError(f"{category.display_name} has already been used")
        if points < 0:
            raise ValueError("Points cannot be negative")

        self.scores[category] = points
        if (not self.got_upper_bonus
                and category.is_upper
                and self.upper_sum >= UPPER_BONUS_THRESHOLD):
            self.got_upper_bonus = True

    @property
    def available_categories(self) -> List[Category]:
        return [c for c in Category if c not in self.scores]

    @property
    def upper_sum(self) -> int:
        return sum(points for category, points in self.scores.items() if category.is_upper)

    @property
    def lower_sum(self) -> int:
        return sum(points for category, points in self.scores.items() if not category.is_upper)

    @property
    def bonus(self) -> int:
        return UPPER_BONUS if self.got_upper_bonus else 0

    @property
    def total(self) -> int:
        return self.upper_sum + self.lower_sum + self.bonus

    @property
    def is_complete(self) -> bool:
        return len(self.scores) == len(Category)

    def to_dict(self) -> dict:
        return {
            "scores": {c.display_name: p for c, p in self.scores.items()},
            "upper_sum": self.upper_sum,
            "bonus": self.bonus,
            "total": self.total,
        }
