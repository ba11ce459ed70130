from typing import Dict, List, Iterable
from enum import Enum
from .dice import DiceRoll


UPPER_BONUS_THRESHOLD = 63
UPPER_BONUS = 35

FULL_HOUSE_SCORE = 25
SMALL_STRAIGHT_SCORE = 30
LARGE_STRAIGHT_SCORE = 40
YAHTZEE_SCORE = 50


class Category(Enum):
    """The thirteen scorecard rows, in scorecard order."""
    ACES = 0
    TWOS = 1
    THREES = 2
    FOURS = 3
    FIVES = 4
    SIXES = 5
    THREE_OF_A_KIND = 6
    FOUR_OF_A_KIND = 7
    FULL_HOUSE = 8
    SMALL_STRAIGHT = 9
    LARGE_STRAIGHT = 10
    YAHTZEE = 11
    CHANCE = 12

    @property
    def index(self) -> int:
        return self.value

    @property
    def is_upper(self) -> bool:
        """Aces through Sixes."""
        return self.value <= Category.SIXES.value

    @property
    def face(self) -> int:
        """Die face counted by an upper category."""
        if not self.is_upper:
            raise ValueError(f"{self.display_name} is not an upper section category")
        return self.value + 1

    @property
    def display_name(self) -> str:
        names = {
            Category.ACES: "Aces",
            Category.TWOS: "Twos",
            Category.THREES: "Threes",
            Category.FOURS: "Fours",
            Category.FIVES: "Fives",
            Category.SIXES: "Sixes",
            Category.THREE_OF_A_KIND: "3 of a kind",
            Category.FOUR_OF_A_KIND: "4 of a kind",
            Category.FULL_HOUSE: "Full House",
            Category.SMALL_STRAIGHT: "Small Straight",
            Category.LARGE_STRAIGHT: "Large Straight",
            Category.YAHTZEE: "Yahtzee (5 of a kind)",
            Category.CHANCE: "Chance",
        }
        return names[self]

    @classmethod
    def from_index(cls, index: int) -> "Category":
        try:
            return cls(index)
        except ValueError:
            raise ValueError(f"Wrong score index: {index}") from None

    @classmethod
    def from_name(cls, name: str) -> "Category":
        """Look a category up by enum name or display name, case-insensitively."""
        key = name.strip().lower().replace("-", " ").replace("_", " ")
        for category in cls:
            if key in (category.name.lower().replace("_", " "), category.display_name.lower()):
                return category
        raise ValueError(f"Unknown category: {name}")


UPPER_CATEGORIES = [c for c in Category if c.is_upper]
LOWER_CATEGORIES = [c for c in Category if not c.is_upper]


class ScoringEngine:
    """Handles all scoring logic for Yahtzee."""

    @staticmethod
    def longest_run(values: Iterable[int]) -> int:
        """Length of the longest run of consecutive faces, ignoring repeats."""
        faces = sorted(set(values))
        if not faces:
            return 0
        best = current = 1
        for previous, face in zip(faces, faces[1:]):
            if face == previous + 1:
                current += 1
            else:
                current = 1
            best = max(best, current)
        return best

    def calculate_scores(self, roll: DiceRoll) -> Dict[Category, int]:
        """Score the roll against every category."""
        if roll.count != 5:
            raise ValueError(f"A Yahtzee hand has 5 dice, got {roll.count}")

        scores: Dict[Category, int] = {}
        value_counts = roll.value_counts
        total = roll.total

        # Upper section
        for category in UPPER_CATEGORIES:
            scores[category] = value_counts[category.face] * category.face

        frequencies: List[int] = sorted(value_counts.values(), reverse=True) + [0]
        most_frequent, second_most_frequent = frequencies[0], frequencies[1]

        scores[Category.THREE_OF_A_KIND] = total if most_frequent >= 3 else 0
        scores[Category.FOUR_OF_A_KIND] = total if most_frequent >= 4 else 0
        scores[Category.FULL_HOUSE] = (
            FULL_HOUSE_SCORE if most_frequent == 3 and second_most_frequent == 2 else 0
        )

        run = self.longest_run(roll.values)
        scores[Category.SMALL_STRAIGHT] = SMALL_STRAIGHT_SCORE if run >= 4 else 0
        scores[Category.LARGE_STRAIGHT] = LARGE_STRAIGHT_SCORE if run >= 5 else 0
        scores[Category.YAHTZEE] = YAHTZEE_SCORE if most_frequent >= 5 else 0
        scores[Category.CHANCE] = total
        return scores

    def score(self, roll: DiceRoll, category: Category) -> int:
        """Score the roll for a single category."""
        return self.calculate_scores(roll)[category]
