from dataclasses import dataclass
from typing import List, Optional
import random
from collections import Counter


NUM_DICE = 5


@dataclass
class DiceRoll:
    """Represents the five faces showing after a roll."""
    values: List[int]

    def __post_init__(self):
        if not all(1 <= v <= 6 for v in self.values):
            raise ValueError("All dice values must be between 1 and 6")

    @property
    def count(self) -> int:
        """Number of dice in this roll."""
        return len(self.values)

    @property
    def value_counts(self) -> Counter:
        """Count of each dice value."""
        return Counter(self.values)

    @property
    def total(self) -> int:
        return sum(self.values)

    @property
    def sorted_values(self) -> List[int]:
        return sorted(self.values)

    def __str__(self) -> str:
        return ", ".join(str(v) for v in self.values)


class Dice:
    """Manages the five dice and which of them are held between rolls."""

    def __init__(self, num_dice: int = NUM_DICE, rng: Optional[random.Random] = None):
        self.num_dice = num_dice
        self.rng = rng or random.Random()
        self.values: List[int] = [1] * num_dice
        self.held: List[bool] = [False] * num_dice

    def _check_index(self, index: int):
        if not 0 <= index < self.num_dice:
            raise ValueError(f"Die index {index} out of range 0..{self.num_dice - 1}")

    def roll(self, specific_values: Optional[List[int]] = None) -> DiceRoll:
        """Roll every die and clear all holds."""
        self.held = [False] * self.num_dice
        return self.reroll(specific_values)

    def reroll(self, specific_values: Optional[List[int]] = None) -> DiceRoll:
        """Re-roll the dice that are not held.

        ``specific_values`` gives the new faces for the unheld dice, in order;
        it is used by tests and scripted play instead of the random source.
        """
        indices = self.unheld_indices
        if specific_values is not None:
            if len(specific_values) != len(indices):
                raise ValueError(
                    f"Expected {len(indices)} values for the unheld dice, got {len(specific_values)}"
                )
            new_values = list(specific_values)
        else:
            new_values = [self.rng.randint(1, 6) for _ in indices]

        DiceRoll(new_values)  # validates range
        for i, value in zip(indices, new_values):
            self.values[i] = value
        return self.current

    def hold(self, index: int):
        self._check_index(index)
        self.held[index] = True

    def release(self, index: int):
        self._check_index(index)
        self.held[index] = False

    def toggle(self, index: int):
        self._check_index(index)
        self.held[index] = not self.held[index]

    def set_holds(self, mask: List[bool]):
        """Replace the held mask in one go (used by strategies)."""
        if len(mask) != self.num_dice:
            raise ValueError(f"Hold mask must have {self.num_dice} entries")
        self.held = [bool(h) for h in mask]

    @property
    def unheld_indices(self) -> List[int]:
        return [i for i, held in enumerate(self.held) if not held]

    @property
    def current(self) -> DiceRoll:
        """The faces currently showing."""
        return DiceRoll(list(self.values))
