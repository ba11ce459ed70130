"""
Base classes for strategy implementations.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any
from dataclasses import dataclass
from ...core.scoring import Category
from ...core.game_state import DecisionState


@dataclass
class StrategyConfig:
    """Configuration for a strategy."""
    name: str
    description: str
    parameters: Dict[str, Any]


class Strategy(ABC):
    """Abstract base class for opponent strategies."""

    def __init__(self, config: Optional[StrategyConfig] = None):
        self.config = config or self.get_default_config()
        self.setup(**self.config.parameters)

    @abstractmethod
    def setup(self, **kwargs):
        """Initialize strategy with parameters."""
        pass

    @abstractmethod
    def should_reroll(self, game_state: DecisionState) -> bool:
        """Decide whether to use another roll this turn."""
        pass

    @abstractmethod
    def select_holds(self, game_state: DecisionState) -> List[bool]:
        """Decide which dice to keep before the next roll."""
        pass

    @abstractmethod
    def select_category(self, game_state: DecisionState) -> Category:
        """Pick the category to score the final dice in."""
        pass

    @classmethod
    @abstractmethod
    def get_default_config(cls) -> StrategyConfig:
        """Get default configuration for this strategy."""
        pass

    def get_description(self) -> str:
        """Get human-readable description of the strategy."""
        return f"{self.config.name}: {self.config.description}"
