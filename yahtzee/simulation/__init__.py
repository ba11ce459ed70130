"""Simulation module for Yahtzee."""
from .game_simulator import GameSimulator, SimulationResult, play_turn_with_strategy
from .strategies import Strategy
from .strategy_registry import strategy_registry

__all__ = [
    "GameSimulator",
    "SimulationResult",
    "Strategy",
    "play_turn_with_strategy",
    "strategy_registry",
]
