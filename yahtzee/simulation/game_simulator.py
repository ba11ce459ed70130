"""Game simulation engine for Yahtzee."""
import logging
import random
import numpy as np
from typing import List, Dict, Optional, Tuple
from dataclasses import dataclass
from concurrent.futures import ProcessPoolExecutor, as_completed
import multiprocessing
from ..core.game import Game, Turn, TurnStatus
from ..core.player import Player, PlayerType
from .strategies import Strategy
from .strategy_registry import strategy_registry


logger = logging.getLogger(__name__)

PlayerConfig = Tuple[str, str]  # (player name, strategy name)


@dataclass
class SimulationResult:
    """Results from game simulations."""
    num_simulations: int
    win_rates: Dict[str, float]  # Player name -> win rate
    tie_rate: float
    avg_scores: Dict[str, float]  # Player name -> average final score
    upper_bonus_rates: Dict[str, float]
    score_distributions: Dict[str, np.ndarray]  # Player name -> final scores

    def percentiles(self, name: str) -> Dict[int, float]:
        scores = self.score_distributions[name]
        return {p: float(np.percentile(scores, p)) for p in (25, 50, 75, 95)}

    def std_deviation(self, name: str) -> float:
        return float(np.std(self.score_distributions[name]))

    def __str__(self) -> str:
        lines = [f"Simulation Results ({self.num_simulations} games):"]
        lines.append(f"Tie rate: {self.tie_rate:.1%}")
        lines.append("\nWin Rates:")
        for player, rate in sorted(self.win_rates.items(), key=lambda x: x[1], reverse=True):
            lines.append(f"  {player}: {rate:.1%}")
        lines.append("\nAverage Final Scores:")
        for player, score in sorted(self.avg_scores.items(), key=lambda x: x[1], reverse=True):
            lines.append(f"  {player}: {score:.0f}")
        return "\n".join(lines)


def play_turn_with_strategy(turn: Turn, strategy: Strategy, game: Optional[Game] = None) -> int:
    """Play an already started turn using a strategy; returns the points scored."""
    while turn.status == TurnStatus.ROLLING and turn.rolls_left > 0:
        decision_state = turn.get_decision_state(game)
        if not strategy.should_reroll(decision_state):
            break
        turn.set_holds(strategy.select_holds(decision_state))
        turn.reroll()

    if turn.status == TurnStatus.ROLLING:
        turn.stop_rolling()

    category = strategy.select_category(turn.get_decision_state(game))
    return turn.score(category)


class GameSimulator:
    """Simulates computer-vs-computer games with various strategies."""

    def __init__(self, num_workers: Optional[int] = None):
        self.num_workers = num_workers or multiprocessing.cpu_count()

    @staticmethod
    def play_game(player_configs: List[PlayerConfig], rng: Optional[random.Random] = None) -> Dict:
        """Play a single game where every player follows a strategy."""
        players = []
        strategies = {}
        rng = rng or random.Random()

        for name, strategy_name in player_configs:
            players.append(Player(name, PlayerType.AI))
            # Strategies with their own randomness draw it from the game's rng
            overrides = {}
            if "seed" in strategy_registry.get_strategy_info(strategy_name).parameters:
                overrides["seed"] = rng.getrandbits(32)
            strategies[name] = strategy_registry.get_strategy(strategy_name, **overrides)

        game = Game(players, rng=rng)
        while not game.is_over:
            turn = game.start_turn()
            play_turn_with_strategy(turn, strategies[turn.player.name], game)
            game.complete_turn()

        return {
            "winner": game.winner.name if game.winner else None,
            "final_scores": {p.name: p.score for p in players},
            "upper_bonus": {p.name: p.scorecard.got_upper_bonus for p in players},
        }

    def simulate_games(
        self,
        player_configs: List[PlayerConfig],
        num_simulations: int = 1000,
        seed: Optional[int] = None
    ) -> SimulationResult:
        """Simulate multiple games with given player configurations.

        Args:
            player_configs: List of (name, strategy_name) tuples
            num_simulations: Number of games to simulate
            seed: Base random seed; each worker derives its own from it
        """
        if num_simulations < 1:
            raise ValueError("Number of simulations must be positive")
        names = [name for name, _ in player_configs]
        if len(set(names)) != len(names):
            raise ValueError("Player names must be unique")
        for _, strategy_name in player_configs:
            strategy_registry.get_strategy_info(strategy_name)

        logger.info("Simulating %d games: %s", num_simulations,
                    ", ".join(f"{n} ({s})" for n, s in player_configs))

        if self.num_workers == 1:
            all_results = self._run_simulations(player_configs, num_simulations, seed, 0)
            return self._aggregate_results(all_results, player_configs)

        # Split simulations across workers
        simulations_per_worker = num_simulations // self.num_workers
        remaining = num_simulations % self.num_workers

        futures = []
        with ProcessPoolExecutor(max_workers=self.num_workers) as executor:
            for i in range(self.num_workers):
                n_sims = simulations_per_worker + (1 if i < remaining else 0)
                if n_sims > 0:
                    future = executor.submit(
                        self._run_simulations,
                        player_configs,
                        n_sims,
                        seed,
                        i  # Worker ID for different random seeds
                    )
                    futures.append(future)

            # Collect results
            all_results = []
            for future in as_completed(futures):
                all_results.extend(future.result())

        return self._aggregate_results(all_results, player_configs)

    @staticmethod
    def _run_simulations(
        player_configs: List[PlayerConfig],
        num_simulations: int,
        seed: Optional[int],
        worker_id: int
    ) -> List[Dict]:
        """Run simulations in a single process."""
        rng = random.Random(None if seed is None else seed + worker_id)
        return [GameSimulator.play_game(player_configs, rng) for _ in range(num_simulations)]

    @staticmethod
    def _aggregate_results(
        all_results: List[Dict],
        player_configs: List[PlayerConfig]
    ) -> SimulationResult:
        """Aggregate results from all simulations."""
        num_games = len(all_results)
        player_names = [name for name, _ in player_configs]

        wins = {name: 0 for name in player_names}
        bonuses = {name: 0 for name in player_names}
        score_lists = {name: [] for name in player_names}
        ties = 0

        for result in all_results:
            if result["winner"]:
                wins[result["winner"]] += 1
            else:
                ties += 1
            for name, score in result["final_scores"].items():
                score_lists[name].append(score)
            for name, got_bonus in result["upper_bonus"].items():
                bonuses[name] += int(got_bonus)

        score_distributions = {name: np.array(scores) for name, scores in score_lists.items()}

        return SimulationResult(
            num_simulations=num_games,
            win_rates={name: wins[name] / num_games for name in player_names},
            tie_rate=ties / num_games,
            avg_scores={name: float(np.mean(score_distributions[name])) for name in player_names},
            upper_bonus_rates={name: bonuses[name] / num_games for name in player_names},
            score_distributions=score_distributions,
        )
