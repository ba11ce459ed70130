import logging
import random
from typing import List, Optional, Dict
from enum import Enum
from .dice import Dice, DiceRoll
from .scoring import ScoringEngine, Category
from .player import Player, PlayerType
from .game_state import DecisionState, GameContext


logger = logging.getLogger(__name__)

NUM_ROUNDS = len(Category)
MAX_REROLLS = 2


class TurnStatus(Enum):
    ROLLING = "rolling"
    CHOOSING = "choosing"
    COMPLETED = "completed"


class Turn:
    """Manages a single turn: one roll, up to two re-rolls, one category."""

    def __init__(self, player: Player, dice: Optional[Dice] = None, max_rerolls: int = MAX_REROLLS):
        self.player = player
        self.dice = dice or Dice()
        self.scoring_engine = ScoringEngine()
        self.max_rerolls = max_rerolls
        self.rolls_left = max_rerolls
        self.status = TurnStatus.ROLLING
        self.started = False
        self.roll_history: List[DiceRoll] = []
        self.chosen_category: Optional[Category] = None
        self.points: Optional[int] = None

    def start(self, specific_values: Optional[List[int]] = None) -> DiceRoll:
        """Roll all five dice to open the turn."""
        if self.started:
            raise ValueError("Turn has already started")
        roll = self.dice.roll(specific_values)
        self.started = True
        self.roll_history.append(roll)
        return roll

    def _require_rolling(self):
        if not self.started:
            raise ValueError("Turn has not started yet")
        if self.status != TurnStatus.ROLLING:
            raise ValueError("Cannot change dice - no longer rolling")

    def reroll(self, specific_values: Optional[List[int]] = None) -> DiceRoll:
        """Re-roll every die that is not held."""
        self._require_rolling()
        if self.rolls_left <= 0:
            raise ValueError("No rolls left this turn")

        roll = self.dice.reroll(specific_values)
        self.rolls_left -= 1
        self.roll_history.append(roll)

        if self.rolls_left == 0:
            self.status = TurnStatus.CHOOSING
        return roll

    def toggle_hold(self, index: int):
        self._require_rolling()
        self.dice.toggle(index)

    def hold(self, index: int):
        self._require_rolling()
        self.dice.hold(index)

    def release(self, index: int):
        self._require_rolling()
        self.dice.release(index)

    def set_holds(self, mask: List[bool]):
        self._require_rolling()
        self.dice.set_holds(mask)

    def stop_rolling(self):
        """Keep the current dice and move on to choosing a category."""
        self._require_rolling()
        self.status = TurnStatus.CHOOSING

    @property
    def current_roll(self) -> DiceRoll:
        return self.dice.current

    @property
    def potential_scores(self) -> Dict[Category, int]:
        """What the current dice would score in each category."""
        return self.scoring_engine.calculate_scores(self.current_roll)

    def can_score(self, category: Category) -> bool:
        return (self.started
                and self.status != TurnStatus.COMPLETED
                and not self.player.scorecard.has_used(category))

    def score(self, category: Category) -> int:
        """Cross out a category with the current dice and end the turn."""
        if not self.started:
            raise ValueError("Turn has not started yet")
        if self.status == TurnStatus.COMPLETED:
            raise ValueError("Turn is already completed")

        points = self.potential_scores[category]
        self.player.record_turn(category, points)
        self.chosen_category = category
        self.points = points
        self.status = TurnStatus.COMPLETED
        return points

    def get_decision_state(self, game: Optional['Game'] = None) -> DecisionState:
        """Get decision state object with optional game context."""
        scorecard = self.player.scorecard
        decision_state = DecisionState(
            dice=self.current_roll,
            held=list(self.dice.held),
            rolls_left=self.rolls_left,
            potential_scores=self.potential_scores,
            available_categories=scorecard.available_categories,
            upper_sum=scorecard.upper_sum,
            got_upper_bonus=scorecard.got_upper_bonus,
            turn_status=self.status.value,
            recorded_scores=dict(scorecard.scores),
        )

        if game:
            decision_state.game_context = GameContext(
                player_scores={p.name: p.score for p in game.players},
                current_player=self.player.name,
                round_number=game.round_number,
                num_rounds=game.num_rounds,
            )

        return decision_state


def default_players() -> List[Player]:
    return [Player("You", PlayerType.HUMAN), Player("AI", PlayerType.AI)]


class Game:
    """Manages a full game of Yahtzee."""

    def __init__(self, players: Optional[List[Player]] = None, num_rounds: int = NUM_ROUNDS,
                 rng: Optional[random.Random] = None):
        if num_rounds < 1 or num_rounds > NUM_ROUNDS:
            raise ValueError(f"Number of rounds must be between 1 and {NUM_ROUNDS}")
        self.players = players if players is not None else default_players()
        if not self.players:
            raise ValueError("A game needs at least one player")
        self.num_rounds = num_rounds
        self.rng = rng or random.Random()
        self.current_player_index = 0
        self.round_number = 1
        self.turn_history: List[Dict] = []
        self.current_turn: Optional[Turn] = None

    @property
    def current_player(self) -> Player:
        """Get the current player."""
        return self.players[self.current_player_index]

    @property
    def is_over(self) -> bool:
        return self.round_number > self.num_rounds

    @property
    def leading_players(self) -> List[Player]:
        """Get the player(s) with the highest score."""
        max_score = max(p.score for p in self.players)
        return [p for p in self.players if p.score == max_score]

    @property
    def winner(self) -> Optional[Player]:
        """The single leading player once the game is over; None while playing or on a tie."""
        if not self.is_over:
            return None
        leaders = self.leading_players
        return leaders[0] if len(leaders) == 1 else None

    def result_for(self, player: Player) -> str:
        """'won', 'tie' or 'lost' from the given player's point of view."""
        best_other = max((p.score for p in self.players if p is not player), default=None)
        if best_other is None or player.score > best_other:
            return "won"
        if player.score == best_other:
            return "tie"
        return "lost"

    def start_turn(self, specific_values: Optional[List[int]] = None) -> Turn:
        """Start a new turn for the current player and make the opening roll."""
        if self.is_over:
            raise ValueError("Game is over")
        if self.current_turn and self.current_turn.status != TurnStatus.COMPLETED:
            raise ValueError("Current turn has not been completed")

        self.current_turn = Turn(self.current_player, Dice(rng=self.rng))
        self.current_turn.start(specific_values)
        logger.debug("Round %d: %s rolled %s", self.round_number,
                     self.current_player.name, self.current_turn.current_roll)
        return self.current_turn

    def complete_turn(self):
        """Record the finished turn and pass play to the next player."""
        turn = self.current_turn
        if not turn:
            raise ValueError("No turn in progress")
        if turn.status != TurnStatus.COMPLETED:
            raise ValueError("Turn must be scored before it can be completed")

        self.turn_history.append({
            "round": self.round_number,
            "player": turn.player.name,
            "dice": list(turn.current_roll.values),
            "category": turn.chosen_category.display_name,
            "score": turn.points,
            "rolls_used": turn.max_rerolls - turn.rolls_left + 1,
        })
        logger.info("Round %d: %s scored %d in %s", self.round_number, turn.player.name,
                    turn.points, turn.chosen_category.display_name)

        self.current_turn = None
        self.advance_turn()

    def advance_turn(self):
        """Move to the next player."""
        self.current_player_index = (self.current_player_index + 1) % len(self.players)

        # Check if we've completed a full round of turns
        if self.current_player_index == 0:
            self.round_number += 1
            if self.is_over:
                logger.info("Game over: %s", ", ".join(str(p) for p in self.players))

    def get_decision_state(self) -> DecisionState:
        if not self.current_turn:
            raise ValueError("No turn in progress")
        return self.current_turn.get_decision_state(self)

    def get_game_state(self) -> dict:
        """Get current game state."""
        winner = self.winner
        return {
            "players": [{"name": p.name, "score": p.score} for p in self.players],
            "current_player": None if self.is_over else self.current_player.name,
            "round_number": min(self.round_number, self.num_rounds),
            "game_over": self.is_over,
            "winner": winner.name if winner else None,
        }
