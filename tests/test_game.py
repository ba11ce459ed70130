"""
Tests for dice, turns and the game loop.
"""
import random
import pytest
from yahtzee.core.dice import Dice, DiceRoll
from yahtzee.core.game import Game, Turn, TurnStatus
from yahtzee.core.player import Player, PlayerType
from yahtzee.core.scoring import Category


class TestDice:

    def test_roll_values_in_range(self):
        dice = Dice(rng=random.Random(7))
        for _ in range(100):
            roll = dice.roll()
            assert roll.count == 5
            assert all(1 <= v <= 6 for v in roll.values)

    def test_reroll_keeps_held_dice(self):
        dice = Dice()
        dice.roll([1, 2, 3, 4, 5])
        dice.hold(0)
        dice.hold(4)
        roll = dice.reroll([6, 6, 6])
        assert roll.values == [1, 6, 6, 6, 5]

    def test_roll_clears_holds(self):
        dice = Dice()
        dice.roll([1, 2, 3, 4, 5])
        dice.toggle(2)
        assert dice.held == [False, False, True, False, False]
        dice.roll([2, 2, 2, 2, 2])
        assert dice.held == [False] * 5

    def test_wrong_number_of_values(self):
        dice = Dice()
        dice.roll([1, 2, 3, 4, 5])
        dice.hold(0)
        with pytest.raises(ValueError):
            dice.reroll([1, 2, 3, 4, 5])

    def test_index_out_of_range(self):
        with pytest.raises(ValueError):
            Dice().hold(5)

    def test_invalid_face(self):
        with pytest.raises(ValueError):
            DiceRoll([0, 1, 2, 3, 4])


class TestTurn:

    def make_turn(self, values=(1, 2, 3, 4, 5)):
        turn = Turn(Player("Tester"))
        turn.start(list(values))
        return turn

    def test_two_rerolls_then_choosing(self):
        turn = self.make_turn()
        assert turn.rolls_left == 2
        turn.reroll([1, 1, 1, 1, 1])
        assert turn.status == TurnStatus.ROLLING
        turn.reroll([2, 2, 2, 2, 2])
        assert turn.rolls_left == 0
        assert turn.status == TurnStatus.CHOOSING
        with pytest.raises(ValueError):
            turn.reroll()

    def test_reroll_with_all_dice_held_uses_a_roll(self):
        turn = self.make_turn()
        turn.set_holds([True] * 5)
        turn.reroll([])
        assert turn.rolls_left == 1
        assert turn.current_roll.values == [1, 2, 3, 4, 5]

    def test_stop_rolling(self):
        turn = self.make_turn()
        turn.stop_rolling()
        assert turn.status == TurnStatus.CHOOSING
        with pytest.raises(ValueError):
            turn.toggle_hold(0)

    def test_score_from_rolling_phase(self):
        turn = self.make_turn([2, 3, 4, 5, 6])
        points = turn.score(Category.LARGE_STRAIGHT)
        assert points == 40
        assert turn.status == TurnStatus.COMPLETED
        assert turn.player.scorecard.score_for(Category.LARGE_STRAIGHT) == 40

    def test_used_category_rejected_and_turn_stays_open(self):
        player = Player("Tester")
        player.record_turn(Category.CHANCE, 10)
        turn = Turn(player)
        turn.start([6, 6, 6, 6, 6])
        assert not turn.can_score(Category.CHANCE)
        with pytest.raises(ValueError):
            turn.score(Category.CHANCE)
        assert turn.status == TurnStatus.ROLLING
        assert turn.score(Category.YAHTZEE) == 50

    def test_cannot_act_before_start(self):
        turn = Turn(Player("Tester"))
        with pytest.raises(ValueError):
            turn.reroll()
        with pytest.raises(ValueError):
            turn.score(Category.CHANCE)

    def test_decision_state(self):
        turn = self.make_turn([3, 3, 3, 2, 2])
        turn.hold(0)
        state = turn.get_decision_state()
        assert state.held[0] is True
        assert state.rolls_left == 2
        assert state.potential_scores[Category.FULL_HOUSE] == 25
        assert len(state.available_categories) == 13


class TestGame:

    def test_default_players(self):
        game = Game()
        assert [p.player_type for p in game.players] == [PlayerType.HUMAN, PlayerType.AI]
        assert game.current_player.is_human
        assert game.round_number == 1

    def test_turn_order_and_rounds(self):
        game = Game()
        turn = game.start_turn([1, 1, 2, 2, 3])
        turn.score(Category.ACES)
        game.complete_turn()
        assert game.current_player.name == "AI"
        assert game.round_number == 1

        turn = game.start_turn([1, 1, 2, 2, 3])
        turn.score(Category.TWOS)
        game.complete_turn()
        assert game.current_player.name == "You"
        assert game.round_number == 2
        assert [h["category"] for h in game.turn_history] == ["Aces", "Twos"]

    def test_complete_turn_requires_score(self):
        game = Game()
        game.start_turn()
        with pytest.raises(ValueError):
            game.complete_turn()
        with pytest.raises(ValueError):
            game.start_turn()

    def test_full_game_ends_after_thirteen_rounds(self):
        game = Game(rng=random.Random(3))
        turns = 0
        while not game.is_over:
            turn = game.start_turn()
            turn.score(turn.player.scorecard.available_categories[0])
            game.complete_turn()
            turns += 1
        assert turns == 26
        assert all(p.scorecard.is_complete for p in game.players)
        with pytest.raises(ValueError):
            game.start_turn()

    def test_winner_and_results(self):
        you, ai = Player("You"), Player("AI", PlayerType.AI)
        game = Game([you, ai], num_rounds=1)
        game.start_turn([6, 6, 6, 6, 6]).score(Category.YAHTZEE)
        game.complete_turn()
        assert game.winner is None  # not over yet
        game.start_turn([1, 2, 2, 4, 6]).score(Category.CHANCE)
        game.complete_turn()

        assert game.is_over
        assert game.winner is you
        assert game.result_for(you) == "won"
        assert game.result_for(ai) == "lost"
        assert game.get_game_state()["winner"] == "You"

    def test_tie(self):
        you, ai = Player("You"), Player("AI", PlayerType.AI)
        game = Game([you, ai], num_rounds=1)
        game.start_turn([1, 2, 3, 4, 6]).score(Category.CHANCE)
        game.complete_turn()
        game.start_turn([2, 2, 3, 4, 5]).score(Category.CHANCE)
        game.complete_turn()
        assert game.winner is None
        assert game.result_for(you) == "tie"

    def test_invalid_round_count(self):
        with pytest.raises(ValueError):
            Game(num_rounds=14)
