"""
Tests for the computer opponent strategies.
"""
import pytest
from yahtzee.core.dice import Dice
from yahtzee.core.game import Turn, TurnStatus
from yahtzee.core.player import Player, PlayerType
from yahtzee.core.scoring import Category
from yahtzee.simulation import play_turn_with_strategy
from yahtzee.simulation.strategies import GreedyStrategy, KeeperStrategy, RandomStrategy
from yahtzee.simulation.strategy_registry import strategy_registry


def started_turn(values, used=()):
    player = Player("AI", PlayerType.AI)
    for category in used:
        player.record_turn(category, 0)
    turn = Turn(player)
    turn.start(list(values))
    return turn


class TestGreedyStrategy:

    def test_never_rerolls(self):
        turn = started_turn([1, 2, 3, 4, 6])
        assert not GreedyStrategy().should_reroll(turn.get_decision_state())

    def test_picks_highest_score(self):
        turn = started_turn([3, 3, 3, 2, 2])
        assert GreedyStrategy().select_category(turn.get_decision_state()) == Category.FULL_HOUSE

    def test_ties_go_to_later_category(self):
        # 3 of a kind, 4 of a kind and Chance all score 5
        turn = started_turn([1, 1, 1, 1, 1], used=[Category.YAHTZEE])
        assert GreedyStrategy().select_category(turn.get_decision_state()) == Category.CHANCE

    def test_skips_used_categories(self):
        turn = started_turn([3, 3, 3, 2, 2], used=[Category.FULL_HOUSE, Category.CHANCE])
        assert GreedyStrategy().select_category(turn.get_decision_state()) == Category.THREE_OF_A_KIND

    def test_plays_turn_with_single_roll(self):
        turn = started_turn([2, 3, 4, 5, 6])
        points = play_turn_with_strategy(turn, GreedyStrategy())
        assert points == 40
        assert turn.rolls_left == 2
        assert turn.status == TurnStatus.COMPLETED


class TestKeeperStrategy:

    def test_holds_most_common_face(self):
        turn = started_turn([4, 4, 2, 4, 6])
        holds = KeeperStrategy().select_holds(turn.get_decision_state())
        assert holds == [True, True, False, True, False]

    def test_tie_prefers_higher_face(self):
        turn = started_turn([2, 2, 5, 5, 1])
        holds = KeeperStrategy().select_holds(turn.get_decision_state())
        assert holds == [False, False, True, True, False]

    def test_holds_straight_draw(self):
        turn = started_turn([1, 2, 3, 4, 4])
        holds = KeeperStrategy().select_holds(turn.get_decision_state())
        assert holds == [True, True, True, True, False]

    def test_stops_on_made_yahtzee(self):
        turn = started_turn([5, 5, 5, 5, 5])
        assert not KeeperStrategy().should_reroll(turn.get_decision_state())

    def test_rerolls_ordinary_hand(self):
        turn = started_turn([1, 3, 3, 5, 6])
        assert KeeperStrategy().should_reroll(turn.get_decision_state())

    def test_prefers_upper_bonus_pace(self):
        turn = started_turn([1, 1, 1, 2, 4])
        category = KeeperStrategy().select_category(turn.get_decision_state())
        assert category == Category.ACES

    def test_dumps_junk_in_cheapest_row(self):
        turn = started_turn([1, 2, 4, 5, 6], used=[Category.CHANCE])
        category = KeeperStrategy().select_category(turn.get_decision_state())
        assert category == Category.ACES

    def test_plays_full_turn(self):
        turn = Turn(Player("AI", PlayerType.AI), Dice())
        turn.start()
        play_turn_with_strategy(turn, KeeperStrategy())
        assert turn.status == TurnStatus.COMPLETED
        assert turn.chosen_category is not None


class TestRandomStrategy:

    def test_seeded_choices_are_open_categories(self):
        strategy = strategy_registry.get_strategy("random", seed=4)
        turn = started_turn([1, 2, 3, 4, 5], used=list(Category)[:12])
        assert strategy.select_category(turn.get_decision_state()) == Category.CHANCE


class TestStrategyRegistry:

    def test_lists_builtin_strategies(self):
        assert set(strategy_registry.list_strategies()) >= {"greedy", "keeper", "random"}

    def test_lookup_is_case_insensitive(self):
        assert isinstance(strategy_registry.get_strategy("Greedy"), GreedyStrategy)

    def test_parameter_override(self):
        strategy = strategy_registry.get_strategy("keeper", expectation_weight=0.0)
        assert strategy.expectation_weight == 0.0

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            strategy_registry.get_strategy("psychic")

    def test_unknown_parameter(self):
        with pytest.raises(ValueError):
            strategy_registry.get_strategy("greedy", patience=3)

    def test_default_config_not_shared(self):
        strategy_registry.get_strategy("keeper", upper_bonus_weight=1.0)
        info = strategy_registry.get_strategy_info("keeper")
        assert info.parameters["upper_bonus_weight"] == 5.0

    def test_description(self):
        assert RandomStrategy().get_description().startswith("Random:")
