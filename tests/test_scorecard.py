"""
Tests for the scorecard and its upper bonus.
"""
import pytest
from yahtzee.core.scorecard import Scorecard
from yahtzee.core.scoring import Category


class TestScorecard:

    def test_record_and_total(self):
        card = Scorecard()
        card.record(Category.CHANCE, 20)
        card.record(Category.FIVES, 15)
        assert card.total == 35
        assert card.upper_sum == 15
        assert card.lower_sum == 20
        assert card.has_used(Category.CHANCE)
        assert Category.CHANCE not in card.available_categories

    def test_cannot_use_category_twice(self):
        card = Scorecard()
        card.record(Category.YAHTZEE, 0)
        with pytest.raises(ValueError):
            card.record(Category.YAHTZEE, 50)
        assert card.score_for(Category.YAHTZEE) == 0

    def test_upper_bonus_awarded_at_threshold(self):
        card = Scorecard()
        for category, points in [(Category.SIXES, 18), (Category.FIVES, 15),
                                 (Category.FOURS, 12), (Category.THREES, 9),
                                 (Category.TWOS, 6)]:
            card.record(category, points)
        assert card.upper_sum == 60
        assert not card.got_upper_bonus

        card.record(Category.ACES, 3)
        assert card.got_upper_bonus
        assert card.total == 63 + 35

    def test_bonus_counted_once(self):
        card = Scorecard()
        card.record(Category.SIXES, 30)
        card.record(Category.FIVES, 25)
        card.record(Category.FOURS, 20)
        card.record(Category.CHANCE, 30)
        assert card.bonus == 35
        assert card.total == 75 + 35 + 30

    def test_lower_category_does_not_trigger_bonus(self):
        card = Scorecard()
        card.record(Category.CHANCE, 30)
        card.record(Category.YAHTZEE, 50)
        assert not card.got_upper_bonus

    def test_is_complete(self):
        card = Scorecard()
        for category in Category:
            assert not card.is_complete
            card.record(category, 0)
        assert card.is_complete
        assert card.available_categories == []

    def test_negative_points_rejected(self):
        with pytest.raises(ValueError):
            Scorecard().record(Category.ACES, -1)
