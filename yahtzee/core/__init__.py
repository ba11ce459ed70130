"""Game rules and state for Yahtzee."""
