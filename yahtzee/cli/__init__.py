"""Terminal front ends for Yahtzee."""
