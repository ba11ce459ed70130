"""Yahtzee - five dice against the computer in your terminal."""

__version__ = "0.1.0"
