#!/usr/bin/env python3
"""
Yahtzee - five dice against the computer in your terminal
"""

from yahtzee.cli.__main__ import main


if __name__ == '__main__':
    main()
