"""Rules text shown by both front ends."""

RULES_LINES = [
    "                       Yahtzee rules.",
    "",
    "On each turn every player rolls 5 dice.",
    "They can save any dice they want and reroll the dice up to 2 times.",
    "Once the dice are rolled, the player crosses out one of the 13 combinations to get points",
    "The combinations: ",
    "    First six 'upper section' combinations score total of the respective dice",
    "    For example, [1, 2, 3, 3, 3] scores 1 for Aces, 2 for Twos and 3 * 3 = 9 for Threes",
    "    An upper section total of 63 or more earns a 35 point bonus",
    "'Lower section' combinations:",
    "    3-of-a-Kind - 3 or more dice of the same number. The score is the total of all dice.",
    "    4-of-a-Kind - 4 or more dice of the same number. The score is the total of all dice.",
    "    Full House - 3 dice of one number and 2 of another. 25 points.",
    "    Small Straight - 4 consecutive numbers. 30 points.",
    "    Large Straight - 5 consecutive numbers. 40 points.",
    "    Yahtzee - 5 dice of the same number. 50 points.",
    "    Chance - no requirements. The score is the total of all dice.",
    "",
    "Once the players cross out all 13 combinations,",
    "the game ends and the player with the most points wins the game",
]

CONTROLS_LINES = [
    "Controls: left/right (h/l) move, up/down (k/j) hold/release a die or pick a row,",
    "Enter toggles a die or confirms, q quits.",
]
