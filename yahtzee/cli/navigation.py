"""Key handling for the terminal game, kept free of any screen I/O."""
from enum import Enum
from typing import Optional
from ..core.game import Turn, TurnStatus
from ..core.scoring import Category


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    SELECT = "select"
    QUIT = "quit"
    OTHER = "other"


# Vi-style letters alongside the arrow keys
CHAR_KEYS = {
    "h": Key.LEFT,
    "l": Key.RIGHT,
    "k": Key.UP,
    "j": Key.DOWN,
    "\n": Key.SELECT,
    "\r": Key.SELECT,
    "q": Key.QUIT,
}


def key_from_char(char: str) -> Key:
    return CHAR_KEYS.get(char, Key.OTHER)


# Focus ring while rolling: five dice, two buttons, then the scorecard
REROLL_BUTTON = 5
HOLD_BUTTON = 6
SCORECARD = 7
FOCUS_COUNT = 8
LAST_ROW = len(Category) - 1


class NavResult(Enum):
    NONE = "none"
    REROLLED = "rerolled"
    STOPPED = "stopped"
    SCORED = "scored"
    REJECTED = "rejected"
    QUIT_REQUESTED = "quit_requested"


class TurnNavigator:
    """Translates keys into actions on a human player's turn."""

    def __init__(self, turn: Turn):
        self.turn = turn
        self.focus = 0
        self.row = 0

    @property
    def is_rolling(self) -> bool:
        return self.turn.status == TurnStatus.ROLLING

    @property
    def highlighted_row(self) -> Optional[int]:
        """Scorecard row to highlight, if the scorecard has focus."""
        if self.turn.status == TurnStatus.CHOOSING or self.focus == SCORECARD:
            return self.row
        return None

    @property
    def focused_die(self) -> Optional[int]:
        if self.is_rolling and self.focus < REROLL_BUTTON:
            return self.focus
        return None

    def handle(self, key: Key) -> NavResult:
        if key == Key.QUIT:
            return NavResult.QUIT_REQUESTED
        if self.turn.status == TurnStatus.ROLLING:
            return self._handle_rolling(key)
        if self.turn.status == TurnStatus.CHOOSING:
            return self._handle_choosing(key)
        return NavResult.NONE

    def _move_row(self, step: int):
        self.row = min(max(self.row + step, 0), LAST_ROW)

    def _handle_rolling(self, key: Key) -> NavResult:
        if key == Key.LEFT:
            self.focus = (self.focus - 1) % FOCUS_COUNT
        elif key == Key.RIGHT:
            self.focus = (self.focus + 1) % FOCUS_COUNT
        elif key == Key.UP:
            if self.focus < REROLL_BUTTON:
                self.turn.hold(self.focus)
            elif self.focus == SCORECARD:
                self._move_row(-1)
        elif key == Key.DOWN:
            if self.focus < REROLL_BUTTON:
                self.turn.release(self.focus)
            elif self.focus == SCORECARD:
                self._move_row(1)
        elif key == Key.SELECT:
            if self.focus < REROLL_BUTTON:
                self.turn.toggle_hold(self.focus)
            elif self.focus == REROLL_BUTTON:
                self.turn.reroll()
                return NavResult.REROLLED
            elif self.focus == HOLD_BUTTON:
                self.turn.stop_rolling()
                return NavResult.STOPPED
            else:
                return self._score_row()
        return NavResult.NONE

    def _handle_choosing(self, key: Key) -> NavResult:
        if key == Key.UP:
            self._move_row(-1)
        elif key == Key.DOWN:
            self._move_row(1)
        elif key == Key.SELECT:
            return self._score_row()
        return NavResult.NONE

    def _score_row(self) -> NavResult:
        category = Category.from_index(self.row)
        if not self.turn.can_score(category):
            return NavResult.REJECTED
        self.turn.score(category)
        return NavResult.SCORED


class QuitDialog:
    """Yes/no confirmation; starts on "no"."""

    def __init__(self):
        self.answer = False

    def handle(self, key: Key) -> Optional[bool]:
        """True to quit, False to go back, None while still asking."""
        if key in (Key.LEFT, Key.RIGHT):
            self.answer = not self.answer
        elif key == Key.SELECT:
            return self.answer
        elif key == Key.QUIT:
            return False
        return None
