"""Full-screen curses front end: the classic key-driven game."""
import curses
import logging
import time
from typing import List, Optional, Sequence
from ..core.game import Game, Turn, TurnStatus
from ..core.player import Player
from ..core.scoring import Category
from ..core.highscores import HighscoreTable, HighscoreError
from ..settings import Settings
from ..simulation import play_turn_with_strategy, strategy_registry
from .navigation import (
    Key, NavResult, TurnNavigator, QuitDialog, key_from_char,
    REROLL_BUTTON, HOLD_BUTTON,
)
from .rules import RULES_LINES, CONTROLS_LINES


logger = logging.getLogger(__name__)

REGULAR_PAIR = 1
HIGHLIGHT_PAIR = 2

SPECIAL_KEYS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_ENTER: Key.SELECT,
}


class UserQuit(Exception):
    """The player confirmed they want to leave the game."""


def translate_key(code: int) -> Key:
    if code in SPECIAL_KEYS:
        return SPECIAL_KEYS[code]
    if 0 <= code < 256:
        return key_from_char(chr(code))
    return Key.OTHER


def turn_label(player: Player, round_number: int) -> str:
    if player.is_human:
        return f"Your turn ({round_number})"
    return f"{player.name} turn ({round_number})"


def score_label(player: Player) -> str:
    if player.is_human:
        return f"Your score: {player.score}"
    return f"{player.name} score: {player.score}"


class TerminalUI:
    """Draws the game with curses and reads one key at a time."""

    def __init__(self, stdscr, settings: Settings, strategy_name: Optional[str] = None,
                 highscore_path: Optional[str] = None):
        self.stdscr = stdscr
        self.settings = settings
        self.strategy = strategy_registry.get_strategy(strategy_name or settings.ai_strategy)
        self.highscores = HighscoreTable(highscore_path or settings.highscore_path)
        self.game = Game()

    # -- drawing helpers -------------------------------------------------

    @property
    def size(self):
        return self.stdscr.getmaxyx()

    def addstr(self, y: int, x: int, text: str, attr: int = 0):
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Clipped when the window is too small
            pass

    def print_centered(self, text: str, dy: int = 0):
        height, width = self.size
        self.addstr(height // 2 + dy, max((width - len(text)) // 2, 0), text)

    def print_centered_left_align(self, lines: Sequence[str]):
        height, width = self.size
        begin = height // 2 - len(lines) // 2
        offset = max(len(line) for line in lines) // 2
        for i, line in enumerate(lines):
            self.addstr(begin + i, max(width // 2 - offset, 0), line)

    def print_padded_from_right(self, y: int, padding: int, text: str, attr: int = 0):
        _, width = self.size
        self.addstr(y, max(width - padding - len(text), 0), text, attr)

    def read_key(self) -> Key:
        return translate_key(self.stdscr.getch())

    def wait(self, seconds: float):
        self.stdscr.refresh()
        time.sleep(seconds)

    def draw_header(self):
        self.stdscr.erase()
        game = self.game
        player = game.current_player
        self.addstr(0, 0, turn_label(player, min(game.round_number, game.num_rounds)))
        for i, p in enumerate(game.players):
            self.addstr(1 + i, 0, score_label(p))

    def draw_scorecard(self, player: Player, scores, highlight_row: Optional[int]):
        height, width = self.size
        center_y = height // 2
        top = center_y - 9
        column = width // 2

        score_heading = "Player Score"
        padding_score = 3
        padding_value = padding_score * 2 + len(score_heading)
        self.print_padded_from_right(top - 1, padding_score, score_heading)
        self.print_padded_from_right(top - 1, padding_value, "Value")

        scorecard = player.scorecard
        offset = 0
        for category in Category:
            i = category.index
            y = top + i + offset
            attr = curses.color_pair(HIGHLIGHT_PAIR if i == highlight_row else REGULAR_PAIR)
            self.addstr(y, column, category.display_name, attr)

            value = "x" if scorecard.has_used(category) else str(scores[category])
            self.print_padded_from_right(y, padding_value, value, attr)

            recorded = scorecard.score_for(category)
            self.print_padded_from_right(y, padding_score, " " if recorded is None else str(recorded))

            if category == Category.SIXES:
                offset += 3
                self.addstr(y + 1, column, "Total score")
                self.print_padded_from_right(y + 1, padding_score, str(scorecard.upper_sum))
                self.addstr(y + 2, column, "Bonus (63 in total or more)")
                self.print_padded_from_right(y + 2, padding_score, str(scorecard.bonus))

    def draw_turn(self, turn: Turn, navigator: TurnNavigator):
        height, _ = self.size
        center_y = height // 2
        self.draw_header()
        self.draw_scorecard(turn.player, turn.potential_scores, navigator.highlighted_row)

        if turn.status == TurnStatus.ROLLING:
            self.addstr(center_y - 3, 0, f"Rolls left: {turn.rolls_left}")
            for i, value in enumerate(turn.dice.values):
                # Held dice are raised one line
                self.addstr(center_y - int(turn.dice.held[i]), 1 + i * 4, str(value))

            self.addstr(center_y, 21, "Reroll")
            self.addstr(center_y, 30, "Hold")
            if navigator.focus < REROLL_BUTTON:
                self.addstr(center_y, navigator.focus * 4, "[")
                self.addstr(center_y, 2 + navigator.focus * 4, "]")
            elif navigator.focus == REROLL_BUTTON:
                self.addstr(center_y, 20, "[")
                self.addstr(center_y, 27, "]")
            elif navigator.focus == HOLD_BUTTON:
                self.addstr(center_y, 29, "[")
                self.addstr(center_y, 34, "]")
        else:
            for i, value in enumerate(turn.current_roll.sorted_values):
                self.addstr(center_y, 1 + i * 4, str(value))
            self.addstr(center_y - 11, 30, "Choose a combination")

    # -- screens ---------------------------------------------------------

    def title_screen(self):
        self.stdscr.erase()
        self.print_centered_left_align([
            "Hello, this is Yahtzee.",
            "Press 'h' for help.",
            "Press Enter to play.",
        ])
        if self.stdscr.getch() == ord("h"):
            self.help_screen()

    def help_screen(self):
        self.stdscr.erase()
        self.print_centered_left_align(
            RULES_LINES + [""] + CONTROLS_LINES + ["", "                           Press Enter to play"]
        )
        while self.read_key() != Key.SELECT:
            pass

    def confirm_quit(self):
        """Ask before leaving; raises UserQuit on yes."""
        height, width = self.size
        center_y, center_x = height // 2, width // 2
        dialog = QuitDialog()
        while True:
            self.draw_header()
            self.print_centered("Are you sure you want to quit?")
            self.addstr(center_y + 2, center_x - 4, "yes")
            self.addstr(center_y + 2, center_x + 2, "no")
            if dialog.answer:
                self.addstr(center_y + 2, center_x - 5, "[")
                self.addstr(center_y + 2, center_x - 1, "]")
            else:
                self.addstr(center_y + 2, center_x + 1, "[")
                self.addstr(center_y + 2, center_x + 4, "]")

            answer = dialog.handle(self.read_key())
            if answer is True:
                raise UserQuit()
            if answer is False:
                return

    def play_human_turn(self):
        turn = self.game.start_turn()
        navigator = TurnNavigator(turn)
        while turn.status != TurnStatus.COMPLETED:
            self.draw_turn(turn, navigator)
            result = navigator.handle(self.read_key())
            if result == NavResult.QUIT_REQUESTED:
                self.confirm_quit()
            elif result == NavResult.REJECTED:
                curses.beep()

    def play_ai_turn(self):
        settings = self.settings
        player = self.game.current_player
        self.draw_header()
        self.print_centered(f"{player.name} is rolling...")
        self.wait(settings.ai_roll_delay)

        turn = self.game.start_turn()
        points = play_turn_with_strategy(turn, self.strategy, self.game)

        self.draw_header()
        self.print_centered(f"{player.name} rolled:")
        self.print_centered(str(turn.current_roll), 2)
        self.wait(settings.ai_show_delay)

        self.print_centered(f"{player.name} chose: {turn.chosen_category.display_name} for {points} points", 4)
        self.wait(settings.ai_choice_delay)

    def wait_for(self, wanted: int) -> bool:
        """Block until the wanted key; False if the player pressed q instead."""
        while True:
            code = self.stdscr.getch()
            if code == wanted:
                return True
            if code == ord("q"):
                return False

    def read_name(self) -> str:
        height, width = self.size
        prompt = "Enter your name: "
        self.stdscr.erase()
        self.addstr(height // 2, max(width // 2 - 20, 0), prompt)
        curses.echo()
        curses.curs_set(1)
        try:
            raw = self.stdscr.getstr(height // 2, max(width // 2 - 20, 0) + len(prompt), 40)
        finally:
            curses.noecho()
            curses.curs_set(0)
        return raw.decode("utf-8", errors="replace")

    def show_error(self, message: str):
        self.stdscr.erase()
        self.print_centered_left_align([message, "", "Press any key to exit."])
        self.stdscr.getch()

    def endgame(self):
        human = next((p for p in self.game.players if p.is_human), self.game.players[0])
        headline = {
            "won": "Congratulations! You won!",
            "tie": "It's a tie!",
            "lost": "You lost!",
        }[self.game.result_for(human)]

        try:
            self.highscores.load()
        except HighscoreError as e:
            logger.error("%s", e)
            self.show_error(str(e))
            return

        if self.highscores.is_new_highscore(human.score):
            prompt = "New highscore! Press h to see highscores"
        else:
            prompt = "Press h to see highscores"

        self.stdscr.erase()
        self.print_centered_left_align(
            ["Game ended!", headline, prompt, ""] + [score_label(p) for p in self.game.players] + [""]
        )
        if not self.wait_for(ord("h")):
            return

        self.stdscr.erase()
        lines: List[str] = ["HIGHSCORES:", ""]
        if not len(self.highscores):
            lines += ["", "No highscores. Press Enter to add your score"]
        else:
            lines += [str(h) for h in self.highscores.top(self.settings.highscore_limit)]
            lines += ["", "Press Enter to add your score"]
        self.print_centered_left_align(lines)
        if not self.wait_for(ord("\n")):
            return

        name = self.read_name()
        self.highscores.add(name, human.score)
        try:
            self.highscores.save()
        except HighscoreError as e:
            logger.error("%s", e)
            self.show_error(str(e))
            return

        self.stdscr.erase()
        self.print_centered_left_align(["Added your score!", "Press any key to exit."])
        self.stdscr.getch()

    def run(self):
        curses.start_color()
        curses.init_pair(REGULAR_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
        curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
        self.stdscr.keypad(True)
        curses.curs_set(0)
        curses.noecho()

        self.title_screen()
        try:
            while not self.game.is_over:
                if self.game.current_player.is_human:
                    self.play_human_turn()
                else:
                    self.play_ai_turn()
                self.game.complete_turn()
        except UserQuit:
            logger.info("Player quit in round %d", self.game.round_number)
            return

        self.stdscr.erase()
        self.endgame()


def run_terminal(settings: Settings, strategy_name: Optional[str] = None,
                 highscore_path: Optional[str] = None):
    """Run the curses game; curses.wrapper restores the terminal on exit."""
    curses.wrapper(lambda stdscr: TerminalUI(stdscr, settings, strategy_name, highscore_path).run())
