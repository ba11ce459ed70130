import logging
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt, Confirm
from typing import Dict, List, Optional
from ..core.game import Game, Turn, TurnStatus
from ..core.player import Player
from ..core.scoring import Category
from ..core.highscores import HighscoreTable, HighscoreError
from ..settings import Settings, get_settings
from ..simulation import GameSimulator, SimulationResult, play_turn_with_strategy
from ..simulation.strategy_registry import strategy_registry
from .rules import RULES_LINES


logger = logging.getLogger(__name__)

console = Console()


def parse_positions(text: str) -> List[int]:
    """Turn '1 3 5' or '135' into zero-based die indices."""
    positions = set()
    for char in text.replace(",", " ").replace(" ", ""):
        if char not in "12345":
            raise ValueError(f"Invalid die position: {char}")
        positions.add(int(char) - 1)
    return sorted(positions)


def render_dice(values: List[int], held: Optional[List[bool]] = None) -> str:
    held = held or [False] * len(values)
    return " ".join(f"[bold green]({v})[/bold green]" if h else f"[{v}]" for v, h in zip(values, held))


def scorecard_table(player: Player, scores: Optional[Dict[Category, int]] = None) -> Table:
    """Scorecard with the current dice's potential values beside open rows."""
    table = Table(title=f"{player.name} - {player.score} points")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="cyan")
    table.add_column("Value", style="yellow", justify="right")
    table.add_column("Score", style="green", justify="right")

    scorecard = player.scorecard
    for category in Category:
        recorded = scorecard.score_for(category)
        if scores is None:
            value = ""
        else:
            value = "x" if recorded is not None else str(scores[category])
        table.add_row(
            str(category.index + 1),
            category.display_name,
            value,
            "" if recorded is None else str(recorded),
        )
        if category == Category.SIXES:
            table.add_row("", "Total score", "", str(scorecard.upper_sum))
            table.add_row("", "Bonus (63 in total or more)", "", str(scorecard.bonus), end_section=True)

    return table


def simulation_table(result: SimulationResult, strategies: Dict[str, str]) -> Table:
    table = Table(title=f"Simulation Results ({result.num_simulations} games)")
    table.add_column("Player", style="cyan")
    table.add_column("Strategy", style="magenta")
    table.add_column("Win Rate", style="green", justify="right")
    table.add_column("Avg Score", style="yellow", justify="right")
    table.add_column("Std Dev", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("Upper Bonus", justify="right")

    for name, rate in sorted(result.win_rates.items(), key=lambda x: x[1], reverse=True):
        table.add_row(
            name,
            strategies.get(name, ""),
            f"{rate:.1%}",
            f"{result.avg_scores[name]:.1f}",
            f"{result.std_deviation(name):.1f}",
            f"{result.percentiles(name)[50]:.0f}",
            f"{result.upper_bonus_rates[name]:.1%}",
        )
    table.caption = f"Ties: {result.tie_rate:.1%}"
    return table


class InteractiveCLI:
    """Prompt-driven command-line interface for Yahtzee."""

    def __init__(self, settings: Optional[Settings] = None, highscore_path: Optional[str] = None):
        self.settings = settings or get_settings()
        self.simulator = GameSimulator()
        self.opponent_strategy = self.settings.ai_strategy
        self.highscores = HighscoreTable(highscore_path or self.settings.highscore_path)

    def display_turn(self, turn: Turn):
        console.print(scorecard_table(turn.player, turn.potential_scores))
        console.print(f"\nDice: {render_dice(turn.dice.values, turn.dice.held)}")
        console.print("        1   2   3   4   5")
        if turn.status == TurnStatus.ROLLING:
            console.print(f"[yellow]Rolls left: {turn.rolls_left}[/yellow]")

    def ask_holds(self, turn: Turn):
        while True:
            text = Prompt.ask("[cyan]Positions to keep (e.g. 1 3 5, blank for none)[/cyan]", default="")
            try:
                positions = parse_positions(text)
            except ValueError as e:
                console.print(f"[red]{e}[/red]")
                continue
            turn.set_holds([i in positions for i in range(turn.dice.num_dice)])
            return

    def ask_category(self, turn: Turn) -> Category:
        available = turn.player.scorecard.available_categories
        while True:
            number = IntPrompt.ask("[cyan]Category number to score[/cyan]")
            try:
                category = Category.from_index(number - 1)
            except ValueError:
                console.print("[red]Please enter a number between 1 and 13[/red]")
                continue
            if category not in available:
                console.print(f"[red]{category.display_name} has already been used[/red]")
                continue
            return category

    def play_human_turn(self, game: Game):
        turn = game.start_turn()
        while turn.status == TurnStatus.ROLLING:
            self.display_turn(turn)
            action = Prompt.ask(
                "\n[cyan]What next?[/cyan]",
                choices=["reroll", "score"],
                default="reroll"
            )
            if action == "score":
                turn.stop_rolling()
                break
            self.ask_holds(turn)
            turn.reroll()

        self.display_turn(turn)
        category = self.ask_category(turn)
        points = turn.score(category)
        console.print(f"\n[green]Scored {points} points in {category.display_name}[/green]")

    def play_ai_turn(self, game: Game):
        player = game.current_player
        strategy = strategy_registry.get_strategy(self.opponent_strategy)
        with console.status(f"[bold green]{player.name} is rolling..."):
            turn = game.start_turn()
            points = play_turn_with_strategy(turn, strategy, game)
        console.print(f"\n[magenta]{player.name} rolled: {turn.current_roll}[/magenta]")
        console.print(f"[magenta]{player.name} chose: {turn.chosen_category.display_name} "
                      f"for {points} points[/magenta]")

    def play_game(self):
        """Play a full game against the computer."""
        game = Game()
        logger.info("New game against the %s strategy", self.opponent_strategy)
        console.print(f"[dim]Opponent strategy: {self.opponent_strategy}[/dim]")

        while not game.is_over:
            player = game.current_player
            console.rule(f"Round {game.round_number} - {player.name}")
            if player.is_human:
                self.play_human_turn(game)
            else:
                self.play_ai_turn(game)
            game.complete_turn()

        self.show_results(game)

    def show_results(self, game: Game):
        human = next((p for p in game.players if p.is_human), game.players[0])
        headline = {
            "won": "[bold green]Congratulations! You won![/bold green]",
            "tie": "[bold yellow]It's a tie![/bold yellow]",
            "lost": "[bold red]You lost![/bold red]",
        }[game.result_for(human)]

        lines = [headline, ""] + [f"{p.name}: {p.score}" for p in game.players]
        console.print(Panel("\n".join(lines), title="Game ended!", border_style="blue"))

        try:
            self.highscores.load()
        except HighscoreError as e:
            console.print(f"[red]{e}[/red]")
            return

        if self.highscores.is_new_highscore(human.score):
            console.print("[bold magenta]New highscore![/bold magenta]")
        if Confirm.ask("[cyan]Add your score to the highscores?[/cyan]", default=True):
            name = Prompt.ask("[cyan]Enter your name[/cyan]", default="")
            self.highscores.add(name, human.score)
            try:
                self.highscores.save()
            except HighscoreError as e:
                console.print(f"[red]{e}[/red]")
                return
            console.print("[green]Added your score![/green]")
            self.show_highscores(reload=False)

    def show_highscores(self, reload: bool = True):
        if reload:
            try:
                self.highscores.load()
            except HighscoreError as e:
                console.print(f"[red]{e}[/red]")
                return

        if not len(self.highscores):
            console.print("[yellow]No highscores yet.[/yellow]")
            return

        table = Table(title="Highscores")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("Score", style="green", justify="right")
        for i, entry in enumerate(self.highscores.top(self.settings.highscore_limit), start=1):
            table.add_row(str(i), entry.name, str(entry.score))
        console.print(table)

    def show_rules(self):
        console.print(Panel("\n".join(RULES_LINES[1:]),
                            title="Yahtzee rules", border_style="blue"))

    def run_simulation(self):
        """Pit two strategies against each other."""
        names = strategy_registry.list_strategies()
        first = Prompt.ask("[cyan]First strategy[/cyan]", choices=names, default="keeper")
        second = Prompt.ask("[cyan]Second strategy[/cyan]", choices=names, default="greedy")
        num_games = IntPrompt.ask("[cyan]Number of games[/cyan]", default=1000)
        if num_games < 1:
            console.print("[red]Number of games must be positive[/red]")
            return

        strategies = {f"{first.capitalize()} 1": first, f"{second.capitalize()} 2": second}
        with console.status(f"[bold green]Simulating {num_games} games..."):
            result = self.simulator.simulate_games(list(strategies.items()), num_simulations=num_games)
        console.print(simulation_table(result, strategies))

    def select_strategy(self):
        """Allow user to select the opponent's strategy."""
        strategies_info = strategy_registry.get_all_strategies_info()

        table = Table(title="Available Strategies")
        table.add_column("Name", style="cyan")
        table.add_column("Description", style="green")
        table.add_column("Parameters", style="yellow")

        for name, config in strategies_info.items():
            params = ", ".join([f"{k}={v}" for k, v in config.parameters.items()])
            table.add_row(name, config.description, params or "None")

        console.print(table)
        console.print(f"\n[bold]Current opponent strategy: {self.opponent_strategy}[/bold]")

        strategy_name = Prompt.ask(
            "\n[cyan]Select strategy[/cyan]",
            choices=list(strategies_info.keys()),
            default=self.opponent_strategy
        )

        self.opponent_strategy = strategy_name
        console.print(f"\n[green]Opponent strategy set to: {strategy_name}[/green]")

    def run(self):
        """Main CLI loop."""
        console.print(Panel.fit(
            "[bold cyan]Hello, this is Yahtzee![/bold cyan]\n"
            "Five dice, two re-rolls, thirteen rows to fill",
            border_style="blue"
        ))

        while True:
            choice = Prompt.ask(
                "\n[cyan]What would you like to do?[/cyan]",
                choices=["play", "simulate", "highscores", "rules", "strategy", "quit"],
                default="play"
            )

            if choice == "play":
                self.play_game()
            elif choice == "simulate":
                self.run_simulation()
            elif choice == "highscores":
                self.show_highscores()
            elif choice == "rules":
                self.show_rules()
            elif choice == "strategy":
                self.select_strategy()
            elif choice == "quit":
                console.print("[yellow]Thanks for playing![/yellow]")
                break
