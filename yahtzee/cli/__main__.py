import logging
import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from ..settings import get_settings
from ..simulation import GameSimulator
from ..simulation.strategy_registry import strategy_registry
from .interface import InteractiveCLI, simulation_table


def setup_logging(level: str, log_file=None, fullscreen: bool = False):
    """Send log records to stderr through rich, or to a file while curses owns the screen."""
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    elif fullscreen:
        handler = logging.NullHandler()
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=[handler], force=True)


@click.command()
@click.option('--prompt', 'prompt_mode', is_flag=True, help='Play with line prompts instead of the full-screen game')
@click.option('--simulate', '-s', is_flag=True, help='Run computer-vs-computer games and print statistics')
@click.option('--games', '-n', type=int, default=1000, show_default=True, help='Number of games to simulate')
@click.option('--strategy', type=click.Choice(strategy_registry.list_strategies()),
              help='Opponent strategy (first player when simulating)')
@click.option('--opponent', type=click.Choice(strategy_registry.list_strategies()), default='greedy',
              show_default=True, help='Second player strategy when simulating')
@click.option('--seed', type=int, help='Random seed for simulations')
@click.option('--workers', type=int, help='Worker processes for simulations')
@click.option('--highscores', 'highscore_path', type=click.Path(dir_okay=False), help='Highscore file')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
def main(prompt_mode, simulate, games, strategy, opponent, seed, workers, highscore_path, log_level):
    """Yahtzee - five dice against the computer in your terminal."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid YAHTZEE_* settings:\n{e}") from e
    fullscreen = not (prompt_mode or simulate)
    setup_logging(log_level or settings.log_level, settings.log_file, fullscreen)

    if simulate:
        if games < 1:
            raise click.BadParameter("must be positive", param_hint="--games")
        first = strategy or settings.ai_strategy
        strategies = {f"{first.capitalize()} 1": first, f"{opponent.capitalize()} 2": opponent}
        click.echo(f"Running {games} games of simulation...")
        simulator = GameSimulator(num_workers=workers)
        result = simulator.simulate_games(list(strategies.items()), num_simulations=games, seed=seed)
        Console().print(simulation_table(result, strategies))
        return

    try:
        if prompt_mode:
            cli = InteractiveCLI(settings, highscore_path)
            if strategy:
                cli.opponent_strategy = strategy
            cli.run()
        else:
            from .terminal import run_terminal
            run_terminal(settings, strategy, highscore_path)
    except KeyboardInterrupt:
        click.echo("\nBye!")


if __name__ == "__main__":
    main()
