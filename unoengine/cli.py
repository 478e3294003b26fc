"""CLI entry point."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO rule engine: hot-seat play and random simulations")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_players(players: str) -> list[str]:
    names = [s.strip() for s in players.split(",") if s.strip()]
    if not names:
        raise typer.BadParameter("Give at least one player name.")
    return names


@app.command()
def play(
    players: str = typer.Option(
        "alice,bob",
        "--players",
        "-p",
        help="Comma-separated player names, one human per seat (1-6)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="UNO_LOG_LEVEL"),
) -> None:
    """Run a hot-seat UNO game in the terminal."""
    from unoengine.agents.human_agent import HumanAgent
    from unoengine.orchestration.game_runner import GameRunner

    _setup_logging(log_level)
    names = _parse_players(players)
    try:
        runner = GameRunner({name: HumanAgent(name=name) for name in names}, seed=seed)
        result = runner.run()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(f"Winner: {result.winner or 'None'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    players: int = typer.Option(4, "--players", "-n", help="Number of seats (1-6)"),
    games: int = typer.Option(10, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    max_turns: int = typer.Option(2000, "--max-turns", help="Turn limit per game"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="UNO_LOG_LEVEL"),
) -> None:
    """Play games between random agents, checking card conservation after every action."""
    import random

    from unoengine.agents.random_agent import RandomAgent
    from unoengine.orchestration.game_runner import GameRunner
    from unoengine.engine.deck import cards_conserved

    def check_conservation(state) -> None:
        if not cards_conserved(state):
            typer.echo(f"Card conservation broken after: {state.last_action}", err=True)
            raise typer.Exit(code=1)

    _setup_logging(log_level)
    rng = random.Random(seed)
    wins: Counter[str] = Counter()
    for g in range(games):
        agents = {
            f"player_{i}": RandomAgent(name=f"Bot{i}", seed=rng.randint(0, 2**31 - 1))
            for i in range(players)
        }
        try:
            runner = GameRunner(
                agents,
                seed=rng.randint(0, 2**31 - 1),
                max_turns=max_turns,
                after_action=check_conservation,
            )
            result = runner.run()
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        wins[result.winner or "unfinished"] += 1
        typer.echo(f"Game {g + 1}: winner={result.winner} turns={result.num_turns} rejected={result.rejected}")

    typer.echo("Results:")
    for pid, w in wins.most_common():
        typer.echo(f"  {pid}: {w}")


if __name__ == "__main__":
    app()
