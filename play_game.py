#!/usr/bin/env python
"""
Command-line driver for watching the search agents play each other.

Three agents, one per side, play on the reference board. Several games can
be played in a row and a summary table is printed at the end.

Example usage:
    # Greedy vs paranoid vs MCTS
    python play_game.py --blue greedy --green paranoid --red mcts

    # Ten quick games with a short MCTS budget
    python play_game.py --games 10 --mcts-time 0.2 --max-plies 120
"""
import argparse
import logging
import random
from collections import Counter
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from threechess_ai.agents import Agent, GreedyAgent, ParanoidAgent, RandomAgent
from threechess_ai.core.board import ThreeSideBoard, create_board
from threechess_ai.core.constants import COLOUR_STYLES, TURN_ORDER, Colour
from threechess_ai.core.state import IllegalMoveError
from threechess_ai.mcts import MCTSAgent, MCTSConfig

logger = logging.getLogger("play_game")

AGENT_CHOICES = ["random", "greedy", "paranoid", "mcts"]


def create_agent(kind: str, args: argparse.Namespace) -> Agent:
    """
    Create an agent from its command-line name.

    Args:
        kind: One of AGENT_CHOICES
        args: Parsed command-line arguments

    Returns:
        Agent
    """
    if kind == "random":
        return RandomAgent(seed=args.seed)
    if kind == "greedy":
        return GreedyAgent()
    if kind == "paranoid":
        return ParanoidAgent(depth=args.depth)
    if kind == "mcts":
        config = MCTSConfig(time_limit=args.mcts_time, playout_depth=args.playout_depth, seed=args.seed)
        return MCTSAgent(config=config, verbose=args.verbose)
    raise ValueError(f"Unknown agent type: {kind}")


def play_game(agents: Dict[Colour, Agent], max_plies: int, console: Optional[Console] = None) -> ThreeSideBoard:
    """
    Play one game to the end.

    A side that offers no move, or an illegal one, stalls the game and it
    ends there without a result.

    Args:
        agents: Agent for each side
        max_plies: Number of moves after which the game ends undecided
        console: Console to show each position on (None = quiet)

    Returns:
        The final board
    """
    board = create_board(max_plies=max_plies)

    while not board.game_over:
        colour = board.turn
        agent = agents[colour]
        move = agent.choose_move(board)
        if move is None:
            logger.warning("%s (%s) has no move, stopping game", agent, colour.name)
            break

        try:
            board.move(move.start, move.end)
        except IllegalMoveError as exc:
            logger.warning("%s (%s) played an illegal move: %s", agent, colour.name, exc)
            break

        if console is not None:
            console.print(f"[{COLOUR_STYLES[colour]}]{agent}[/] plays {move}")
            console.print(str(board))

    for agent in agents.values():
        agent.on_game_end(board)

    return board


def print_summary(console: Console, agents: Dict[Colour, Agent], results: Counter, games: int) -> None:
    """Print a table of wins and losses per side."""
    table = Table(title=f"Results over {games} game(s)")
    table.add_column("Side")
    table.add_column("Agent")
    table.add_column("Wins", justify="right")
    table.add_column("Losses", justify="right")

    for colour in TURN_ORDER:
        table.add_row(
            f"[{COLOUR_STYLES[colour]}]{colour.name}[/]",
            str(agents[colour]),
            str(results[("win", colour)]),
            str(results[("loss", colour)]),
        )

    console.print(table)
    console.print(f"Undecided games: {results['undecided']}")


def main():
    """Run games with command-line arguments."""
    parser = argparse.ArgumentParser(description="Watch search agents play a three-sided game.")
    parser.add_argument("--blue", choices=AGENT_CHOICES, default="greedy", help="Agent for BLUE")
    parser.add_argument("--green", choices=AGENT_CHOICES, default="paranoid", help="Agent for GREEN")
    parser.add_argument("--red", choices=AGENT_CHOICES, default="mcts", help="Agent for RED")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument("--max-plies", type=int, default=300, help="Moves before a game ends undecided")
    parser.add_argument("--depth", type=int, default=3, help="Paranoid search depth")
    parser.add_argument("--mcts-time", type=float, default=5.0, help="MCTS time budget per move (seconds)")
    parser.add_argument("--playout-depth", type=int, default=10, help="Random plies per MCTS simulation")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--show-moves", action="store_true", help="Print every move and position")
    parser.add_argument("--verbose", action="store_true", help="Print detailed information")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    if args.seed is not None:
        random.seed(args.seed)

    console = Console()
    agents = {
        Colour.BLUE: create_agent(args.blue, args),
        Colour.GREEN: create_agent(args.green, args),
        Colour.RED: create_agent(args.red, args),
    }

    results: Counter = Counter()
    for _ in tqdm(range(args.games), desc="Games", disable=args.games == 1):
        board = play_game(agents, args.max_plies, console if args.show_moves else None)
        if board.winner is None:
            results["undecided"] += 1
        else:
            results[("win", board.winner)] += 1
            results[("loss", board.loser)] += 1

        if args.games == 1:
            console.print(str(board))
            for colour in TURN_ORDER:
                console.print(f"[{COLOUR_STYLES[colour]}]{colour.name}[/]: score {board.score(colour)}")

    print_summary(console, agents, results, args.games)


if __name__ == "__main__":
    main()
