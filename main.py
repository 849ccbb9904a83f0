"""
Main entry point for TicTacToe.

Three ways to play:
- Window (default): Tkinter board, keyboard controls
- Console (--no-ui): board printed after every round, typed commands
- Headless (--headless): computer vs computer, prints a tally

Run this script to play TicTacToe!
"""

import random
from collections import Counter
from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_state import GameState, Outcome, Symbol
from logic.match_setup import HUMAN, PLAYER_CHOICES, MatchSetup
from logic.strategies import StrategyKind
from logic.turn_engine import GameInput, TurnEngine, new_match


class ConsolePlayer:
    """
    Human player typing commands in the terminal.

    One command per line: w/a/s/d move the cursor, an empty line or
    'e' places the mark, 'q' quits the match.
    """

    def __init__(self, prompt: Callable[[str], str] = input):
        self.prompt = prompt
        self.commands = {
            GameConfig.KEY_UP: GameInput.UP,
            GameConfig.KEY_LEFT: GameInput.LEFT,
            GameConfig.KEY_DOWN: GameInput.DOWN,
            GameConfig.KEY_RIGHT: GameInput.RIGHT,
            GameConfig.KEY_PLACE: GameInput.PLACE,
            GameConfig.KEY_QUIT: GameInput.QUIT,
            "": GameInput.PLACE,
        }

    def next_input(self) -> GameInput:
        while True:
            try:
                line = self.prompt("Move (w/a/s/d, Enter=place, q=quit): ")
            except EOFError:
                return GameInput.QUIT

            command = line.strip().lower()[:1]
            if command in self.commands:
                return self.commands[command]
            print(f"Unknown command '{line.strip()}'")


def parse_starter(value: str, rng: random.Random) -> Symbol:
    """Turn 'x', 'o' or 'random' into the symbol that starts."""
    if value == "random":
        return rng.choice([Symbol.X, Symbol.O])
    return Symbol(value)


def show_game_result(state: GameState, setup: MatchSetup):
    """Show the final game result."""
    print("\n" + "=" * 60)
    print("   GAME OVER!")
    print("=" * 60)

    state.print_board()

    winner = state.winner
    if winner is None:
        print("\nIt's a draw! Good game!")
    elif setup.is_human(winner) and not setup.is_human(winner.opposite()):
        print("\nCongratulations! You won!")
    elif setup.is_human(winner.opposite()) and not setup.is_human(winner):
        print("\nThe computer wins! Better luck next time!")
    else:
        print(f"\n{winner.name} ({setup.player_for(winner)}) wins!")

    print("\n" + "=" * 60)


def run_console(
    setup: MatchSetup,
    starter: str = "random",
    seed: Optional[int] = None,
    fast: bool = False,
    prompt: Callable[[str], str] = input
) -> Optional[Outcome]:
    """
    Play one match in the terminal.

    Returns:
        The outcome, or None if a player quit.
    """
    rng = random.Random(seed)
    state = new_match(parse_starter(starter, rng))
    engine = TurnEngine(state)

    delays = {} if fast else GameConfig.agent_delays()
    sources = setup.create_sources(
        state, human_source=ConsolePlayer(prompt), rng=rng, verbose=True, **delays
    )

    print("\n" + "=" * 60)
    print(f"   TicTacToe - {setup.mode}")
    print(f"   X: {setup.x_player.upper()}   O: {setup.o_player.upper()}")
    print(f"   {state.turn.name} starts")
    print("=" * 60)

    def render(snapshot: GameState):
        if not snapshot.is_game_over:
            snapshot.print_board()

    outcome = engine.play(sources, render=render)

    if outcome is None:
        print("\nMatch abandoned.")
    else:
        show_game_result(engine.game_state, setup)
    return outcome


def run_headless(
    x_kind: StrategyKind = StrategyKind.HEURISTIC,
    o_kind: StrategyKind = StrategyKind.RANDOM,
    games: int = 100,
    seed: Optional[int] = None,
    starter: str = "random",
    verbose: bool = False
) -> Counter:
    """
    Play computer vs computer matches without delays.

    Args:
        x_kind: Strategy for X.
        o_kind: Strategy for O.
        games: Number of matches.
        seed: Seed for reproducible runs.
        starter: 'x', 'o' or 'random' (drawn per match).
        verbose: Print every board.

    Returns:
        Counter of Outcome values.
    """
    rng = random.Random(seed)
    setup = MatchSetup(StrategyKind(x_kind).value, StrategyKind(o_kind).value)
    tally: Counter = Counter()

    for game in range(games):
        state = new_match(parse_starter(starter, rng))
        engine = TurnEngine(state)
        sources = setup.create_sources(state, rng=rng)

        render = GameState.print_board if verbose else None
        outcome = engine.play(sources, render=render)
        tally[outcome] += 1

        if verbose:
            print(f"Game {game + 1}: {outcome.value} ({state.starter.name} started)")

    return tally


def print_tally(tally: Counter, setup: MatchSetup):
    """Print headless results."""
    total = sum(tally.values())
    print("\n" + "=" * 60)
    print(f"   {total} games   X: {setup.x_player}   O: {setup.o_player}")
    print("=" * 60)
    for outcome in (Outcome.X_WINS, Outcome.O_WINS, Outcome.DRAW):
        count = tally.get(outcome, 0)
        share = 100.0 * count / total if total else 0.0
        print(f"  {outcome.value:8s} {count:6d}  ({share:5.1f}%)")
    print("=" * 60)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run computer vs computer matches and print a tally"
    )
    parser.add_argument(
        "--x",
        choices=PLAYER_CHOICES,
        default=HUMAN,
        help="Who plays X (default: human)"
    )
    parser.add_argument(
        "--o",
        choices=PLAYER_CHOICES,
        default=StrategyKind.HEURISTIC.value,
        help="Who plays O (default: heuristic)"
    )
    parser.add_argument(
        "--starter",
        choices=["x", "o", "random"],
        default="random",
        help="Who moves first (default: random)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=100,
        help="Number of headless matches"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed"
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="No thinking pauses for computer players"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every board in headless mode"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.headless:
        if HUMAN in (args.x, args.o):
            parser.error("--headless needs a strategy for both --x and --o")
        tally = run_headless(
            StrategyKind(args.x), StrategyKind(args.o),
            games=args.games, seed=args.seed,
            starter=args.starter, verbose=args.verbose
        )
        print_tally(tally, MatchSetup(args.x, args.o))
        return 0

    setup = MatchSetup(args.x, args.o)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "=" * 60)
        print("   TicTacToe UI")
        print("=" * 60 + "\n")
        ui = TicTacToeUI(setup=setup, fast=args.fast, seed=args.seed)
        ui.run()
        return 0

    try:
        run_console(setup, starter=args.starter, seed=args.seed, fast=args.fast)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
