#!/usr/bin/env python3
"""
Termsweeper - Main entry point.

Usage:
    python main.py play [--preset NAME] [--columns N --rows N --mines N]
    python main.py evaluate [--games N] [--seed N]
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from termsweeper import Game, BoardConfig, PRESETS, TermsweeperEnv
from agents import RandomAgent
from training import Evaluator


HELP_TEXT = (
    "Left <h>  Down <j>  Up <k>  Right <l>  Mark <m>  Reveal <space or .>  "
    "New game <n>  Quit <q>"
)


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Start from the preset and apply any explicit sizes."""
    preset = PRESETS[args.preset]
    return BoardConfig(
        columns=args.columns if args.columns is not None else preset.columns,
        rows=args.rows if args.rows is not None else preset.rows,
        number_of_mines=(
            args.mines if args.mines is not None else preset.number_of_mines
        ),
    )


def title(game: Game) -> str:
    """Headline for the current state of a match."""
    if game.is_won:
        return "Termsweeper - VICTORY"
    if game.is_lost:
        return "Termsweeper - GAME OVER"
    return "Termsweeper - Game"


def play(args: argparse.Namespace) -> None:
    """Play interactively, one line of keys at a time."""
    config = build_config(args)
    env = TermsweeperEnv(config=config, render_mode="ansi")
    env.reset(seed=args.seed)

    print(HELP_TEXT)
    while True:
        game = env.game
        print(f"\n{title(game)} | Mines: {config.number_of_mines} | "
              f"Left to reveal: {game.fields_left_to_reveal}")
        print(env.render())

        try:
            line = input("> ")
        except EOFError:
            break

        keys = line.lower()
        if "q" in keys:
            break
        if "n" in keys:
            env.reset()
            continue
        for key in keys:
            game.handle_key(" " if key == "." else key)

    print("Bye!")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent and print results."""
    config = build_config(args)
    agent = RandomAgent(config.rows, config.columns, seed=args.seed)
    evaluator = Evaluator(
        config,
        num_episodes=args.games,
        max_steps=args.max_steps,
        seed=args.seed,
    )

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Loss rate: {results['loss_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board size options shared by all commands."""
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="default",
        help="Board size preset",
    )
    parser.add_argument("--columns", type=int, default=None, help="Board width")
    parser.add_argument("--rows", type=int, default=None, help="Board height")
    parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines requested"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Termsweeper - Cursor-driven minesweeper"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--max-steps", type=int, default=2000, help="Commands per game"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except ValueError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
