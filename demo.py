#!/usr/bin/env python3
"""Watch the Random agent steer the cursor around Termsweeper."""
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from termsweeper import BoardConfig, TermsweeperEnv
from agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.1, games: int = 3, columns: int = 9, rows: int = 9,
         mines: int = 10, seed: int = None):
    """Run demo games with visualization."""
    config = BoardConfig(columns=columns, rows=rows, number_of_mines=mines)
    env = TermsweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(rows, columns, seed=seed)

    print(f"Board: {columns}x{rows} with {mines} mines requested")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset(seed=None if seed is None else seed + game)
        agent.reset()

        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            command = agent.action_to_command(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last command: {command.name} | "
                  f"Left to reveal: {info['fields_left']}\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** VICTORY! ***")
                else:
                    print(f"\n*** GAME OVER (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.1, help="Delay between commands")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--columns", type=int, default=9, help="Board width")
    parser.add_argument("--rows", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~12%% of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    mines = args.mines if args.mines is not None else int(args.columns * args.rows * 0.12)

    demo(delay=args.delay, games=args.games, columns=args.columns, rows=args.rows,
         mines=mines, seed=args.seed)
