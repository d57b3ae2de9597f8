#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed S]
    python main.py play --rows R --cols C --mines M
    python main.py simulate [--games N] [--difficulty ...]
"""
import argparse
import logging
import random
import time
from typing import Optional

import numpy as np

from src.minesweeper.board import DIFFICULTIES, Difficulty, get_difficulty
from src.minesweeper.display import render_header, render_text, status_message
from src.minesweeper.environment import MinesweeperEnv
from src.minesweeper.session import GameSession

PLAY_HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), "
    "n (new game), d NAME (difficulty), q (quit)"
)


def resolve_difficulty(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> Difficulty:
    """Build the difficulty from a preset name or an explicit triple."""
    custom = (args.rows, args.cols, args.mines)
    if all(value is None for value in custom):
        return get_difficulty(args.difficulty)
    if any(value is None for value in custom):
        parser.error("--rows, --cols and --mines must be given together")
    try:
        return Difficulty(args.rows, args.cols, args.mines)
    except ValueError as exc:
        parser.error(str(exc))


def show(session: GameSession) -> None:
    """Print the counters and the board."""
    print(render_header(session.remaining_mine_count, session.elapsed, session.status))
    print(render_text(session.board))
    message = status_message(session.status)
    if message:
        print(message)


def play(difficulty: Difficulty, seed: Optional[int]) -> None:
    """Interactive terminal game."""
    rng = random.Random(seed) if seed is not None else None
    session = GameSession(difficulty, rng)
    last_tick = time.monotonic()

    print(PLAY_HELP)
    show(session)

    while True:
        try:
            line = input("> ").strip().split()
        except EOFError:
            break

        now = time.monotonic()
        whole_seconds = int(now - last_tick)
        session.tick(whole_seconds)
        last_tick += whole_seconds

        if not line:
            show(session)
            continue

        command, params = line[0].lower(), line[1:]
        was_running = session.clock.running

        if command == "q":
            break
        if command == "n":
            session.new_game()
        elif command == "d" and len(params) == 1:
            try:
                session.set_difficulty(params[0])
            except KeyError as exc:
                print(exc.args[0])
                continue
        elif command in ("r", "f") and len(params) == 2:
            try:
                row, col = int(params[0]), int(params[1])
            except ValueError:
                print(PLAY_HELP)
                continue
            if command == "r":
                session.reveal(row, col)
            else:
                session.toggle_flag(row, col)
        else:
            print(PLAY_HELP)
            continue

        if session.clock.running and not was_running:
            last_tick = time.monotonic()
        show(session)


def simulate(difficulty: Difficulty, games: int, seed: Optional[int]) -> None:
    """Play random legal reveals and report outcomes."""
    env = MinesweeperEnv(difficulty)
    rng = np.random.default_rng(seed)
    cells = difficulty.cell_count

    wins = 0
    total_steps = 0
    total_reward = 0.0

    print(f"Simulating {games} random games on "
          f"{difficulty.rows}x{difficulty.cols} with {difficulty.mine_count} mines...")

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)
        done = False
        info = {}
        while not done:
            reveal_mask = env.get_action_mask()[:cells]
            action = int(rng.choice(np.flatnonzero(reveal_mask)))
            _, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            done = terminated or truncated
        wins += info.get("game_state") == "WON"
        total_steps += info.get("steps", 0)

    print(f"  Win rate: {wins / games:.1%}")
    print(f"  Avg reward: {total_reward / games:.2f}")
    print(f"  Avg steps: {total_steps / games:.1f}")


def add_difficulty_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="easy",
        help="Preset difficulty",
    )
    parser.add_argument("--rows", type=int, help="Custom number of rows")
    parser.add_argument("--cols", type=int, help="Custom number of columns")
    parser.add_argument("--mines", type=int, help="Custom number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    add_difficulty_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report results"
    )
    add_difficulty_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        play(resolve_difficulty(play_parser, args), args.seed)
    elif args.command == "simulate":
        if args.games < 1:
            simulate_parser.error("--games must be positive")
        simulate(resolve_difficulty(simulate_parser, args), args.games, args.seed)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
