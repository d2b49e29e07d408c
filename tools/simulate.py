import argparse
import random
import sys
import time
from collections import Counter
from dataclasses import replace

from loguru import logger

from ludo_core import GameMode, Simulator, config, default_players, new_game
from ludo_core.strategy import available


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play automated Ludo games and report wins per seat"
    )
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument(
        "--num-players",
        type=int,
        default=config.NUM_PLAYERS,
        choices=range(config.MIN_PLAYERS, config.MAX_PLAYERS + 1),
        help="Players per game",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default=config.AI_DIFFICULTY,
        choices=available(),
        help="AI difficulty for every seat",
    )
    parser.add_argument("--seed", type=int, default=config.SEED, help="Random seed")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.MAX_TURNS,
        help="Give up on a game after this many rolls",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Loguru level")
    return parser.parse_args()


def play_game(num_players: int, difficulty: str, rng: random.Random, max_turns: int):
    # Offline mode seats humans only; flip them all to AI for a headless run
    specs = [
        replace(spec, is_ai=True)
        for spec in default_players(num_players, GameMode.OFFLINE)
    ]
    state = new_game(specs, mode=GameMode.AI, difficulty=difficulty)
    sim = Simulator(state, rng=rng, roll_delay=0.0, move_delay=0.0)
    final = sim.run(max_turns=max_turns)
    return final, sim.turns


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    rng = random.Random(args.seed)
    wins: Counter = Counter()
    turn_counts = []
    start_time = time.time()

    for game_idx in range(args.games):
        final, turns = play_game(args.num_players, args.difficulty, rng, args.max_turns)
        turn_counts.append(turns)
        winner = final.player_by_id(final.winner_id) if final.winner_id else None
        if winner is None:
            wins["no winner"] += 1
            logger.info(f"Game {game_idx + 1}: no winner after {turns} turns")
        else:
            wins[winner.color.value] += 1
            logger.info(f"Game {game_idx + 1}: {winner.color.value} wins in {turns} turns")

    logger.info("--- SIMULATION COMPLETE ---")
    for label, count in wins.most_common():
        logger.info(f"  {label}: {count}/{args.games}")
    if turn_counts:
        logger.info(f"Average turns: {sum(turn_counts) / len(turn_counts):.1f}")
    logger.info(f"Simulation time: {time.time() - start_time:.2f} seconds")


if __name__ == "__main__":
    main()
