from __future__ import annotations

import random
import unittest
from dataclasses import replace

from ludo_core.board import is_safe_cell
from ludo_core.game import default_players, new_game
from ludo_core.strategy import (
    HeuristicStrategy,
    RandomStrategy,
    available,
    build_move_options,
    choose_move,
    create,
)
from ludo_core.types import GameState


def place(state: GameState, player_idx: int, pawn_idx: int, position: int) -> GameState:
    player = state.players[player_idx]
    pawn = replace(
        player.pawns[pawn_idx],
        position=position,
        in_base=position == -1,
        in_home=position == 57,
        is_safe=position != -1 and is_safe_cell(position),
    )
    pawns = player.pawns[:pawn_idx] + (pawn,) + player.pawns[pawn_idx + 1 :]
    players = list(state.players)
    players[player_idx] = replace(player, pawns=pawns)
    return replace(state, players=tuple(players))


class MoveOptionTests(unittest.TestCase):
    def test_options_describe_legal_moves(self) -> None:
        state = place(new_game(default_players(2)), 0, 0, 4)
        state = place(state, 1, 0, 10)
        state = place(state, 1, 1, 10)
        options = build_move_options(replace(state, dice_value=6))

        self.assertEqual([o.pawn_id for o in options], [f"player-0-pawn-{i}" for i in range(4)])
        self.assertEqual(options[0].new_pos, 10)
        self.assertEqual(options[0].capture_count, 2)
        self.assertTrue(options[0].can_capture)
        self.assertTrue(options[1].from_base)
        self.assertEqual(options[1].new_pos, 0)

    def test_no_options_without_legal_moves(self) -> None:
        state = replace(new_game(default_players(2)), dice_value=3)
        self.assertEqual(build_move_options(state), [])
        self.assertIsNone(choose_move(state))


class HeuristicStrategyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.strategy = HeuristicStrategy()
        self.state = new_game(default_players(2), difficulty="medium")

    def test_prefers_deploying_from_base(self) -> None:
        state = replace(place(self.state, 0, 0, 20), dice_value=6)
        self.assertEqual(self.strategy.choose_move(state), "player-0-pawn-1")

    def test_capture_beats_deploying(self) -> None:
        state = place(self.state, 0, 0, 4)
        state = place(state, 1, 0, 10)
        state = replace(state, dice_value=6)
        self.assertEqual(self.strategy.choose_move(state), "player-0-pawn-0")

    def test_safe_opponent_is_not_counted(self) -> None:
        state = place(self.state, 0, 0, 2)
        state = place(state, 1, 0, 8)
        state = replace(state, dice_value=6)
        # No capture available on a safe cell, deploying wins
        self.assertEqual(self.strategy.choose_move(state), "player-0-pawn-1")

    def test_home_stretch_bonus(self) -> None:
        state = place(self.state, 0, 0, 20)
        state = place(state, 0, 1, 48)
        state = replace(state, dice_value=4)
        self.assertEqual(self.strategy.choose_move(state), "player-0-pawn-1")

    def test_ties_keep_the_first_pawn(self) -> None:
        state = place(self.state, 0, 0, 30)
        state = place(state, 0, 2, 20)
        state = place(state, 0, 3, 10)
        state = replace(state, dice_value=3)
        self.assertEqual(self.strategy.choose_move(state), "player-0-pawn-0")

    def test_hard_uses_the_medium_heuristic(self) -> None:
        self.assertIsInstance(create("hard"), HeuristicStrategy)
        state = replace(place(self.state, 0, 0, 20), dice_value=6, ai_difficulty="hard")
        self.assertEqual(choose_move(state), "player-0-pawn-1")


class RandomStrategyTests(unittest.TestCase):
    def test_easy_picks_a_legal_pawn(self) -> None:
        state = new_game(default_players(2), difficulty="easy")
        state = replace(place(state, 0, 0, 20), dice_value=6)
        legal = {o.pawn_id for o in build_move_options(state)}
        rng = random.Random(3)
        picks = {choose_move(state, rng=rng) for _ in range(50)}
        self.assertTrue(picks <= legal)
        self.assertGreater(len(picks), 1)

    def test_seeded_rng_is_reproducible(self) -> None:
        state = new_game(default_players(2), difficulty="easy")
        state = replace(state, dice_value=6)
        first = RandomStrategy(random.Random(11)).choose_move(state)
        second = RandomStrategy(random.Random(11)).choose_move(state)
        self.assertEqual(first, second)


class RegistryTests(unittest.TestCase):
    def test_available(self) -> None:
        self.assertEqual(available(), ["easy", "medium", "hard"])

    def test_create(self) -> None:
        self.assertIsInstance(create("easy"), RandomStrategy)
        self.assertIsInstance(create("MEDIUM"), HeuristicStrategy)

    def test_unknown_strategy(self) -> None:
        with self.assertRaises(KeyError):
            create("grandmaster")


if __name__ == "__main__":
    unittest.main()
