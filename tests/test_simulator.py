from __future__ import annotations

import random
import unittest
from dataclasses import replace

from ludo_core.game import default_players, new_game
from ludo_core.simulator import Simulator
from ludo_core.types import GameMode, GamePhase


def all_ai(count: int):
    return [replace(s, is_ai=True) for s in default_players(count, GameMode.OFFLINE)]


class SimulatorTests(unittest.TestCase):
    def test_step_performs_one_action(self) -> None:
        sim = Simulator(new_game(all_ai(2)), rng=random.Random(1))
        after = sim.step()
        self.assertIn(after.game_phase, (GamePhase.MOVING, GamePhase.WAITING))
        self.assertEqual(sim.turns, 1)

    def test_full_game_reaches_a_winner(self) -> None:
        for count, difficulty in ((2, "medium"), (4, "easy")):
            sim = Simulator(
                new_game(all_ai(count), difficulty=difficulty), rng=random.Random(42)
            )
            final = sim.run(max_turns=20_000)
            self.assertIs(final.game_phase, GamePhase.FINISHED)
            winner = final.player_by_id(final.winner_id)
            self.assertTrue(winner.is_winner)
            self.assertTrue(all(p.position == 57 for p in winner.pawns))

    def test_run_stops_at_max_turns(self) -> None:
        sim = Simulator(new_game(all_ai(3)), rng=random.Random(5))
        final = sim.run(max_turns=3)
        self.assertEqual(sim.turns, 3)
        self.assertIs(final.game_phase, GamePhase.ROLLING)

    def test_human_policy_is_consulted(self) -> None:
        calls = []

        def policy(state):
            calls.append(state.current_player.id)
            return state.possible_moves[-1]

        state = new_game(default_players(2, GameMode.AI))
        sim = Simulator(state, rng=random.Random(9), human_policy=policy)
        sim.run(max_turns=300)
        self.assertTrue(calls)
        self.assertEqual(set(calls), {"player-0"})

    def test_pass_when_policy_declines(self) -> None:
        state = new_game(default_players(2, GameMode.OFFLINE))
        sim = Simulator(state, rng=random.Random(2), human_policy=lambda s: None)
        final = sim.run(max_turns=40)
        self.assertTrue(all(p.in_base for pl in final.players for p in pl.pawns))


if __name__ == "__main__":
    unittest.main()
