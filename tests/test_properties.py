import random
import unittest

from game import (
    RELAY_RULES,
    STANDARD_RULES,
    Player,
    apply_move,
    compute_hint,
    create_initial_state,
    describe_outcome,
    is_legal_move,
    legal_moves,
    side_empty,
    sow_stepwise,
)

MAX_PLIES = 500


def play_out(seed, stones, rules, greedy=False):
    """Plays a game to the end and returns every state visited."""
    rng = random.Random(seed)
    state = create_initial_state(stones)
    history = [state]
    while not state.is_game_over and len(history) < MAX_PLIES:
        pit = compute_hint(state, rules) if greedy else rng.choice(legal_moves(state))
        state = apply_move(state, pit, rules)
        history.append(state)
    return history


class TestSelfPlayProperties(unittest.TestCase):
    def _check_game(self, history, stones):
        total = 12 * stones
        for prev, cur in zip(history, history[1:]):
            self.assertEqual(cur.total_stones, total)
            self.assertGreaterEqual(cur.pits[6], prev.pits[6])
            self.assertGreaterEqual(cur.pits[13], prev.pits[13])
            if cur.extra_turn:
                self.assertIs(cur.current_player, prev.current_player)
        last = history[-1]
        self.assertTrue(last.is_game_over)
        self.assertTrue(side_empty(last.pits, Player.A) and side_empty(last.pits, Player.B))
        self.assertEqual(last.pits[6] + last.pits[13], total)
        self.assertIn('Game over.', describe_outcome(last))
        for s in history[:-1]:
            self.assertFalse(s.is_game_over)

    def test_given_random_games_when_played_out_then_invariants_hold(self):
        for seed in range(25):
            for stones in (1, 3, 4, 6):
                with self.subTest(seed=seed, stones=stones):
                    self._check_game(play_out(seed, stones, STANDARD_RULES), stones)

    def test_given_random_relay_games_when_played_out_then_invariants_hold(self):
        for seed in range(25):
            for stones in (2, 4):
                with self.subTest(seed=seed, stones=stones):
                    self._check_game(play_out(seed, stones, RELAY_RULES), stones)

    def test_given_greedy_self_play_when_played_out_then_hints_always_legal(self):
        for rules in (STANDARD_RULES, RELAY_RULES):
            history = play_out(0, 4, rules, greedy=True)
            self._check_game(history, 4)
            for s in history:
                hint = compute_hint(s, rules)
                if s.is_game_over:
                    self.assertIsNone(hint)
                else:
                    self.assertTrue(is_legal_move(s, hint))

    def test_given_random_positions_when_sowing_stepwise_then_matches_batch(self):
        for seed in range(10):
            for s in play_out(seed, 4, STANDARD_RULES)[:-1]:
                for pit in legal_moves(s):
                    frames = []
                    pits, last = sow_stepwise(s, pit, lambda p, i: frames.append(i))
                    self.assertEqual(len(frames), s.pits[pit])
                    self.assertNotIn(s.current_player.opponent_store, frames)
                    self.assertEqual(frames[-1], last)
                    self.assertEqual(sum(pits), s.total_stones)


if __name__ == '__main__':
    unittest.main(verbosity=2)
