import unittest

from game import (
    RELAY_RULES,
    BoardState,
    Player,
    apply_move,
    compute_hint,
    create_initial_state,
    is_legal_move,
    score_moves,
    with_hint_move,
)


def make_state(a_pits, a_store, b_pits, b_store, player=Player.A):
    pits = tuple(a_pits) + (a_store,) + tuple(b_pits) + (b_store,)
    return BoardState(pits=pits, current_player=player)


class TestGreedyHint(unittest.TestCase):
    def test_given_start_when_scoring_moves_then_store_gain_per_pit(self):
        scores = score_moves(create_initial_state())
        self.assertEqual(scores, {0: 0, 1: 0, 2: 1, 3: 1, 4: 1, 5: 1})

    def test_given_tied_scores_when_computing_hint_then_lowest_pit_wins(self):
        self.assertEqual(compute_hint(create_initial_state()), 2)

    def test_given_capture_available_when_computing_hint_then_capture_preferred(self):
        s = make_state([1, 0, 4, 4, 4, 4], 0, [4] * 6, 3)
        self.assertEqual(score_moves(s)[0], 5)
        self.assertEqual(compute_hint(s), 0)

    def test_given_b_to_move_when_computing_hint_then_pit_on_b_side(self):
        start = create_initial_state()
        s = BoardState(pits=start.pits, current_player=Player.B)
        hint = compute_hint(s)
        self.assertEqual(hint, 9)
        self.assertTrue(is_legal_move(s, hint))

    def test_given_finished_game_when_computing_hint_then_none_and_state_unchanged(self):
        s = make_state([0] * 6, 20, [2] * 6, 16)
        self.assertIsNone(compute_hint(s))
        self.assertEqual(score_moves(s), {})
        self.assertIs(with_hint_move(s), s)

    def test_given_hint_when_applied_then_same_as_playing_the_pit(self):
        s = create_initial_state()
        self.assertEqual(with_hint_move(s), apply_move(s, 2))

    def test_given_relay_rules_when_scoring_then_relay_outcome_used(self):
        s = make_state([0, 0, 2, 0, 1, 0], 0, [1] * 6, 0)
        self.assertEqual(score_moves(s), {2: 0, 4: 2})
        self.assertEqual(score_moves(s, RELAY_RULES), {2: 1, 4: 2})
        self.assertEqual(compute_hint(s, RELAY_RULES), 4)


if __name__ == '__main__':
    unittest.main(verbosity=2)
