from __future__ import annotations

import logging
from typing import Dict, Optional

from .config import RuleConfig
from .moves import apply_move, legal_moves
from .state import BoardState

logger = logging.getLogger(__name__)


def score_moves(state: BoardState, rules: Optional[RuleConfig] = None) -> Dict[int, int]:
    """Stones each legal move would add to the mover's store, keyed by pit."""
    mover = state.current_player
    before = state.store(mover)
    scores: Dict[int, int] = {}
    for pit in legal_moves(state):
        after = apply_move(state, pit, rules)
        scores[pit] = after.store(mover) - before
    return scores


def compute_hint(state: BoardState, rules: Optional[RuleConfig] = None) -> Optional[int]:
    """
    Greedy one-ply lookahead: the legal pit that puts the most stones in the
    mover's store right now, lowest pit on ties. It does not look at the
    opponent's reply, so it will happily set up a capture for them.
    Returns None when there is nothing to play.
    """
    best: Optional[int] = None
    best_score = -1
    for pit, score in score_moves(state, rules).items():
        if score > best_score:
            best, best_score = pit, score
    if best is not None:
        logger.debug('Hint for player %s: pit %d (+%d)', state.current_player.value, best, best_score)
    return best


def with_hint_move(state: BoardState, rules: Optional[RuleConfig] = None) -> BoardState:
    """Plays the hinted move, or returns `state` unchanged when there is none."""
    pit = compute_hint(state, rules)
    if pit is None:
        return state
    return apply_move(state, pit, rules)
