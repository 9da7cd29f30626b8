from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Sequence, Set, Tuple

from .board import PIT_COUNT, Player, is_store, opposite_pit, side_empty, validate_pits
from .config import STANDARD_RULES, RuleConfig
from .state import BoardState

logger = logging.getLogger(__name__)

Pits = Tuple[int, ...]
SowObserver = Callable[[Pits, int], None]


def _check_index(pit_index: int) -> None:
    if isinstance(pit_index, bool) or not isinstance(pit_index, int) or not 0 <= pit_index < PIT_COUNT:
        raise ValueError(f'Pit index must be in 0..{PIT_COUNT - 1}, got {pit_index!r}')


def is_legal_move(state: BoardState, pit_index: int) -> bool:
    """True if the side to move may sow from pit_index."""
    if state.is_game_over:
        return False
    if isinstance(pit_index, bool) or pit_index not in state.current_player.pit_range:
        return False
    return state.pits[pit_index] > 0


def legal_moves(state: BoardState) -> List[int]:
    """Calculates all legal starting pits for the current player, lowest index first."""
    if state.is_game_over:
        return []
    return [i for i in state.current_player.pit_range if state.pits[i] > 0]


def sow_step(pits: Sequence[int], index: int, opponent_store: int) -> Tuple[Pits, int]:
    """Drops one stone into the slot after index, never into the opponent's store."""
    nxt = (index + 1) % PIT_COUNT
    if nxt == opponent_store:
        nxt = (nxt + 1) % PIT_COUNT
    updated = list(pits)
    updated[nxt] += 1
    return tuple(updated), nxt


def _pick_up(pits: Sequence[int], index: int) -> Tuple[Pits, int]:
    updated = list(pits)
    hand = updated[index]
    updated[index] = 0
    return tuple(updated), hand


def iter_sow(state: BoardState, start_pit: int, rules: Optional[RuleConfig] = None) -> Iterator[Tuple[Pits, int]]:
    """
    Yields (pits, index) after every stone placed when sowing from start_pit.
    The starting pit is emptied before the first stone is dropped. With relay
    sowing a lap that ends in a pit now holding several stones picks them all
    up and keeps going; the turn stops in the mover's store or in a pit that
    holds exactly one stone.
    """
    rules = rules or STANDARD_RULES
    _check_index(start_pit)
    if not is_legal_move(state, start_pit):
        raise ValueError(f'Pit {start_pit} is not a legal move for player {state.current_player.value}')
    opponent_store = state.current_player.opponent_store
    pits, hand = _pick_up(state.pits, start_pit)
    index = start_pit
    seen: Set[Tuple[Pits, int]] = set()
    while True:
        for _ in range(hand):
            pits, index = sow_step(pits, index, opponent_store)
            yield pits, index
        if not rules.relay_sowing or is_store(index) or pits[index] <= 1:
            return
        # Identical lap ends repeat forever; stop at the second occurrence.
        if (pits, index) in seen:
            logger.warning('Relay from pit %d loops; stopping at pit %d with %d stones',
                           start_pit, index, pits[index])
            return
        seen.add((pits, index))
        pits, hand = _pick_up(pits, index)
        logger.debug('Relay: picked up %d stones from pit %d', hand, index)


def sow_stepwise(
    state: BoardState,
    start_pit: int,
    on_each_step: Optional[SowObserver] = None,
    rules: Optional[RuleConfig] = None,
) -> Tuple[Pits, int]:
    """Sows from start_pit, calling on_each_step(pits, index) once per stone placed.

    Returns the pits after sowing and the index of the last stone.
    """
    pits: Pits = state.pits
    last = start_pit
    for pits, last in iter_sow(state, start_pit, rules):
        if on_each_step is not None:
            on_each_step(pits, last)
    return pits, last


def sow(state: BoardState, start_pit: int, rules: Optional[RuleConfig] = None) -> Tuple[Pits, int]:
    """Batch form of sow_stepwise."""
    return sow_stepwise(state, start_pit, None, rules)


def _sweep(pits: List[int]) -> None:
    for player in Player:
        for i in player.pit_range:
            pits[player.store] += pits[i]
            pits[i] = 0


def resolve_after_sow(state: BoardState, pits_after_sow: Sequence[int], last_index: int) -> BoardState:
    """
    Applies the post-sowing rules for the player who just moved in `state`,
    strictly in this order:
    1. extra turn when the last stone landed in the mover's store;
    2. otherwise capture when it landed alone in one of the mover's pits and
       the opposite pit holds stones (both go to the mover's store);
    3. end-of-game sweep when either side is empty, which discards the turn
       result of step 1.
    """
    if state.is_game_over:
        raise ValueError('Cannot resolve a move on a finished game')
    _check_index(last_index)
    if last_index == state.current_player.opponent_store:
        raise ValueError(f"Sowing never ends in the opponent's store (index {last_index})")
    pits = list(validate_pits(pits_after_sow))
    if sum(pits) != state.total_stones:
        raise ValueError(f'Stone count changed during sowing: {state.total_stones} -> {sum(pits)}')

    mover = state.current_player
    store = mover.store
    extra = last_index == store

    if not extra and last_index in mover.pit_range and pits[last_index] == 1:
        opposite = opposite_pit(last_index)
        if pits[opposite] > 0:
            captured = pits[opposite] + 1
            pits[store] += captured
            pits[opposite] = 0
            pits[last_index] = 0
            logger.debug('Player %s captures %d stones at pit %d', mover.value, captured, last_index)

    if side_empty(pits, Player.A) or side_empty(pits, Player.B):
        _sweep(pits)
        logger.debug('Side empty; swept remaining stones, final score %d-%d', pits[Player.A.store], pits[Player.B.store])
        return BoardState(pits=tuple(pits), current_player=mover, extra_turn=False)

    next_player = mover if extra else mover.opponent()
    return BoardState(pits=tuple(pits), current_player=next_player, extra_turn=extra)


def apply_move(state: BoardState, pit_index: int, rules: Optional[RuleConfig] = None) -> BoardState:
    """Plays a full move and returns the new state.

    Finished games and illegal pits are ignored and return `state` itself.
    """
    _check_index(pit_index)
    if state.is_game_over:
        return state
    if not is_legal_move(state, pit_index):
        logger.debug('Ignoring illegal move %d for player %s', pit_index, state.current_player.value)
        return state
    pits, last = sow(state, pit_index, rules)
    result = resolve_after_sow(state, pits, last)
    logger.debug('Player %s sowed pit %d, last stone in %d', state.current_player.value, pit_index, last)
    return result
