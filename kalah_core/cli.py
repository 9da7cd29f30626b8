from __future__ import annotations

import argparse
import time
from typing import Callable, List, Optional

from .ai import compute_hint
from .board import Player, render_board
from .config import RuleConfig, configure_logging, rules_from_env, stones_from_env
from .moves import legal_moves, resolve_after_sow, sow_stepwise
from .state import BoardState, create_initial_state, status_message


def play_turn(state: BoardState, pit: int, rules: RuleConfig, delay: float = 0.0) -> BoardState:
    """Sows one stone per frame (printing each when delay > 0), then resolves the move."""
    observer = None
    if delay > 0:
        def observer(pits, index):
            print(render_board(pits, state.current_player))
            print(f'  stone -> {index}')
            time.sleep(delay)
    pits, last = sow_stepwise(state, pit, observer, rules)
    return resolve_after_sow(state, pits, last)


def prompt_human_move(state: BoardState, rules: RuleConfig,
                      read: Optional[Callable[[str], str]] = None) -> Optional[int]:
    """Asks for a pit until a legal one is given. Returns None if the player quits."""
    read = read or input
    moves = legal_moves(state)
    if not moves:
        raise RuntimeError('No legal moves available')
    print(f'Player {state.current_player.value} legal pits:', moves)
    while True:
        try:
            text = read('Pit (h = hint, q = quit): ').strip().lower()
        except EOFError:
            return None
        if text in ('q', 'quit'):
            return None
        if text in ('h', 'hint'):
            print('Hint: pit', compute_hint(state, rules))
            continue
        try:
            move = int(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if move in moves:
            return move
        print('Illegal move. Try again.')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Kalah (Mancala) in the terminal')
    parser.add_argument('--stones', type=int, default=None, help='Stones per pit (default: KALAH_STONES_PER_PIT or 4)')
    parser.add_argument('--relay', action='store_true', help='Relay sowing: keep sowing from loaded landing pits')
    parser.add_argument('--play', choices=['human', 'greedy'], default='human', help='Opponent: another human or the greedy hint')
    parser.add_argument('--ai-side', choices=['A', 'B'], default='B', help='Side played by the greedy opponent')
    parser.add_argument('--delay', type=float, default=0.0, help='Seconds between sown stones (0 = no animation)')
    parser.add_argument('--demo', action='store_true', help='Greedy self-play to the end, no input')
    parser.add_argument('--debug', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    configure_logging(True if args.debug else None)
    rules = RuleConfig(relay_sowing=True) if args.relay else rules_from_env()
    stones = args.stones if args.stones is not None else stones_from_env()
    if stones <= 0:
        parser.error('--stones must be positive')
    ai_side = Player(args.ai_side)

    state = create_initial_state(stones)
    print('Initial board:')
    print(state.pretty())
    print(status_message(state))

    while not state.is_game_over:
        if args.demo or (args.play == 'greedy' and state.current_player is ai_side):
            move = compute_hint(state, rules)
            if move is None:
                break
            print(f'Player {state.current_player.value} plays pit {move}')
        else:
            move = prompt_human_move(state, rules)
            if move is None:
                print('Game abandoned.')
                return
        state = play_turn(state, move, rules, args.delay)
        print(state.pretty())
        print(status_message(state))


if __name__ == '__main__':
    main()
