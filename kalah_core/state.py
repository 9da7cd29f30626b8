from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import STORE_A, STORE_B, Player, render_board, side_empty, validate_pits

DEFAULT_STONES_PER_PIT = 4


@dataclass(frozen=True)
class BoardState:
    """One game position: stone counts per slot, side to move and the last move's extra-turn flag."""
    pits: Tuple[int, ...]  # 14 slots, see board.py for the layout
    current_player: Player
    extra_turn: bool = False

    def __post_init__(self) -> None:
        pits = validate_pits(self.pits)
        if not isinstance(self.current_player, Player):
            raise ValueError(f'Unknown player {self.current_player!r}')
        object.__setattr__(self, 'pits', pits)

    @property
    def is_game_over(self) -> bool:
        return side_empty(self.pits, Player.A) or side_empty(self.pits, Player.B)

    @property
    def total_stones(self) -> int:
        return sum(self.pits)

    def store(self, player: Player) -> int:
        return self.pits[player.store]

    def side(self, player: Player) -> Tuple[int, ...]:
        return tuple(self.pits[i] for i in player.pit_range)

    def score(self) -> Tuple[int, int]:
        return self.pits[STORE_A], self.pits[STORE_B]

    def pretty(self) -> str:
        return render_board(self.pits, None if self.is_game_over else self.current_player)


def create_initial_state(stones_per_pit: int = DEFAULT_STONES_PER_PIT) -> BoardState:
    """Standard opening: every playing pit filled, stores empty, A to move."""
    if isinstance(stones_per_pit, bool) or not isinstance(stones_per_pit, int) or stones_per_pit <= 0:
        raise ValueError(f'stones_per_pit must be a positive integer, got {stones_per_pit!r}')
    side = [stones_per_pit] * 6
    pits = tuple(side + [0] + side + [0])
    return BoardState(pits=pits, current_player=Player.A)


def describe_outcome(state: BoardState) -> str:
    if not state.is_game_over:
        raise ValueError('Outcome requested for a game that is still in progress')
    a = state.pits[STORE_A]
    b = state.pits[STORE_B]
    if a > b:
        return f'Game over. Player A wins {a}-{b}!'
    if b > a:
        return f'Game over. Player B wins {b}-{a}!'
    return f"Game over. It's a draw {a}-{b}!"


def status_message(state: BoardState) -> str:
    """The line a UI shows under the board after each move."""
    if state.is_game_over:
        return describe_outcome(state)
    if state.extra_turn:
        return f'Extra turn! {state.current_player.value} again'
    return f"Player {state.current_player.value}'s turn"
