from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple

PIT_COUNT = 14
PITS_PER_SIDE = 6
STORE_A = 6
STORE_B = 13


class Player(Enum):
    A = 'A'
    B = 'B'

    def opponent(self) -> 'Player':
        return Player.B if self is Player.A else Player.A

    @property
    def store(self) -> int:
        return STORE_A if self is Player.A else STORE_B

    @property
    def opponent_store(self) -> int:
        return self.opponent().store

    @property
    def pit_range(self) -> range:
        """The six playing pits owned by this player."""
        return range(0, 6) if self is Player.A else range(7, 13)


def is_store(index: int) -> bool:
    return index == STORE_A or index == STORE_B


def opposite_pit(index: int) -> int:
    """Index of the pit facing the given playing pit across the board."""
    if is_store(index) or not 0 <= index < PIT_COUNT:
        raise ValueError(f'No opposite pit for index {index}')
    return 12 - index


def side_empty(pits: Sequence[int], player: Player) -> bool:
    return all(pits[i] == 0 for i in player.pit_range)


def render_board(pits: Sequence[int], current: Optional[Player] = None) -> str:
    """Text view from A's side: B's pits 12..7 on top, A's pits 0..5 below."""
    lines: List[str] = []
    top = ' '.join(f'{pits[i]:>2}' for i in range(12, 6, -1))
    bottom = ' '.join(f'{pits[i]:>2}' for i in range(0, 6))
    labels_top = ' '.join(f'{i:>2}' for i in range(12, 6, -1))
    labels_bottom = ' '.join(f'{i:>2}' for i in range(0, 6))
    marker_b = '*' if current is Player.B else ' '
    marker_a = '*' if current is Player.A else ' '
    lines.append(f'{marker_b}B     [{labels_top}]')
    lines.append(f'        {top}')
    lines.append(f'{pits[STORE_B]:>3}{" " * 20}{pits[STORE_A]:>3}')
    lines.append(f'        {bottom}')
    lines.append(f'{marker_a}A     [{labels_bottom}]')
    return '\n'.join(lines)


def validate_pits(values: Sequence[int]) -> Tuple[int, ...]:
    """Returns the counts as a tuple, or raises ValueError unless there are 14 non-negative ints."""
    pits = tuple(values)
    if len(pits) != PIT_COUNT:
        raise ValueError(f'Expected {PIT_COUNT} pits, got {len(pits)}')
    for count in pits:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f'Pit counts must be non-negative integers, got {count!r}')
    return pits
