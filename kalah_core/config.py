from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .state import DEFAULT_STONES_PER_PIT

LOG_FORMAT = '%(asctime)s [%(levelname)s]: %(message)s'
LOG_DATEFMT = '%m/%d/%Y %I:%M:%S %p'

_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('0', 'false', 'no', 'off', '')


@dataclass(frozen=True)
class RuleConfig:
    """Rule switches that change how a move is played out.

    relay_sowing: keep sowing from the landing pit while it holds more than
    one stone (not standard Kalah). Off by default.
    """
    relay_sowing: bool = False


STANDARD_RULES = RuleConfig()
RELAY_RULES = RuleConfig(relay_sowing=True)


def parse_flag(raw: str) -> bool:
    """Reads an on/off switch such as 'true', 'no' or '1'. Raises ValueError on anything else."""
    text = raw.strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ValueError(f'Expected an on/off flag, got {raw!r}')


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return parse_flag(raw)
    except ValueError:
        raise ValueError(f'{name} must be an on/off flag, got {raw!r}')


def rules_from_env() -> RuleConfig:
    """Rule set selected by KALAH_RELAY_SOWING."""
    return RuleConfig(relay_sowing=_env_flag('KALAH_RELAY_SOWING'))


def stones_from_env() -> int:
    raw = os.getenv('KALAH_STONES_PER_PIT')
    if not raw:
        return DEFAULT_STONES_PER_PIT
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'KALAH_STONES_PER_PIT must be an integer, got {raw!r}')
    if value <= 0:
        raise ValueError(f'KALAH_STONES_PER_PIT must be positive, got {value}')
    return value


def debug_enabled() -> bool:
    return _env_flag('KALAH_DEBUG')


def configure_logging(debug: Optional[bool] = None) -> None:
    if debug is None:
        debug = debug_enabled()
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT,
                        level=logging.DEBUG if debug else logging.INFO)
