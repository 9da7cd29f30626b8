from __future__ import annotations

# Facade module that re-exports the Kalah core.
# The Flask app and tests import from here; single-responsibility modules
# live under kalah_core/*.

from kalah_core.board import (  # noqa: F401
    PIT_COUNT,
    STORE_A,
    STORE_B,
    Player,
    is_store,
    opposite_pit,
    render_board,
    side_empty,
    validate_pits,
)
from kalah_core.state import (  # noqa: F401
    DEFAULT_STONES_PER_PIT,
    BoardState,
    create_initial_state,
    describe_outcome,
    status_message,
)
from kalah_core.config import (  # noqa: F401
    RELAY_RULES,
    STANDARD_RULES,
    RuleConfig,
    configure_logging,
    parse_flag,
    rules_from_env,
    stones_from_env,
)
from kalah_core.moves import (  # noqa: F401
    apply_move,
    is_legal_move,
    iter_sow,
    legal_moves,
    resolve_after_sow,
    sow,
    sow_step,
    sow_stepwise,
)
from kalah_core.ai import (  # noqa: F401
    compute_hint,
    score_moves,
    with_hint_move,
)


def main() -> None:
    # CLI driver delegated to kalah_core.cli
    from kalah_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
