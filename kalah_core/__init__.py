"""
Kalah core Python package.

Pure rules engine for Mancala (Kalah variant). Every operation takes a
BoardState and returns a new one; presentation layers (app.py, cli.py)
only render the snapshots produced here.
Modules:
- board.py: pit layout, Player, text rendering
- state.py: BoardState and initial setup
- config.py: rule flags, environment settings, logging setup
- moves.py: legality, sowing, capture/extra-turn/sweep resolution
- ai.py: greedy one-ply hint
"""
