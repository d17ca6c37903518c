"""
Livescore - In-memory live scoreboard for fixtures in progress.

This package provides:
- The Match model and match factories (``models``)
- The Scoreboard registry with its ranked summary (``services.scoreboard``)
- Scripted fixture replays for demos (``services.replay``, ``fixture_config``)
- A small command line driver (``cli``)
"""

__version__ = "0.1.0"
