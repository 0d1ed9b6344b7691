"""Crossword board construction and answer verification.

This package exposes the public API surface via:

- ``crossboard.engine.board.build_board``: derives cells, bounds and word
  coordinates from authored word placements.
- ``crossboard.engine.verifier.verify``: checks a filled-cell submission.
- ``crossboard.engine.service.LevelService``: the level-facing operations
  over a ``crossboard.data.level_store`` store.
"""

from .data.level_store import HttpLevelStore, JsonLevelStore, LevelStoreConfig, resolve_store
from .engine.board import build_board
from .engine.service import LevelService
from .engine.verifier import verify

__all__ = [
    "build_board",
    "verify",
    "LevelService",
    "JsonLevelStore",
    "HttpLevelStore",
    "LevelStoreConfig",
    "resolve_store",
]

__version__ = "0.1.0"
