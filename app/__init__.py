"""
Pyraminx Engine - Host Package
Session controller, autosave persistence, and the interactive console shell.
"""
from .game_io import PersistenceFailure, save, load, autosave, load_or_default, looks_like_snapshot
from .controller import PuzzleController

__all__ = [
    'PersistenceFailure', 'save', 'load', 'autosave', 'load_or_default', 'looks_like_snapshot',
    'PuzzleController',
]
