"""
Pyraminx Engine - Core Package
Puzzle state, legality validation, moves, notation, history, and snapshots.
"""
from .types import (
    Face, EdgePos, CenterPos, MoveKind, Invariant,
    PyraminxError, ParseError, ValidationError, SnapshotFormatError, UnsupportedSnapshotVersion,
)
from .pyraminx_state import PyraminxState
from .validator import require_legal, collect_violations, is_legal
from .moves import Move
from .move_library import parse, parse_token, scramble, apply_all, to_alg, invert
from .history import History
from .snapshot import encode, decode

__all__ = [
    'Face', 'EdgePos', 'CenterPos', 'MoveKind', 'Invariant',
    'PyraminxError', 'ParseError', 'ValidationError', 'SnapshotFormatError', 'UnsupportedSnapshotVersion',
    'PyraminxState', 'require_legal', 'collect_violations', 'is_legal',
    'Move', 'parse', 'parse_token', 'scramble', 'apply_all', 'to_alg', 'invert',
    'History', 'encode', 'decode',
]
