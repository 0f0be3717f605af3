"""
Undo/redo history for puzzle moves.

Stores moves, not states: undo applies the inverse of the last move,
redo re-applies it. Applying a new move discards the redo branch.
"""
from typing import Any, Dict, Iterable, List, Optional

from core.move_library import to_alg, invert
from core.moves import Move
from core.pyraminx_state import PyraminxState


class History:
    """Manages the undo and redo stacks."""

    def __init__(self):
        self._undo: List[Move] = []  # oldest first
        self._redo: List[Move] = []  # next redo last

    def apply(self, state: PyraminxState, move: Move) -> PyraminxState:
        """Apply move, record it, and clear the redo stack."""
        next_state = move.apply(state)
        self._undo.append(move)
        self._redo.clear()
        return next_state

    def apply_all(self, state: PyraminxState, moves: Iterable[Move]) -> PyraminxState:
        """
        Apply a sequence of moves as one unit.

        The final state is computed before anything is recorded, so if any
        move fails the stacks are left exactly as they were.

        Returns:
            State after the last move
        """
        moves = list(moves)
        next_state = state
        for move in moves:
            next_state = move.apply(next_state)
        self._undo.extend(moves)
        self._redo.clear()
        return next_state

    def undo(self, state: PyraminxState) -> PyraminxState:
        """Undo the last move; with nothing to undo the input comes back unchanged."""
        if not self._undo:
            return state
        move = self._undo.pop()
        prev_state = move.inverse().apply(state)
        self._redo.append(move)
        return prev_state

    def redo(self, state: PyraminxState) -> PyraminxState:
        """Re-apply the last undone move; no-op when the redo stack is empty."""
        if not self._redo:
            return state
        move = self._redo.pop()
        next_state = move.apply(state)
        self._undo.append(move)
        return next_state

    def clear(self):
        """Clear both stacks."""
        self._undo.clear()
        self._redo.clear()

    def undo_size(self) -> int:
        return len(self._undo)

    def redo_size(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def peek_undo(self) -> Optional[str]:
        """Notation of the move that would be undone."""
        if not self._undo:
            return None
        return self._undo[-1].notation()

    def peek_redo(self) -> Optional[str]:
        """Notation of the move that would be redone."""
        if not self._redo:
            return None
        return self._redo[-1].notation()

    def to_alg(self) -> str:
        """Applied moves, oldest to newest, in notation."""
        return to_alg(self._undo)

    def inverse_alg(self) -> str:
        """Sequence that would take the current state back to where history began."""
        return to_alg(invert(self._undo))

    def get_history_info(self) -> Dict[str, Any]:
        """Get information about current history state."""
        return {
            "undo_size": self.undo_size(),
            "redo_size": self.redo_size(),
            "can_undo": self.can_undo(),
            "can_redo": self.can_redo(),
            "undo_move": self.peek_undo(),
            "redo_move": self.peek_redo(),
            "alg": self.to_alg(),
        }
