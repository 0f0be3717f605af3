"""
PuzzleController - thin glue between user intent and the engine.

Owns the current state and the move history, republishes every new state
to subscribers, and autosaves after each accepted mutation. Save failures
are logged and otherwise ignored; the next mutation writes again.
"""
import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from app import game_io
from core.config import default_autosave_dir
from core.history import History
from core.move_library import parse, scramble as generate_scramble
from core.moves import Move
from core.pyraminx_state import PyraminxState
from core.types import Face

logger = logging.getLogger(__name__)

StateListener = Callable[[PyraminxState], None]


class PuzzleController:
    """
    Session controller.

    Attributes:
        history: Undo/redo stacks for this session
        autosave_dir: Directory receiving pyraminx.save (None disables saving)
    """

    def __init__(self, history: Optional[History] = None,
                 autosave_dir: Optional[Path] = None, autosave: bool = True):
        self.history: History = history if history is not None else History()
        if autosave:
            self.autosave_dir: Optional[Path] = Path(autosave_dir) if autosave_dir else default_autosave_dir()
        else:
            self.autosave_dir = None
        self._state: PyraminxState = PyraminxState.solved()
        self._listeners: List[StateListener] = []

    # =============================================================================
    # OBSERVATION
    # =============================================================================

    @property
    def state(self) -> PyraminxState:
        return self._state

    @property
    def alg_text(self) -> str:
        return self.history.to_alg()

    @property
    def move_count(self) -> int:
        return self.history.undo_size()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for new states; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return _unsubscribe

    def _publish(self, state: PyraminxState):
        self._state = state
        self._autosave()
        for listener in list(self._listeners):
            listener(state)

    def _autosave(self):
        if self.autosave_dir is None:
            return
        try:
            game_io.autosave(self.autosave_dir, self._state)
        except game_io.PersistenceFailure as e:
            logger.warning("Autosave failed: %s", e)

    # =============================================================================
    # MUTATIONS
    # =============================================================================

    def apply(self, move: Move):
        """Apply any move and publish the result."""
        logger.debug("apply %s", move.notation() or "<no-op>")
        self._publish(self.history.apply(self._state, move))

    def layer(self, face: Face, turns: int = 1):
        self.apply(Move.layer(face, turns))

    def tip(self, face: Face, turns: int = 1):
        self.apply(Move.tip(face, turns))

    def apply_all(self, moves: Iterable[Move]):
        """Apply a sequence as one update (single publish); on failure nothing is recorded."""
        self._publish(self.history.apply_all(self._state, moves))

    def apply_alg(self, alg: str):
        """
        Parse and apply an algorithm string.

        Raises:
            ParseError: On a bad token; nothing is applied in that case
        """
        self.apply_all(parse(alg))

    def undo(self):
        self._publish(self.history.undo(self._state))

    def redo(self):
        self._publish(self.history.redo(self._state))

    def reset(self):
        """Back to solved with an empty history."""
        self.replace_state(PyraminxState.solved())

    def scramble(self, n: int, seed: Optional[int] = None) -> List[Move]:
        """Apply n random moves (recorded in history) and return them."""
        moves = generate_scramble(n, seed)
        logger.debug("scramble n=%d seed=%s", n, seed)
        self.apply_all(moves)
        return moves

    def solve_by_undo_all(self):
        """Undo every recorded move."""
        state = self._state
        while self.history.can_undo():
            state = self.history.undo(state)
        self._publish(state)

    def replace_state(self, state: PyraminxState):
        """Adopt a replacement state; history no longer applies to it."""
        self.history.clear()
        self._publish(state)

    def init_from_autosave_or_solved(self):
        """Startup: load the autosave if usable, otherwise start solved."""
        if self.autosave_dir is None:
            self.replace_state(PyraminxState.solved())
            return
        self.replace_state(game_io.load_or_default(self.autosave_dir, PyraminxState.solved))
