"""
Moves: pure transformations of a PyraminxState.

The move family is closed: a Move is either a tip twist or a layer turn,
told apart by its MoveKind. apply/inverse/notation dispatch on the kind.
Turns are kept in {0,1,2} (1 = 120 degrees clockwise, 2 = 240 degrees,
the same as 120 counter-clockwise, 0 = no-op).
"""
from dataclasses import dataclass

from core.config import TURN_MODULUS, EDGE_MODULUS, CENTER_MODULUS
from core.permutation_tables import (
    edge_cycle_cw, edge_flip_delta, center_for_face, center_orientation_delta
)
from core.pyraminx_state import PyraminxState
from core.types import Face, MoveKind, ValidationError
from utils.permutation import normalize, rotate_cycle


@dataclass(frozen=True)
class Move:
    """A single tip twist or layer turn."""
    kind: MoveKind
    face: Face
    turns: int = 1

    def __post_init__(self):
        if not isinstance(self.kind, MoveKind):
            raise TypeError(f"kind must be a MoveKind, got {self.kind!r}")
        if not isinstance(self.face, Face):
            raise TypeError(f"face must be a Face, got {self.face!r}")
        object.__setattr__(self, 'turns', normalize(int(self.turns), TURN_MODULUS))

    @classmethod
    def tip(cls, face: Face, turns: int = 1) -> "Move":
        return cls(MoveKind.TIP, face, turns)

    @classmethod
    def layer(cls, face: Face, turns: int = 1) -> "Move":
        return cls(MoveKind.LAYER, face, turns)

    def is_noop(self) -> bool:
        return self.turns == 0

    def apply(self, state: PyraminxState) -> PyraminxState:
        """
        Apply this move and return a new state; the input is never altered.

        A zero-turn move returns the input object itself.
        """
        if self.turns == 0:
            return state
        if self.kind is MoveKind.TIP:
            return _apply_tip(state, self.face, self.turns)
        if self.kind is MoveKind.LAYER:
            return _apply_layer(state, self.face, self.turns)
        raise AssertionError(f"unhandled move kind {self.kind}")

    def inverse(self) -> "Move":
        """Move that undoes this one on any legal state."""
        return Move(self.kind, self.face, (TURN_MODULUS - self.turns) % TURN_MODULUS)

    def notation(self) -> str:
        """Canonical token: 'U', 'U2', 'u', 'u2', or '' for a no-op."""
        if self.turns == 0:
            return ""
        if self.kind is MoveKind.LAYER:
            letter = self.face.name
        elif self.kind is MoveKind.TIP:
            letter = self.face.name.lower()
        else:
            raise AssertionError(f"unhandled move kind {self.kind}")
        return letter if self.turns == 1 else letter + "2"

    def __str__(self):
        return self.notation()


def _apply_tip(state: PyraminxState, face: Face, turns: int) -> PyraminxState:
    return state.with_tip_orientation(face, state.tip_orientation(face) + turns)


def _apply_layer(state: PyraminxState, face: Face, turns: int) -> PyraminxState:
    edges = list(state.edge_permutation)
    flips = list(state.edge_orientations)
    center_oris = list(state.center_orientations)

    cycle = [pos.index for pos in edge_cycle_cw(face)]
    deltas = edge_flip_delta(face)
    for _ in range(turns):
        rotate_cycle(edges, flips, cycle, deltas, EDGE_MODULUS)

    c = center_for_face(face).index
    center_oris[c] = (center_oris[c] + center_orientation_delta(face, turns)) % CENTER_MODULUS

    try:
        return PyraminxState(
            state.tip_orientations, edges, flips, state.center_permutation, center_oris
        )
    except ValidationError as exc:
        # Only a broken transition table can get here
        raise AssertionError(f"layer turn {face.name} produced an illegal state: {exc}") from exc
