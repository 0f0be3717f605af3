"""
PyraminxState - immutable snapshot of the puzzle.

Holds tip orientations (mod 3), the edge permutation and flips, and the
center permutation and orientations (mod 3). Every construction path runs
the validator, so any instance a caller can hold satisfies all invariants.
"Changing" a state always means building a new one, usually through a Move.
"""
from typing import Iterable, Tuple

from core.config import TIP_COUNT, EDGE_COUNT, CENTER_COUNT, TIP_MODULUS
from core.types import Face, EdgePos, CenterPos
from core.validator import require_legal
from utils.permutation import normalize


def _freeze(values: Iterable[int]) -> Tuple[int, ...]:
    """Copy into a tuple so no caller-owned storage is shared; elements are not converted."""
    return tuple(values)


class PyraminxState:
    """
    Immutable puzzle configuration.

    Attributes (read-only):
        tip_orientations: 4 values in {0,1,2}, indexed by Face
        edge_permutation: 6 edge ids, indexed by EdgePos (identity when solved)
        edge_orientations: 6 flips in {0,1}, indexed by EdgePos
        center_permutation: 4 center ids, always the identity
        center_orientations: 4 values in {0,1,2}, indexed by CenterPos
    """

    __slots__ = ('_tips', '_edges', '_flips', '_centers', '_center_oris')

    def __init__(self, tip_ori: Iterable[int], edge_at: Iterable[int], edge_ori: Iterable[int],
                 center_at: Iterable[int], center_ori: Iterable[int]):
        """
        Build and validate a state from raw arrays.

        Args:
            tip_ori: Tip orientations by face
            edge_at: Edge id sitting at each edge position
            edge_ori: Flip bit at each edge position
            center_at: Center id at each center position
            center_ori: Center orientation at each center position

        Raises:
            ValidationError: If any invariant is violated
        """
        object.__setattr__(self, '_tips', _freeze(tip_ori))
        object.__setattr__(self, '_edges', _freeze(edge_at))
        object.__setattr__(self, '_flips', _freeze(edge_ori))
        object.__setattr__(self, '_centers', _freeze(center_at))
        object.__setattr__(self, '_center_oris', _freeze(center_ori))
        require_legal(self)

    @classmethod
    def checked_of(cls, tip_ori: Iterable[int], edge_at: Iterable[int], edge_ori: Iterable[int],
                   center_at: Iterable[int], center_ori: Iterable[int]) -> "PyraminxState":
        """Checked factory; same contract as the constructor."""
        return cls(tip_ori, edge_at, edge_ori, center_at, center_ori)

    @classmethod
    def solved(cls) -> "PyraminxState":
        """Canonical solved state: identity permutations, all orientations zero."""
        return cls(
            [0] * TIP_COUNT,
            range(EDGE_COUNT),
            [0] * EDGE_COUNT,
            range(CENTER_COUNT),
            [0] * CENTER_COUNT,
        )

    @classmethod
    def from_snapshot(cls, line: str) -> "PyraminxState":
        from core.snapshot import decode
        return decode(line)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # =============================================================================
    # ARRAY VIEWS
    # =============================================================================

    @property
    def tip_orientations(self) -> Tuple[int, ...]:
        return self._tips

    @property
    def edge_permutation(self) -> Tuple[int, ...]:
        return self._edges

    @property
    def edge_orientations(self) -> Tuple[int, ...]:
        return self._flips

    @property
    def center_permutation(self) -> Tuple[int, ...]:
        return self._centers

    @property
    def center_orientations(self) -> Tuple[int, ...]:
        return self._center_oris

    # =============================================================================
    # POSITION ACCESSORS
    # =============================================================================

    def tip_orientation(self, face: Face) -> int:
        return self._tips[face.index]

    def edge_at(self, pos: EdgePos) -> int:
        """Id of the edge piece currently at pos."""
        return self._edges[pos.index]

    def edge_orientation(self, pos: EdgePos) -> int:
        return self._flips[pos.index]

    def center_at(self, pos: CenterPos) -> int:
        return self._centers[pos.index]

    def center_orientation(self, pos: CenterPos) -> int:
        return self._center_oris[pos.index]

    # =============================================================================
    # DERIVED STATES
    # =============================================================================

    def with_tip_orientation(self, face: Face, value: int) -> "PyraminxState":
        """New state with one tip set to value (mod 3); everything else shared."""
        tips = list(self._tips)
        tips[face.index] = normalize(value, TIP_MODULUS)
        return PyraminxState(tips, self._edges, self._flips, self._centers, self._center_oris)

    def apply(self, move) -> "PyraminxState":
        """Functional application of a move (delegates to the move)."""
        return move.apply(self)

    def is_solved(self) -> bool:
        return (
            all(t == 0 for t in self._tips)
            and self._edges == tuple(range(EDGE_COUNT))
            and all(f == 0 for f in self._flips)
            and self._centers == tuple(range(CENTER_COUNT))
            and all(o == 0 for o in self._center_oris)
        )

    def to_snapshot(self) -> str:
        from core.snapshot import encode
        return encode(self)

    def _key(self) -> Tuple[Tuple[int, ...], ...]:
        return (self._tips, self._edges, self._flips, self._centers, self._center_oris)

    def __eq__(self, other):
        if not isinstance(other, PyraminxState):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f"PyraminxState(tips={list(self._tips)}, edges={list(self._edges)}, "
            f"flips={list(self._flips)}, centers={list(self._centers)}, "
            f"center_oris={list(self._center_oris)})"
        )
