"""
Shared types for the Pyraminx engine.
Separated to avoid circular imports between modules.
"""
from enum import Enum
from typing import Optional


class Face(Enum):
    """The four outer faces of the tetrahedron, in canonical order."""
    U = 0
    L = 1
    R = 2
    B = 3

    @property
    def index(self) -> int:
        return self.value


class EdgePos(Enum):
    """Six edge positions, named by the two faces they border."""
    UL = 0
    UR = 1
    UB = 2
    LR = 3
    LB = 4
    RB = 5

    @property
    def index(self) -> int:
        return self.value


class CenterPos(Enum):
    """Four three-color center positions (one per face, same order as Face)."""
    U = 0
    L = 1
    R = 2
    B = 3

    @property
    def index(self) -> int:
        return self.value


class MoveKind(Enum):
    """The two move families."""
    TIP = "tip"       # single tip twist
    LAYER = "layer"   # vertex layer turn


class Invariant(Enum):
    """Which legality rule a state broke."""
    ARRAY_SHAPE = "array_shape"
    TIP_ORIENTATION = "tip_orientation"
    EDGE_PERMUTATION = "edge_permutation"
    EDGE_PARITY = "edge_parity"
    EDGE_FLIP_RANGE = "edge_flip_range"
    EDGE_FLIP_PARITY = "edge_flip_parity"
    CENTER_FIXED = "center_fixed"
    CENTER_ORIENTATION = "center_orientation"


class PyraminxError(Exception):
    """Base class for engine errors."""


class ParseError(PyraminxError, ValueError):
    """Bad notation token."""
    def __init__(self, token: str, reason: str):
        super().__init__(f"{reason}: {token!r}")
        self.token = token
        self.reason = reason


class ValidationError(PyraminxError, ValueError):
    """Represents a violated state invariant with an optional position."""
    def __init__(self, invariant: Invariant, message: str, location: Optional[Enum] = None):
        super().__init__(message)
        self.invariant = invariant
        self.message = message
        self.location = location

    def __str__(self):
        loc_str = f" at {self.location.name}" if self.location is not None else ""
        return f"{self.invariant.name}: {self.message}{loc_str}"


class SnapshotFormatError(PyraminxError, ValueError):
    """Snapshot line is structurally malformed."""


class UnsupportedSnapshotVersion(SnapshotFormatError):
    """Snapshot line is missing the version tag or carries an unknown one."""
