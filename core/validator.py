"""
Legality checks for Pyraminx states.

Every state handed out by the engine has passed require_legal(). The checks
are stateless and can be run on any state-like object exposing the five
backing tuples, so tests and loaders can check malformed inputs directly.

Rules enforced:
    - tip orientations in {0,1,2}
    - edge ids form a permutation of 0..5 with even parity
    - edge flips in {0,1} with an even sum
    - centers never permute; center orientations in {0,1,2}
"""
from typing import List

from core.config import (
    TIP_COUNT, EDGE_COUNT, CENTER_COUNT,
    TIP_MODULUS, EDGE_MODULUS, CENTER_MODULUS,
)
from core.types import Face, EdgePos, CenterPos, Invariant, ValidationError
from utils.permutation import is_permutation, is_even_permutation


def _check_shape(state) -> List[ValidationError]:
    errors = []
    expected = (
        ("tip_orientations", TIP_COUNT),
        ("edge_permutation", EDGE_COUNT),
        ("edge_orientations", EDGE_COUNT),
        ("center_permutation", CENTER_COUNT),
        ("center_orientations", CENTER_COUNT),
    )
    for name, length in expected:
        actual = len(getattr(state, name))
        if actual != length:
            errors.append(ValidationError(
                Invariant.ARRAY_SHAPE, f"{name} has length {actual}, expected {length}"
            ))
    return errors


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid piece id or orientation
    return isinstance(value, int) and not isinstance(value, bool)


def collect_violations(state) -> List[ValidationError]:
    """
    Run every check and return all violations, in check order.

    Elements must be plain ints; floats, bools and strings are reported under
    the invariant of the array they sit in. Parity of the edge permutation is
    only examined once the edge ids are known to be a bijection, and the flip
    sum only once every flip is in range.
    """
    errors = _check_shape(state)
    if errors:
        # Per-position checks would index out of range
        return errors

    for face in Face:
        t = state.tip_orientations[face.index]
        if not _is_int(t) or not 0 <= t < TIP_MODULUS:
            errors.append(ValidationError(
                Invariant.TIP_ORIENTATION, f"tip orientation {t!r} not in {{0,1,2}}", location=face
            ))

    bad_ids = False
    bad_flips = False
    for pos in EdgePos:
        piece = state.edge_permutation[pos.index]
        if not _is_int(piece) or not 0 <= piece < EDGE_COUNT:
            bad_ids = True
            errors.append(ValidationError(
                Invariant.EDGE_PERMUTATION, f"edge id {piece!r} out of range", location=pos
            ))
        flip = state.edge_orientations[pos.index]
        if not _is_int(flip) or not 0 <= flip < EDGE_MODULUS:
            bad_flips = True
            errors.append(ValidationError(
                Invariant.EDGE_FLIP_RANGE, f"edge flip {flip!r} not in {{0,1}}", location=pos
            ))

    for pos in CenterPos:
        piece = state.center_permutation[pos.index]
        if not _is_int(piece) or piece != pos.index:
            errors.append(ValidationError(
                Invariant.CENTER_FIXED, f"centers must not permute, found id {piece!r}", location=pos
            ))
        ori = state.center_orientations[pos.index]
        if not _is_int(ori) or not 0 <= ori < CENTER_MODULUS:
            errors.append(ValidationError(
                Invariant.CENTER_ORIENTATION, f"center orientation {ori!r} not in {{0,1,2}}", location=pos
            ))

    edges = state.edge_permutation
    if not bad_ids:
        if not is_permutation(edges, EDGE_COUNT):
            errors.append(ValidationError(
                Invariant.EDGE_PERMUTATION, f"edge ids {list(edges)} are not a permutation of 0..5"
            ))
        elif not is_even_permutation(edges):
            errors.append(ValidationError(
                Invariant.EDGE_PARITY, "edge permutation has odd parity"
            ))

    if not bad_flips and sum(state.edge_orientations) % 2 != 0:
        errors.append(ValidationError(
            Invariant.EDGE_FLIP_PARITY, "sum of edge flips must be even"
        ))

    return errors


def require_legal(state) -> None:
    """
    Return normally if the state is legal, otherwise raise.

    Raises:
        ValidationError: The first violated rule, tagged with its Invariant
    """
    errors = collect_violations(state)
    if errors:
        raise errors[0]


def is_legal(state) -> bool:
    return not collect_violations(state)
