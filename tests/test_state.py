"""
State basics:
- Solved factory and per-position accessors
- Checked construction rejects every kind of illegal array
- Immutability, copying of inputs, equality and hashing
"""

import pytest

from core.pyraminx_state import PyraminxState
from core.types import Face, EdgePos, CenterPos, Invariant, ValidationError

SOLVED_ARRAYS = dict(
    tip_ori=[0, 0, 0, 0],
    edge_at=[0, 1, 2, 3, 4, 5],
    edge_ori=[0, 0, 0, 0, 0, 0],
    center_at=[0, 1, 2, 3],
    center_ori=[0, 0, 0, 0],
)


def _with(**overrides):
    arrays = dict(SOLVED_ARRAYS)
    arrays.update(overrides)
    return arrays


def test_solved_is_identity(solved):
    assert solved.is_solved()
    for face in Face:
        assert solved.tip_orientation(face) == 0
    for pos in EdgePos:
        assert solved.edge_at(pos) == pos.index
        assert solved.edge_orientation(pos) == 0
    for pos in CenterPos:
        assert solved.center_at(pos) == pos.index
        assert solved.center_orientation(pos) == 0


def test_checked_of_accepts_legal_arrays():
    s = PyraminxState.checked_of(
        [1, 2, 0, 1], [1, 2, 0, 3, 4, 5], [1, 1, 0, 0, 0, 0], [0, 1, 2, 3], [2, 0, 1, 0]
    )
    assert s.tip_orientation(Face.L) == 2
    assert s.edge_at(EdgePos.UL) == 1
    assert s.edge_orientation(EdgePos.UR) == 1
    assert s.center_orientation(CenterPos.R) == 1
    assert not s.is_solved()


@pytest.mark.parametrize("overrides, invariant", [
    (dict(edge_at=[1, 0, 2, 3, 4, 5]), Invariant.EDGE_PARITY),
    (dict(edge_ori=[1, 0, 0, 0, 0, 0]), Invariant.EDGE_FLIP_PARITY),
    (dict(center_at=[1, 0, 2, 3]), Invariant.CENTER_FIXED),
    (dict(tip_ori=[4, 0, 0, 0]), Invariant.TIP_ORIENTATION),
    (dict(edge_at=[0, 0, 2, 3, 4, 5]), Invariant.EDGE_PERMUTATION),
    (dict(edge_at=[0, 1, 2, 3, 4, 6]), Invariant.EDGE_PERMUTATION),
    (dict(center_ori=[0, 3, 0, 0]), Invariant.CENTER_ORIENTATION),
    (dict(edge_ori=[2, 0, 0, 0, 0, 0]), Invariant.EDGE_FLIP_RANGE),
    (dict(tip_ori=[0, 0, 0]), Invariant.ARRAY_SHAPE),
    (dict(tip_ori=[1.7, 0, 0, 0]), Invariant.TIP_ORIENTATION),
    (dict(tip_ori=[True, 0, 0, 0]), Invariant.TIP_ORIENTATION),
    (dict(edge_at=[0.0, 1, 2, 3, 4, 5]), Invariant.EDGE_PERMUTATION),
    (dict(edge_ori=[0, 0, 0, 0, 0, 0.0]), Invariant.EDGE_FLIP_RANGE),
    (dict(center_at=[0.0, 1, 2, 3]), Invariant.CENTER_FIXED),
    (dict(center_ori=[0, 0, 0, "1"]), Invariant.CENTER_ORIENTATION),
])
def test_checked_of_rejects(overrides, invariant):
    with pytest.raises(ValidationError) as exc_info:
        PyraminxState.checked_of(**_with(**overrides))
    assert exc_info.value.invariant is invariant


def test_string_arrays_are_rejected_not_coerced():
    with pytest.raises(ValidationError) as exc_info:
        PyraminxState("0000", "012345", "000000", "0123", "0000")
    assert exc_info.value.invariant is Invariant.TIP_ORIENTATION


def test_validation_error_names_location():
    with pytest.raises(ValidationError) as exc_info:
        PyraminxState(**_with(tip_ori=[0, 0, 5, 0]))
    assert exc_info.value.location is Face.R
    assert str(exc_info.value).startswith("TIP_ORIENTATION")


def test_inputs_are_copied():
    tips = [1, 0, 0, 0]
    s = PyraminxState(**_with(tip_ori=tips))
    tips[0] = 2
    assert s.tip_orientation(Face.U) == 1


def test_state_is_immutable(solved):
    with pytest.raises(AttributeError):
        solved._tips = (1, 1, 1, 1)
    with pytest.raises(AttributeError):
        solved.foo = 1


def test_equality_and_hash():
    a = PyraminxState(**_with(tip_ori=[1, 0, 0, 0]))
    b = PyraminxState(**_with(tip_ori=[1, 0, 0, 0]))
    c = PyraminxState(**_with(tip_ori=[2, 0, 0, 0]))
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2
    assert a != "not a state"


def test_with_tip_orientation_wraps(solved):
    s = solved.with_tip_orientation(Face.B, 5)
    assert s.tip_orientation(Face.B) == 2
    assert solved.is_solved(), "receiver must not change"


def test_apply_delegates_to_move(solved, apply_seq):
    from core.moves import Move
    assert solved.apply(Move.layer(Face.U)) == apply_seq(solved, "U")
