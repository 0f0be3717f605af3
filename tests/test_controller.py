"""
Controller glue and console shell:
- Listeners see every new state
- Bad notation changes nothing
- Shell lines map to controller operations
"""

import pytest

from app.controller import PuzzleController
from app.main import format_state, handle_line
from core.move_library import apply_all, scramble
from core.pyraminx_state import PyraminxState
from core.moves import Move
from core.types import Face, ParseError


@pytest.fixture
def controller():
    c = PuzzleController(autosave=False)
    c.init_from_autosave_or_solved()
    return c


def test_listeners_receive_each_new_state(controller):
    seen = []
    unsubscribe = controller.subscribe(seen.append)
    controller.layer(Face.U)
    controller.tip(Face.R, 2)
    controller.undo()
    assert len(seen) == 3
    assert seen[-1] == controller.state

    unsubscribe()
    controller.redo()
    assert len(seen) == 3


def test_bad_algorithm_applies_nothing(controller):
    controller.apply_alg("U")
    before = controller.state
    with pytest.raises(ParseError):
        controller.apply_alg("R L X")
    assert controller.state == before
    assert controller.move_count == 1


def test_alg_text_and_move_count(controller):
    controller.apply_alg("U L' r2 u")
    assert controller.alg_text == "U L2 r2 u"
    assert controller.move_count == 4


def test_scramble_is_recorded_and_reproducible(controller):
    moves = controller.scramble(10, seed=42)
    assert controller.state == apply_all(PyraminxState.solved(), scramble(10, 42))
    assert controller.move_count == len(moves)
    controller.solve_by_undo_all()
    assert controller.state.is_solved()
    assert controller.history.redo_size() == 10


def test_replace_state_clears_history(controller, apply_seq):
    controller.apply_alg("U R")
    target = apply_seq(PyraminxState.solved(), "b")
    controller.replace_state(target)
    assert controller.state == target
    assert controller.move_count == 0
    assert not controller.history.can_redo()


def test_shell_applies_algorithm(controller):
    out = handle_line(controller, "U L' r2 u")
    assert "Moves: 4" in out
    assert "Solved: no" in out


def test_shell_commands(controller):
    handle_line(controller, "U R")
    assert "Applied: U R" in handle_line(controller, "history")
    assert "Inverse: R2 U2" in handle_line(controller, "history")
    handle_line(controller, "undo")
    assert controller.move_count == 1
    handle_line(controller, "redo")
    assert controller.move_count == 2
    assert "Solved: yes" in handle_line(controller, "solve")
    handle_line(controller, "U")
    assert "Solved: yes" in handle_line(controller, "reset")
    assert controller.move_count == 0


def test_shell_scramble_with_seed(controller):
    out = handle_line(controller, "scramble 6 9")
    expected = " ".join(m.notation() for m in scramble(6, 9))
    assert out.startswith(f"Scramble: {expected}")
    assert controller.move_count == 6


def test_shell_reports_errors(controller):
    assert handle_line(controller, "U3").startswith("Error:")
    assert handle_line(controller, "scramble many").startswith("Error:")
    assert handle_line(controller, "   ") == ""
    assert controller.move_count == 0


def test_format_state_lists_positions(solved):
    text = format_state(solved)
    assert "UL:0/0" in text
    assert "RB:5/0" in text
    assert "Solved: yes" in text


def test_apply_all_failure_changes_nothing(controller):
    controller.apply_alg("U R")
    controller.undo()
    before = controller.state
    seen = []
    controller.subscribe(seen.append)
    with pytest.raises(AttributeError):
        controller.apply_all([Move.layer(Face.U), "bogus"])
    assert controller.state == before
    assert controller.move_count == 1
    assert controller.history.can_redo()
    assert seen == []
    controller.undo()
    assert controller.state.is_solved()


def test_app_package_exports():
    import app
    assert app.PuzzleController is PuzzleController
    for name in app.__all__:
        assert hasattr(app, name), name
    assert "looks_like_snapshot" in app.__all__
