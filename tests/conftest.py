import os
import sys
import pytest

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.move_library import parse
from core.pyraminx_state import PyraminxState


@pytest.fixture
def solved():
    return PyraminxState.solved()


@pytest.fixture
def apply_seq():
    """Returns a function that applies an algorithm string to a state."""
    def _apply(state, alg):
        for move in parse(alg):
            state = move.apply(state)
        return state
    return _apply


@pytest.fixture
def tmp_home(tmp_path, monkeypatch):
    """Point the default autosave location at a temp directory."""
    monkeypatch.setenv("PYRAMINX_HOME", str(tmp_path))
    return tmp_path
