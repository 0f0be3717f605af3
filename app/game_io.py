"""
Persistence for a puzzle session: the current state as one snapshot line.

Saves go to a ".tmp" sibling first and are then moved over the target, so a
reader never sees a half-written file. Loading at startup never fails: any
missing, unreadable, or invalid save falls back to a caller-supplied state.
"""
import logging
import os
from pathlib import Path
from typing import Callable, Union

from core.config import SAVE_BASENAME
from core.pyraminx_state import PyraminxState
from core.snapshot import decode, encode

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class PersistenceFailure(Exception):
    """A save could not be written."""


def _tmp_sibling(target: Path) -> Path:
    return target.with_name(target.name + ".tmp")


def save(target: PathLike, state: PyraminxState) -> None:
    """
    Atomically replace target with the state's snapshot line.

    Raises:
        PersistenceFailure: If the filesystem operation fails
    """
    target = Path(target)
    tmp = _tmp_sibling(target)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(encode(state) + "\n")
        os.replace(tmp, target)
    except OSError as e:
        raise PersistenceFailure(f"Could not save to {target}: {e}") from e
    logger.debug("Saved snapshot to %s", target)


def load(source: PathLike) -> PyraminxState:
    """
    Read and decode a snapshot file.

    Raises:
        OSError: If the file cannot be read
        SnapshotFormatError / ValidationError: If the contents are invalid
    """
    with open(source, "r", encoding="utf-8") as f:
        line = f.read()
    return decode(line.strip())


def autosave(directory: PathLike, state: PyraminxState) -> Path:
    """Save to directory/pyraminx.save and return the written path."""
    target = Path(directory) / SAVE_BASENAME
    save(target, state)
    return target


def load_or_default(directory: PathLike, fallback: Callable[[], PyraminxState]) -> PyraminxState:
    """
    Load directory/pyraminx.save, or return fallback() if it is absent or invalid.
    """
    path = Path(directory) / SAVE_BASENAME
    if path.is_file():
        try:
            return load(path)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unusable save %s: %s", path, e)
    state = fallback()
    if state is None:
        raise ValueError("fallback supplied None")
    return state


def looks_like_snapshot(path: PathLike) -> bool:
    """Cheap pre-check: file is readable and starts with a version tag."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip().startswith("v:")
    except (OSError, UnicodeDecodeError):
        return False
