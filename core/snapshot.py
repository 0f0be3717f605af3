"""
Single-line text codec for PyraminxState.

Format (UTF-8, one line):
    v:1; tipOri:[0, 0, 0, 0]; edgeAt:[0, 1, 2, 3, 4, 5]; edgeOri:[0, 0, 0, 0, 0, 0]; centerAt:[0, 1, 2, 3]; centerOri:[0, 0, 0, 0];

Encoding is stable: equal states give identical lines. Decoding locates
each field by key, parses the bracketed integers and hands the arrays to
the checked constructor, so a well-formed line describing an illegal
state still fails (with ValidationError).
"""
import re
from typing import List, Sequence, Tuple

from core.config import SNAPSHOT_VERSION
from core.pyraminx_state import PyraminxState
from core.types import SnapshotFormatError, UnsupportedSnapshotVersion

VERSION_TAG = f"v:{SNAPSHOT_VERSION};"

# Field order is part of the format
FIELDS: Tuple[str, ...] = ("tipOri", "edgeAt", "edgeOri", "centerAt", "centerOri")

_VERSION_RE = re.compile(r"(?<![A-Za-z0-9_])v:")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _format_array(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def encode(state: PyraminxState) -> str:
    """Encode a state as a snapshot line (no trailing newline)."""
    arrays = (
        state.tip_orientations,
        state.edge_permutation,
        state.edge_orientations,
        state.center_permutation,
        state.center_orientations,
    )
    parts = [VERSION_TAG]
    for key, values in zip(FIELDS, arrays):
        parts.append(f"{key}:{_format_array(values)};")
    return " ".join(parts)


def _read_field(line: str, key: str) -> List[int]:
    key_re = re.compile(rf"(?<![A-Za-z0-9_]){re.escape(key)}:")
    hits = key_re.findall(line)
    if not hits:
        raise SnapshotFormatError(f"Missing field '{key}'")
    if len(hits) > 1:
        raise SnapshotFormatError(f"Duplicate field '{key}'")

    match = re.search(rf"(?<![A-Za-z0-9_]){re.escape(key)}:\s*\[([^\[\]]*)\]", line)
    if match is None:
        raise SnapshotFormatError(f"Field '{key}' has no bracketed array")

    body = match.group(1).strip()
    if not body:
        return []

    values = []
    for raw in body.split(","):
        item = raw.strip()
        if not _INT_RE.fullmatch(item):
            raise SnapshotFormatError(f"Non-integer element {item!r} in field '{key}'")
        values.append(int(item))
    return values


def decode(line: str) -> PyraminxState:
    """
    Decode a snapshot line into a validated state.

    Raises:
        UnsupportedSnapshotVersion: Missing or unknown version tag
        SnapshotFormatError: Missing/duplicate field, bad brackets, non-integer element
        ValidationError: Arrays parse but describe an illegal state
    """
    if line is None:
        raise UnsupportedSnapshotVersion("Empty snapshot")
    line = line.strip()
    if not line.startswith(VERSION_TAG):
        found = line.split(";", 1)[0] if line.startswith("v:") else "none"
        raise UnsupportedSnapshotVersion(f"Unsupported snapshot version: {found}")
    if len(_VERSION_RE.findall(line)) > 1:
        raise SnapshotFormatError("Duplicate version tag")

    tip_ori, edge_at, edge_ori, center_at, center_ori = (_read_field(line, key) for key in FIELDS)
    return PyraminxState(tip_ori, edge_at, edge_ori, center_at, center_ori)
