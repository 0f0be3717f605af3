"""
Notation parsing and scramble generation.

Tokens: U L R B (layer turns), u l r b (tip twists), each optionally
followed by a single ' or 2, both meaning two turns (the turn group has
order 3, so U' and U2 do the same thing). Algorithms are
whitespace-separated tokens; a blank string is the empty algorithm.
"""
import random
import time
from typing import Iterable, List, Optional

from core.moves import Move
from core.pyraminx_state import PyraminxState
from core.types import Face, MoveKind, ParseError

_LAYER_LETTERS = {face.name: face for face in Face}
_TIP_LETTERS = {face.name.lower(): face for face in Face}
_DOUBLE_SUFFIXES = ("'", "2")


def parse_token(token: str) -> Move:
    """
    Parse one notation token.

    Args:
        token: e.g. "U", "L'", "r2", "b"

    Returns:
        The Move the token denotes

    Raises:
        ParseError: Unknown face letter, bad suffix, or trailing characters
    """
    if not token:
        raise ParseError(token, "Empty token")

    letter = token[0]
    if letter in _LAYER_LETTERS:
        kind, face = MoveKind.LAYER, _LAYER_LETTERS[letter]
    elif letter in _TIP_LETTERS:
        kind, face = MoveKind.TIP, _TIP_LETTERS[letter]
    else:
        raise ParseError(token, "Unknown face")

    turns = 1
    if len(token) > 1:
        if token[1] not in _DOUBLE_SUFFIXES:
            raise ParseError(token, "Bad suffix")
        if len(token) > 2:
            raise ParseError(token, "Extra characters")
        turns = 2

    return Move(kind, face, turns)


def parse(alg: Optional[str]) -> List[Move]:
    """Parse a whitespace-separated algorithm; None or blank gives []."""
    if alg is None or not alg.strip():
        return []
    return [parse_token(tok) for tok in alg.split()]


def _random_move(rng: random.Random) -> Move:
    # Draw order is part of the seed contract: face, kind, turns
    face = list(Face)[rng.randrange(4)]
    kind = MoveKind.LAYER if rng.random() < 0.5 else MoveKind.TIP
    turns = 1 if rng.random() < 0.5 else 2
    return Move(kind, face, turns)


def scramble(n: int, seed: Optional[int] = None) -> List[Move]:
    """
    Generate n random moves, never repeating the same (kind, face) back to back.

    The same n and seed always produce the same list. With seed None a
    time-derived seed is used.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Scramble length must be non-negative: {n}")
    if seed is None:
        seed = time.time_ns()

    rng = random.Random(seed)
    moves: List[Move] = []
    prev: Optional[Move] = None
    for _ in range(n):
        move = _random_move(rng)
        while prev is not None and move.kind is prev.kind and move.face is prev.face:
            move = _random_move(rng)
        moves.append(move)
        prev = move
    return moves


def apply_all(state: PyraminxState, moves: Iterable[Move]) -> PyraminxState:
    for move in moves:
        state = move.apply(state)
    return state


def to_alg(moves: Iterable[Move]) -> str:
    """Render moves as notation, skipping no-ops."""
    return " ".join(m.notation() for m in moves if not m.is_noop())


def invert(moves: Iterable[Move]) -> List[Move]:
    """Inverse algorithm: each move inverted, order reversed."""
    return [m.inverse() for m in reversed(list(moves))]
