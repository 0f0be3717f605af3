"""
Interactive console shell for the Pyraminx engine.
Each input line is a shell command or an algorithm to apply.
"""

import argparse
import logging
import sys
import os
from typing import List, Optional

# Add project root to path first
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Then import project modules
from app.controller import PuzzleController
from core.config import DEFAULT_SCRAMBLE_LENGTH, default_log_level
from core.pyraminx_state import PyraminxState
from core.types import Face, EdgePos, CenterPos, ParseError

HELP_TEXT = """\
Notation: U L R B turn a layer, u l r b twist a tip.
          Add ' or 2 for the other direction, e.g.  U L' r2 u
Commands:
  undo / redo          step through history
  reset                back to solved, history cleared
  solve                undo every recorded move
  scramble [n] [seed]  apply n random moves (default 12)
  history              show applied moves and their inverse
  show                 print the current state
  help                 this text
  quit                 leave the shell"""

QUIT_COMMANDS = ("quit", "exit")


def setup_logging(level: str):
    """Configure logging for the shell."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def format_state(state: PyraminxState) -> str:
    """Text dump of every position's occupant and orientation."""
    tips = " ".join(f"{f.name}:{state.tip_orientation(f)}" for f in Face)
    edges = " ".join(f"{p.name}:{state.edge_at(p)}/{state.edge_orientation(p)}" for p in EdgePos)
    centers = " ".join(f"{p.name}:{state.center_orientation(p)}" for p in CenterPos)
    return (
        f"Tips     {tips}\n"
        f"Edges    {edges}\n"
        f"Centers  {centers}\n"
        f"Solved: {'yes' if state.is_solved() else 'no'}"
    )


def _status(controller: PuzzleController) -> str:
    return f"{format_state(controller.state)}\nMoves: {controller.move_count}"


def _scramble_args(args: List[str]):
    n = int(args[0]) if args else DEFAULT_SCRAMBLE_LENGTH
    seed = int(args[1]) if len(args) > 1 else None
    return n, seed


def handle_line(controller: PuzzleController, line: str) -> str:
    """
    Execute one line of input and return the text to print.

    Args:
        controller: Session controller
        line: Shell command or algorithm string

    Returns:
        Output text (empty for blank input)
    """
    words = line.split()
    if not words:
        return ""
    command, args = words[0].lower(), words[1:]

    if command == "help":
        return HELP_TEXT
    if command == "show":
        return _status(controller)
    if command == "history":
        info = controller.history.get_history_info()
        return (
            f"Applied: {info['alg'] or '-'}\n"
            f"Inverse: {controller.history.inverse_alg() or '-'}\n"
            f"Undo: {info['undo_size']}  Redo: {info['redo_size']}"
        )
    if command == "undo":
        controller.undo()
        return _status(controller)
    if command == "redo":
        controller.redo()
        return _status(controller)
    if command == "reset":
        controller.reset()
        return _status(controller)
    if command == "solve":
        controller.solve_by_undo_all()
        return _status(controller)
    if command == "scramble":
        try:
            n, seed = _scramble_args(args)
            moves = controller.scramble(n, seed)
        except ValueError as e:
            return f"Error: {e}"
        applied = " ".join(m.notation() for m in moves)
        return f"Scramble: {applied or '-'}\n{_status(controller)}"

    try:
        controller.apply_alg(line)
    except ParseError as e:
        return f"Error: {e}"
    return _status(controller)


def run_shell(controller: PuzzleController):
    print("Pyraminx shell. Type 'help' for commands.")
    print(_status(controller))
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() in QUIT_COMMANDS:
            break
        output = handle_line(controller, line)
        if output:
            print(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pyraminx puzzle shell")
    parser.add_argument("--save-dir", default=None, help="Directory for the autosave file")
    parser.add_argument("--no-autosave", action="store_true", help="Do not read or write the autosave file")
    parser.add_argument("--log-level", default=default_log_level(), help="Logging level (default from PYRAMINX_LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        controller = PuzzleController(autosave_dir=args.save_dir, autosave=not args.no_autosave)
        controller.init_from_autosave_or_solved()
        run_shell(controller)
    except Exception as e:
        print(f"Error starting shell: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
