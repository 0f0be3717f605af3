"""
Configuration: engine constants and host defaults.
"""
import os
from pathlib import Path

# Snapshot format version written by the codec
SNAPSHOT_VERSION = 1

# Piece counts
TIP_COUNT = 4
EDGE_COUNT = 6
CENTER_COUNT = 4

# Orientation moduli
TIP_MODULUS = 3
EDGE_MODULUS = 2
CENTER_MODULUS = 3

# Turn group order for both move families
TURN_MODULUS = 3

# Autosave location: <PYRAMINX_HOME or ~>/.pyraminx/pyraminx.save
AUTOSAVE_DIRNAME = ".pyraminx"
SAVE_BASENAME = "pyraminx.save"
HOME_ENV_VAR = "PYRAMINX_HOME"

# Scramble length used by the shell when none is given
DEFAULT_SCRAMBLE_LENGTH = 12

# Logging
LOG_LEVEL_ENV_VAR = "PYRAMINX_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def default_autosave_dir() -> Path:
    """Directory holding the autosave file, resolved at call time."""
    home = os.environ.get(HOME_ENV_VAR) or str(Path.home())
    return Path(home) / AUTOSAVE_DIRNAME


def default_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
