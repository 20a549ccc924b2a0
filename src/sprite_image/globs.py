"""Constants and paths for the project.

:author: Shay Hill
:created: 2025-01-06
"""

from pathlib import Path

# ===================================================================================
#   Paths
# ===================================================================================

_PROJECT = Path(__file__).parent.parent.parent

# where scripts write example output. Not created here. The library itself never
# touches the file system.
BINARIES = _PROJECT / "binaries"


# ===================================================================================
#   Metaparameters
# ===================================================================================

# unit appended to svg width and height when the caller doesn't give one
DEFAULT_UNIT = "px"

# (r, g, b, a) of the color a new sprite is filled with
DEFAULT_FILL = (0, 0, 0, 1.0)
