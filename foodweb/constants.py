"""
Central configuration constants for the foodweb encounter model.

Defines the vitality range and data file names used across modules.
"""

import numpy as np


# ============================================================================
# Vitality Range
# ============================================================================

# Vitality behaves like an unsigned 64-bit counter
VITALITY_MIN = 0
VITALITY_MAX = int(np.iinfo(np.uint64).max)

# Vitality of a dead organism
DEAD_VITALITY = 0


# ============================================================================
# Data Files
# ============================================================================

# Schema used by loader.load_roster when a schema_dir is given
ROSTER_SCHEMA_FILE = "roster.schema.json"

# Glob pattern for roster files in a directory
ROSTER_FILE_PATTERN = "*.yaml"
