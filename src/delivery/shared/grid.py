"""Bounds of the delivery grid.

Both axes share the same inclusive range. The bounds are read from the
environment on every call so a running process (or a test) can resize the grid.
"""

import os

DEFAULT_GRID_MIN = 1
DEFAULT_GRID_MAX = 10


def grid_bounds() -> tuple[int, int]:
    """Return the inclusive ``(lower, upper)`` bound shared by both axes."""
    lower = int(os.getenv("DELIVERY_GRID_MIN", DEFAULT_GRID_MIN))
    upper = int(os.getenv("DELIVERY_GRID_MAX", DEFAULT_GRID_MAX))
    if lower > upper:
        raise ValueError(f"Invalid grid bounds: {lower}..{upper}")
    return lower, upper
