"""Cetkaik move notation.

Converts moves to and from their canonical notation strings.
"""

from cetkaik.notation.parse import CoordParser, parse_move
from cetkaik.notation.render import (
    FIRST_DEST_CLOSE,
    FIRST_DEST_OPEN,
    INFINITE_MARKER,
    NON_TAM_MARKER,
    TAM_MARKER,
    WATER_MARKER,
    render_move,
)

__all__ = [
    "CoordParser",
    "FIRST_DEST_CLOSE",
    "FIRST_DEST_OPEN",
    "INFINITE_MARKER",
    "NON_TAM_MARKER",
    "TAM_MARKER",
    "WATER_MARKER",
    "parse_move",
    "render_move",
]
