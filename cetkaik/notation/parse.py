"""Parsing cetkaik notation back into moves.

Coordinates are opaque, so the caller supplies `parse_coord`, a callable
turning a coordinate's text into a coordinate and raising ValueError (or
ParseError) otherwise. A LookupError, such as an IndexError from slicing
short text, also counts as "not a coordinate". Where markers do not delimit
two adjacent coordinates, every split point is tried and the text is
accepted only when exactly one split works. Anything ambiguous is rejected.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Tuple, TypeVar

from ..errors import ParseError
from ..models import CANONICAL_PIECES
from ..moves import (
    InfAfterStep,
    NonTamMoveFromHopZuo,
    NonTamMoveSrcDst,
    NonTamMoveSrcStepDstFinite,
    PureMove,
    TamMoveNoStep,
    TamMoveStepsDuringFormer,
    TamMoveStepsDuringLatter,
)
from .render import (
    FIRST_DEST_CLOSE,
    FIRST_DEST_OPEN,
    INFINITE_MARKER,
    NON_TAM_MARKER,
    TAM_MARKER,
    WATER_MARKER,
)

logger = logging.getLogger(__name__)

CoordT = TypeVar("CoordT")
CoordParser = Callable[[str], CoordT]

_NO_COORD = object()


def _reject(text: str, reason: str) -> ParseError:
    logger.debug("Rejected move notation %r: %s", text, reason)
    return ParseError(f"Invalid move notation: {reason}", text=text, expected="move")


def _try_coord(segment: str, parse_coord: CoordParser) -> object:
    if not segment:
        return _NO_COORD
    try:
        return parse_coord(segment)
    except (ValueError, LookupError):
        return _NO_COORD


def _one_coord(text: str, segment: str, parse_coord: CoordParser, role: str):
    coord = _try_coord(segment, parse_coord)
    if coord is _NO_COORD:
        raise _reject(text, f"{role} {segment!r} is not a coordinate")
    return coord


def _split_coords(segment: str, parse_coord: CoordParser) -> List[Tuple]:
    """All readings of `segment` as one coordinate or as two adjacent ones."""
    readings: List[Tuple] = []
    whole = _try_coord(segment, parse_coord)
    if whole is not _NO_COORD:
        readings.append((whole,))
    for i in range(1, len(segment)):
        left = _try_coord(segment[:i], parse_coord)
        if left is _NO_COORD:
            continue
        right = _try_coord(segment[i:], parse_coord)
        if right is not _NO_COORD:
            readings.append((left, right))
    return readings


def _unique_reading(text: str, segment: str, parse_coord: CoordParser) -> Tuple:
    readings = _split_coords(segment, parse_coord)
    if not readings:
        raise _reject(text, f"{segment!r} is not one or two coordinates")
    if len(readings) > 1:
        raise _reject(text, f"{segment!r} can be split {len(readings)} ways")
    return readings[0]


def _parse_non_tam(text: str, parse_coord: CoordParser) -> PureMove:
    src_text, rest = text.split(NON_TAM_MARKER)
    src = _one_coord(text, src_text, parse_coord, "source")

    if INFINITE_MARKER in rest:
        if rest.count(INFINITE_MARKER) != 1:
            raise _reject(text, f"more than one {INFINITE_MARKER}")
        if rest.endswith(WATER_MARKER):
            raise _reject(text, f"{WATER_MARKER} is not allowed after {INFINITE_MARKER}")
        step_text, planned_text = rest.split(INFINITE_MARKER)
        return InfAfterStep(
            src=src,
            step=_one_coord(text, step_text, parse_coord, "step"),
            planned_direction=_one_coord(text, planned_text, parse_coord, "planned target"),
        )

    water = rest.endswith(WATER_MARKER)
    if water:
        rest = rest[: -len(WATER_MARKER)]
    reading = _unique_reading(text, rest, parse_coord)
    if len(reading) == 1:
        return NonTamMoveSrcDst(src=src, dest=reading[0], is_water_entry_ciurl=water)
    step, dest = reading
    return NonTamMoveSrcStepDstFinite(
        src=src, step=step, dest=dest, is_water_entry_ciurl=water
    )


def _parse_tam(text: str, parse_coord: CoordParser) -> PureMove:
    if text.count(FIRST_DEST_OPEN) != 1 or text.count(FIRST_DEST_CLOSE) != 1:
        raise _reject(text, "Tam2 moves need exactly one bracketed first destination")
    if WATER_MARKER in text:
        raise _reject(text, f"Tam2 moves never carry {WATER_MARKER}")

    src_text, rest = text.split(TAM_MARKER)
    src = _one_coord(text, src_text, parse_coord, "source")

    open_at = rest.find(FIRST_DEST_OPEN)
    close_at = rest.find(FIRST_DEST_CLOSE)
    if open_at < 0 or close_at < open_at:
        raise _reject(text, "brackets out of order")
    before = rest[:open_at]
    first_dest = _one_coord(text, rest[open_at + 1:close_at], parse_coord, "first destination")
    after = rest[close_at + 1:]

    if before:
        return TamMoveStepsDuringFormer(
            src=src,
            step=_one_coord(text, before, parse_coord, "step"),
            first_dest=first_dest,
            second_dest=_one_coord(text, after, parse_coord, "second destination"),
        )

    reading = _unique_reading(text, after, parse_coord)
    if len(reading) == 1:
        return TamMoveNoStep(src=src, first_dest=first_dest, second_dest=reading[0])
    step, second_dest = reading
    return TamMoveStepsDuringLatter(
        src=src, step=step, first_dest=first_dest, second_dest=second_dest
    )


def parse_move(text: str, parse_coord: CoordParser) -> PureMove:
    """Parse canonical notation into a move.

    Inverse of render_move as long as parse_coord inverts the coordinates'
    str() and no segment reads two ways.

    Raises:
        ParseError: unknown shape, bad coordinate, stray marker or an
            ambiguous split
    """
    non_tam = text.count(NON_TAM_MARKER)
    tam = text.count(TAM_MARKER)

    if non_tam == 0 and tam == 0:
        pair = CANONICAL_PIECES.get(text[:2])
        if pair is None:
            raise _reject(text, "no move marker and no hop1zuo1 piece")
        if text.endswith(WATER_MARKER):
            raise _reject(text, f"hop1zuo1 entries never carry {WATER_MARKER}")
        color, prof = pair
        return NonTamMoveFromHopZuo(
            color=color,
            prof=prof,
            dest=_one_coord(text, text[2:], parse_coord, "destination"),
        )
    if non_tam == 1 and tam == 0:
        return _parse_non_tam(text, parse_coord)
    if tam == 1 and non_tam == 0:
        return _parse_tam(text, parse_coord)
    raise _reject(text, f"expected exactly one of {NON_TAM_MARKER} or {TAM_MARKER}")
