"""Rendering moves to cetkaik notation.

Marker glyphs:
    片  a non-Tam2 piece moves from the square on its left
    皇  the Tam2 moves from the square on its left
    心  separates the step square from the planned target of an infinite move
    水  a water-entry ciurl is required
    [ ] wrap the Tam2's intermediate landing square
"""

from __future__ import annotations

from typing import assert_never

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

NON_TAM_MARKER = "片"
TAM_MARKER = "皇"
INFINITE_MARKER = "心"
WATER_MARKER = "水"
FIRST_DEST_OPEN = "["
FIRST_DEST_CLOSE = "]"


def _water(is_water_entry_ciurl: bool) -> str:
    return WATER_MARKER if is_water_entry_ciurl else ""


def render_move(move: PureMove) -> str:
    """Render a move in canonical notation.

    Examples:
        KA片LE        NonTamMoveSrcDst without water entry
        KA片LE水      NonTamMoveSrcDst with water entry
        KA片KELI      NonTamMoveSrcStepDstFinite
        KA片KE心KY    InfAfterStep
        赤兵LE        NonTamMoveFromHopZuo
        ZO皇[ZI]ZU    TamMoveNoStep
    """
    if isinstance(move, NonTamMoveSrcDst):
        return f"{move.src}{NON_TAM_MARKER}{move.dest}{_water(move.is_water_entry_ciurl)}"
    elif isinstance(move, NonTamMoveSrcStepDstFinite):
        return (
            f"{move.src}{NON_TAM_MARKER}{move.step}{move.dest}"
            f"{_water(move.is_water_entry_ciurl)}"
        )
    elif isinstance(move, InfAfterStep):
        return (
            f"{move.src}{NON_TAM_MARKER}{move.step}"
            f"{INFINITE_MARKER}{move.planned_direction}"
        )
    elif isinstance(move, NonTamMoveFromHopZuo):
        return f"{move.color.render()}{move.prof.render()}{move.dest}"
    elif isinstance(move, TamMoveNoStep):
        return (
            f"{move.src}{TAM_MARKER}"
            f"{FIRST_DEST_OPEN}{move.first_dest}{FIRST_DEST_CLOSE}{move.second_dest}"
        )
    elif isinstance(move, TamMoveStepsDuringFormer):
        return (
            f"{move.src}{TAM_MARKER}{move.step}"
            f"{FIRST_DEST_OPEN}{move.first_dest}{FIRST_DEST_CLOSE}{move.second_dest}"
        )
    elif isinstance(move, TamMoveStepsDuringLatter):
        return (
            f"{move.src}{TAM_MARKER}"
            f"{FIRST_DEST_OPEN}{move.first_dest}{FIRST_DEST_CLOSE}"
            f"{move.step}{move.second_dest}"
        )
    else:
        assert_never(move)
