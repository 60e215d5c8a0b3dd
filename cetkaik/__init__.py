"""Fundamental data types for cetkaik (机戦), a board game.

Sides, piece colors and professions, the (color, profession) identity of a
capturable piece, and the moves of the game with their textual notation.
"""

from cetkaik.errors import CetkaikError, ConfigurationError, ParseError, ValidationError
from cetkaik.models import (
    AbsoluteSide,
    Color,
    ColorAndProf,
    Profession,
    color,
    cp,
    prof,
    serialize_color,
    serialize_prof,
)
from cetkaik.moves import (
    MOVE_ADAPTER,
    InfAfterStep,
    NonTamMoveFromHopZuo,
    NonTamMoveSrcDst,
    NonTamMoveSrcStepDstFinite,
    PureMove,
    TamMoveNoStep,
    TamMoveStepsDuringFormer,
    TamMoveStepsDuringLatter,
)
from cetkaik.notation import parse_move, render_move

__all__ = [
    "AbsoluteSide",
    "CetkaikError",
    "Color",
    "ColorAndProf",
    "ConfigurationError",
    "InfAfterStep",
    "MOVE_ADAPTER",
    "NonTamMoveFromHopZuo",
    "NonTamMoveSrcDst",
    "NonTamMoveSrcStepDstFinite",
    "ParseError",
    "Profession",
    "PureMove",
    "TamMoveNoStep",
    "TamMoveStepsDuringFormer",
    "TamMoveStepsDuringLatter",
    "ValidationError",
    "color",
    "cp",
    "parse_move",
    "prof",
    "render_move",
    "serialize_color",
    "serialize_prof",
]
