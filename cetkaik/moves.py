"""
Pydantic Models for cetkaik moves.

A PureMove is one of seven shapes, each a frozen model generic over the
coordinate type. Coordinates are opaque here: the only thing ever asked of
them is str(). The `type` field is the tag used for structured
(de)serialization through MOVE_ADAPTER.

Usage:
    from cetkaik.moves import NonTamMoveSrcDst, MOVE_ADAPTER

    move = NonTamMoveSrcDst(src="KA", dest="LE", is_water_entry_ciurl=True)
    str(move)                                   # "KA片LE水"
    MOVE_ADAPTER.validate_python(move.model_dump()) == move
"""

from typing import Annotated, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field, TypeAdapter

from .models import Color, Profession

__all__ = [
    "CoordT",
    "InfAfterStep",
    "MOVE_ADAPTER",
    "NonTamMoveFromHopZuo",
    "NonTamMoveSrcDst",
    "NonTamMoveSrcStepDstFinite",
    "PureMove",
    "TamMoveNoStep",
    "TamMoveStepsDuringFormer",
    "TamMoveStepsDuringLatter",
]

CoordT = TypeVar("CoordT")


class _MoveModel(BaseModel):
    """Shared config and notation rendering; carries no fields."""

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    def __str__(self) -> str:
        from .notation.render import render_move

        return render_move(self)  # type: ignore[arg-type]


class NonTamMoveSrcDst(_MoveModel, Generic[CoordT]):
    """A non-Tam2 piece moves from src to dest without stepping."""
    type: Literal["non_tam_move_src_dst"] = "non_tam_move_src_dst"
    src: CoordT
    dest: CoordT
    is_water_entry_ciurl: bool


class NonTamMoveSrcStepDstFinite(_MoveModel, Generic[CoordT]):
    """A non-Tam2 piece steps over the piece at `step`, then makes a finite move to dest."""
    type: Literal["non_tam_move_src_step_dst_finite"] = "non_tam_move_src_step_dst_finite"
    src: CoordT
    step: CoordT
    dest: CoordT
    is_water_entry_ciurl: bool


class InfAfterStep(_MoveModel, Generic[CoordT]):
    """A non-Tam2 piece steps, then tries an infinite directional move.

    Only the plan is recorded. Depending on the rule set, the sticks cast
    after the step decide whether the piece must reach the planned square or
    merely travel in its direction, hence the name of planned_direction.
    """
    type: Literal["inf_after_step"] = "inf_after_step"
    src: CoordT
    step: CoordT
    planned_direction: CoordT


class NonTamMoveFromHopZuo(_MoveModel, Generic[CoordT]):
    """A piece from the hop1zuo1 (captured pool) is placed at dest."""
    type: Literal["non_tam_move_from_hop_zuo"] = "non_tam_move_from_hop_zuo"
    color: Color
    prof: Profession
    dest: CoordT


class TamMoveNoStep(_MoveModel, Generic[CoordT]):
    """The Tam2 moves twice without stepping."""
    type: Literal["tam_move_no_step"] = "tam_move_no_step"
    src: CoordT
    first_dest: CoordT
    second_dest: CoordT


class TamMoveStepsDuringFormer(_MoveModel, Generic[CoordT]):
    """The Tam2 moves twice, stepping during the first leg."""
    type: Literal["tam_move_steps_during_former"] = "tam_move_steps_during_former"
    src: CoordT
    step: CoordT
    first_dest: CoordT
    second_dest: CoordT


class TamMoveStepsDuringLatter(_MoveModel, Generic[CoordT]):
    """The Tam2 moves twice, stepping during the second leg."""
    type: Literal["tam_move_steps_during_latter"] = "tam_move_steps_during_latter"
    src: CoordT
    step: CoordT
    first_dest: CoordT
    second_dest: CoordT


PureMove = Union[
    NonTamMoveSrcDst[CoordT],
    NonTamMoveSrcStepDstFinite[CoordT],
    InfAfterStep[CoordT],
    NonTamMoveFromHopZuo[CoordT],
    TamMoveNoStep[CoordT],
    TamMoveStepsDuringFormer[CoordT],
    TamMoveStepsDuringLatter[CoordT],
]

# Validates tagged mappings (coordinates left as given) back into moves
MOVE_ADAPTER: TypeAdapter = TypeAdapter(
    Annotated[
        Union[
            NonTamMoveSrcDst,
            NonTamMoveSrcStepDstFinite,
            InfAfterStep,
            NonTamMoveFromHopZuo,
            TamMoveNoStep,
            TamMoveStepsDuringFormer,
            TamMoveStepsDuringLatter,
        ],
        Field(discriminator="type"),
    ]
)
