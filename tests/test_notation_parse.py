"""Tests for cetkaik/notation/parse.py - notation back to moves."""

import pytest

from cetkaik.errors import ParseError
from cetkaik.models import Color, Profession
from cetkaik.moves import (
    InfAfterStep,
    NonTamMoveFromHopZuo,
    NonTamMoveSrcDst,
    NonTamMoveSrcStepDstFinite,
    TamMoveNoStep,
    TamMoveStepsDuringFormer,
    TamMoveStepsDuringLatter,
)
from cetkaik.notation import parse_move, render_move

from squares import Square, sq


ALL_SHAPES = [
    NonTamMoveSrcDst(src=sq("KA"), dest=sq("LE"), is_water_entry_ciurl=False),
    NonTamMoveSrcDst(src=sq("KA"), dest=sq("LE"), is_water_entry_ciurl=True),
    NonTamMoveSrcStepDstFinite(
        src=sq("NAI"), step=sq("TAI"), dest=sq("ZAI"), is_water_entry_ciurl=False
    ),
    NonTamMoveSrcStepDstFinite(
        src=sq("NAI"), step=sq("TAI"), dest=sq("ZO"), is_water_entry_ciurl=True
    ),
    InfAfterStep(src=sq("LIA"), step=sq("LAU"), planned_direction=sq("LE")),
    NonTamMoveFromHopZuo(color=Color.RED, prof=Profession.PAWN, dest=sq("ZIA")),
    NonTamMoveFromHopZuo(color=Color.BLACK, prof=Profession.GENERAL, dest=sq("PA")),
    TamMoveNoStep(src=sq("ZO"), first_dest=sq("ZI"), second_dest=sq("ZU")),
    TamMoveStepsDuringFormer(
        src=sq("ZO"), step=sq("ZU"), first_dest=sq("ZY"), second_dest=sq("ZAI")
    ),
    TamMoveStepsDuringLatter(
        src=sq("ZO"), step=sq("ZU"), first_dest=sq("XO"), second_dest=sq("CO")
    ),
]


class TestRoundTrip:
    """parse_move inverts render_move."""

    @pytest.mark.parametrize("move", ALL_SHAPES, ids=lambda m: render_move(m))
    def test_round_trip(self, move):
        assert parse_move(render_move(move), Square.parse) == move

    def test_literal_examples(self):
        assert parse_move("KA片LE水", Square.parse) == NonTamMoveSrcDst(
            src=sq("KA"), dest=sq("LE"), is_water_entry_ciurl=True
        )
        assert parse_move("赤兵ZIA", Square.parse) == NonTamMoveFromHopZuo(
            color=Color.RED, prof=Profession.PAWN, dest=sq("ZIA")
        )


class TestAmbiguity:
    """Anything that reads more than one way is rejected."""

    @staticmethod
    def anything(text: str) -> str:
        return text

    def test_single_letter_dest_is_unambiguous(self):
        move = parse_move("X片Y", self.anything)
        assert move == NonTamMoveSrcDst(src="X", dest="Y", is_water_entry_ciurl=False)

    def test_two_letter_tail_is_ambiguous(self):
        """"YZ" is either one square or step Y then dest Z."""
        with pytest.raises(ParseError, match="split"):
            parse_move("X片YZ", self.anything)

    def test_tam_latter_tail_is_ambiguous(self):
        with pytest.raises(ParseError):
            parse_move("A皇[B]CD", self.anything)

    def test_water_on_hop_zuo_is_rejected(self):
        """Even a coordinate parser that accepts anything cannot absorb 水."""
        with pytest.raises(ParseError):
            parse_move("赤兵Z水", self.anything)

    def test_bracket_inside_coordinate_is_rejected(self):
        move = TamMoveNoStep(src="A", first_dest="[B]", second_dest="C")
        with pytest.raises(ParseError):
            parse_move(render_move(move), self.anything)


class TestRejections:
    """Malformed notation raises ParseError."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "KALE",
            "KA片",
            "片LE",
            "KA片QQ",
            "KA片LE片LI",
            "KA片LE皇[LI]LU",
            "KA片KE心KY水",
            "KA片KE心心KY",
            "ZO皇ZIZU",
            "ZO皇[ZI]]ZU",
            "ZO皇]ZI[ZU",
            "ZO皇[ZI]ZU水",
            "ZO皇ZU[ZI]",
            "赤ZIA",
            "赤elmerZIA",
            "兵赤ZIA",
            "赤兵",
            "赤兵QQ",
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(ParseError) as exc_info:
            parse_move(text, Square.parse)
        assert exc_info.value.expected == "move"
        assert exc_info.value.text == text

    def test_coord_parser_parse_error_is_wrapped(self):
        def strict(text: str) -> Square:
            raise ParseError("nope", text=text, expected="square")

        with pytest.raises(ParseError) as exc_info:
            parse_move("KA片LE", strict)
        assert exc_info.value.expected == "move"

    def test_coord_parser_lookup_error_is_wrapped(self):
        """A parser that indexes past short text is just another failed coordinate."""
        def third_glyph(text: str) -> str:
            return text[2]

        with pytest.raises(ParseError) as exc_info:
            parse_move("KA片LE", third_glyph)
        assert exc_info.value.expected == "move"

    def test_coord_parser_key_error_is_wrapped(self):
        squares = {"KA": sq("KA")}
        with pytest.raises(ParseError):
            parse_move("KA片LE", squares.__getitem__)
