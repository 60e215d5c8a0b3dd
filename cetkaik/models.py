"""
Pydantic Models for cetkaik piece identity.

Sides, colors, professions and the (color, profession) pair that names a
capturable piece. Every type serializes to its canonical string.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, field_validator, model_serializer, model_validator

from .aliases import COLOR_LOOKUP, PROFESSION_LOOKUP, normalize_spelling
from .config import get_notation_config
from .errors import ParseError

logger = logging.getLogger(__name__)

__all__ = [
    "AbsoluteSide",
    "CANONICAL_PIECES",
    "Color",
    "ColorAndProf",
    "Profession",
    "color",
    "cp",
    "prof",
    "serialize_color",
    "serialize_prof",
]


class AbsoluteSide(str, Enum):
    """Which half of the board a player starts on"""
    # Pieces start on rows A, E and I
    A_SIDE = "A"
    # Pieces start on rows IA, AU and AI
    IA_SIDE = "IA"

    def __str__(self) -> str:
        return self.value

    def __invert__(self) -> "AbsoluteSide":
        return self.flip()

    def flip(self) -> "AbsoluteSide":
        """Return the opposite side."""
        if self is AbsoluteSide.A_SIDE:
            return AbsoluteSide.IA_SIDE
        return AbsoluteSide.A_SIDE

    @classmethod
    def parse(cls, text: str) -> "AbsoluteSide":
        """Parse "A" or "IA". Case-sensitive, no aliases."""
        for side in cls:
            if text == side.value:
                return side
        logger.debug("Rejected side token %r", text)
        raise ParseError.unknown("side", text)


class Color(str, Enum):
    """Piece color"""
    RED = "赤"  # Kok1
    BLACK = "黒"  # Huok2

    def __str__(self) -> str:
        return self.value

    def render(self) -> str:
        return self.value

    @classmethod
    def _lookup(cls, text: Any) -> Optional["Color"]:
        if not isinstance(text, str):
            return None
        key = normalize_spelling(text)
        glyph = COLOR_LOOKUP.get(key) or get_notation_config().extra_color_aliases.get(key)
        return cls(glyph) if glyph else None

    @classmethod
    def _missing_(cls, value: Any) -> Optional["Color"]:
        return cls._lookup(value)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse a color from any accepted spelling, ignoring case.

        "赤", "red", "Kok1", "红" and "紅" all give Color.RED.
        """
        found = cls._lookup(text)
        if found is None:
            logger.debug("Rejected color %r", text)
            raise ParseError.unknown("color", text)
        return found


class Profession(str, Enum):
    """Piece profession"""
    VESSEL = "船"  # Nuak1, felkana
    PAWN = "兵"  # Kauk2, elmer
    ROOK = "弓"  # Gua2, gustuer
    BISHOP = "車"  # Kaun1, vadyrd
    TIGER = "虎"  # Dau2, stistyst
    HORSE = "馬"  # Maun1, dodor
    CLERK = "筆"  # Kua2, kua
    SHAMAN = "巫"  # Tuk2, terlsk
    GENERAL = "将"  # Uai1, varxle
    KING = "王"  # Io, ales

    def __str__(self) -> str:
        return self.value

    def render(self) -> str:
        return self.value

    @classmethod
    def _lookup(cls, text: Any) -> Optional["Profession"]:
        if not isinstance(text, str):
            return None
        key = normalize_spelling(text)
        glyph = (
            PROFESSION_LOOKUP.get(key)
            or get_notation_config().extra_profession_aliases.get(key)
        )
        return cls(glyph) if glyph else None

    @classmethod
    def _missing_(cls, value: Any) -> Optional["Profession"]:
        return cls._lookup(value)

    @classmethod
    def parse(cls, text: str) -> "Profession":
        """Parse a profession, ignoring case.

        Accepts the glyph, the English name, simplified glyphs where they
        differ, and the Pekzep / Lineparine names: "兵", "pawn", "elmer",
        "kauk2" and "elme" all give Profession.PAWN.
        """
        found = cls._lookup(text)
        if found is None:
            logger.debug("Rejected profession %r", text)
            raise ParseError.unknown("profession", text)
        return found


def serialize_color(c: Color) -> str:
    return c.value


def serialize_prof(p: Profession) -> str:
    return p.value


# Only these 20 strings are accepted by ColorAndProf.parse
CANONICAL_PIECES: Dict[str, Tuple[Color, Profession]] = {
    c.value + p.value: (c, p) for c in Color for p in Profession
}


class ColorAndProf(BaseModel):
    """A piece that is not a Tam2, and hence can be taken and placed in a hop1zuo1.

    Serializes to its two-glyph string, e.g. "赤兵".
    """
    color: Color
    prof: Profession

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _from_canonical_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            c, p = cls._canonical_pair(data)
            return {"color": c, "prof": p}
        return data

    @field_validator("color", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Color.parse(value)
        return value

    @field_validator("prof", mode="before")
    @classmethod
    def _parse_prof(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Profession.parse(value)
        return value

    @model_serializer
    def _to_canonical_string(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        return self.color.render() + self.prof.render()

    @staticmethod
    def _canonical_pair(text: str) -> Tuple[Color, Profession]:
        pair = CANONICAL_PIECES.get(text)
        if pair is None:
            logger.debug("Rejected piece %r", text)
            raise ParseError(
                f"Not a canonical piece: {text!r}", text=text, expected="color_and_prof"
            )
        return pair

    @classmethod
    def parse(cls, text: str) -> "ColorAndProf":
        """Parse one of the 20 canonical strings such as "黒船".

        Stricter than parsing the halves separately: no aliases, no case
        folding, color glyph first.
        """
        c, p = cls._canonical_pair(text)
        return cls(color=c, prof=p)


_COLOR_BY_GLYPH = {c.value: c for c in Color}
_PROF_BY_GLYPH = {p.value: p for p in Profession}


def color(glyph: str) -> Color:
    """Shorthand: color("赤") is Color.RED. Canonical glyphs only."""
    try:
        return _COLOR_BY_GLYPH[glyph]
    except KeyError:
        raise ParseError(f"Not a color glyph: {glyph!r}", text=glyph, expected="color") from None


def prof(glyph: str) -> Profession:
    """Shorthand: prof("兵") is Profession.PAWN. Canonical glyphs only."""
    try:
        return _PROF_BY_GLYPH[glyph]
    except KeyError:
        raise ParseError(
            f"Not a profession glyph: {glyph!r}", text=glyph, expected="profession"
        ) from None


def cp(color_glyph: str, prof_glyph: str) -> ColorAndProf:
    """Shorthand: cp("赤", "兵") is the red pawn."""
    return ColorAndProf(color=color(color_glyph), prof=prof(prof_glyph))
