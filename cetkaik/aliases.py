"""
Alias tables for piece identity parsing.

Each table is an ordered list of (spelling, canonical glyph) pairs. Lookups
lower-case the input first, so spellings are stored lower-case. Adding a new
locale or romanization is a matter of appending rows here (or shipping an
alias file, see cetkaik.config).

Usage:
    from cetkaik.aliases import COLOR_LOOKUP, normalize_spelling

    COLOR_LOOKUP[normalize_spelling("Red")]  # "赤"
"""

from typing import Dict, Tuple

__all__ = [
    "COLOR_ALIASES",
    "COLOR_LOOKUP",
    "PROFESSION_ALIASES",
    "PROFESSION_LOOKUP",
    "build_lookup",
    "normalize_spelling",
]


COLOR_ALIASES: Tuple[Tuple[str, str], ...] = (
    # Kok1
    ("red", "赤"),
    ("赤", "赤"),
    ("kok1", "赤"),
    ("红", "赤"),
    ("紅", "赤"),
    # Huok2
    ("black", "黒"),
    ("黒", "黒"),
    ("huok2", "黒"),
    ("黑", "黒"),
)

PROFESSION_ALIASES: Tuple[Tuple[str, str], ...] = (
    # Nuak1
    ("vessel", "船"),
    ("船", "船"),
    ("felkana", "船"),
    ("nuak1", "船"),
    ("muak1", "船"),
    ("pelkana", "船"),
    ("pijume", "船"),
    ("muak", "船"),
    # Kauk2
    ("pawn", "兵"),
    ("兵", "兵"),
    ("elmer", "兵"),
    ("kauk2", "兵"),
    ("elme", "兵"),
    ("kauk", "兵"),
    # Gua2
    ("rook", "弓"),
    ("弓", "弓"),
    ("gustuer", "弓"),
    ("gua2", "弓"),
    ("kucte", "弓"),
    ("kuctu", "弓"),
    # Kaun1
    ("bishop", "車"),
    ("車", "車"),
    ("车", "車"),
    ("vadyrd", "車"),
    ("kaun1", "車"),
    ("badut", "車"),
    ("xije", "車"),
    ("kaun", "車"),
    # Dau2
    ("tiger", "虎"),
    ("虎", "虎"),
    ("stistyst", "虎"),
    ("dau2", "虎"),
    ("cictus", "虎"),
    ("cucit", "虎"),
    ("dau", "虎"),
    # Maun1
    ("horse", "馬"),
    ("馬", "馬"),
    ("马", "馬"),
    ("dodor", "馬"),
    ("maun1", "馬"),
    ("dodo", "馬"),
    ("maun", "馬"),
    # Kua2
    ("clerk", "筆"),
    ("筆", "筆"),
    ("笔", "筆"),
    ("kua", "筆"),
    ("kua2", "筆"),
    ("kuwa", "筆"),
    # Tuk2
    ("shaman", "巫"),
    ("巫", "巫"),
    ("terlsk", "巫"),
    ("tuk2", "巫"),
    ("tamcuk", "巫"),
    ("tancuk", "巫"),
    # Uai1
    ("general", "将"),
    ("将", "将"),
    ("varxle", "将"),
    ("uai1", "将"),
    ("baxule", "将"),
    ("xan", "将"),
    ("wai", "将"),
    # Io
    ("king", "王"),
    ("王", "王"),
    ("ales", "王"),
    ("io", "王"),
    ("xet", "王"),
    ("caupla", "王"),
)


def normalize_spelling(text: str) -> str:
    """Case-fold a spelling the same way the tables are stored."""
    return text.lower()


def build_lookup(rows: Tuple[Tuple[str, str], ...]) -> Dict[str, str]:
    """Turn an alias table into a spelling -> glyph dict.

    Raises ValueError if the same spelling is listed for two glyphs.
    """
    lookup: Dict[str, str] = {}
    for spelling, glyph in rows:
        key = normalize_spelling(spelling)
        existing = lookup.get(key)
        if existing is not None and existing != glyph:
            raise ValueError(
                f"alias {spelling!r} maps to both {existing!r} and {glyph!r}"
            )
        lookup[key] = glyph
    return lookup


COLOR_LOOKUP: Dict[str, str] = build_lookup(COLOR_ALIASES)
PROFESSION_LOOKUP: Dict[str, str] = build_lookup(PROFESSION_ALIASES)
