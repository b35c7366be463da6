"""Arabic joining types and queries on Arabic joining properties.

A joining type is one of the values of :class:`JoiningType`.  An *Arabic
property* is a plain integer built from the same bit masks; it starts out as
a joining type and is refined by the joining algorithm.
"""

from __future__ import annotations

import enum

from bidikit.types import level_is_rtl

__all__ = [
    "JoiningType",
    "MASK_JOINS_RIGHT",
    "MASK_JOINS_LEFT",
    "MASK_ARAB_SHAPES",
    "MASK_TRANSPARENT",
    "MASK_IGNORED",
    "MASK_LIGATURED",
    "joining_type_name",
    "classify",
    "joins_right",
    "joins_left",
    "arab_shapes",
    "is_join_skipped",
    "is_join_base_shapes",
    "joins_preceding_mask",
    "joins_following_mask",
    "join_shape",
    "char_from_joining_type",
]

MASK_JOINS_RIGHT = 0x01
MASK_JOINS_LEFT = 0x02
MASK_ARAB_SHAPES = 0x04
MASK_TRANSPARENT = 0x08
MASK_IGNORED = 0x10
MASK_LIGATURED = 0x20

_SKIP = MASK_TRANSPARENT | MASK_IGNORED
_JOINS = MASK_JOINS_RIGHT | MASK_JOINS_LEFT


class JoiningType(enum.IntEnum):
    """Primary Arabic joining classes."""

    U = 0
    R = MASK_JOINS_RIGHT | MASK_ARAB_SHAPES
    D = MASK_JOINS_RIGHT | MASK_JOINS_LEFT | MASK_ARAB_SHAPES
    C = MASK_JOINS_RIGHT | MASK_JOINS_LEFT
    T = MASK_TRANSPARENT | MASK_ARAB_SHAPES
    L = MASK_JOINS_LEFT | MASK_ARAB_SHAPES
    G = MASK_IGNORED

    @property
    def symbol(self) -> str:
        """One-character symbol used when printing joining sequences."""
        return _SYMBOLS[self]

    def matches(self, prop: int) -> bool:
        """Return True if an Arabic property belongs to this joining class."""
        mask, expected = _CLASS_TESTS[self]
        return (prop & mask) == expected


_SYMBOLS: dict[JoiningType, str] = {
    JoiningType.U: "|",
    JoiningType.R: "<",
    JoiningType.D: "+",
    JoiningType.C: "-",
    JoiningType.T: "^",
    JoiningType.L: ">",
    JoiningType.G: "~",
}

# For each class: (bits examined, value those bits must have).
_CLASS_TESTS: dict[JoiningType, tuple[int, int]] = {
    JoiningType.U: (_SKIP | _JOINS, 0),
    JoiningType.R: (_SKIP | _JOINS, MASK_JOINS_RIGHT),
    JoiningType.D: (_SKIP | _JOINS | MASK_ARAB_SHAPES, _JOINS | MASK_ARAB_SHAPES),
    JoiningType.C: (_SKIP | _JOINS | MASK_ARAB_SHAPES, _JOINS),
    JoiningType.T: (_SKIP, MASK_TRANSPARENT),
    JoiningType.L: (_SKIP | _JOINS, MASK_JOINS_LEFT),
    JoiningType.G: (_SKIP, MASK_IGNORED),
}

# Order in which classes are tried when classifying a property.
_CLASS_ORDER = (
    JoiningType.U,
    JoiningType.R,
    JoiningType.D,
    JoiningType.C,
    JoiningType.T,
    JoiningType.L,
    JoiningType.G,
)


def joining_type_name(value: int) -> str:
    """Return the name of a joining type, or "?" for any other value."""
    try:
        return JoiningType(value).name
    except ValueError:
        return "?"


def classify(prop: int) -> JoiningType | None:
    """Return the joining class an Arabic property falls into, or None."""
    return next((jt for jt in _CLASS_ORDER if jt.matches(prop)), None)


def joins_right(prop: int) -> bool:
    """Return True if the property may join to the right (R, D, C)."""
    return bool(prop & MASK_JOINS_RIGHT)


def joins_left(prop: int) -> bool:
    """Return True if the property may join to the left (L, D, C)."""
    return bool(prop & MASK_JOINS_LEFT)


def arab_shapes(prop: int) -> bool:
    """Return True if the property may be Arabic-shaped (R, D, L, T)."""
    return bool(prop & MASK_ARAB_SHAPES)


def is_join_skipped(prop: int) -> bool:
    """Return True if the property is skipped in joining (T, G)."""
    return bool(prop & _SKIP)


def is_join_base_shapes(prop: int) -> bool:
    """Return True for a base character that will be shaped (R, D, L)."""
    return (prop & (_SKIP | MASK_ARAB_SHAPES)) == MASK_ARAB_SHAPES


def joins_preceding_mask(level: int) -> int:
    """Mask of the bit that joins toward the preceding character at a level."""
    return MASK_JOINS_RIGHT if level_is_rtl(level) else MASK_JOINS_LEFT


def joins_following_mask(level: int) -> int:
    """Mask of the bit that joins toward the following character at a level."""
    return MASK_JOINS_LEFT if level_is_rtl(level) else MASK_JOINS_RIGHT


def join_shape(prop: int) -> int:
    """Return only the joining bits of a property."""
    return prop & _JOINS


def char_from_joining_type(prop: int, visual: bool) -> str:
    """Return the display symbol of a property, swapping sides in visual runs."""
    if visual and joins_right(prop) != joins_left(prop):
        prop ^= _JOINS
    jt = classify(prop)
    return jt.symbol if jt is not None else "?"