"""Core bidi types, option flags, Unicode constants and debug state."""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass

__all__ = [
    "BidiType",
    "ParType",
    "Flags",
    "level_is_rtl",
    "is_isolate",
    "is_explicit_or_bn",
    "bidi_type_symbol",
    "set_debug",
    "debug_status",
    "NO_BRACKET",
    "SENTINEL",
    "LEVEL_INVALID",
    "UNICODE_CHARS",
    "UNICODE_VERSION",
    "BIDI_NUM_TYPES",
    "BIDI_MAX_EXPLICIT_LEVEL",
    "BIDI_MAX_RESOLVED_LEVELS",
    "BIDI_MAX_NESTED_BRACKET_PAIRS",
]

logger = logging.getLogger("bidikit")

# Bracket type value for a character that is not a bracket.
NO_BRACKET = 0

# Marker level/position used by sentinels and "no consistent level".
SENTINEL = -1

# Unicode code space handled by the library.
UNICODE_CHARS = 0x110000
UNICODE_VERSION = "unknown"

# Unicode Bidirectional Algorithm limits.
BIDI_NUM_TYPES = 19
BIDI_MAX_EXPLICIT_LEVEL = 125
BIDI_MAX_RESOLVED_LEVELS = 127
BIDI_MAX_NESTED_BRACKET_PAIRS = 63

LEVEL_INVALID = BIDI_MAX_RESOLVED_LEVELS

# Bidirectional marks.
CHAR_LRM = 0x200E
CHAR_RLM = 0x200F
CHAR_LRE = 0x202A
CHAR_RLE = 0x202B
CHAR_PDF = 0x202C
CHAR_LRO = 0x202D
CHAR_RLO = 0x202E
CHAR_LRI = 0x2066
CHAR_RLI = 0x2067
CHAR_FSI = 0x2068
CHAR_PDI = 0x2069

# Line and paragraph separators.
CHAR_LS = 0x2028
CHAR_PS = 0x2029

# Arabic joining marks.
CHAR_ZWNJ = 0x200C
CHAR_ZWJ = 0x200D

# Hebrew and Arabic.
CHAR_HEBREW_ALEF = 0x05D0
CHAR_ARABIC_ALEF = 0x0627
CHAR_ARABIC_ZERO = 0x0660
CHAR_PERSIAN_ZERO = 0x06F0

# Misc.
CHAR_ZWNBSP = 0xFEFF
CHAR_FILL = CHAR_ZWNBSP


class BidiType(enum.Enum):
    """Bidirectional character types, with the short aliases L, R, B and S."""

    LTR = 0
    RTL = 1
    AL = 2
    EN = 3
    AN = 4
    ES = 5
    ET = 6
    CS = 7
    NSM = 8
    BN = 9
    BS = 10
    SS = 11
    WS = 12
    ON = 13
    LRE = 14
    RLE = 15
    LRO = 16
    RLO = 17
    PDF = 18
    LRI = 19
    RLI = 20
    FSI = 21
    PDI = 22
    SENTINEL = 23

    L = 0
    R = 1
    B = 10
    S = 11

    @property
    def symbol(self) -> str:
        """One-character symbol used when printing type sequences."""
        return _BIDI_SYMBOLS[self]


_BIDI_SYMBOLS: dict[BidiType, str] = {
    BidiType.LTR: "L",
    BidiType.RTL: "R",
    BidiType.AL: "A",
    BidiType.EN: "1",
    BidiType.AN: "9",
    BidiType.ES: "w",
    BidiType.ET: "w",
    BidiType.CS: "w",
    BidiType.NSM: "`",
    BidiType.BN: "b",
    BidiType.BS: "B",
    BidiType.SS: "S",
    BidiType.WS: "_",
    BidiType.ON: "n",
    BidiType.LRE: "+",
    BidiType.RLE: "+",
    BidiType.LRO: "+",
    BidiType.RLO: "+",
    BidiType.PDF: "-",
    BidiType.LRI: "+",
    BidiType.RLI: "+",
    BidiType.FSI: "+",
    BidiType.PDI: "-",
    BidiType.SENTINEL: "$",
}


class ParType(enum.Enum):
    """Paragraph base directions."""

    LTR = "L"
    RTL = "R"
    ON = "n"
    WLTR = "l"
    WRTL = "r"

    @property
    def symbol(self) -> str:
        """One-character symbol of the paragraph direction."""
        return self.value


class Flags(enum.IntFlag):
    """Option flags used by shaping and reordering functions."""

    SHAPE_MIRRORING = 0x00000001
    REORDER_NSM = 0x00000002

    SHAPE_ARAB_PRES = 0x00000100
    SHAPE_ARAB_LIGA = 0x00000200
    SHAPE_ARAB_CONSOLE = 0x00000400

    REMOVE_BIDI = 0x00010000
    REMOVE_JOINING = 0x00020000
    REMOVE_SPECIALS = 0x00040000

    DEFAULT = SHAPE_MIRRORING | REORDER_NSM | REMOVE_SPECIALS
    ARABIC = SHAPE_ARAB_PRES | SHAPE_ARAB_LIGA


_ISOLATES = frozenset({BidiType.LRI, BidiType.RLI, BidiType.FSI, BidiType.PDI})
_EXPLICIT_OR_BN = frozenset(
    {
        BidiType.LRE,
        BidiType.RLE,
        BidiType.LRO,
        BidiType.RLO,
        BidiType.PDF,
        BidiType.BN,
    }
)


def _as_bidi_type(bidi_type: BidiType | int) -> BidiType:
    return bidi_type if isinstance(bidi_type, BidiType) else BidiType(bidi_type)


def level_is_rtl(level: int) -> bool:
    """Return True if an embedding level is right-to-left (odd)."""
    return bool(level & 1)


def is_isolate(bidi_type: BidiType | int) -> bool:
    """Return True for the isolate initiators and PDI."""
    return _as_bidi_type(bidi_type) in _ISOLATES


def is_explicit_or_bn(bidi_type: BidiType | int) -> bool:
    """Return True for explicit embedding/override codes and boundary neutrals."""
    return _as_bidi_type(bidi_type) in _EXPLICIT_OR_BN


def bidi_type_symbol(bidi_type: BidiType | int) -> str:
    """Return the one-character symbol of a bidi type."""
    return _as_bidi_type(bidi_type).symbol


@dataclass
class _DebugState:
    enabled: bool = False


_debug = _DebugState()


def set_debug(state: bool) -> bool:
    """Turn debug output on or off; return the new state."""
    _debug.enabled = bool(state)
    if _debug.enabled and not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("bidikit: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if _debug.enabled else logging.WARNING)
    return _debug.enabled


def debug_status() -> bool:
    """Return whether debug output is enabled."""
    return _debug.enabled