"""Removal of bidi marks from a string and its accompanying lists."""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass

from bidikit.types import (
    CHAR_LRM,
    CHAR_RLM,
    BidiType,
    debug_status,
    is_explicit_or_bn,
    is_isolate,
)

__all__ = ["MarkRemoval", "remove_bidi_marks"]

logger = logging.getLogger("bidikit")

_CLASS_NAMES: dict[str, BidiType] = {
    "L": BidiType.LTR,
    "R": BidiType.RTL,
    "AL": BidiType.AL,
    "EN": BidiType.EN,
    "AN": BidiType.AN,
    "ES": BidiType.ES,
    "ET": BidiType.ET,
    "CS": BidiType.CS,
    "NSM": BidiType.NSM,
    "BN": BidiType.BN,
    "B": BidiType.BS,
    "S": BidiType.SS,
    "WS": BidiType.WS,
    "ON": BidiType.ON,
    "LRE": BidiType.LRE,
    "RLE": BidiType.RLE,
    "LRO": BidiType.LRO,
    "RLO": BidiType.RLO,
    "PDF": BidiType.PDF,
    "LRI": BidiType.LRI,
    "RLI": BidiType.RLI,
    "FSI": BidiType.FSI,
    "PDI": BidiType.PDI,
}


def _bidi_type(code_point: int) -> BidiType:
    name = unicodedata.bidirectional(chr(code_point))
    return _CLASS_NAMES.get(name, BidiType.LTR)


def _is_mark(code_point: int) -> bool:
    if code_point in (CHAR_LRM, CHAR_RLM):
        return True
    bidi_type = _bidi_type(code_point)
    return is_explicit_or_bn(bidi_type) or is_isolate(bidi_type)


@dataclass(frozen=True)
class MarkRemoval:
    """Result of :func:`remove_bidi_marks`.

    ``text`` has the same kind (``str`` or list of code points) as the input.
    ``positions_to_this`` keeps the length of the input and holds -1 for
    every removed character; the other lists are as long as ``text``.
    """

    text: str | list[int]
    positions_to_this: list[int] | None = None
    positions_from_this: list[int] | None = None
    embedding_levels: list[int] | None = None

    def __len__(self) -> int:
        return len(self.text)


def _check_length(name: str, values: Sequence[int] | None, expected: int) -> None:
    if values is not None and len(values) != expected:
        raise ValueError(f"{name} has length {len(values)}, expected {expected}")


def remove_bidi_marks(
    text: str | Sequence[int],
    positions_to_this: Sequence[int] | None = None,
    positions_from_this: Sequence[int] | None = None,
    embedding_levels: Sequence[int] | None = None,
) -> MarkRemoval:
    """Remove explicit bidi codes, isolates, boundary neutrals, LRM and RLM.

    The position maps, if given, must be valid permutations of the input
    positions.  If ``text`` is the visual string, ``positions_to_this`` is
    the logical-to-visual map and ``positions_from_this`` the visual-to-logical
    one; for a logical string the other way round.  Lists that are not given
    are not returned.
    """
    as_string = isinstance(text, str)
    code_points = [ord(ch) for ch in text] if as_string else [int(c) for c in text]
    count = len(code_points)

    _check_length("positions_to_this", positions_to_this, count)
    _check_length("positions_from_this", positions_from_this, count)
    _check_length("embedding_levels", embedding_levels, count)

    if debug_status():
        logger.debug("in remove_bidi_marks")

    from_this: list[int] | None
    if positions_from_this is not None:
        from_this = list(positions_from_this)
    elif positions_to_this is not None:
        from_this = [0] * count
        for logical, target in enumerate(positions_to_this):
            if not 0 <= target < count:
                raise ValueError(f"position {target} is out of range")
            from_this[target] = logical
    else:
        from_this = None

    kept = [i for i, cp in enumerate(code_points) if not _is_mark(cp)]

    kept_points = [code_points[i] for i in kept]
    new_levels = (
        [embedding_levels[i] for i in kept] if embedding_levels is not None else None
    )
    new_from = [from_this[i] for i in kept] if from_this is not None else None

    new_to: list[int] | None = None
    if positions_to_this is not None and new_from is not None:
        new_to = [-1] * count
        for index, source in enumerate(new_from):
            if not 0 <= source < count:
                raise ValueError(f"position {source} is out of range")
            new_to[source] = index

    return MarkRemoval(
        text="".join(map(chr, kept_points)) if as_string else kept_points,
        positions_to_this=new_to,
        positions_from_this=new_from if positions_from_this is not None else None,
        embedding_levels=new_levels,
    )