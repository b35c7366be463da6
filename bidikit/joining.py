"""Arabic cursive joining (rules R1 to R7), aware of resolved bidi levels."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bidikit.joining_types import (
    JoiningType,
    arab_shapes,
    char_from_joining_type,
    is_join_skipped,
    joins_following_mask,
    joins_preceding_mask,
)
from bidikit.types import (
    SENTINEL,
    BidiType,
    debug_status,
    is_explicit_or_bn,
    level_is_rtl,
)

__all__ = ["join_arabic"]

logger = logging.getLogger("bidikit")


def _levels_match(a: int, b: int) -> bool:
    return a == b or a == SENTINEL or b == SENTINEL


def _log_joining_types(embedding_levels: Sequence[int], props: Sequence[int]) -> None:
    symbols = "".join(
        char_from_joining_type(prop, not level_is_rtl(level))
        for prop, level in zip(props, embedding_levels)
    )
    logger.debug("  Join. types: %s", symbols)


def join_arabic(
    bidi_types: Sequence[BidiType | int],
    embedding_levels: Sequence[int],
    ar_props: Sequence[int],
) -> list[int]:
    """Resolve Arabic joining and return the refined Arabic properties.

    ``ar_props`` holds the joining types of the characters; the result has
    the joining bits adjusted to reflect the neighbouring characters.  The
    input sequences are left untouched.
    """
    count = len(ar_props)
    if len(bidi_types) != count or len(embedding_levels) != count:
        raise ValueError("bidi_types, embedding_levels and ar_props differ in length")

    props = [int(p) for p in ar_props]
    if not props:
        return props

    debugging = debug_status()
    if debugging:
        logger.debug("in join_arabic")
        _log_joining_types(embedding_levels, props)

    saved = 0
    saved_level = SENTINEL
    saved_shapes = False
    saved_joins_following_mask = 0
    joins = False

    for i, (bidi_type, embedding_level) in enumerate(zip(bidi_types, embedding_levels)):
        if JoiningType.G.matches(props[i]):
            continue

        disjoin = False
        shapes = arab_shapes(props[i])
        level = SENTINEL if is_explicit_or_bn(bidi_type) else embedding_level

        if joins and not _levels_match(saved_level, level):
            disjoin = True
            joins = False

        if not is_join_skipped(props[i]):
            preceding = joins_preceding_mask(level)
            if not joins:
                if shapes:
                    props[i] &= ~preceding
            elif not props[i] & preceding:
                disjoin = True
            else:
                # Skipped characters in between get joining bits too, so that
                # marks can later be placed on a tatweel if wanted.
                for j in range(saved + 1, i):
                    props[j] |= preceding | saved_joins_following_mask

        if disjoin and saved_shapes:
            props[saved] &= ~saved_joins_following_mask

        if not is_join_skipped(props[i]):
            saved = i
            saved_level = level
            saved_shapes = shapes
            saved_joins_following_mask = joins_following_mask(level)
            joins = bool(props[i] & saved_joins_following_mask)

    if joins and saved_shapes:
        props[saved] &= ~saved_joins_following_mask

    if debugging:
        _log_joining_types(embedding_levels, props)
        logger.debug("leaving join_arabic")

    return props