"""Runs of equal bidi type kept in a circular doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from bidikit.types import NO_BRACKET, SENTINEL, BidiType, is_isolate

__all__ = ["Run", "RunList", "encode_bidi_types"]


@dataclass(eq=False)
class Run:
    """A stretch of text sharing one bidi type, level and bracket type."""

    type: BidiType
    pos: int = 0
    length: int = 0
    level: int = 0
    isolate_level: int = 0
    bracket_type: int = NO_BRACKET
    prev: Run | None = field(default=None, repr=False)
    next: Run | None = field(default=None, repr=False)
    prev_isolate: Run | None = field(default=None, repr=False)
    next_isolate: Run | None = field(default=None, repr=False)

    @property
    def end(self) -> int:
        """Position just past the run."""
        return self.pos + self.length


class RunList:
    """Circular list of runs anchored by a sentinel run."""

    def __init__(self) -> None:
        sentinel = Run(
            type=BidiType.SENTINEL, pos=SENTINEL, length=SENTINEL, level=SENTINEL
        )
        sentinel.prev = sentinel.next = sentinel
        self.sentinel = sentinel

    def __iter__(self) -> Iterator[Run]:
        node = self.sentinel.next
        while node is not None and node.type is not BidiType.SENTINEL:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"RunList({list(self)!r})"

    def _clear(self) -> None:
        self.sentinel.prev = self.sentinel.next = self.sentinel

    def validate(self) -> None:
        """Check the links of the list; raise ValueError if they are broken."""
        sentinel = self.sentinel
        if sentinel.type is not BidiType.SENTINEL:
            raise ValueError("run list does not start with a sentinel")
        seen: set[int] = set()
        node = sentinel
        while True:
            following = node.next
            if following is None:
                raise ValueError(f"run at {node.pos} has no next link")
            if following.prev is not node:
                raise ValueError(f"run at {following.pos} has a broken prev link")
            if following is sentinel:
                return
            if id(following) in seen:
                raise ValueError("run list does not return to its sentinel")
            seen.add(id(following))
            node = following

    def shadow(self, over: RunList, preserve_length: bool = False) -> None:
        """Lay the runs of ``over`` onto this list, replacing what they cover.

        The first run here must not start after the first run of ``over``,
        and the last run here must not end before the last run of ``over``.
        With ``preserve_length`` the covered runs grow by the length of the
        inserted run instead of being cut.  ``over`` is left empty.
        """
        self.validate()
        over.validate()

        p = self.sentinel
        pos = 0
        q = over.sentinel.next
        while q.type is not BidiType.SENTINEL:
            if not q.length or q.pos < pos:
                q = q.next
                continue
            pos = q.pos
            while p.next.type is not BidiType.SENTINEL and p.next.pos <= pos:
                p = p.next
            # p is the run that q is inserted into.
            pos2 = pos + q.length
            r = p
            while r.next.type is not BidiType.SENTINEL and r.next.pos < pos2:
                r = r.next
            if preserve_length:
                r.length += q.length
            # r is the last run that q affects.
            if p is r:
                if p.pos + p.length > pos2:
                    r = Run(
                        type=p.type,
                        pos=pos2,
                        length=p.pos + p.length - pos2,
                        level=p.level,
                        isolate_level=p.isolate_level,
                    )
                    p.next.prev = r
                    r.next = p.next
                else:
                    r = r.next
                if p.pos + p.length >= pos:
                    if p.pos < pos:
                        p.length = pos - p.pos
                    else:
                        p = p.prev
            else:
                if p.pos + p.length >= pos:
                    if p.pos < pos:
                        p.length = pos - p.pos
                    else:
                        p = p.prev
                if r.pos + r.length > pos2:
                    r.length = r.pos + r.length - pos2
                    r.pos = pos2
                else:
                    r = r.next
            inserted = q
            q = q.prev
            inserted.prev.next = inserted.next
            inserted.next.prev = inserted.prev
            p.next = inserted
            inserted.prev = p
            inserted.next = r
            r.prev = inserted
            q = q.next

        self.validate()
        over._clear()


def encode_bidi_types(
    bidi_types: Sequence[BidiType | int],
    bracket_types: Sequence[int] | None = None,
) -> RunList:
    """Group consecutive characters of equal bidi type into a run list.

    Brackets and isolate codes always get runs of their own.  Raises
    ValueError for an empty sequence or mismatched lengths.
    """
    count = len(bidi_types)
    if count == 0:
        raise ValueError("cannot encode an empty sequence of bidi types")
    if bracket_types is not None and len(bracket_types) != count:
        raise ValueError("bidi_types and bracket_types differ in length")

    run_list = RunList()
    last = run_list.sentinel
    for i, raw_type in enumerate(bidi_types):
        char_type = BidiType(raw_type)
        bracket_type = bracket_types[i] if bracket_types is not None else NO_BRACKET
        if (
            char_type is not last.type
            or bracket_type != NO_BRACKET
            or last.bracket_type != NO_BRACKET
            or is_isolate(char_type)
        ):
            run = Run(type=char_type, pos=i, bracket_type=bracket_type)
            last.length = run.pos - last.pos
            last.next = run
            run.prev = last
            last = run

    last.length = count - last.pos
    last.next = run_list.sentinel
    run_list.sentinel.prev = last

    run_list.validate()
    return run_list