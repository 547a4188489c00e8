from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass

from .errors import PreconditionError


logger = logging.getLogger(__name__)

TIE_BREAKS = ("alpha", "first-seen")


@dataclass(frozen=True)
class RankedEntry:
    word: str
    count: int


@dataclass(frozen=True)
class Selection:
    entries: tuple[RankedEntry, ...]
    largest: int
    smallest: int

    def __len__(self) -> int:
        return len(self.entries)


def parse_word_count(raw: str | int) -> int:
    """Parse a user-supplied word count into a non-negative int."""
    if isinstance(raw, bool):
        raise PreconditionError(f"word count must be a non-negative integer, got {raw!r}")
    if isinstance(raw, int):
        n = raw
    else:
        s = str(raw).strip()
        try:
            n = int(s)
        except ValueError:
            raise PreconditionError(f"word count must be a non-negative integer, got {raw!r}") from None
    if n < 0:
        raise PreconditionError(f"word count must be non-negative, got {n}")
    return n


def _alpha_key(e: RankedEntry) -> tuple[str, str]:
    return (e.word.lower(), e.word)


def _count_order(entries: list[RankedEntry], tie_break: str) -> list[RankedEntry]:
    if tie_break == "alpha":
        # Alphabetical first, then a stable sort by count keeps that order within ties.
        entries = sorted(entries, key=_alpha_key)
    return sorted(entries, key=lambda e: e.count, reverse=True)


def select_top(
    table: MutableMapping[str, int],
    num: int,
    *,
    tie_break: str = "alpha",
) -> Selection:
    """Drain ``table`` and return its ``num`` most frequent words in alphabetical order.

    ``largest``/``smallest`` are the counts of the first and last entries taken from
    the count ordering. The table is left empty.
    """
    tb = str(tie_break or "alpha").strip().lower()
    if tb not in TIE_BREAKS:
        raise ValueError("tie_break must be one of: alpha|first-seen")
    n = int(num)
    if n < 0:
        raise PreconditionError(f"word count must be non-negative, got {n}")
    if n > len(table):
        raise PreconditionError(
            f"requested {n} words but the input only has {len(table)} distinct words"
        )

    drained = [RankedEntry(word=w, count=int(c)) for w, c in table.items()]
    table.clear()

    by_count = _count_order(drained, tb)

    picked = by_count[:n]
    largest = picked[0].count if picked else 0
    smallest = picked[-1].count if picked else 0

    by_word = sorted(picked, key=_alpha_key)
    logger.debug(
        "selected %d of %d words (largest=%d, smallest=%d, tie_break=%s)",
        n,
        len(drained),
        largest,
        smallest,
        tb,
    )
    return Selection(entries=tuple(by_word), largest=largest, smallest=smallest)
