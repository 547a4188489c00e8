from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from .tokens import iter_words


logger = logging.getLogger(__name__)


def read_lines(path: Path, *, encoding: str = "utf-8") -> list[str]:
    with Path(path).open("r", encoding=encoding) as fp:
        return [ln.rstrip("\r\n") for ln in fp]


def count_words(lines: Iterable[str], table: Counter[str] | None = None) -> Counter[str]:
    """Count case-folded words across ``lines``.

    A given ``table`` is cleared and refilled in place; otherwise a new one is built.
    """
    c: Counter[str] = Counter() if table is None else table
    c.clear()
    n_lines = 0
    for line in lines:
        n_lines += 1
        for w in iter_words(line.lower()):
            c[w.lower()] += 1
    logger.debug("counted %d distinct words over %d lines", len(c), n_lines)
    return c
