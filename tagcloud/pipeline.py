from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Sequence

from .frequency import count_words, read_lines
from .font import font_size
from .rank import RankedEntry, Selection, select_top
from .render import DEFAULT_STYLESHEETS, render_tag_cloud, write_tag_cloud


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagCloudResult:
    input_path: Path
    output_path: Path | None
    num: int
    distinct_words: int
    total_words: int
    largest: int
    smallest: int
    entries: tuple[RankedEntry, ...]

    def to_dict(self) -> dict:
        return {
            "input": str(self.input_path),
            "output": None if self.output_path is None else str(self.output_path),
            "top": self.num,
            "distinct_words": self.distinct_words,
            "total_words": self.total_words,
            "largest": self.largest,
            "smallest": self.smallest,
            "words": [
                {
                    "word": e.word,
                    "count": e.count,
                    "font": font_size(self.largest, self.smallest, e.count),
                }
                for e in self.entries
            ],
        }


def rank_words(
    *,
    inp: Path,
    num: int | None,
    tie_break: str = "alpha",
    encoding: str = "utf-8",
    read_fn: Callable[..., list[str]] | None = None,
) -> TagCloudResult:
    """Count and select the top ``num`` words of ``inp`` (all words when ``num`` is None)."""
    if read_fn is None:
        read_fn = read_lines

    lines = read_fn(Path(inp), encoding=str(encoding))
    table = count_words(lines)
    distinct = len(table)
    total = sum(table.values())
    n = distinct if num is None else int(num)

    sel = select_top(table, n, tie_break=tie_break)
    return TagCloudResult(
        input_path=Path(inp),
        output_path=None,
        num=n,
        distinct_words=distinct,
        total_words=total,
        largest=sel.largest,
        smallest=sel.smallest,
        entries=sel.entries,
    )


def run_tag_cloud(
    *,
    inp: Path,
    out: Path,
    num: int,
    tie_break: str = "alpha",
    encoding: str = "utf-8",
    stylesheets: Sequence[str] | None = None,
    filename: str | None = None,
    # Dependency injection points for tests.
    read_fn: Callable[..., list[str]] | None = None,
    write_fn: Callable[[str, Path], object] | None = None,
) -> TagCloudResult:
    """read -> count -> select -> render -> write.

    The document is built in memory, so nothing is written when selection fails.
    ``filename`` is the name shown in the title; it defaults to ``str(inp)``.
    """
    if write_fn is None:
        write_fn = write_tag_cloud

    res = rank_words(inp=inp, num=num, tie_break=tie_break, encoding=encoding, read_fn=read_fn)

    doc = render_tag_cloud(
        Selection(entries=res.entries, largest=res.largest, smallest=res.smallest),
        filename=str(inp) if filename is None else filename,
        num=res.num,
        stylesheets=tuple(stylesheets) if stylesheets is not None else DEFAULT_STYLESHEETS,
    )
    write_fn(doc, Path(out))
    logger.info("wrote %d words to %s", len(res.entries), out)

    return replace(res, output_path=Path(out))
