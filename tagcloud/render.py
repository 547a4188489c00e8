from __future__ import annotations

import html
from pathlib import Path
from typing import Sequence

from .font import font_size
from .rank import RankedEntry, Selection


DEFAULT_STYLESHEETS: tuple[str, ...] = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/projects/tag-cloud-generator/data/tagcloud.css",
    "doc/tagcloud.css",
)


def _title(filename: str, num: int | str) -> str:
    return f"Top {num} words in {html.escape(str(filename))}"


def render_header(
    filename: str,
    num: int | str,
    *,
    stylesheets: Sequence[str] = DEFAULT_STYLESHEETS,
) -> list[str]:
    title = _title(filename, num)
    out = ["<html>", "<head>", f"<title> {title}</title>"]
    for href in stylesheets:
        out.append(f'<link href="{html.escape(str(href))}" rel="stylesheet" type="text/css">')
    out += [
        "</head>",
        "<body>",
        f"<h2> {title}</h2>",
        "<hr>",
        '<div class ="cdiv">',
        '<p class ="cbox">',
    ]
    return out


def render_entry(entry: RankedEntry, largest: int, smallest: int) -> str:
    font = font_size(largest, smallest, entry.count)
    return (
        f'<span style="cursor:default" class="{font}" title="count: {entry.count}">'
        f"{html.escape(entry.word)}</span>"
    )


def render_footer() -> list[str]:
    return ["</p>", "</div>", "</body>", "</html>"]


def render_tag_cloud(
    selection: Selection,
    *,
    filename: str,
    num: int | str,
    stylesheets: Sequence[str] = DEFAULT_STYLESHEETS,
) -> str:
    lines = render_header(filename, num, stylesheets=stylesheets)
    lines += [render_entry(e, selection.largest, selection.smallest) for e in selection.entries]
    lines += render_footer()
    return "\n".join(lines) + "\n"


def write_tag_cloud(text: str, out: Path) -> Path:
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    return out_path
