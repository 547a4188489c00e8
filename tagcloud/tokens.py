from __future__ import annotations

from typing import Iterator

from .errors import PreconditionError


SEPARATORS = " \t\n\r,-.!?[]';:/()"
_SEPARATOR_SET = frozenset(SEPARATORS)


def is_separator(ch: str) -> bool:
    return ch in _SEPARATOR_SET


def next_word_or_separator(text: str, position: int) -> str:
    """Return the maximal word or separator run in ``text`` starting at ``position``.

    The run has the same class (separator / non-separator) as ``text[position]``.
    Requires 0 <= position < len(text).
    """
    if not isinstance(text, str):
        raise PreconditionError("text must be a str")
    if not 0 <= position < len(text):
        raise PreconditionError(f"position {position} out of range for text of length {len(text)}")

    kind = is_separator(text[position])
    end = position + 1
    while end < len(text) and is_separator(text[end]) == kind:
        end += 1
    return text[position:end]


def iter_tokens(text: str) -> Iterator[str]:
    pos = 0
    while pos < len(text):
        tok = next_word_or_separator(text, pos)
        yield tok
        pos += len(tok)


def iter_words(text: str) -> Iterator[str]:
    for tok in iter_tokens(text):
        if not is_separator(tok[0]):
            yield tok
