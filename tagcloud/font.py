from __future__ import annotations


MAX_FONT = 48
MIN_FONT = 11
FONT_PREFIX = "f"


def font_value(largest: int, smallest: int, count: int) -> int:
    if largest == smallest:
        return MAX_FONT
    # Integer (truncating) division keeps the endpoints exact.
    return (MAX_FONT - MIN_FONT) * (count - smallest) // (largest - smallest) + MIN_FONT


def font_size(largest: int, smallest: int, count: int) -> str:
    """Map ``count`` within [smallest, largest] to a font class such as ``f11`` .. ``f48``."""
    return f"{FONT_PREFIX}{font_value(largest, smallest, count)}"
