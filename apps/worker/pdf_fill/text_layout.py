"""
Greedy line wrapping against a measured text width.
"""
from __future__ import annotations

from typing import Callable

Measure = Callable[[str, float], float]


def wrap_text(text: str, measure: Measure, font_size: float, max_width: float) -> list[str]:
    """
    Split ``text`` into lines whose measured width stays within ``max_width``.

    Words are separated on single spaces only. A candidate line that measures
    exactly ``max_width`` still fits. A word wider than ``max_width`` on its own
    is emitted unchanged as its own line; nothing is hyphenated.
    """
    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if measure(candidate, font_size) <= max_width:
            current = candidate
            continue
        if current:
            lines.append(current)
        current = word
    if current:
        lines.append(current)
    return lines
