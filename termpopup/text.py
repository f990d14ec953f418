"""Measuring and truncating text by terminal cell width."""

from __future__ import annotations

from wcwidth import wcwidth

ELLIPSIS = "\u2026"


def _char_width(ch: str) -> int:
    width = wcwidth(ch)
    return width if width > 0 else 0


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies."""
    return sum(_char_width(ch) for ch in text)


def _take_display_width(text: str, max_width: int) -> str:
    taken: list[str] = []
    width = 0
    for ch in text:
        ch_width = _char_width(ch)
        if width + ch_width > max_width:
            break
        taken.append(ch)
        width += ch_width
    return "".join(taken)


def truncate_display_width(text: str, max_width: int) -> str:
    """Shorten ``text`` to at most ``max_width`` cells, marking the cut with an ellipsis."""
    if max_width <= 0:
        return ""
    if display_width(text) <= max_width:
        return text

    ellipsis_width = display_width(ELLIPSIS)
    if max_width <= ellipsis_width:
        return _take_display_width(text, max_width) or ELLIPSIS

    prefix = _take_display_width(text, max_width - ellipsis_width)
    return f"{prefix}{ELLIPSIS}" if prefix else ELLIPSIS