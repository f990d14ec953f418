"""Centred, bordered popups sized to the text they hold."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from .canvas import Alignment, Buffer, Rect, Wrap
from .text import display_width
from .theme import Style
from .widgets import bordered_titled_block, render_paragraph


@dataclass(frozen=True)
class Popup:
    """How a popup is titled, sized, styled and wrapped."""

    title: str
    min_width: int = 0
    min_height: int = 0
    max_width: Optional[int] = None
    max_height: Optional[int] = None
    text_style: Style = field(default_factory=Style)
    border_style: Style = field(default_factory=Style)
    text_alignment: Alignment = Alignment.LEFT
    title_alignment: Alignment = Alignment.LEFT
    wrap: Wrap = field(default_factory=Wrap)

    def with_min_size(self, width: int, height: int) -> "Popup":
        return replace(self, min_width=width, min_height=height)

    def with_max_width(self, width: int) -> "Popup":
        return replace(self, max_width=width)

    def with_max_height(self, height: int) -> "Popup":
        return replace(self, max_height=height)

    def with_text_style(self, style: Style) -> "Popup":
        return replace(self, text_style=style)

    def with_border_style(self, style: Style) -> "Popup":
        return replace(self, border_style=style)

    def with_text_alignment(self, alignment: Alignment) -> "Popup":
        return replace(self, text_alignment=alignment)

    def with_title_alignment(self, alignment: Alignment) -> "Popup":
        return replace(self, title_alignment=alignment)

    def with_wrap(self, wrap: Wrap) -> "Popup":
        return replace(self, wrap=wrap)


def _clamp(value: int, low: int, high: int) -> int:
    if low > high:
        raise ValueError(f"minimum {low} exceeds maximum {high}")
    return max(low, min(value, high))


def popup_width(popup: Popup, lines: Sequence[str], max_width: int) -> int:
    """Width that fits the widest line plus its border, within the popup's limits."""
    widest = max((display_width(line) for line in lines), default=0)
    return _clamp(widest + 2, popup.min_width, max_width)


def popup_height(popup: Popup, lines: Sequence[str], width: int, max_height: int) -> int:
    """Height of the wrapped lines plus the border, within the popup's limits."""
    text_width = max(width - 2, 1)
    wrapped = sum(-(-max(display_width(line), 1) // text_width) for line in lines)
    return _clamp(wrapped + 2, popup.min_height, max_height)


def popup_area(area: Rect, popup: Popup, lines: Sequence[str]) -> Optional[Rect]:
    """Where the popup goes inside ``area``, or ``None`` when it cannot fit."""
    if area.width < popup.min_width or area.height < popup.min_height:
        return None

    max_width = min(area.width if popup.max_width is None else popup.max_width, area.width)
    max_height = min(
        area.height if popup.max_height is None else popup.max_height, area.height
    )
    if max_width == 0 or max_height == 0:
        return None

    width = popup_width(popup, lines, max_width)
    height = popup_height(popup, lines, width, max_height)
    x = area.x + max(0, area.width - width) // 2
    y = area.y + max(0, area.height - height) // 2
    return Rect(x, y, width, height)


def render_popup(area: Rect, buf: Buffer, popup: Popup, lines: Sequence[str]) -> None:
    """Clear the popup's place in ``buf`` and draw it; do nothing when it cannot fit."""
    target = popup_area(area, popup, lines)
    if target is None:
        return

    buf.clear(target)
    render_paragraph(
        target,
        buf,
        "\n".join(lines),
        popup.text_style,
        popup.text_alignment,
        popup.wrap,
        bordered_titled_block(popup.title, popup.border_style, popup.title_alignment),
    )