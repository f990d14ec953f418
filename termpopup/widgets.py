"""Bordered blocks and paragraphs drawn onto a buffer."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from .canvas import Alignment, Buffer, Rect, Wrap
from .text import display_width
from .theme import Palette, Style, style_panel_focused, style_panel_unfocused

_HORIZONTAL = "\u2500"
_VERTICAL = "\u2502"
_TOP_LEFT = "\u250c"
_TOP_RIGHT = "\u2510"
_BOTTOM_LEFT = "\u2514"
_BOTTOM_RIGHT = "\u2518"


def _clip(text: str, width: int) -> str:
    kept: list[str] = []
    used = 0
    for ch in text:
        ch_width = display_width(ch)
        if used + ch_width > width:
            break
        kept.append(ch)
        used += ch_width
    return "".join(kept)


def _aligned_x(area: Rect, content_width: int, alignment: Alignment) -> int:
    spare = max(0, area.width - content_width)
    if alignment is Alignment.CENTER:
        return area.x + spare // 2
    if alignment is Alignment.RIGHT:
        return area.x + spare
    return area.x


@dataclass(frozen=True)
class Block:
    """A box with an optional border and a title on its top edge."""

    title: str = ""
    title_alignment: Alignment = Alignment.LEFT
    style: Style = field(default_factory=Style)
    border_style: Style = field(default_factory=Style)
    borders: bool = True

    def inner(self, area: Rect) -> Rect:
        if not self.borders:
            return area
        return Rect(
            min(area.x + 1, area.right()),
            min(area.y + 1, area.bottom()),
            max(0, area.width - 2),
            max(0, area.height - 2),
        )

    def render(self, area: Rect, buf: Buffer) -> None:
        area = area.intersection(buf.area)
        if area.area() == 0:
            return
        buf.set_style(area, self.style)
        if self.borders:
            self._render_borders(area, buf)
        self._render_title(area, buf)

    def _render_borders(self, area: Rect, buf: Buffer) -> None:
        left, top = area.x, area.y
        right, bottom = area.right() - 1, area.bottom() - 1
        style = self.border_style
        for x in range(left, right + 1):
            buf.set_string(x, top, _HORIZONTAL, style)
            buf.set_string(x, bottom, _HORIZONTAL, style)
        for y in range(top, bottom + 1):
            buf.set_string(left, y, _VERTICAL, style)
            buf.set_string(right, y, _VERTICAL, style)
        buf.set_string(left, top, _TOP_LEFT, style)
        buf.set_string(right, top, _TOP_RIGHT, style)
        buf.set_string(left, bottom, _BOTTOM_LEFT, style)
        buf.set_string(right, bottom, _BOTTOM_RIGHT, style)

    def _render_title(self, area: Rect, buf: Buffer) -> None:
        if not self.title:
            return
        margin = 1 if self.borders else 0
        span = Rect(area.x + margin, area.y, max(0, area.width - 2 * margin), 1)
        if span.width == 0:
            return
        title = _clip(self.title, span.width)
        x = _aligned_x(span, display_width(title), self.title_alignment)
        buf.set_string(x, area.y, title, Style())


def _wrap_line(line: str, width: int, trim: bool) -> list[str]:
    rows: list[str] = []
    current = ""
    current_width = 0
    for token in re.findall(r"\s+|\S+", line):
        token_width = display_width(token)
        if token.isspace():
            if not current and trim:
                continue
            if current_width + token_width > width:
                rows.append(current.rstrip())
                current, current_width = "", 0
                if trim:
                    continue
                token = _clip(token, width)
                token_width = display_width(token)
            current += token
            current_width += token_width
            continue
        if current_width + token_width <= width:
            current += token
            current_width += token_width
            continue
        if current:
            rows.append(current.rstrip())
        while display_width(token) > width:
            head = _clip(token, width) or token[0]
            rows.append(head)
            token = token[len(head):]
        current, current_width = token, display_width(token)
    rows.append(current)
    return rows


def render_paragraph(
    area: Rect,
    buf: Buffer,
    text: str,
    style: Style,
    alignment: Alignment,
    wrap: Optional[Wrap],
    block: Optional[Block],
) -> None:
    """Draw ``text`` inside ``area``, optionally framed by ``block`` and word wrapped."""
    area = area.intersection(buf.area)
    if area.area() == 0:
        return
    buf.set_style(area, style)
    inner = area
    if block is not None:
        block.render(area, buf)
        inner = block.inner(area)
    if inner.area() == 0:
        return

    rows: list[str] = []
    for line in text.split("\n"):
        if wrap is None:
            rows.append(_clip(line, inner.width))
        else:
            rows.extend(_wrap_line(line, inner.width, wrap.trim))

    for y, row in zip(range(inner.y, inner.bottom()), rows):
        x = _aligned_x(inner, display_width(row), alignment)
        buf.set_string(x, y, row, Style())


def styled_titled_block(title: str, style: Style, title_alignment: Alignment) -> Block:
    return Block(title=title, title_alignment=title_alignment, style=style)


def bordered_titled_block(
    title: str, border_style: Style, title_alignment: Alignment
) -> Block:
    return Block(title=title, title_alignment=title_alignment, border_style=border_style)


def accent_titled_block(title: str, palette: Palette) -> Block:
    return styled_titled_block(title, style_panel_focused(palette), Alignment.CENTER)


def bordered_box_inner(area: Rect) -> Rect:
    """The area inside a one-cell border, or ``area`` itself when too small for one."""
    if area.height >= 2 and area.width >= 2:
        return Rect(area.x + 1, area.y + 1, area.width - 2, area.height - 2)
    return area


def render_bordered_titled_box(
    area: Rect,
    title: str,
    border_style: Style,
    title_alignment: Alignment,
    buf: Buffer,
) -> Rect:
    """Draw a titled box and return the area inside it."""
    if area.height < 2 or area.width < 2:
        return area
    bordered_titled_block(title, border_style, title_alignment).render(area, buf)
    return bordered_box_inner(area)


def render_panel_box(
    area: Rect, title: str, focused: bool, buf: Buffer, palette: Palette
) -> Rect:
    border_style = style_panel_focused(palette) if focused else style_panel_unfocused(palette)
    return render_bordered_titled_box(area, title, border_style, Alignment.LEFT, buf)


def render_unfocused_panel_box(
    area: Rect, title: str, buf: Buffer, palette: Palette
) -> Rect:
    return render_panel_box(area, title, False, buf, palette)