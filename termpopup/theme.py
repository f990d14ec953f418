"""Styles, text modifiers and the colour palette used for drawing."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional

Color = str


class Modifier(enum.Flag):
    """Text attributes a terminal cell can carry."""

    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


@dataclass(frozen=True)
class Style:
    """Foreground, background and modifiers; unset colours leave what is below."""

    fg: Optional[Color] = None
    bg: Optional[Color] = None
    modifiers: Modifier = Modifier.NONE

    def with_fg(self, color: Color) -> "Style":
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> "Style":
        return replace(self, bg=color)

    def add_modifier(self, modifier: Modifier) -> "Style":
        return replace(self, modifiers=self.modifiers | modifier)

    def bold(self) -> "Style":
        return self.add_modifier(Modifier.BOLD)

    def patch(self, other: "Style") -> "Style":
        """Layer ``other`` on top of this style."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            modifiers=self.modifiers | other.modifiers,
        )


@dataclass(frozen=True)
class Palette:
    """Named colours the interface draws with."""

    text: Color = "white"
    muted: Color = "dark_gray"
    accent: Color = "cyan"
    accent_strong: Color = "light_cyan"
    danger: Color = "red"


DEFAULT_PALETTE = field(default_factory=Palette)


def style_text(palette: Palette) -> Style:
    return Style(fg=palette.text)


def style_header(palette: Palette) -> Style:
    return style_text(palette).bold()


def style_panel_focused(palette: Palette) -> Style:
    return Style(fg=palette.accent).bold()


def style_panel_unfocused(palette: Palette) -> Style:
    return Style(fg=palette.muted)


def style_gauge(palette: Palette) -> Style:
    return Style(fg=palette.accent_strong)


def style_error(palette: Palette) -> Style:
    return Style(fg=palette.danger).bold()