"""Ready-made popups for help, error and information messages."""

from __future__ import annotations

from typing import Optional

from .canvas import Alignment, Wrap
from .popup import Popup
from .theme import Palette, style_error, style_panel_focused, style_text

_MAX_EXTENT = 0xFFFF


def help_popup(
    title: str,
    min_width: int,
    min_height: int,
    max_width: int,
    palette: Optional[Palette] = None,
) -> Popup:
    palette = palette or Palette()
    return Popup(
        title=title,
        min_width=min_width,
        min_height=min_height,
        max_width=max_width,
        max_height=_MAX_EXTENT,
        text_style=style_text(palette),
        border_style=style_panel_focused(palette),
        text_alignment=Alignment.LEFT,
        title_alignment=Alignment.CENTER,
        wrap=Wrap(trim=False),
    )


def error_popup(
    title: str,
    min_width: int,
    min_height: int,
    max_width: int,
    palette: Optional[Palette] = None,
) -> Popup:
    palette = palette or Palette()
    return Popup(
        title=title,
        min_width=min_width,
        min_height=min_height,
        max_width=max_width,
        text_style=style_error(palette),
        border_style=style_error(palette),
        text_alignment=Alignment.CENTER,
        title_alignment=Alignment.CENTER,
        wrap=Wrap(trim=True),
    )


def info_popup(
    title: str,
    min_width: int,
    min_height: int,
    palette: Optional[Palette] = None,
) -> Popup:
    palette = palette or Palette()
    return Popup(
        title=title,
        min_width=min_width,
        min_height=min_height,
        text_style=style_text(palette),
        border_style=style_panel_focused(palette),
        text_alignment=Alignment.LEFT,
        title_alignment=Alignment.CENTER,
        wrap=Wrap(trim=False),
    )