from functools import reduce

from termpopup.theme import (
    Modifier,
    Palette,
    Style,
    style_error,
    style_gauge,
    style_header,
    style_panel_focused,
    style_panel_unfocused,
    style_text,
)

PALETTE = Palette(text="t", muted="m", accent="a", accent_strong="s", danger="d")


def _layered(*styles):
    return reduce(Style.patch, styles)


def test_with_fg_and_bg_return_new_styles():
    base = Style()
    styled = base.with_fg("red").with_bg("blue")
    assert (styled.fg, styled.bg) == ("red", "blue")
    assert base == Style()


def test_add_modifier_accumulates():
    style = Style().add_modifier(Modifier.ITALIC).bold()
    assert Modifier.ITALIC in style.modifiers
    assert Modifier.BOLD in style.modifiers
    assert Modifier.DIM not in style.modifiers


def test_layering_overrides_set_colours_and_merges_modifiers():
    below = Style(fg="red", bg="blue", modifiers=Modifier.ITALIC)
    above = Style(fg="green", modifiers=Modifier.BOLD)
    combined = _layered(below, above)
    assert combined.fg == "green"
    assert combined.bg == "blue"
    assert combined.modifiers == Modifier.ITALIC | Modifier.BOLD


def test_layering_with_empty_style_is_identity():
    style = Style(fg="red", modifiers=Modifier.BOLD)
    assert _layered(style, Style()) == style
    assert _layered(Style(), style) == style


def test_text_and_header_styles_use_text_colour():
    assert style_text(PALETTE) == Style(fg=PALETTE.text)
    header = style_header(PALETTE)
    assert header.fg == PALETTE.text
    assert Modifier.BOLD in header.modifiers


def test_panel_styles():
    focused = style_panel_focused(PALETTE)
    assert focused.fg == PALETTE.accent
    assert Modifier.BOLD in focused.modifiers
    assert style_panel_unfocused(PALETTE) == Style(fg=PALETTE.muted)


def test_gauge_and_error_styles():
    assert style_gauge(PALETTE) == Style(fg=PALETTE.accent_strong)
    error = style_error(PALETTE)
    assert error.fg == PALETTE.danger
    assert Modifier.BOLD in error.modifiers