import pytest

from termpopup.canvas import Alignment, Buffer, Rect, Wrap
from termpopup.popup import (
    Popup,
    popup_area,
    popup_height,
    popup_width,
    render_popup,
)
from termpopup.theme import Modifier, Style


def small_popup() -> Popup:
    return (
        Popup("Info")
        .with_min_size(3, 3)
        .with_text_style(Style())
        .with_border_style(Style())
        .with_text_alignment(Alignment.LEFT)
        .with_title_alignment(Alignment.LEFT)
        .with_wrap(Wrap(trim=False))
    )


def test_builder_setters_update_the_expected_fields():
    popup = (
        Popup("Help")
        .with_min_size(10, 4)
        .with_max_width(30)
        .with_max_height(12)
        .with_text_style(Style().add_modifier(Modifier.BOLD))
        .with_border_style(Style().add_modifier(Modifier.ITALIC))
        .with_text_alignment(Alignment.CENTER)
        .with_title_alignment(Alignment.RIGHT)
        .with_wrap(Wrap(trim=True))
    )

    assert popup.title == "Help"
    assert popup.min_width == 10
    assert popup.min_height == 4
    assert popup.max_width == 30
    assert popup.max_height == 12
    assert popup.text_alignment is Alignment.CENTER
    assert popup.title_alignment is Alignment.RIGHT
    assert Modifier.BOLD in popup.text_style.modifiers
    assert Modifier.ITALIC in popup.border_style.modifiers
    assert popup.wrap.trim is True


def test_builder_leaves_original_unchanged():
    base = Popup("Help")
    changed = base.with_max_width(10)
    assert base.max_width is None
    assert changed.max_width == 10


def test_defaults():
    popup = Popup("X")
    assert (popup.min_width, popup.min_height) == (0, 0)
    assert popup.max_height is None
    assert popup.text_alignment is Alignment.LEFT
    assert popup.wrap.trim is False


def test_render_popup_is_a_no_op_when_the_area_cannot_fit_the_popup():
    area = Rect(0, 0, 4, 2)
    buf = Buffer.empty(area)
    popup = Popup("Help").with_min_size(10, 4)

    render_popup(area, buf, popup, ["line 1"])

    assert buf.text().strip() == ""


def test_render_popup_writes_title_and_joined_body_lines():
    area = Rect(0, 0, 24, 8)
    buf = Buffer.empty(area)
    popup = Popup("Info").with_min_size(10, 4).with_max_width(20)

    render_popup(area, buf, popup, ["first line", "second line"])

    text = buf.text()
    assert "Info" in text
    assert "first line" in text
    assert "second line" in text


def test_render_popup_clears_what_was_underneath():
    area = Rect(0, 0, 9, 7)
    buf = Buffer.empty(area)
    for y in range(7):
        buf.set_string(0, y, "x" * 9, Style())

    render_popup(area, buf, small_popup(), ["abc"])

    lines = buf.lines()
    assert lines[0] == "x" * 9
    assert lines[3] == "xx\u2502abc\u2502xx"
    assert lines[2][2] == "\u250c"


def test_popup_width_uses_display_width():
    assert popup_width(small_popup(), ["界界界"], 20) == 8


def test_popup_height_wraps_by_display_width():
    assert popup_height(small_popup(), ["界界界"], 6, 20) == 4


def test_popup_area_centers_measured_size():
    assert popup_area(Rect(0, 0, 9, 7), small_popup(), ["abc"]) == Rect(2, 2, 5, 3)


def test_popup_area_returns_none_when_available_area_is_smaller_than_minimum():
    popup = small_popup().with_min_size(10, 4)

    assert popup_area(Rect(0, 0, 9, 7), popup, ["abc"]) is None
    assert popup_area(Rect(0, 0, 12, 3), popup, ["abc"]) is None


def test_popup_area_clamps_to_maximum_width_and_height():
    lines = ["12345678901234567890", "second line"]
    popup = small_popup().with_max_width(8).with_max_height(4)

    assert popup_area(Rect(0, 0, 30, 10), popup, lines) == Rect(11, 3, 8, 4)


def test_popup_area_returns_none_when_clamped_max_size_is_zero():
    popup = small_popup().with_max_width(0).with_max_height(0)

    assert popup_area(Rect(0, 0, 10, 10), popup, ["abc"]) is None


def test_popup_area_offsets_by_area_origin():
    assert popup_area(Rect(10, 20, 9, 7), small_popup(), ["abc"]) == Rect(12, 22, 5, 3)


def test_minimum_above_maximum_is_rejected():
    popup = Popup("X").with_min_size(10, 4).with_max_width(5)
    with pytest.raises(ValueError):
        popup_area(Rect(0, 0, 20, 20), popup, ["abc"])