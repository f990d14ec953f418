# termpopup

Small building blocks for drawing text user interfaces into an in-memory
grid of terminal cells.

- `termpopup.text`: `display_width` counts the terminal cells a string
  occupies. Wide CJK characters count as two cells and combining marks as
  zero. `truncate_display_width` shortens a string to a given number of cells
  and marks the cut with an ellipsis (`…`).
- `termpopup.theme`: `Style` is a frozen dataclass with optional `fg` and `bg`
  and a `Modifier` flag set. It has the methods `with_fg`, `with_bg`,
  `add_modifier`, `bold` and `patch`. `Palette` holds named colours (`text`,
  `muted`, `accent`, `accent_strong`, `danger`) as plain strings. The helpers
  `style_text`, `style_header`, `style_panel_focused`, `style_panel_unfocused`,
  `style_gauge` and `style_error` each take a `Palette` and return a `Style`.
- `termpopup.canvas`: `Rect` is an integer rectangle and raises `ValueError` on
  negative fields. It has `area`, `right`, `bottom` and `intersection`.
  `Buffer` is a grid of `Cell`s and has `Buffer.empty`, `cell`, `set_string`,
  `set_style`, `clear`, `text` and `lines`. This module also defines
  `Alignment` (`LEFT`, `CENTER`, `RIGHT`) and `Wrap(trim=...)`.
- `termpopup.widgets`: `Block` is a box with box-drawing borders and a title.
  `render_paragraph` draws word-wrapped, aligned text, optionally inside a
  block. The remaining helpers are `styled_titled_block`,
  `bordered_titled_block`, `accent_titled_block`, `render_bordered_titled_box`,
  `render_panel_box`, `render_unfocused_panel_box` and `bordered_box_inner`.
- `termpopup.popup`: `Popup` is a frozen dataclass with `with_*` methods that
  return modified copies. `popup_width`, `popup_height` and `popup_area` work
  out a popup's size and place. `render_popup` draws the popup.
- `termpopup.presets`: `help_popup`, `error_popup` and `info_popup` build
  popups with consistent styling. The palette argument is optional and
  defaults to `Palette()`.

## Installation

```
pip install termpopup
```

## Example

```python
from termpopup.canvas import Buffer, Rect
from termpopup.popup import render_popup
from termpopup.presets import info_popup
from termpopup.theme import Palette

area = Rect(0, 0, 24, 8)
buf = Buffer.empty(area)
popup = info_popup(" Info ", 10, 4, Palette()).with_max_width(20)

render_popup(area, buf, popup, ["first line", "second line"])
print("\n".join(buf.lines()))
```

### How a popup is sized and placed

- **Width:** the widest line plus two cells for the border.
- **Height:** the number of lines after wrapping to the inner width, plus two.
- **Limits:** both values are clamped between the popup's minimum size and its
  maximum size. The maximum itself is capped by the area.
- **Position:** the popup is centred in the area.
- **No room:** if the area is smaller than the popup's minimum size, or the
  maximum works out to zero, `popup_area` returns `None` and `render_popup`
  draws nothing.
- **Conflicting limits:** a minimum larger than the effective maximum raises
  `ValueError`.

Text helpers can be used on their own:

```python
from termpopup.text import display_width, truncate_display_width

display_width("界界")                      # 4
truncate_display_width("hello world", 8)   # 'hello w…'
```

## What this package does not do

Everything is drawn into a `Buffer` held in memory. The package does not:

- write to a real terminal,
- turn styles or palette colour names into escape codes,
- read keyboard or mouse input,
- run an event loop,
- provide a command-line program.

Those parts are left to the application that uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```