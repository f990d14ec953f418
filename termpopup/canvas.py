"""A grid of styled terminal cells and the geometry used to address it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator

from wcwidth import wcwidth

from .theme import Style


class Alignment(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Wrap:
    """Word wrapping; ``trim`` drops leading whitespace on wrapped rows."""

    trim: bool = False


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError(f"rectangle fields must not be negative: {self}")

    def area(self) -> int:
        return self.width * self.height

    def right(self) -> int:
        return self.x + self.width

    def bottom(self) -> int:
        return self.y + self.height

    def intersection(self, other: "Rect") -> "Rect":
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right(), other.right())
        y2 = min(self.bottom(), other.bottom())
        return Rect(x1, y1, max(0, x2 - x1), max(0, y2 - y1))

    def _positions(self) -> Iterator[tuple[int, int]]:
        for y in range(self.y, self.bottom()):
            for x in range(self.x, self.right()):
                yield x, y


@dataclass
class Cell:
    symbol: str = " "
    style: Style = field(default_factory=Style)


def _clusters(text: str) -> Iterator[tuple[str, int]]:
    """Group characters so zero-width marks stay with the character before them."""
    current = ""
    current_width = 0
    for ch in text:
        width = max(wcwidth(ch), 0)
        if width == 0 and current:
            current += ch
            continue
        if current:
            yield current, current_width
        current, current_width = ch, width
    if current:
        yield current, current_width


class Buffer:
    """A rectangular grid of cells."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._cells = [Cell() for _ in range(area.area())]

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        return cls(area)

    def _contains(self, x: int, y: int) -> bool:
        a = self.area
        return a.x <= x < a.right() and a.y <= y < a.bottom()

    def cell(self, x: int, y: int) -> Cell:
        if not self._contains(x, y):
            raise IndexError(f"position ({x}, {y}) is outside {self.area}")
        return self._cells[(y - self.area.y) * self.area.width + (x - self.area.x)]

    def set_string(self, x: int, y: int, text: str, style: Style) -> int:
        """Write ``text`` from (x, y), clipped at the right edge; return the next column."""
        if not self._contains(x, y):
            return x
        right = self.area.right()
        for cluster, width in _clusters(text):
            if width == 0:
                continue
            if x + width > right:
                break
            head = self.cell(x, y)
            head.symbol = cluster
            head.style = head.style.patch(style)
            for offset in range(1, width):
                tail = self.cell(x + offset, y)
                tail.symbol = ""
                tail.style = tail.style.patch(style)
            x += width
        return x

    def set_style(self, area: Rect, style: Style) -> None:
        for x, y in area.intersection(self.area)._positions():
            target = self.cell(x, y)
            target.style = target.style.patch(style)

    def clear(self, area: Rect) -> None:
        for x, y in area.intersection(self.area)._positions():
            target = self.cell(x, y)
            target.symbol = " "
            target.style = Style()

    def text(self) -> str:
        return "".join(cell.symbol for cell in self._cells)

    def lines(self) -> list[str]:
        width = self.area.width
        return [
            "".join(cell.symbol for cell in self._cells[start : start + width])
            for start in range(0, len(self._cells), width or 1)
        ] if width else ["" for _ in range(self.area.height)]