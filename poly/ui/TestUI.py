from __future__ import annotations

# standard libraries
import typing

# third party libraries
# None

# local libraries
from nion.utils import Geometry
from poly.ui import Painter
from poly.ui import Widget


class TestWidget(Widget.Widget):
    """Leaf widget for tests. Records updates and the painter area of each paint."""

    def __init__(self) -> None:
        super().__init__()
        self.update_count = 0
        self.total_dt = 0.0
        self.painted_rects: typing.List[Geometry.IntRect] = list()

    def update(self, dt: float) -> None:
        self.update_count += 1
        self.total_dt += dt
        super().update(dt)

    def paint(self, painter: Painter.Painter) -> None:
        rect = Geometry.IntRect(origin=painter.origin, size=painter.size)
        self.painted_rects.append(rect)
        painter.fill_rect(Geometry.IntRect(origin=Geometry.IntPoint(x=0, y=0), size=painter.size))
        super().paint(painter)


def make_painter(width: int, height: int) -> Painter.Painter:
    return Painter.Painter(Geometry.IntSize(width=width, height=height))
