"""
    Painter module contains the recording painter handed to widgets at paint time.

    A painter has a size and an origin within the root painter. Drawing commands are recorded as tuples in a command
    list shared by a root painter and all of its sub painters; coordinates are stored relative to the root.
"""
from __future__ import annotations

# standard libraries
import dataclasses
import typing

# third party libraries
# None

# local libraries
from nion.utils import Geometry

if typing.TYPE_CHECKING:
    from poly.ui import Hierarchy


@dataclasses.dataclass(frozen=True)
class Line:
    start: Geometry.IntPoint
    end: Geometry.IntPoint


class Painter:
    """
        Record drawing commands for an area of the given size.

        Commands are tuples: ("clear", ), ("present", ), ("drawColor", color), ("point", x, y),
        ("line", x1, y1, x2, y2), ("rect", x, y, width, height) and ("fillRect", x, y, width, height).
    """

    def __init__(self, size: Geometry.IntSize, origin: typing.Optional[Geometry.IntPoint] = None, commands: typing.Optional[typing.List[typing.Tuple[typing.Any, ...]]] = None, draw_color: str = "#000") -> None:
        self.__size = size
        self.__origin = origin if origin is not None else Geometry.IntPoint(x=0, y=0)
        self.commands: typing.List[typing.Tuple[typing.Any, ...]] = commands if commands is not None else list()
        self.__draw_color = draw_color

    @property
    def size(self) -> Geometry.IntSize:
        return self.__size

    @property
    def origin(self) -> Geometry.IntPoint:
        return self.__origin

    def sub_painter(self, transform: Hierarchy.Transform) -> Painter:
        """Return a painter covering the transform area, translated relative to this painter."""
        origin = Geometry.IntPoint(x=self.__origin.x + transform.origin.x, y=self.__origin.y + transform.origin.y)
        return Painter(transform.size, origin, self.commands, self.__draw_color)

    def clear(self) -> None:
        self.commands.append(("clear", ))

    def present(self) -> None:
        self.commands.append(("present", ))

    @property
    def draw_color(self) -> str:
        return self.__draw_color

    @draw_color.setter
    def draw_color(self, color: str) -> None:
        if color != self.__draw_color:
            self.__draw_color = color
            self.commands.append(("drawColor", str(color)))

    def draw_point(self, point: Geometry.IntPoint) -> None:
        self.commands.append(("point", self.__origin.x + point.x, self.__origin.y + point.y))

    def draw_points(self, points: typing.Sequence[Geometry.IntPoint]) -> None:
        for point in points:
            self.draw_point(point)

    def draw_line(self, line: Line) -> None:
        x, y = self.__origin.x, self.__origin.y
        self.commands.append(("line", x + line.start.x, y + line.start.y, x + line.end.x, y + line.end.y))

    def draw_lines(self, lines: typing.Sequence[Line]) -> None:
        for line in lines:
            self.draw_line(line)

    def draw_rect(self, rect: Geometry.IntRect) -> None:
        self.commands.append(("rect", self.__origin.x + rect.left, self.__origin.y + rect.top, rect.width, rect.height))

    def draw_rects(self, rects: typing.Sequence[Geometry.IntRect]) -> None:
        for rect in rects:
            self.draw_rect(rect)

    def fill_rect(self, rect: Geometry.IntRect) -> None:
        self.commands.append(("fillRect", self.__origin.x + rect.left, self.__origin.y + rect.top, rect.width, rect.height))

    def fill_rects(self, rects: typing.Sequence[Geometry.IntRect]) -> None:
        for rect in rects:
            self.fill_rect(rect)
