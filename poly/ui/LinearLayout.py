"""
    Linear layout widget.

    Children are placed one after another along the main axis of the layout direction. The main axis is sized by a
    Layout; each child takes the full extent of the cross axis.
"""
from __future__ import annotations

# standard libraries
import enum
import logging
import typing
import uuid

# third party libraries
# None

# local libraries
from nion.utils import Geometry
from poly.ui import Hierarchy
from poly.ui import Layout
from poly.ui import Widget

if typing.TYPE_CHECKING:
    from poly.ui import Painter


class LinearLayoutDirection(enum.Enum):
    """Direction in which the layout grows."""
    LeftToRight = 0
    RightToLeft = 1
    TopToBottom = 2
    BottomToTop = 3

    @property
    def is_horizontal(self) -> bool:
        return self in (LinearLayoutDirection.LeftToRight, LinearLayoutDirection.RightToLeft)

    @property
    def is_reversed(self) -> bool:
        return self in (LinearLayoutDirection.RightToLeft, LinearLayoutDirection.BottomToTop)


class LinearLayout(Widget.Widget):

    def __init__(self, direction: LinearLayoutDirection = LinearLayoutDirection.LeftToRight) -> None:
        super().__init__()
        self.__direction = direction
        self.__layout = Layout.Layout(0)
        self.__cross_size = 0
        self.__is_dirty = True

    @property
    def layout(self) -> Layout.Layout:
        return self.__layout

    @property
    def direction(self) -> LinearLayoutDirection:
        return self.__direction

    @direction.setter
    def direction(self, direction: LinearLayoutDirection) -> None:
        if direction != self.__direction:
            self.__direction = direction
            self.__is_dirty = True

    def add_child(self, child: Widget.Widget, stretch: int = Layout.DEFAULT_STRETCH, min_size: typing.Optional[int] = None, max_size: typing.Optional[int] = None) -> None:
        item = Layout.Item(stretch, min_size, max_size)
        self.hierarchy.add_with_transform(child, Hierarchy.Transform())
        self.__layout.append(item)
        self.__is_dirty = True

    def remove_child(self, child_id: uuid.UUID) -> Widget.Widget:
        index = self.hierarchy.index(child_id)
        if index is None:
            raise Layout.OutOfRangeError(f"no child with id {child_id}")
        widget = super().remove_child(child_id)
        self.__layout.pop(index)
        self.__is_dirty = True
        return widget

    def set_stretch(self, index: int, stretch: int) -> None:
        self.__layout[index].stretch = stretch
        self.__is_dirty = True

    def set_min_size(self, index: int, size: int) -> None:
        self.__layout[index].min_size = size
        self.__is_dirty = True

    def set_max_size(self, index: int, size: int) -> None:
        self.__layout[index].max_size = size
        self.__is_dirty = True

    def paint(self, painter: Painter.Painter) -> None:
        size = painter.size
        main_size, cross_size = (size.width, size.height) if self.__direction.is_horizontal else (size.height, size.width)
        if self.__is_dirty or self.__layout.requested_size != main_size or self.__cross_size != cross_size:
            self.refresh_children_transforms(size)
        super().paint(painter)

    def refresh_children_transforms(self, size: Geometry.IntSize) -> None:
        assert len(self.hierarchy) == len(self.__layout)
        direction = self.__direction
        main_size, cross_size = (size.width, size.height) if direction.is_horizontal else (size.height, size.width)
        self.__layout.solve(main_size)
        self.__cross_size = cross_size
        self.__is_dirty = False
        logging.debug("Linear layout solved for %s: %s", main_size, self.__layout.sizes)
        total = self.__layout.size
        for child, offset, item_size in zip(self.hierarchy.children, self.__layout.offsets, self.__layout.sizes):
            if direction.is_reversed:
                offset = total - offset - item_size
            if direction.is_horizontal:
                transform = Hierarchy.Transform.make(offset, 0, item_size, cross_size)
            else:
                transform = Hierarchy.Transform.make(0, offset, cross_size, item_size)
            self.hierarchy.set_transform(child.widget.id, transform)
