"""
Hierarchy module contains the per-widget store of child widgets and their transforms.

A transform is the position and size of a child relative to its parent. Layout widgets write transforms; painting
reads them to give each child a sub painter covering its area.
"""
from __future__ import annotations

# standard libraries
import dataclasses
import typing
import uuid

# third party libraries
# None

# local libraries
from nion.utils import Event
from nion.utils import Geometry
from poly.ui import Layout

if typing.TYPE_CHECKING:
    from poly.ui import Painter
    from poly.ui import Widget


@dataclasses.dataclass(frozen=True)
class Transform:
    """Relative position and size of a widget. The origin may be negative; the size may not."""
    origin: Geometry.IntPoint = dataclasses.field(default_factory=lambda: Geometry.IntPoint(x=0, y=0))
    size: Geometry.IntSize = dataclasses.field(default_factory=lambda: Geometry.IntSize(width=0, height=0))

    @classmethod
    def make(cls, x: int, y: int, width: int, height: int) -> Transform:
        assert width >= 0 and height >= 0
        return cls(Geometry.IntPoint(x=x, y=y), Geometry.IntSize(width=width, height=height))

    @property
    def rect(self) -> Geometry.IntRect:
        return Geometry.IntRect(origin=self.origin, size=self.size)

    def with_origin(self, origin: Geometry.IntPoint) -> Transform:
        return dataclasses.replace(self, origin=origin)

    def with_size(self, size: Geometry.IntSize) -> Transform:
        return dataclasses.replace(self, size=size)


@dataclasses.dataclass
class HierarchyChild:
    widget: Widget.Widget
    transform: Transform


class Hierarchy:
    """
        Ordered children of a widget, each with its transform.

        The hierarchy owns its children exclusively; a widget is moved out of a hierarchy by remove, which returns it.
        Children are looked up by their id. Looking up an unknown id raises OutOfRangeError.
    """

    def __init__(self) -> None:
        self.__children: typing.List[HierarchyChild] = list()
        # fired with (child id, transform) whenever a transform is written
        self.transform_changed_event = Event.Event()

    def __len__(self) -> int:
        return len(self.__children)

    def __contains__(self, child_id: uuid.UUID) -> bool:
        return self.index(child_id) is not None

    @property
    def children(self) -> typing.Sequence[HierarchyChild]:
        return tuple(self.__children)

    @property
    def widgets(self) -> typing.List[Widget.Widget]:
        return [child.widget for child in self.__children]

    def add(self, widget: Widget.Widget) -> None:
        self.add_with_transform(widget, Transform())

    def add_with_transform(self, widget: Widget.Widget, transform: Transform) -> None:
        if widget.id in self:
            raise Layout.DuplicateAssignmentError(f"widget {widget.id} is already a child")
        self.__children.append(HierarchyChild(widget, transform))
        self.transform_changed_event.fire(widget.id, transform)

    def remove(self, child_id: uuid.UUID) -> Widget.Widget:
        return self.__children.pop(self.__required_index(child_id)).widget

    def set_transform(self, child_id: uuid.UUID, transform: Transform) -> None:
        child = self.__children[self.__required_index(child_id)]
        if child.transform != transform:
            child.transform = transform
            self.transform_changed_event.fire(child_id, transform)

    def set_origin(self, child_id: uuid.UUID, origin: Geometry.IntPoint) -> None:
        self.set_transform(child_id, self.get_transform(child_id).with_origin(origin))

    def set_size(self, child_id: uuid.UUID, size: Geometry.IntSize) -> None:
        self.set_transform(child_id, self.get_transform(child_id).with_size(size))

    def get_transform(self, child_id: uuid.UUID) -> Transform:
        return self.__children[self.__required_index(child_id)].transform

    def index(self, child_id: uuid.UUID) -> typing.Optional[int]:
        for index, child in enumerate(self.__children):
            if child.widget.id == child_id:
                return index
        return None

    def __required_index(self, child_id: uuid.UUID) -> int:
        index = self.index(child_id)
        if index is None:
            raise Layout.OutOfRangeError(f"no child with id {child_id}")
        return index

    def update_children(self, dt: float) -> None:
        for child in self.__children:
            child.widget.update(dt)

    def paint_children(self, painter: Painter.Painter) -> None:
        for child in self.__children:
            child.widget.paint(painter.sub_painter(child.transform))
