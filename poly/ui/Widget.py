from __future__ import annotations

# standard libraries
import typing
import uuid

# third party libraries
# None

# local libraries
from poly.ui import Hierarchy

if typing.TYPE_CHECKING:
    from poly.ui import Painter


class Widget:
    """
        Base widget. Each widget has a stable id and owns its children through its hierarchy.

        Subclasses override update and paint, usually calling the base implementation to reach the children.
    """

    def __init__(self) -> None:
        self.__id = uuid.uuid4()
        self.__hierarchy = Hierarchy.Hierarchy()

    def __repr__(self) -> str:
        return "{0} ({1})".format(type(self).__name__, self.__id)

    @property
    def id(self) -> uuid.UUID:
        return self.__id

    @property
    def hierarchy(self) -> Hierarchy.Hierarchy:
        return self.__hierarchy

    @property
    def children(self) -> typing.List[Widget]:
        return self.__hierarchy.widgets

    def remove_child(self, child_id: uuid.UUID) -> Widget:
        return self.__hierarchy.remove(child_id)

    def get_child_transform(self, child_id: uuid.UUID) -> Hierarchy.Transform:
        return self.__hierarchy.get_transform(child_id)

    def update(self, dt: float) -> None:
        self.__hierarchy.update_children(dt)

    def paint(self, painter: Painter.Painter) -> None:
        self.__hierarchy.paint_children(painter)
