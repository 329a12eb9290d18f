"""
    Grid layout widget.

    Columns and rows are sized independently, each by its own Layout. Each cell holds at most one child and each
    child occupies at most one cell. Sizes are resolved lazily at paint time and written to the child transforms.
"""
from __future__ import annotations

# standard libraries
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


class GridLayout(Widget.Widget):
    """
        Layout with rows and columns. Rows and columns can have stretch factors and min/max sizes.

        Children are inserted into cells with insert_child_at. The column and row counts grow as needed to hold the
        cell. New columns and rows have stretch 1, minimum 0 and no maximum.

        Shrinking the column or row count evicts the children in the dropped cells from the layout. The evicted
        widgets are returned to the caller.
    """

    def __init__(self) -> None:
        super().__init__()
        self.__column_layout = Layout.Layout(0)
        self.__row_layout = Layout.Layout(0)
        self.__is_column_layout_dirty = True
        self.__is_row_layout_dirty = True
        # set by insert_child_at, cleared once the child transforms are written
        self.__needs_transforms = False
        # columns stores the child ids in a grid, indexed [column][row].
        self.__columns: typing.List[typing.List[typing.Optional[uuid.UUID]]] = list()

    @property
    def column_layout(self) -> Layout.Layout:
        return self.__column_layout

    @property
    def row_layout(self) -> Layout.Layout:
        return self.__row_layout

    @property
    def column_count(self) -> int:
        return len(self.__column_layout)

    @property
    def row_count(self) -> int:
        return len(self.__row_layout)

    @property
    def is_dirty(self) -> bool:
        return self.__is_column_layout_dirty or self.__is_row_layout_dirty

    def child_at(self, column: int, row: int) -> typing.Optional[uuid.UUID]:
        if not (0 <= column < self.column_count and 0 <= row < self.row_count):
            raise Layout.OutOfRangeError(f"cell ({column}, {row}) outside grid of {self.column_count}x{self.row_count}")
        return self.__columns[column][row]

    def cell_of(self, child_id: uuid.UUID) -> typing.Tuple[int, int]:
        """Return the (column, row) of the child."""
        for column, rows in enumerate(self.__columns):
            for row, cell_child_id in enumerate(rows):
                if cell_child_id == child_id:
                    return column, row
        raise Layout.OutOfRangeError(f"no child with id {child_id}")

    def insert_child_at(self, child: Widget.Widget, column: typing.Optional[int] = None, row: typing.Optional[int] = None) -> None:
        """
            Insert the child into the cell at column, row.

            A column or row of None means the one after the current last column or row.
        """
        column = column if column is not None else self.column_count
        row = row if row is not None else self.row_count
        if column < 0 or row < 0:
            raise Layout.OutOfRangeError(f"cell ({column}, {row}) has a negative index")
        if child.id in self.hierarchy:
            raise Layout.DuplicateAssignmentError(f"{child} is already in the grid")
        if column < self.column_count and row < self.row_count and self.__columns[column][row] is not None:
            raise Layout.DuplicateAssignmentError(f"cell ({column}, {row}) is already occupied")
        self.__ensure_column_exists(column)
        self.__ensure_row_exists(row)
        self.__columns[column][row] = child.id
        self.hierarchy.add_with_transform(child, Hierarchy.Transform())
        self.__needs_transforms = True

    def remove_child(self, child_id: uuid.UUID) -> Widget.Widget:
        column, row = self.cell_of(child_id)
        self.__columns[column][row] = None
        return super().remove_child(child_id)

    def set_column_count(self, count: int) -> typing.List[Widget.Widget]:
        """
            Set the column count. Return the children evicted from the dropped columns.
        """
        if count < 0:
            raise Layout.OutOfRangeError(f"column count must not be negative, got {count}")
        evicted_ids = [child_id for rows in self.__columns[count:] for child_id in rows if child_id is not None]
        self.__column_layout.resize(count)
        del self.__columns[count:]
        while len(self.__columns) < count:
            self.__columns.append([None] * self.row_count)
        self.__is_column_layout_dirty = True
        return self.__evict(evicted_ids)

    def set_row_count(self, count: int) -> typing.List[Widget.Widget]:
        """
            Set the row count. Return the children evicted from the dropped rows.
        """
        if count < 0:
            raise Layout.OutOfRangeError(f"row count must not be negative, got {count}")
        evicted_ids = [child_id for rows in self.__columns for child_id in rows[count:] if child_id is not None]
        self.__row_layout.resize(count)
        for rows in self.__columns:
            del rows[count:]
            rows.extend([None] * (count - len(rows)))
        self.__is_row_layout_dirty = True
        return self.__evict(evicted_ids)

    def set_column_stretch(self, column: int, stretch: int) -> None:
        self.__column_item(column).stretch = stretch
        self.__is_column_layout_dirty = True

    def set_column_min_size(self, column: int, size: int) -> None:
        self.__column_item(column).min_size = size
        self.__is_column_layout_dirty = True

    def set_column_max_size(self, column: int, size: int) -> None:
        self.__column_item(column).max_size = size
        self.__is_column_layout_dirty = True

    def set_row_stretch(self, row: int, stretch: int) -> None:
        self.__row_item(row).stretch = stretch
        self.__is_row_layout_dirty = True

    def set_row_min_size(self, row: int, size: int) -> None:
        self.__row_item(row).min_size = size
        self.__is_row_layout_dirty = True

    def set_row_max_size(self, row: int, size: int) -> None:
        self.__row_item(row).max_size = size
        self.__is_row_layout_dirty = True

    def paint(self, painter: Painter.Painter) -> None:
        painter_size = painter.size
        if (self.is_dirty or self.__needs_transforms or self.__column_layout.requested_size != painter_size.width
                or self.__row_layout.requested_size != painter_size.height):
            self.refresh_children_transforms(painter_size)
        super().paint(painter)

    def refresh_children_transforms(self, size: Geometry.IntSize) -> None:
        """Solve the axes that need it and write the transform of every occupied cell."""
        if self.__is_column_layout_dirty or self.__column_layout.requested_size != size.width:
            self.__column_layout.solve(size.width)
            self.__is_column_layout_dirty = False
            logging.debug("Grid columns solved for width %s: %s", size.width, self.__column_layout.sizes)
        if self.__is_row_layout_dirty or self.__row_layout.requested_size != size.height:
            self.__row_layout.solve(size.height)
            self.__is_row_layout_dirty = False
            logging.debug("Grid rows solved for height %s: %s", size.height, self.__row_layout.sizes)

        self.__needs_transforms = False
        column_offsets = self.__column_layout.offsets
        column_sizes = self.__column_layout.sizes
        row_offsets = self.__row_layout.offsets
        row_sizes = self.__row_layout.sizes
        for column, rows in enumerate(self.__columns):
            for row, child_id in enumerate(rows):
                if child_id is not None:
                    transform = Hierarchy.Transform.make(column_offsets[column], row_offsets[row], column_sizes[column], row_sizes[row])
                    self.hierarchy.set_transform(child_id, transform)

    def __column_item(self, column: int) -> Layout.Item:
        if column < 0:
            raise Layout.OutOfRangeError(f"column index must not be negative, got {column}")
        self.__ensure_column_exists(column)
        return self.__column_layout[column]

    def __row_item(self, row: int) -> Layout.Item:
        if row < 0:
            raise Layout.OutOfRangeError(f"row index must not be negative, got {row}")
        self.__ensure_row_exists(row)
        return self.__row_layout[row]

    def __ensure_column_exists(self, column: int) -> None:
        if self.column_count <= column:
            self.set_column_count(column + 1)

    def __ensure_row_exists(self, row: int) -> None:
        if self.row_count <= row:
            self.set_row_count(row + 1)

    def __evict(self, child_ids: typing.Sequence[uuid.UUID]) -> typing.List[Widget.Widget]:
        evicted = [self.hierarchy.remove(child_id) for child_id in child_ids]
        if evicted:
            logging.debug("Grid evicted %s children from dropped cells", len(evicted))
        return evicted
