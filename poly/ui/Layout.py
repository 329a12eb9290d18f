"""
Layout module contains the linear space allocation solver.

OVERVIEW

A Layout distributes an integer span among an ordered list of items. Each item carries a stretch weight and a
minimum and maximum size. Solving assigns every item a current size so that the sizes sum exactly to the layout
size, every size stays within its item's bounds, and the surplus above the minimums follows the stretch weights
as closely as integer sizes allow.

Layouts are solved from scratch on every solve; they keep no state between solves other than the items and the
requested size. The grid and linear layout widgets own one Layout per axis.

ALGORITHM

1. The layout size is raised to the sum of the item minimums.
2. Each item maximum is raised to its minimum.
3. If no item has stretch, every item is weighted equally for this solve.
4. Every item starts at its minimum. The remaining space is then handed out one unit at a time to the unsaturated
   item whose expected share (stretch / total stretch) most exceeds its current share (size / layout size). Ties go
   to the earliest item.
"""
from __future__ import annotations

# standard libraries
import heapq
import logging
import typing

# third party libraries
import numpy

# local libraries
# None


MAX_SIZE = 2 ** 32 - 1
DEFAULT_STRETCH = 1


class LayoutError(Exception):
    """Base class for layout contract violations."""


class OutOfRangeError(LayoutError, IndexError):
    """A column, row, item or child index does not exist."""


class InvalidConstraintsError(LayoutError, ValueError):
    """The item constraints cannot be satisfied."""


class DuplicateAssignmentError(LayoutError, ValueError):
    """A cell is already occupied or a child is already assigned."""


def _check_size_value(name: str, value: typing.Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, numpy.integer)):
        raise InvalidConstraintsError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidConstraintsError(f"{name} must not be negative, got {value}")
    return int(value)


class Item:
    """
        A single constrained quantity within a layout.

        Stretch is the relative weight used to distribute surplus space. Minimum defaults to 0 and maximum defaults to
        MAX_SIZE. The owning layout clamps the maximum to the minimum when solving; the item itself does not.
    """

    def __init__(self, stretch: int = DEFAULT_STRETCH, min_size: typing.Optional[int] = None, max_size: typing.Optional[int] = None) -> None:
        self.stretch = stretch
        self.min_size = min_size if min_size is not None else 0
        self.max_size = max_size if max_size is not None else MAX_SIZE
        self.current_size = 0

    def __repr__(self) -> str:
        return "Item (stretch={0}, min={1}, max={2}, current={3})".format(self.stretch, self.min_size, self.max_size, self.current_size)

    @property
    def stretch(self) -> int:
        return self.__stretch

    @stretch.setter
    def stretch(self, value: int) -> None:
        self.__stretch = _check_size_value("stretch", value)

    @property
    def min_size(self) -> int:
        return self.__min_size

    @min_size.setter
    def min_size(self, value: int) -> None:
        self.__min_size = _check_size_value("min_size", value)

    @property
    def max_size(self) -> int:
        return self.__max_size

    @max_size.setter
    def max_size(self, value: int) -> None:
        self.__max_size = _check_size_value("max_size", value)

    @property
    def is_saturated(self) -> bool:
        return self.current_size >= self.max_size


class Layout:
    """
        Solve the sizes of an ordered list of items against a requested size.

        The layout is solved on construction. Call solve again after changing item constraints or to solve against a
        different size.
    """

    def __init__(self, size: int, items: typing.Optional[typing.Sequence[Item]] = None) -> None:
        self.__requested_size = _check_size_value("size", size)
        self.__size = self.__requested_size
        self.__items: typing.List[Item] = list(items) if items is not None else list()
        self.solve()

    def __repr__(self) -> str:
        return "Layout (size={0}, items={1})".format(self.__size, self.__items)

    @property
    def size(self) -> int:
        return self.__size

    @property
    def requested_size(self) -> int:
        return self.__requested_size

    @property
    def items(self) -> typing.Sequence[Item]:
        return tuple(self.__items)

    @property
    def sizes(self) -> typing.List[int]:
        return [item.current_size for item in self.__items]

    @property
    def offsets(self) -> typing.List[int]:
        """Return the starting offset of each item, i.e. the sum of the sizes of the preceding items."""
        sizes = numpy.array(self.sizes, dtype=numpy.int64)
        if len(sizes) == 0:
            return list()
        offsets = numpy.concatenate(([0], numpy.cumsum(sizes)[:-1]))
        return [int(offset) for offset in offsets]

    def __len__(self) -> int:
        return len(self.__items)

    def __getitem__(self, index: int) -> Item:
        if not 0 <= index < len(self.__items):
            raise OutOfRangeError(f"item index {index} out of range for {len(self.__items)} items")
        return self.__items[index]

    def append(self, item: Item) -> None:
        self.__items.append(item)

    def pop(self, index: int) -> Item:
        item = self[index]
        del self.__items[index]
        return item

    def resize(self, count: int, item_factory: typing.Optional[typing.Callable[[], Item]] = None) -> typing.List[Item]:
        """Grow or truncate the item list to count items. Return the truncated items."""
        if count < 0:
            raise OutOfRangeError(f"item count must not be negative, got {count}")
        item_factory = item_factory if item_factory else Item
        truncated = self.__items[count:]
        del self.__items[count:]
        while len(self.__items) < count:
            self.__items.append(item_factory())
        return truncated

    def solve(self, size: typing.Optional[int] = None) -> None:
        """Normalize the constraints and assign every item its current size."""
        requested_size = _check_size_value("size", size) if size is not None else self.__requested_size
        items = self.__items
        if not items:
            self.__requested_size = requested_size
            self.__size = requested_size
            return

        # the layout can never be smaller than the sum of its minimums
        minimum_total = sum(item.min_size for item in items)
        layout_size = requested_size
        if layout_size < minimum_total:
            logging.debug("Layout size raised from %s to minimum %s", layout_size, minimum_total)
            layout_size = minimum_total

        maximum_total = sum(max(item.max_size, item.min_size) for item in items)
        if maximum_total < layout_size:
            raise InvalidConstraintsError(f"layout size {layout_size} exceeds the sum of item maximums {maximum_total}")

        self.__requested_size = requested_size
        self.__size = layout_size
        for item in items:
            if item.max_size < item.min_size:
                item.max_size = item.min_size

        stretches = [item.stretch for item in items]
        total_stretch = sum(stretches)
        if total_stretch == 0:
            stretches = [1] * len(items)
            total_stretch = len(items)

        for item in items:
            item.current_size = item.min_size

        remaining = layout_size - minimum_total
        if remaining == 0:
            return

        # score is (stretch / total_stretch - current / size) scaled by (size * total_stretch) to stay in integers.
        # an item's score only changes when that item grows, so a heap of (-score, index) yields the highest score
        # with ties going to the lowest index.

        def score(index: int) -> int:
            return stretches[index] * layout_size - items[index].current_size * total_stretch

        heap = [(-score(index), index) for index, item in enumerate(items) if not item.is_saturated]
        heapq.heapify(heap)
        while remaining > 0:
            assert heap
            _, index = heapq.heappop(heap)
            item = items[index]
            item.current_size += 1
            remaining -= 1
            if not item.is_saturated:
                heapq.heappush(heap, (-score(index), index))
