"""Growable backing storage with an explicit, tracked capacity."""

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .config import Settings, DEFAULT_SETTINGS
from .errors import CapacityOverflowError
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def min_non_zero_cap(item_size: int) -> int:
    """
    Smallest capacity worth allocating once growth starts.

    Tiny items get a larger floor, since a handful of them costs almost
    nothing; huge items grow one slot at a time.
    """
    if item_size == 1:
        return 8
    if item_size <= 1024:
        return 4
    return 1


class GrowableList(Generic[T]):
    """
    A list that tracks its allocated capacity separately from its length.

    Elements live in a plain ``list``; ``capacity`` follows the amortized
    doubling policy of a growable vector so that callers can reason about
    pre-allocation the same way on every platform.
    """

    __slots__ = ("_items", "_capacity", "_settings")

    def __init__(self, capacity: int = 0, settings: Optional[Settings] = None):
        self._settings = settings or DEFAULT_SETTINGS
        self._items: List[T] = []
        self._capacity = 0
        if capacity > 0:
            self._allocate(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def settings(self) -> Settings:
        return self._settings

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrowableList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"GrowableList({self._items!r}, capacity={self._capacity})"

    def reserve(self, additional: int) -> None:
        """
        Make room for at least ``additional`` more items.

        May allocate more than asked to keep appends amortized O(1).
        Does nothing if the current capacity is already sufficient.

        Raises:
            CapacityOverflowError: If the new capacity is not addressable
        """
        if self._capacity - len(self._items) >= additional:
            return
        required = self._required(additional)
        item_size = self._settings.pointer_size
        self._allocate(max(self._capacity * 2, required, min_non_zero_cap(item_size)))

    def reserve_exact(self, additional: int) -> None:
        """
        Make room for exactly ``additional`` more items.

        Does nothing if the current capacity is already sufficient.

        Raises:
            CapacityOverflowError: If the new capacity is not addressable
        """
        if self._capacity - len(self._items) >= additional:
            return
        self._allocate(self._required(additional))

    def shrink_to_fit(self) -> None:
        if self._capacity > len(self._items):
            logger.debug(f"Shrinking backing storage from {self._capacity} to {len(self._items)}")
            self._capacity = len(self._items)

    def append(self, item: T) -> None:
        if len(self._items) == self._capacity:
            self.reserve(1)
        self._items.append(item)

    def extend(self, items: Iterable[T]) -> None:
        # Snapshot first: the source may be a view over this storage
        items = list(items)
        self.reserve(len(items))
        self._items.extend(items)

    def pop(self) -> T:
        """Remove and return the last item; ``IndexError`` when empty."""
        return self._items.pop()

    def to_list(self) -> List[T]:
        return list(self._items)

    def _required(self, additional: int) -> int:
        required = len(self._items) + additional
        if required > self._settings.max_uint:
            raise CapacityOverflowError(
                f"capacity overflow: {len(self._items)} + {additional} exceeds {self._settings.max_uint}"
            )
        return required

    def _allocate(self, capacity: int) -> None:
        size = capacity * self._settings.pointer_size
        if size > self._settings.max_alloc_bytes:
            raise CapacityOverflowError(
                f"capacity overflow: {capacity} items need {size} bytes, "
                f"more than the addressable {self._settings.max_alloc_bytes}"
            )
        logger.debug(f"Growing backing storage from {self._capacity} to {capacity}")
        self._capacity = capacity
