"""
A list that always holds at least one element.

The first element is stored on its own; every further element goes into a
``GrowableList``. Index 0 maps to the stored first element and index ``i``
maps to ``dynamic[i - 1]``.
"""

import operator
from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from .backing import GrowableList
from .capacity import Capacity
from .errors import ConsumedError, SourceEmptyError
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Elements guaranteed outside the dynamic portion.
BASE = 1


class NonEmptyList(Sequence[T]):
    """
    A non-empty ``list``.

    Growth goes through ``push``/``extend`` and can never empty the list.
    ``pop`` is the only way to shrink it: once the last element is popped
    the instance is consumed and must not be used again.
    """

    __slots__ = ("_first", "_dynamic", "_consumed")

    def __init__(self, first: T):
        self._first = first
        self._dynamic: GrowableList[T] = GrowableList()
        self._consumed = False

    @classmethod
    def with_capacity(cls, first: T, capacity: Union[Capacity, int]) -> "NonEmptyList[T]":
        """
        Create a list holding ``first`` with room for more elements.

        Args:
            first: The guaranteed element
            capacity: A ``Capacity`` with base 1, or an int read as total capacity

        Returns:
            A list of length 1 whose dynamic portion holds at least
            ``capacity.dynamic`` elements without reallocating

        Raises:
            CapacityOverflowError: If the allocation is larger than addressable memory
        """
        capacity = Capacity.coerce(capacity, base=BASE)
        instance = cls(first)
        instance._dynamic = GrowableList(capacity.dynamic)
        return instance

    @classmethod
    def try_from(cls, items: Iterable[T]) -> "NonEmptyList[T]":
        """
        Build a list from any iterable, keeping its order.

        Raises:
            SourceEmptyError: If ``items`` produces nothing
        """
        iterator = iter(items)
        try:
            first = next(iterator)
        except StopIteration:
            logger.debug("Refusing to build NonEmptyList from an empty source")
            raise SourceEmptyError("list") from None

        instance = cls(first)
        if hasattr(items, "__len__"):
            instance._dynamic = GrowableList(len(items) - 1)  # type: ignore[arg-type]
        instance._dynamic.extend(iterator)
        return instance

    @classmethod
    def from_list(cls, items: List[T]) -> "NonEmptyList[T]":
        return cls.try_from(items)

    @classmethod
    def from_deque(cls, items: Deque[T]) -> "NonEmptyList[T]":
        return cls.try_from(items)

    @property
    def first(self) -> T:
        self._ensure_live()
        return self._first

    @property
    def last(self) -> T:
        self._ensure_live()
        if len(self._dynamic):
            return self._dynamic[-1]
        return self._first

    def capacity(self) -> Capacity:
        """Actual allocation, which may be larger than what was requested."""
        self._ensure_live()
        return Capacity.from_dynamic(self._dynamic.capacity, base=BASE)

    def len(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        """Always ``False``; kept so code written against lists still reads naturally."""
        return False

    def reserve(self, additional: int) -> None:
        self._ensure_live()
        self._dynamic.reserve(additional)

    def reserve_exact(self, additional: int) -> None:
        self._ensure_live()
        self._dynamic.reserve_exact(additional)

    def shrink_to_fit(self) -> None:
        self._ensure_live()
        self._dynamic.shrink_to_fit()

    def push(self, item: T) -> None:
        self._ensure_live()
        self._dynamic.append(item)

    append = push

    def extend(self, items: Iterable[T]) -> None:
        self._ensure_live()
        self._dynamic.extend(items)

    def pop(self) -> Tuple[Optional["NonEmptyList[T]"], T]:
        """
        Remove the last element.

        Returns:
            ``(self, item)`` while other elements remain. When ``item`` was
            the only element, ``(None, item)``: the list is consumed and any
            further use raises ``ConsumedError``.
        """
        self._ensure_live()
        if len(self._dynamic):
            return self, self._dynamic.pop()

        first = self._first
        self._consume()
        return None, first

    def to_list(self) -> List[T]:
        self._ensure_live()
        items = [self._first]
        items.extend(self._dynamic)
        return items

    def to_deque(self) -> Deque[T]:
        self._ensure_live()
        items = deque(self._dynamic)
        items.appendleft(self._first)
        return items

    def copy(self) -> "NonEmptyList[T]":
        self._ensure_live()
        clone = type(self)(self._first)
        clone._dynamic = GrowableList(len(self._dynamic))
        clone._dynamic.extend(self._dynamic)
        return clone

    def __len__(self) -> int:
        self._ensure_live()
        return BASE + len(self._dynamic)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        self._ensure_live()
        yield self._first
        yield from self._dynamic

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.to_list()[index]
        position = self._position(index)
        if position == 0:
            return self._first
        return self._dynamic[position - 1]

    def __setitem__(self, index: int, value: T) -> None:
        position = self._position(index)
        if position == 0:
            self._first = value
        else:
            self._dynamic[position - 1] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmptyList):
            return NotImplemented
        if self._consumed or other._consumed:
            return self is other
        return self._first == other._first and self._dynamic == other._dynamic

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._consumed:
            return f"{type(self).__name__}(<consumed>)"
        return f"{type(self).__name__}({self.to_list()!r})"

    def _position(self, index: int) -> int:
        index = operator.index(index)
        length = len(self)
        position = index + length if index < 0 else index
        if not 0 <= position < length:
            raise IndexError(f"index out of range: the len is {length} but the index is {index}")
        return position

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ConsumedError(f"{type(self).__name__} was consumed by popping its last element")

    def _consume(self) -> None:
        logger.debug(f"{type(self).__name__} consumed, handing out its last element")
        self._consumed = True
        self._first = None
        self._dynamic = GrowableList()


def nonempty_list(first: T, *rest: T) -> NonEmptyList[T]:
    """Literal-style constructor: ``nonempty_list(1, 2, 3)``."""
    items = NonEmptyList(first)
    for item in rest:
        items.push(item)
    return items
