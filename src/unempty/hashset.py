"""A set that always holds at least one element."""

from typing import AbstractSet, Any, Iterable, Iterator, Optional, Set, Tuple, TypeVar

from .errors import ConsumedError, SourceEmptyError
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class NonEmptySet(AbstractSet[T]):
    """
    A non-empty ``set``.

    The first element is stored on its own and the rest in a plain ``set``
    that starts empty and never contains the stored element. Set algebra
    (``&``, ``|``, ``-``, ``^``) returns plain sets, since the result of
    an intersection or difference can be empty.
    """

    __slots__ = ("_first", "_dynamic", "_consumed")

    def __init__(self, first: T):
        hash(first)
        self._first = first
        self._dynamic: Set[T] = set()
        self._consumed = False

    @classmethod
    def try_from(cls, items: Iterable[T]) -> "NonEmptySet[T]":
        """
        Build from any iterable; duplicates collapse as in ``set``.

        Raises:
            SourceEmptyError: If ``items`` produces nothing
        """
        iterator = iter(items)
        try:
            first = next(iterator)
        except StopIteration:
            logger.debug("Refusing to build NonEmptySet from an empty source")
            raise SourceEmptyError("set") from None

        instance = cls(first)
        for item in iterator:
            instance.insert(item)
        return instance

    @classmethod
    def from_set(cls, items: AbstractSet[T]) -> "NonEmptySet[T]":
        return cls.try_from(items)

    @classmethod
    def _from_iterable(cls, items: Iterable[Any]) -> Set[Any]:
        return set(items)

    @property
    def first(self) -> T:
        self._ensure_live()
        return self._first

    def is_empty(self) -> bool:
        return False

    def insert(self, item: T) -> bool:
        """Add ``item``; returns ``True`` if it was not already present."""
        self._ensure_live()
        if self._is_first(item) or item in self._dynamic:
            return False
        self._dynamic.add(item)
        return True

    add = insert

    def remove(self, item: T) -> Tuple[Optional["NonEmptySet[T]"], T]:
        """
        Remove ``item`` and return it.

        Removing the stored first element promotes an arbitrary remaining
        one in its place. When nothing is left the set is consumed and
        ``(None, item)`` is returned.

        Raises:
            KeyError: If ``item`` is not present
        """
        self._ensure_live()
        if not self._is_first(item):
            self._dynamic.remove(item)
            return self, item

        first = self._first
        if not self._dynamic:
            self._consume()
            return None, first

        self._first = self._dynamic.pop()
        return self, first

    def to_set(self) -> Set[T]:
        self._ensure_live()
        items = {self._first}
        items.update(self._dynamic)
        return items

    def __contains__(self, item: object) -> bool:
        self._ensure_live()
        return self._is_first(item) or item in self._dynamic

    def __len__(self) -> int:
        self._ensure_live()
        return 1 + len(self._dynamic)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        self._ensure_live()
        yield self._first
        yield from self._dynamic

    def __repr__(self) -> str:
        if self._consumed:
            return f"{type(self).__name__}(<consumed>)"
        return f"{type(self).__name__}({self.to_set()!r})"

    def _is_first(self, item: object) -> bool:
        return item is self._first or item == self._first

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ConsumedError(f"{type(self).__name__} was consumed by removing its last element")

    def _consume(self) -> None:
        logger.debug(f"{type(self).__name__} consumed, handing out its last element")
        self._consumed = True
        self._first = None
        self._dynamic = set()
