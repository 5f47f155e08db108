"""A dict that always holds at least one entry."""

from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, TypeVar

from .errors import ConsumedError, SourceEmptyError
from .logging import get_logger

logger = get_logger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


class NonEmptyDict(Mapping[K, V]):
    """
    A non-empty ``dict``.

    The first key-value pair is stored on its own and the rest in a plain
    ``dict`` that starts empty. The stored key never appears in that dict,
    so key uniqueness holds across both parts.
    """

    __slots__ = ("_first", "_dynamic", "_consumed")

    def __init__(self, key: K, value: V):
        hash(key)
        self._first: Tuple[K, V] = (key, value)
        self._dynamic: Dict[K, V] = {}
        self._consumed = False

    @classmethod
    def try_from(cls, items: Mapping[K, V]) -> "NonEmptyDict[K, V]":
        """
        Build from a mapping; iteration order is kept.

        Raises:
            SourceEmptyError: If ``items`` is empty
        """
        pairs = iter(items.items())
        try:
            key, value = next(pairs)
        except StopIteration:
            logger.debug("Refusing to build NonEmptyDict from an empty source")
            raise SourceEmptyError("dict") from None

        instance = cls(key, value)
        instance._dynamic.update(pairs)
        return instance

    @classmethod
    def from_dict(cls, items: Dict[K, V]) -> "NonEmptyDict[K, V]":
        return cls.try_from(items)

    @property
    def first(self) -> Tuple[K, V]:
        self._ensure_live()
        return self._first

    def is_empty(self) -> bool:
        return False

    def insert(self, key: K, value: V) -> Optional[V]:
        """
        Set ``key`` to ``value``.

        Returns:
            The previous value for ``key``, or ``None`` if it was absent
        """
        self._ensure_live()
        first_key, first_value = self._first
        if self._is_first(key):
            self._first = (first_key, value)
            return first_value
        previous = self._dynamic.get(key)
        self._dynamic[key] = value
        return previous

    def remove(self, key: K) -> Tuple[Optional["NonEmptyDict[K, V]"], V]:
        """
        Remove ``key`` and return its value.

        Removing the stored first key promotes the oldest remaining entry
        in its place. When no entry is left the dict is consumed and
        ``(None, value)`` is returned.

        Raises:
            KeyError: If ``key`` is not present
        """
        self._ensure_live()
        first_key, first_value = self._first
        if not self._is_first(key):
            return self, self._dynamic.pop(key)

        if not self._dynamic:
            self._consume()
            return None, first_value

        promoted = next(iter(self._dynamic))
        self._first = (promoted, self._dynamic.pop(promoted))
        return self, first_value

    def to_dict(self) -> Dict[K, V]:
        self._ensure_live()
        items = dict([self._first])
        items.update(self._dynamic)
        return items

    def __getitem__(self, key: K) -> V:
        self._ensure_live()
        first_key, first_value = self._first
        if self._is_first(key):
            return first_value
        return self._dynamic[key]

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        self._ensure_live()
        return self._is_first(key) or key in self._dynamic

    def __len__(self) -> int:
        self._ensure_live()
        return 1 + len(self._dynamic)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[K]:
        self._ensure_live()
        yield self._first[0]
        yield from self._dynamic

    def __repr__(self) -> str:
        if self._consumed:
            return f"{type(self).__name__}(<consumed>)"
        return f"{type(self).__name__}({self.to_dict()!r})"

    def _is_first(self, key: object) -> bool:
        first_key = self._first[0]
        return key is first_key or key == first_key

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ConsumedError(f"{type(self).__name__} was consumed by removing its last entry")

    def _consume(self) -> None:
        logger.debug(f"{type(self).__name__} consumed, handing out its last value")
        self._consumed = True
        self._first = (_MISSING, _MISSING)
        self._dynamic = {}
