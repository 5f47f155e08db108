"""
Non-empty collections.

Each collection stores one guaranteed element on its own and keeps the
rest in an ordinary, possibly empty, backing collection. Code that holds a
``NonEmptyList`` never needs to check for the empty case: ``first`` and
``last`` always exist and ``len()`` is at least 1.
"""

from .capacity import Capacity
from .errors import CapacityOverflowError, ConsumedError, SourceEmptyError, UnemptyError
from .hashmap import NonEmptyDict
from .hashset import NonEmptySet
from .vec import NonEmptyList, nonempty_list

__all__ = [
    "Capacity",
    "NonEmptyList",
    "NonEmptyDict",
    "NonEmptySet",
    "nonempty_list",
    "UnemptyError",
    "SourceEmptyError",
    "ConsumedError",
    "CapacityOverflowError",
]
