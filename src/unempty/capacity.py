"""
Capacity values for non-empty data structures.

Many collections offer a ``with_capacity`` style constructor for
pre-allocation. For a non-empty collection that raises a question: is the
requested capacity the full size, or the size of the part that grows?

``Capacity`` answers it by carrying both views at once:

- ``total``: size of the whole structure, including the guaranteed part.
- ``dynamic``: size of the growable part alone.

``base`` is the number of elements the structure guarantees outside its
growable part. ``NonEmptyList`` guarantees one element, so its base is 1:

    ============================  =====  =======
    Construction                  total  dynamic
    ============================  =====  =======
    ``NonEmptyList(x)``           1      0
    ``with_capacity(x, 10)``      10     9
    ``NonEmptyList(x)`` + push    2      1
    ============================  =====  =======

Plain integers converted with ``Capacity.coerce`` are always read as the
*total* capacity.
"""

import operator
from dataclasses import dataclass
from typing import Union

from .config import DEFAULT_SETTINGS

MAX_UINT = DEFAULT_SETTINGS.max_uint


@dataclass(frozen=True, order=True)
class Capacity:
    """
    Pre-allocation hint seen as total and dynamic size.

    Build instances with ``from_total``, ``from_dynamic``, ``default`` or
    ``coerce``; those never fail. Calling ``Capacity(...)`` directly with
    fields that break ``total == dynamic + base`` raises ``ValueError``.
    """
    total: int                       # Whole structure, guaranteed part included
    dynamic: int                     # Growable part only
    base: int = 1                    # Elements guaranteed outside the growable part

    def __post_init__(self) -> None:
        if self.base < 0 or self.dynamic < 0 or self.total != self.dynamic + self.base:
            raise ValueError(
                f"inconsistent capacity: total={self.total}, dynamic={self.dynamic}, base={self.base}; "
                "use Capacity.from_total or Capacity.from_dynamic"
            )

    @classmethod
    def from_total(cls, capacity: int, base: int = 1) -> "Capacity":
        """
        Create a capacity from the total size.

        Values below ``base`` are raised to ``base``.
        """
        total = max(operator.index(capacity), base)
        return cls(total=total, dynamic=total - base, base=base)

    @classmethod
    def from_dynamic(cls, capacity: int, base: int = 1) -> "Capacity":
        """
        Create a capacity from the size of the growable part.

        Values that would overflow ``MAX_UINT`` once ``base`` is added are
        reduced to ``MAX_UINT - base``; negative values become 0.
        """
        dynamic = max(0, min(operator.index(capacity), MAX_UINT - base))
        return cls(total=dynamic + base, dynamic=dynamic, base=base)

    @classmethod
    def default(cls, base: int = 1) -> "Capacity":
        """Smallest valid capacity: the guaranteed part and nothing more."""
        return cls.from_total(base, base=base)

    @classmethod
    def coerce(cls, value: Union["Capacity", int], base: int = 1) -> "Capacity":
        """
        Convert ``value`` to a capacity with the given base.

        Integers are read as total capacity. A capacity with a different
        base is re-expressed through its total.
        """
        if isinstance(value, Capacity):
            if value.base == base:
                return value
            return cls.from_total(value.total, base=base)
        return cls.from_total(value, base=base)

    def __str__(self) -> str:
        return f"capacity(total: {self.total}, dynamic: {self.dynamic})"
