"""Exceptions raised by the non-empty collections."""


class UnemptyError(Exception):
    """Base class for errors raised by this package."""


class SourceEmptyError(UnemptyError, ValueError):
    """Raised when a non-empty collection is built from an empty source."""

    def __init__(self, target: str = "collection"):
        super().__init__(f"cannot build a non-empty {target} from an empty source")
        self.target = target


class ConsumedError(UnemptyError, ValueError):
    """Raised when an instance is used after its last element was taken out."""


class CapacityOverflowError(UnemptyError, OverflowError):
    """Raised when a requested allocation is larger than the platform can address."""
