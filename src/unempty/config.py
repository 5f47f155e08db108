import struct
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    pointer_size: int = struct.calcsize("P")
    max_alloc_bytes: int = sys.maxsize

    @property
    def max_uint(self) -> int:
        """Largest value of an unsigned machine word."""
        return 2 ** (8 * self.pointer_size) - 1


DEFAULT_SETTINGS = Settings()
