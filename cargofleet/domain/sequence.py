"""
Container serial number sequence.

A single process-wide counter numbers every container regardless of its
variant. Containers take the next value at construction time; values are
never reused and the counter is never reset.
"""

import itertools
import threading

from cargofleet.config import get_id_prefix


class ContainerSequence:
    """
    Monotonic counter handing out container serial numbers.

    The id prefix is fixed when the sequence is created; it defaults to
    the CARGOFLEET_ID_PREFIX setting at that time.

    Usage:
        sequence = ContainerSequence()
        sequence.next_value()  # 1
        sequence.next_id("L")  # KON-L-2
    """

    def __init__(self, start: int = 1, prefix: str | None = None):
        if start < 1:
            raise ValueError("Sequence must start at 1 or higher")
        self.prefix = prefix.upper() if prefix else get_id_prefix()
        self._counter = itertools.count(start)
        self._lock = threading.Lock()
        self._last: int | None = None

    def next_value(self) -> int:
        """Reserve and return the next serial number."""
        with self._lock:
            self._last = next(self._counter)
            return self._last

    def next_id(self, type_code: str) -> str:
        """Reserve the next serial number and format it as a container id."""
        return f"{self.prefix}-{type_code}-{self.next_value()}"

    @property
    def last_value(self) -> int | None:
        """Most recently issued value, or None if nothing was issued yet."""
        return self._last


# Shared by all containers unless a sequence is injected at construction
DEFAULT_SEQUENCE = ContainerSequence()
