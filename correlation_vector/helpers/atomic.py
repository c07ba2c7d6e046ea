"""Atomic integer used for the shared extension counter."""

import threading


class AtomicInteger:
    """
    Integer cell supporting compare-and-set.

    Reads are plain attribute reads. ``compare_and_set`` is the only write and
    is atomic with respect to other writers; callers build retry loops on it.
    """

    def __init__(self, value: int = 0):
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> int:
        return self._value

    def compare_and_set(self, expected: int, new: int) -> bool:
        """
        Set the value to ``new`` if it currently equals ``expected``.

        Returns:
            True if the value was replaced, False if another writer got there first.
        """
        with self._lock:
            if self._value != expected:
                return False
            self._value = new
            return True

    def __repr__(self) -> str:
        return f"AtomicInteger({self._value})"
