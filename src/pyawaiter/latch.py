import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class Latch(Generic[T]):
    """Value that can be assigned at most once, from any thread.

    The first call to `set` or `close` decides the latch. Every later attempt
    is a no-op and reports that it lost.
    """

    _lock: threading.Lock
    _decided: bool
    _value: T | None

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._decided = False
        self._value = None

    @property
    def value(self) -> T | None:
        """The assigned value, or `None` if not set."""

        with self._lock:
            return self._value

    def set(self, value: T) -> bool:
        """Assign the value if the latch is still pending."""

        with self._lock:
            if self._decided:
                return False

            self._decided = True
            self._value = value
            return True

    def close(self) -> bool:
        """Decide the latch without assigning a value."""

        with self._lock:
            if self._decided:
                return False

            self._decided = True
            return True
