import threading
from collections.abc import Callable
from typing import Generic, ParamSpec

from pyawaiter.logging import get_logger

logger = get_logger(__name__)

P = ParamSpec("P")


class Event(Generic[P]):
    """Multicast notification source that handlers subscribe to.

    Safe to use from multiple threads. Handlers are called synchronously on the
    thread that fires the event.
    """

    _lock: threading.Lock
    _handlers: list[Callable[P, None]]

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self._lock = threading.Lock()
        self._handlers = []

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def handlers(self) -> int:
        """Number of registered handlers."""

        with self._lock:
            return len(self._handlers)

    def subscribe(self, handler: Callable[P, None]) -> None:
        """Register a handler."""

        with self._lock:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[P, None]) -> None:
        """Remove one registration of a handler, if present."""

        with self._lock:
            try:
                self._handlers.remove(handler)
            except ValueError:
                pass

    def fire(self, *args: P.args, **kwargs: P.kwargs) -> None:
        """Call every handler registered at the time of firing."""

        with self._lock:
            handlers = list(self._handlers)

        logger.debug("Firing event %s to %d handlers.", self._name, len(handlers))

        for handler in handlers:
            handler(*args, **kwargs)
