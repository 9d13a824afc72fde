import itertools
import threading
from types import TracebackType
from typing import Any

from pyawaiter.errors import OperationCancelledError
from pyawaiter.logging import get_logger
from pyawaiter.models.types import Callback

logger = get_logger(__name__)


class Registration:
    """Callback registered on a cancellation source."""

    def __init__(self, source: "CancellationSource | None", key: int) -> None:
        self._source = source
        self._key = key

    def dispose(self) -> None:
        """Remove the callback from the source. Safe to call more than once."""

        if self._source is not None:
            self._source._unregister(self._key)

    def __enter__(self) -> "Registration":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.dispose()


class Token:
    """Read-only view of a cancellation source."""

    def __init__(self, source: "CancellationSource | None") -> None:
        self._source = source

    @classmethod
    def none(cls) -> "Token":
        """Return a token that is never cancelled."""

        return _NONE

    @property
    def cancelled(self) -> bool:
        return self._source is not None and self._source.cancelled

    @property
    def reason(self) -> Any:
        return None if self._source is None else self._source.reason

    def register(self, callback: Callback) -> Registration:
        """Call `callback` once cancellation is requested."""

        if self._source is None:
            return Registration(None, 0)

        return self._source._register(callback)

    def raise_if_cancelled(self) -> None:
        """Raise `OperationCancelledError` if cancellation was requested."""

        if self.cancelled:
            raise OperationCancelledError(self, self.reason)


_NONE = Token(None)


class CancellationSource:
    """Requests cancellation and notifies registered callbacks, from any thread."""

    _lock: threading.Lock
    _callbacks: dict[int, Callback]
    _cancelled: bool
    _reason: Any

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._callbacks = {}
        self._keys = itertools.count(1)
        self._cancelled = False
        self._reason = None
        self._token = Token(self)

    @property
    def token(self) -> Token:
        """Token observing this source."""
        return self._token

    @property
    def cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    @property
    def reason(self) -> Any:
        with self._lock:
            return self._reason

    def _register(self, callback: Callback) -> Registration:
        with self._lock:
            if not self._cancelled:
                key = next(self._keys)
                self._callbacks[key] = callback
                return Registration(self, key)

        callback()
        return Registration(None, 0)

    def _unregister(self, key: int) -> None:
        with self._lock:
            self._callbacks.pop(key, None)

    def cancel(self, reason: Any = None) -> None:
        """Request cancellation. Only the first request has any effect.

        Every registered callback runs, even if some of them fail. Failures are
        raised together afterwards.
        """

        with self._lock:
            if self._cancelled:
                return

            self._cancelled = True
            self._reason = reason
            callbacks = list(self._callbacks.values())
            self._callbacks.clear()

        logger.debug("Cancellation requested, notifying %d callbacks.", len(callbacks))

        errors = []

        for callback in callbacks:
            try:
                callback()
            except Exception as ex:
                errors.append(ex)

        if errors:
            raise ExceptionGroup("Cancellation callbacks failed.", errors)
