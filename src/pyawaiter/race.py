import asyncio
from collections.abc import Callable
from typing import Generic, TypeVar

from pyawaiter.latch import Latch
from pyawaiter.logging import get_logger
from pyawaiter.models.enums import Outcome
from pyawaiter.models.types import Callback, Subscriber
from pyawaiter.protocols.cancellation import CancellationToken, Registration

logger = get_logger(__name__)

H = TypeVar("H")


class Race(Generic[H]):
    """Races a notification against a timeout and a cancellation request.

    The notification, the timer and the cancellation callback may each arrive on
    a different thread. Whichever reaches the outcome latch first decides the
    result; the others become no-ops. The winner unsubscribes the handler
    before the waiting coroutine is woken up, and the handler is unsubscribed
    exactly once on every exit path where subscribing succeeded. `run` does not
    return while an unsubscribe started by another thread is still running.

    A race is single-use.
    """

    _subscribe: Subscriber[H]
    _unsubscribe: Subscriber[H]
    _handler: H
    _timeout: float | None
    _cancellation: CancellationToken
    _outcome: Latch[Outcome]
    _released: Latch[None]
    _loop: asyncio.AbstractEventLoop
    _future: asyncio.Future[Outcome]
    _unsubscribed: asyncio.Future[None]

    def __init__(
        self,
        subscribe: Subscriber[H],
        unsubscribe: Subscriber[H],
        adapt: Callable[[Callback], H],
        timeout: float | None,
        cancellation: CancellationToken,
    ) -> None:
        self._subscribe = subscribe
        self._unsubscribe = unsubscribe
        self._handler = adapt(self._on_fired)
        self._timeout = timeout
        self._cancellation = cancellation
        self._outcome = Latch[Outcome]()
        self._released = Latch[None]()
        self._loop = asyncio.get_running_loop()
        self._future = self._loop.create_future()
        self._unsubscribed = self._loop.create_future()

    def _schedule(self, callback: Callable[..., None], *args: object) -> None:
        # The loop may already be closed when a thread finishes after `run`.
        if self._loop.is_closed():
            return

        try:
            self._loop.call_soon_threadsafe(callback, *args)
        except RuntimeError:
            if not self._loop.is_closed():
                raise

    def _release(self) -> bool:
        if not self._released.set(None):
            return False

        try:
            self._unsubscribe(self._handler)
        finally:
            self._schedule(self._finish_release)

        return True

    def _finish_release(self) -> None:
        if not self._unsubscribed.done():
            self._unsubscribed.set_result(None)

    def _wake(self) -> None:
        if not self._future.done():
            self._future.set_result(self._outcome.value)

    def _resolve(self, outcome: Outcome) -> None:
        if not self._outcome.set(outcome):
            return

        try:
            self._release()
        finally:
            self._schedule(self._wake)

    def _on_fired(self) -> None:
        self._resolve(Outcome.FIRED)

    def _on_timed_out(self) -> None:
        self._resolve(Outcome.TIMED_OUT)

    def _on_cancelled(self) -> None:
        self._resolve(Outcome.CANCELLED)

    def _start_timer(self) -> asyncio.TimerHandle | None:
        if self._timeout is None:
            return None

        return self._loop.call_later(self._timeout, self._on_timed_out)

    async def run(self) -> Outcome:
        """Subscribe, wait for the first trigger and clean up."""

        self._cancellation.raise_if_cancelled()

        try:
            self._subscribe(self._handler)
        except BaseException:
            # Nothing was registered, so there is nothing to unsubscribe.
            self._outcome.close()
            self._released.close()
            raise

        logger.debug("Subscribed handler, waiting with timeout %s.", self._timeout)

        timer: asyncio.TimerHandle | None = None
        registration: Registration | None = None

        try:
            timer = self._start_timer()
            registration = self._cancellation.register(self._on_cancelled)
            outcome = await self._future
        finally:
            if registration is not None:
                registration.dispose()

            if timer is not None:
                timer.cancel()

            self._outcome.close()

            if not self._release():
                await asyncio.shield(self._unsubscribed)

        logger.debug("Wait resolved with outcome %s.", outcome)

        return outcome
