from collections.abc import Callable
from typing import Any, TypeVar

from pyawaiter.cancellation import Token
from pyawaiter.errors import OperationCancelledError
from pyawaiter.models.enums import Outcome
from pyawaiter.models.types import Callback, EventHandler, Subscriber, Timeout
from pyawaiter.protocols.cancellation import CancellationToken
from pyawaiter.race import Race
from pyawaiter.time import INFINITE, to_seconds

H = TypeVar("H")


def _adapt_callback(trigger: Callback) -> Callback:
    def handler() -> None:
        trigger()

    return handler


def _adapt_event_handler(trigger: Callback) -> EventHandler:
    def handler(sender: Any, args: Any) -> None:
        trigger()

    return handler


async def _wait(
    subscribe: Subscriber[H],
    unsubscribe: Subscriber[H],
    adapt: Callable[[Callback], H],
    timeout: Timeout,
    cancellation: CancellationToken | None,
) -> bool:
    seconds = to_seconds(timeout)
    token = cancellation if cancellation is not None else Token.none()

    race = Race(subscribe, unsubscribe, adapt, seconds, token)
    outcome = await race.run()

    match outcome:
        case Outcome.FIRED:
            return True
        case Outcome.TIMED_OUT:
            return False
        case _:
            raise OperationCancelledError(token, token.reason)


async def wait_for_callback(
    subscribe: Subscriber[Callback],
    unsubscribe: Subscriber[Callback],
    timeout: Timeout = INFINITE,
    *,
    cancellation: CancellationToken | None = None,
) -> bool:
    """Wait for a callback that takes no arguments.

    Returns `True` if the callback was invoked and `False` if the timeout
    elapsed first. Omit `timeout` to wait without one. Raises
    `OperationCancelledError` if `cancellation` is requested before either.
    """

    return await _wait(
        subscribe, unsubscribe, _adapt_callback, timeout, cancellation
    )


async def wait_for_event(
    subscribe: Subscriber[EventHandler],
    unsubscribe: Subscriber[EventHandler],
    timeout: Timeout = INFINITE,
    *,
    cancellation: CancellationToken | None = None,
) -> bool:
    """Wait for an event whose handlers take `(sender, args)`.

    The sender and arguments are ignored. Otherwise behaves like
    `wait_for_callback`.
    """

    return await _wait(
        subscribe, unsubscribe, _adapt_event_handler, timeout, cancellation
    )
