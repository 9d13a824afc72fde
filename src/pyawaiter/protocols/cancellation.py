from abc import abstractmethod
from typing import Any, Protocol

from pyawaiter.models.types import Callback


class Registration(Protocol):
    """Handle for a callback registered on a cancellation token."""

    @abstractmethod
    def dispose(self) -> None:
        """Remove the callback. Safe to call more than once."""

        pass


class CancellationToken(Protocol):
    """Observable cancellation request."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """Whether cancellation has been requested."""

        pass

    @property
    @abstractmethod
    def reason(self) -> Any:
        """Reason given when cancellation was requested."""

        pass

    @abstractmethod
    def register(self, callback: Callback) -> Registration:
        """Call `callback` once cancellation is requested.

        If cancellation was already requested, the callback runs immediately.
        """

        pass

    @abstractmethod
    def raise_if_cancelled(self) -> None:
        """Raise if cancellation has been requested."""

        pass
