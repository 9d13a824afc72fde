import math
from datetime import timedelta
from typing import Final

from pyawaiter.errors import InvalidTimeoutError
from pyawaiter.models.types import Timeout

INFINITE: Final = None


def to_seconds(timeout: Timeout) -> float | None:
    """Convert a timeout to seconds, with `None` meaning no timeout."""

    if timeout is None:
        return None

    seconds = (
        timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
    )

    if math.isnan(seconds) or seconds < 0:
        raise InvalidTimeoutError(timeout)

    if math.isinf(seconds):
        return None

    return seconds
