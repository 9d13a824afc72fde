from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

Callback = Callable[[], None]
EventHandler = Callable[[Any, Any], None]
Timeout = float | timedelta | None

H = TypeVar("H")

Subscriber = Callable[[H], None]
