from enum import StrEnum


class Outcome(StrEnum):
    """Outcome of a wait."""

    FIRED = "fired"
    TIMED_OUT = "timed-out"
    CANCELLED = "cancelled"
