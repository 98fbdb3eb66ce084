"""Clocks for the Codeflix catalog."""

from datetime import datetime, timedelta, timezone

from codeflix_catalog.interfaces.clock import Clock


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """A controllable clock.

    Returns the same instant until it is moved with `set` or `advance`.
    Intended for tests and deterministic demos.
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = self._require_aware(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        """Move the clock to `instant`."""
        self._instant = self._require_aware(instant)

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward (or backward, for negative deltas) by `delta`."""
        self._instant = self._instant + delta

    @staticmethod
    def _require_aware(instant: datetime) -> datetime:
        if instant.tzinfo is None:
            raise ValueError("FixedClock requires a tz-aware datetime")
        return instant.astimezone(timezone.utc)
