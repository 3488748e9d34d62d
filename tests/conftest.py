"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire
import pytest

from waypoint.domain.model import InviteCacheEntry

# Keep Logfire local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Settable clock for time-dependent tests."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


def make_entry(
    code: str = "cached",
    expires_at: datetime | None = None,
    max_uses: int | None = None,
    uses: int = 0,
) -> InviteCacheEntry:
    """Helper function to build cache entries for tests."""
    return InviteCacheEntry(
        url=f"https://discord.gg/{code}",
        code=code,
        expires_at=expires_at or NOW + timedelta(hours=1),
        max_uses=max_uses,
        uses=uses,
    )


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at NOW."""
    return FrozenClock()
