"""Cache state for the last weather snapshot - pure functions for testability."""
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


DEFAULT_TTL_SECONDS = 1800  # 30 minutes


@dataclass(frozen=True)
class CacheState:
    """
    Last parsed snapshot and when it was fetched.

    `fetched_at` is None for a fresh state and after invalidate(); invalidate
    keeps the snapshot so there is still something to show.
    """
    snapshot: Optional[Dict[str, Any]] = None
    fetched_at: Optional[float] = None  # seconds since the epoch
    ttl: float = DEFAULT_TTL_SECONDS

    def __post_init__(self):
        if self.ttl < 0:
            raise ValueError(f"Cache TTL must not be negative, got {self.ttl}")


def needs_refresh(state: CacheState, now: float) -> bool:
    """True if there is no valid fetch time or the TTL has run out."""
    if state.fetched_at is None:
        return True
    return now >= state.fetched_at + state.ttl


def record(state: CacheState, snapshot: Dict[str, Any], now: float) -> CacheState:
    """Replace the snapshot wholesale and stamp it with `now`."""
    return replace(state, snapshot=snapshot, fetched_at=now)


def invalidate(state: CacheState) -> CacheState:
    """Force the next needs_refresh() to be true, keeping the last snapshot."""
    return replace(state, fetched_at=None)


def age(state: CacheState, now: float) -> Optional[float]:
    """Seconds since the snapshot was fetched, or None if not valid."""
    if state.fetched_at is None:
        return None
    return now - state.fetched_at
