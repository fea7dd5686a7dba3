"""Weather service with caching."""
import logging
import time
from typing import Any, Callable, Dict, Optional
from weather_provider import WeatherProviderBase
from weather_cache import CacheState, DEFAULT_TTL_SECONDS, age, invalidate, needs_refresh, record
from weather_parser import check_api_error, parse


class WeatherService:
    """
    Service that wraps a weather provider with caching.

    Prevents hammering the API by caching the parsed snapshot and only
    fetching new data when the cache is stale (default: 30 minutes).
    Failures are never retried; they propagate to the caller and leave
    the cache as it was.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        cache_ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            cache_ttl_seconds: How long to cache results before fetching new data
            clock: Source of the current time in seconds (for tests)
        """
        self.provider = provider
        self.clock = clock
        self._state = CacheState(ttl=cache_ttl_seconds)

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def snapshot(self) -> Optional[Dict[str, Any]]:
        """Last good snapshot, even if stale or invalidated."""
        return self._state.snapshot

    def get_latest(self) -> Dict[str, Any]:
        """
        Get the latest weather snapshot, using cache if still fresh.

        Returns:
            dict: Latest snapshot (may be cached)

        Raises:
            WeatherProviderError: If the fetch or parse fails; the cache is untouched
        """
        now = self.clock()

        if not needs_refresh(self._state, now):
            logging.debug(f"Using cached weather data (age: {age(self._state, now):.1f}s, TTL: {self._state.ttl}s)")
            return self._state.snapshot

        if self._state.fetched_at is None:
            logging.info("No valid cached weather, fetching new data")
        else:
            logging.info(f"Cache expired (age: {age(self._state, now):.1f}s >= TTL: {self._state.ttl}s), fetching new data")

        raw = self.provider.fetch()
        snapshot = parse(raw)
        check_api_error(snapshot)

        self._state = record(self._state, snapshot, now)
        logging.info("Weather fetch successful")
        return snapshot

    def invalidate(self) -> None:
        """Make the next get_latest() fetch regardless of age."""
        logging.info("Weather cache invalidated")
        self._state = invalidate(self._state)
