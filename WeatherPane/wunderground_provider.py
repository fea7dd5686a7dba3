"""Weather Underground conditions/forecast API provider implementation."""
import logging
import requests
from weather_provider import WeatherProviderBase, ConfigError, NetworkError


DEFAULT_API_BASE = "http://api.wunderground.com/api"


class WundergroundProvider(WeatherProviderBase):
    """
    Weather provider using the Weather Underground JSON API.

    One request returns both the current observation and the text forecast:
    {base}/{key}/conditions/forecast/q/{lat},{lon}.json
    """

    def __init__(
        self,
        api_key: str,
        lat: float,
        lon: float,
        base_url: str = DEFAULT_API_BASE,
        timeout: int = 10
    ):
        """
        Initialize Weather Underground provider.

        Args:
            api_key: Weather Underground API key
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)
            base_url: API root, without the key
            timeout: HTTP request timeout in seconds
        """
        self.api_key = api_key
        self.lat = lat
        self.lon = lon
        self.base_url = base_url
        self.timeout = timeout

    def build_url(self, api_key: str) -> str:
        """Request URL for the given key and the stored coordinates."""
        base = self.base_url.rstrip("/")
        return f"{base}/{api_key}/conditions/forecast/q/{self.lat:f},{self.lon:f}.json"

    def fetch(self) -> bytes:
        """
        Fetch conditions and forecast from Weather Underground.

        Returns:
            bytes: Raw response content

        Raises:
            ConfigError: If no API key is configured (raised before any request)
            NetworkError: If the request fails or returns a non-2xx status
        """
        if not self.api_key:
            logging.error("No weather API key configured, not fetching")
            raise ConfigError("missing API key")

        url = self.build_url(self.api_key)
        try:
            logging.info(f"Making weather API request for {self.lat:f},{self.lon:f}")
            logging.debug(f"Request URL: {self.build_url('<key>')}")

            response = requests.get(url, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")
            logging.debug(f"Response headers: {dict(response.headers)}")
        except requests.exceptions.RequestException as e:
            # requests puts the URL, key included, into its messages
            message = str(e).replace(self.api_key, "<key>")
            logging.error(f"Network error during API request: {message}")
            raise NetworkError(f"Network error: {message}") from e

        if not response.ok:
            logging.error(f"API request failed with status {response.status_code}")
            self._handle_error_response(response)

        logging.debug(f"Received {len(response.content)} bytes")
        return response.content

    def _handle_error_response(self, response: requests.Response) -> None:
        """Raise a NetworkError describing a non-2xx response."""
        body = response.text.replace(self.api_key, "<key>")
        logging.error(f"Error response body: {body[:500]}")
        raise NetworkError(f"HTTP {response.status_code}: {body[:200]}")


def fetch(api_base: str, api_key: str, latitude: float, longitude: float, timeout: int = 10) -> bytes:
    """One-shot fetch without keeping a provider around."""
    provider = WundergroundProvider(
        api_key=api_key,
        lat=latitude,
        lon=longitude,
        base_url=api_base,
        timeout=timeout,
    )
    return provider.fetch()
