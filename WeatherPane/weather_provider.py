"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""
    
    @abstractmethod
    def fetch(self) -> bytes:
        """
        Fetch the raw weather response.
        
        Returns:
            bytes: Response content, possibly preceded by protocol header text
            
        Raises:
            ConfigError: If the provider is not configured well enough to fetch
            NetworkError: If the transport fails
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class ConfigError(WeatherProviderError):
    """Provider configuration is incomplete (e.g. no API key)."""
    pass


class NetworkError(WeatherProviderError):
    """Transport failure: connection refused, timeout, DNS, bad HTTP status."""
    pass


class ParseError(WeatherProviderError):
    """Response could not be decoded into a weather snapshot."""
    pass


class ApiError(WeatherProviderError):
    """The API answered, but with an error object instead of weather."""
    pass
