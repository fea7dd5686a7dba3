"""Weather report pane for the terminal."""
import argparse
import curses
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from curses_pane import CursesPaneHost
from pil_pane import PILPaneHost
from report_format import brief_summary
from weather_cache import DEFAULT_TTL_SECONDS
from weather_presenter import HELP_TEXT, WeatherPresenter
from weather_provider import WeatherProviderError
from weather_service import WeatherService
from wunderground_provider import DEFAULT_API_BASE, WundergroundProvider

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_LOG_FILE = os.path.join(BASE_DIR, "weatherpane.log")


@dataclass
class WeatherConfig:
    api_key: str
    lat: float
    lon: float
    api_base: str
    cache_ttl: float


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Terminal weather report")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE)
    parser.add_argument("--api-base", default=None, help="API root (default: $WEATHER_API_BASE or Weather Underground)")
    parser.add_argument("--cache-ttl", type=float, default=None, help="Seconds before cached weather is refetched")
    parser.add_argument("--timeout", type=int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--brief", action="store_true", help="Print a one-line summary and exit")
    parser.add_argument("--png", metavar="PATH", help="Render the full report to a PNG and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: str, verbose: bool, console: bool = True) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.FileHandler(log_file)]
    if console:
        handlers.insert(0, logging.StreamHandler(sys.stdout))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def load_config(args: argparse.Namespace) -> WeatherConfig:
    load_dotenv()
    # A missing key is reported by the provider on the first fetch.
    api_key = os.getenv("WEATHER_API_KEY", "")
    lat = os.getenv("WEATHER_LAT")
    lon = os.getenv("WEATHER_LON")
    api_base = args.api_base or os.getenv("WEATHER_API_BASE", DEFAULT_API_BASE)

    if not lat or not lon:
        raise SystemExit("Missing WEATHER_LAT/WEATHER_LON in environment")

    try:
        lat_val = float(lat)
        lon_val = float(lon)
    except ValueError as exc:
        raise SystemExit(f"Invalid coordinates: {exc}") from exc

    if args.cache_ttl is not None:
        cache_ttl = args.cache_ttl
    else:
        try:
            cache_ttl = float(os.getenv("WEATHER_CACHE_TTL", DEFAULT_TTL_SECONDS))
        except ValueError as exc:
            raise SystemExit(f"Invalid WEATHER_CACHE_TTL: {exc}") from exc
    if cache_ttl < 0:
        raise SystemExit(f"Cache TTL must not be negative: {cache_ttl}")

    logging.info("Configuration loaded: lat=%s lon=%s api_base=%s cache_ttl=%ss", lat_val, lon_val, api_base, cache_ttl)
    return WeatherConfig(api_key=api_key, lat=lat_val, lon=lon_val, api_base=api_base, cache_ttl=cache_ttl)


def build_weather_service(config: WeatherConfig, args: argparse.Namespace) -> WeatherService:
    provider = WundergroundProvider(
        api_key=config.api_key,
        lat=config.lat,
        lon=config.lon,
        base_url=config.api_base,
        timeout=args.timeout,
    )
    service = WeatherService(provider=provider, cache_ttl_seconds=config.cache_ttl)
    logging.info("Weather service ready (cache ttl=%ss)", config.cache_ttl)
    return service


def run_brief(service: WeatherService) -> int:
    try:
        snapshot = service.get_latest()
    except WeatherProviderError as err:
        logging.error("Weather fetch failed: %s", err)
        return 1
    print(brief_summary(snapshot))
    return 0


def run_png(service: WeatherService, path: str) -> int:
    presenter = WeatherPresenter(service, PILPaneHost(path), notify=logging.info)
    try:
        presenter.refresh()
    except WeatherProviderError as err:
        logging.error("Weather fetch failed: %s", err)
        return 1
    return 0


def run_interactive(screen, service: WeatherService) -> None:
    host = CursesPaneHost(screen)
    presenter = WeatherPresenter(service, host, notify=host.notify)
    host.notify(HELP_TEXT)
    presenter.handle_key("g")
    while True:
        key = screen.getkey()
        if key == "KEY_RESIZE":
            continue
        if not presenter.handle_key(key):
            logging.info("Weather pane closed")
            break


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    interactive = not (args.brief or args.png)
    setup_logging(args.log_file, args.verbose, console=not interactive)
    config = load_config(args)
    service = build_weather_service(config, args)

    if args.brief:
        return run_brief(service)
    if args.png:
        return run_png(service, args.png)

    try:
        curses.wrapper(run_interactive, service)
    except KeyboardInterrupt:
        logging.info("Stopping weather display")
    return 0


if __name__ == "__main__":
    sys.exit(main())
