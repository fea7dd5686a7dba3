"""Text rendering for weather snapshots - pure functions for testability."""
import time
from collections.abc import Mapping
from typing import Any, List, Optional


TITLE = "title"
HEADING = "heading"


class TextRun:
    """A piece of report text and the emphasis style to show it in."""
    def __init__(self, text: str, style: Optional[str] = None):
        self.text = text
        self.style = style

    def __repr__(self):
        return f"TextRun({self.text!r}, {self.style!r})"

    def __eq__(self, other):
        if not isinstance(other, TextRun):
            return NotImplemented
        return self.text == other.text and self.style == other.style


def get_field(section: Any, name: str) -> Optional[Any]:
    """Value of `name` in `section`, or None if absent or `section` is not a mapping."""
    if isinstance(section, Mapping):
        return section.get(name)
    return None


def field(section: Any, name: str) -> Any:
    """
    Value of `name` in `section`, with a visible placeholder when missing.

    A partial report is more useful than none, so this never raises.

    Args:
        section: Mapping to read from (anything else counts as empty)
        name: Field name

    Returns:
        The value, or "<name> (missing)"
    """
    value = get_field(section, name)
    if value is None:
        return f"{name} (missing)"
    return value


def section(snapshot: Any, *path: str) -> Mapping:
    """Walk nested mappings along `path`; an empty dict on any miss."""
    current = snapshot
    for name in path:
        current = get_field(current, name)
        if not isinstance(current, Mapping):
            return {}
    return current


def observation_time(observation: Any, fmt: str) -> str:
    """
    Format the observation's local_epoch in the host's local time zone.

    The epoch may be a string or a number; int() handles any size.
    """
    epoch = get_field(observation, "local_epoch")
    if epoch is None:
        return "local_epoch (missing)"
    try:
        seconds = int(epoch)
        return time.strftime(fmt, time.localtime(seconds))
    except (TypeError, ValueError, OverflowError, OSError):
        return "local_epoch (invalid)"


def _percent(section: Any, name: str) -> str:
    value = get_field(section, name)
    if value is None:
        return field(section, name)
    text = str(value)
    return text if text.endswith("%") else f"{text}%"


def brief_summary(snapshot: Any) -> str:
    """One line: condition, temperature, humidity, wind and retrieval time."""
    obs = section(snapshot, "current_observation")
    return (
        f"{field(obs, 'weather')}, "
        f"Temp {field(obs, 'temp_f')}F, "
        f"Humidity {_percent(obs, 'relative_humidity')}, "
        f"Wind {field(obs, 'wind_string')} "
        f"(retrieved {observation_time(obs, '%H:%M:%S')})"
    )


def current_runs(snapshot: Any) -> List[TextRun]:
    """Title, heading and current-conditions block."""
    obs = section(snapshot, "current_observation")
    location = section(obs, "display_location")
    retrieved = observation_time(obs, "%A %H:%M:%S")
    body = (
        f"{field(obs, 'weather')}\n"
        f"Temp {field(obs, 'temp_f')}F\n"
        f"Humidity {field(obs, 'relative_humidity')}\n"
        f"Precipitation rate {field(obs, 'precip_1hr_in')} in/hr\n"
        f"Wind {field(obs, 'wind_string')}\n"
    )
    return [
        TextRun(f"{field(location, 'city')} Weather", TITLE),
        TextRun("\n\n"),
        TextRun(f"Current conditions (retrieved {retrieved})", HEADING),
        TextRun("\n"),
        TextRun(body),
    ]


def forecast_runs(snapshot: Any) -> List[TextRun]:
    """One title/text group per forecast day, in document order."""
    days = get_field(section(snapshot, "forecast", "txt_forecast"), "forecastday")
    if not isinstance(days, list):
        return [TextRun("\nforecastday (missing)\n")]

    runs = []
    for day in days:
        runs.append(TextRun("\n"))
        runs.append(TextRun(str(field(day, "title")), HEADING))
        runs.append(TextRun(f"\n{field(day, 'fcttext')}\n"))
    return runs


def report_runs(snapshot: Any) -> List[TextRun]:
    """Full report (current conditions then forecast) as styled runs."""
    return current_runs(snapshot) + forecast_runs(snapshot)


def _join(runs: List[TextRun]) -> str:
    return "".join(run.text for run in runs)


def forecast_section(snapshot: Any) -> str:
    return _join(forecast_runs(snapshot))


def full_report(snapshot: Any) -> str:
    """Plain-text full report; the same text the pane shows."""
    return _join(report_runs(snapshot))
