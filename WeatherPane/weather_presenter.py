"""Weather pane lifecycle and the commands bound to it."""
import logging
from typing import Callable, Optional

from report_format import brief_summary, report_runs
from text_pane import PaneHost, TextPane
from weather_provider import WeatherProviderError
from weather_service import WeatherService

PANE_NAME = "*weather*"

ABSENT = "absent"
DISPLAYED = "displayed"
HIDDEN = "hidden"

HELP_TEXT = "g refresh, G force refresh, b brief, q dismiss, Q quit"


class WeatherPresenter:
    """
    Owns the weather pane and runs the user's commands against it.

    Commands run to completion one at a time. A failed fetch leaves
    whatever the pane showed before.
    """

    def __init__(
        self,
        service: WeatherService,
        host: PaneHost,
        notify: Callable[[str], None],
        pane_name: str = PANE_NAME
    ):
        """
        Initialize presenter.

        Args:
            service: Cached weather service
            host: Creates and keeps the display pane
            notify: Shows a transient one-line message
            pane_name: Name of the pane to reuse
        """
        self.service = service
        self.host = host
        self.notify = notify
        self.pane_name = pane_name
        self.keymap = {
            "g": self.refresh,
            "G": self.force_refresh,
            "q": self.dismiss,
            "Q": self.quit,
            "b": self.brief,
            "?": self.help,
        }

    @property
    def pane(self) -> Optional[TextPane]:
        return self.host.get(self.pane_name)

    @property
    def state(self) -> str:
        pane = self.pane
        if pane is None:
            return ABSENT
        return DISPLAYED if pane.is_active else HIDDEN

    def refresh(self) -> None:
        """Fetch if the cache is stale, then redraw the pane."""
        snapshot = self.service.get_latest()

        pane = self.host.get_or_create(self.pane_name)
        was_active = pane.is_active
        pane.set_read_only(False)
        pane.clear()
        for run in report_runs(snapshot):
            pane.write(run.text, run.style)
        pane.set_read_only(True)
        pane.set_cursor_visible(False)

        if was_active:
            logging.debug("Weather pane updated in place")
        else:
            logging.debug("Bringing weather pane into view")
            pane.show()

    def force_refresh(self) -> None:
        self.service.invalidate()
        self.refresh()

    def dismiss(self) -> None:
        """Hide the pane but keep it for the next refresh."""
        pane = self.pane
        if pane is not None:
            pane.hide()

    def quit(self) -> None:
        """Hide the pane and destroy it."""
        pane = self.pane
        if pane is not None:
            pane.hide()
            self.host.destroy(pane)

    def brief(self) -> None:
        """
        Show the one-line summary as a notification; the pane is untouched.

        If the fetch fails but an earlier snapshot is cached, its summary is
        shown along with the failure.
        """
        try:
            snapshot = self.service.get_latest()
        except WeatherProviderError as err:
            cached = self.service.snapshot
            if cached is None:
                raise
            logging.warning(f"Weather fetch failed, showing cached summary: {err}")
            self.notify(f"{brief_summary(cached)} [update failed: {err}]")
            return
        self.notify(brief_summary(snapshot))

    def help(self) -> None:
        self.notify(HELP_TEXT)

    def handle_key(self, key: str) -> bool:
        """
        Run the command bound to `key`.

        Weather failures are reported once through notify.

        Returns:
            False once the user has quit, True otherwise
        """
        command = self.keymap.get(key)
        if command is None:
            logging.debug(f"Unbound key {key!r}")
            return True

        try:
            command()
        except WeatherProviderError as err:
            logging.error(f"Weather command {command.__name__} failed: {err}")
            self.notify(f"Weather update failed: {err}")

        return command != self.quit
