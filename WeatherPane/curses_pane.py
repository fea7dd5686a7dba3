"""Terminal pane backend using curses."""
import curses
import logging
from typing import Dict, List, Optional, Tuple

from report_format import HEADING, TITLE
from text_pane import PaneHost, TextPane

TITLE_PAIR = 1
HEADING_PAIR = 2


class CursesTextPane(TextPane):
    """
    Pane drawn in its own curses window above the echo area.

    The window is created on the first show() and dropped by destroy();
    hide() only blanks it.
    """

    def __init__(self, name: str, screen, attrs: Dict[Optional[str], int]):
        super().__init__(name)
        self._screen = screen
        self._attrs = attrs
        self._window = None
        self._runs: List[Tuple[str, Optional[str]]] = []
        self._active = False
        self._cursor_visible = True

    @property
    def is_active(self) -> bool:
        return self._active

    def clear(self) -> None:
        self._check_writable()
        self._runs = []
        self._paint()

    def write(self, text: str, style: Optional[str] = None) -> None:
        self._check_writable()
        self._runs.append((text, style))
        self._paint()

    def set_cursor_visible(self, visible: bool) -> None:
        self._cursor_visible = visible
        if self._active:
            self._apply_cursor()

    def show(self) -> None:
        if self._window is None:
            height, width = self._screen.getmaxyx()
            self._window = curses.newwin(max(height - 1, 1), width, 0, 0)
            logging.debug(f"Created window for pane {self.name} ({height - 1}x{width})")
        self._active = True
        self._apply_cursor()
        self._paint()

    def hide(self) -> None:
        self._active = False
        if self._window is not None:
            self._window.erase()
            self._window.noutrefresh()
            curses.doupdate()

    def destroy(self) -> None:
        self.hide()
        self._window = None
        super().destroy()

    def _apply_cursor(self) -> None:
        try:
            curses.curs_set(1 if self._cursor_visible else 0)
        except curses.error:
            # not every terminal can change cursor visibility
            logging.debug("Terminal does not support cursor visibility changes")

    def _paint(self) -> None:
        if not self._active or self._window is None:
            return
        window = self._window
        window.erase()
        height, width = window.getmaxyx()
        y, x = 0, 0
        for text, style in self._runs:
            attr = self._attrs.get(style, curses.A_NORMAL)
            for i, line in enumerate(text.split("\n")):
                if i > 0:
                    y, x = y + 1, 0
                if y >= height:
                    break
                room = width - x - 1
                if line and room > 0:
                    window.addnstr(y, x, line, room, attr)
                    x += min(len(line), room)
        window.noutrefresh()
        curses.doupdate()


class CursesPaneHost(PaneHost):
    """Pane host for a curses screen; the bottom line is the echo area."""

    def __init__(self, screen):
        super().__init__()
        self._screen = screen
        self._attrs = self._init_styles()

    @staticmethod
    def _init_styles() -> Dict[Optional[str], int]:
        title = curses.A_BOLD | curses.A_UNDERLINE
        heading = curses.A_BOLD
        if curses.has_colors():
            curses.start_color()
            curses.init_pair(TITLE_PAIR, curses.COLOR_WHITE, curses.COLOR_BLUE)
            curses.init_pair(HEADING_PAIR, curses.COLOR_CYAN, curses.COLOR_BLACK)
            title |= curses.color_pair(TITLE_PAIR)
            heading |= curses.color_pair(HEADING_PAIR)
        return {None: curses.A_NORMAL, TITLE: title, HEADING: heading}

    def _create(self, name: str) -> TextPane:
        return CursesTextPane(name, self._screen, self._attrs)

    def notify(self, message: str) -> None:
        """Show a one-line message in the echo area."""
        logging.info(f"Notify: {message}")
        height, width = self._screen.getmaxyx()
        self._screen.move(height - 1, 0)
        self._screen.clrtoeol()
        self._screen.addnstr(height - 1, 0, message.replace("\n", " "), max(width - 1, 0))
        self._screen.noutrefresh()
        curses.doupdate()
