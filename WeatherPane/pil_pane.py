"""PIL-based pane backend for rendering the report to PNG images."""
import logging
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from report_format import HEADING, TITLE
from text_pane import PaneHost, TextPane

BACKGROUND = (0, 0, 0)
STYLE_COLORS = {
    None: (220, 220, 220),
    TITLE: (255, 255, 255),
    HEADING: (0, 200, 255),
}
TITLE_BANNER = (0, 70, 160)


class PILTextPane(TextPane):
    """
    Pane that renders its text to an image.

    Useful for previews and for running without a terminal; show() saves
    the rendered image to `path`.
    """

    def __init__(self, name: str, path: str, width: int = 480, margin: int = 4):
        """
        Initialize PIL pane.

        Args:
            name: Pane name
            path: Where show() writes the PNG
            width: Image width in pixels
            margin: Space around the text in pixels
        """
        super().__init__(name)
        self.path = path
        self._width = width
        self._margin = margin
        self._font = ImageFont.load_default()
        self._runs: List[Tuple[str, Optional[str]]] = []
        self.saved_count = 0

    @property
    def is_active(self) -> bool:
        # A saved image is never updated in place; every show() re-renders.
        return False

    def clear(self) -> None:
        self._check_writable()
        self._runs = []

    def write(self, text: str, style: Optional[str] = None) -> None:
        self._check_writable()
        self._runs.append((text, style))

    def set_cursor_visible(self, visible: bool) -> None:
        # Images have no cursor.
        pass

    def _line_height(self) -> int:
        left, top, right, bottom = self._font.getbbox("Ag")
        return bottom - top + 4

    def render(self) -> Image.Image:
        """Draw the current runs onto a new image."""
        line_height = self._line_height()
        line_count = 1 + sum(text.count("\n") for text, _ in self._runs)
        height = line_count * line_height + 2 * self._margin
        image = Image.new("RGB", (self._width, height), BACKGROUND)
        draw = ImageDraw.Draw(image)

        x, y = self._margin, self._margin
        for text, style in self._runs:
            for i, line in enumerate(text.split("\n")):
                if i > 0:
                    x, y = self._margin, y + line_height
                if not line:
                    continue
                line_width = draw.textlength(line, font=self._font)
                if style == TITLE:
                    draw.rectangle([x, y, x + line_width, y + line_height - 1], fill=TITLE_BANNER)
                draw.text((x, y), line, fill=STYLE_COLORS.get(style, STYLE_COLORS[None]), font=self._font)
                x += line_width
        return image

    def show(self) -> None:
        image = self.render()
        image.save(self.path)
        logging.info(f"Saved weather report image to {self.path} ({image.width}x{image.height})")
        self.saved_count += 1

    def hide(self) -> None:
        pass


class PILPaneHost(PaneHost):
    """Creates image panes that save to a fixed path."""

    def __init__(self, path: str, width: int = 480):
        super().__init__()
        self.path = path
        self.width = width

    def _create(self, name: str) -> TextPane:
        return PILTextPane(name, self.path, width=self.width)
