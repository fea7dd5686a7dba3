"""Pane abstraction for the weather display - allows swapping real UIs with test backends."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple


class PaneReadOnlyError(Exception):
    """Raised when writing to or clearing a pane that is read-only."""
    pass


class TextPane(ABC):
    """Abstract named text pane the report is written into."""

    def __init__(self, name: str):
        self._name = name
        self._read_only = False
        self._destroyed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True if the pane is currently the view in front of the user."""
        pass

    def _check_writable(self) -> None:
        if self._read_only:
            raise PaneReadOnlyError(f"Pane {self._name} is read-only")

    def set_read_only(self, read_only: bool) -> None:
        self._read_only = read_only

    @abstractmethod
    def clear(self) -> None:
        """Remove all text."""
        pass

    @abstractmethod
    def write(self, text: str, style: Optional[str] = None) -> None:
        """
        Append text at the end of the pane.

        Args:
            text: Text to append, may contain newlines
            style: None, "title" or "heading"
        """
        pass

    @abstractmethod
    def set_cursor_visible(self, visible: bool) -> None:
        pass

    @abstractmethod
    def show(self) -> None:
        """Bring the pane into view and make it active."""
        pass

    @abstractmethod
    def hide(self) -> None:
        """Take the pane out of view; its contents are kept."""
        pass

    def destroy(self) -> None:
        """Release the pane; it must not be used afterwards."""
        self._destroyed = True


class PaneHost(ABC):
    """Creates panes by name and keeps the live ones."""

    def __init__(self):
        self._panes: Dict[str, TextPane] = {}

    @abstractmethod
    def _create(self, name: str) -> TextPane:
        pass

    def get(self, name: str) -> Optional[TextPane]:
        pane = self._panes.get(name)
        if pane is not None and pane.destroyed:
            del self._panes[name]
            return None
        return pane

    def get_or_create(self, name: str) -> TextPane:
        """Return the live pane called `name`, creating it if needed."""
        pane = self.get(name)
        if pane is None:
            pane = self._create(name)
            self._panes[name] = pane
        return pane

    def destroy(self, pane: TextPane) -> None:
        pane.destroy()
        self._panes.pop(pane.name, None)


class FakeTextPane(TextPane):
    """
    Fake pane implementation for testing - stores text in memory.

    Useful for unit tests and development without a terminal.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._runs: List[Tuple[str, Optional[str]]] = []
        self._active = False
        self.cursor_visible = True
        self.show_count = 0

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def text(self) -> str:
        return "".join(text for text, _ in self._runs)

    @property
    def runs(self) -> List[Tuple[str, Optional[str]]]:
        """Written (text, style) pairs, in order (for testing)."""
        return list(self._runs)

    def styled(self, style: str) -> List[str]:
        """Texts written with the given style (for testing)."""
        return [text for text, run_style in self._runs if run_style == style]

    def clear(self) -> None:
        self._check_writable()
        self._runs = []

    def write(self, text: str, style: Optional[str] = None) -> None:
        self._check_writable()
        self._runs.append((text, style))

    def set_cursor_visible(self, visible: bool) -> None:
        self.cursor_visible = visible

    def show(self) -> None:
        self.show_count += 1
        self._active = True

    def hide(self) -> None:
        self._active = False

    def destroy(self) -> None:
        self._active = False
        super().destroy()


class FakePaneHost(PaneHost):
    """In-memory pane host; panes can be inspected after the fact."""

    def __init__(self):
        super().__init__()
        self.created: List[FakeTextPane] = []

    def _create(self, name: str) -> TextPane:
        pane = FakeTextPane(name)
        self.created.append(pane)
        return pane
