"""Tests for the pane abstraction."""
import pytest
from text_pane import FakePaneHost, FakeTextPane, PaneReadOnlyError


def test_fake_pane_write_and_clear():
    pane = FakeTextPane("*weather*")

    pane.write("Title", "title")
    pane.write("\nbody\n")

    assert pane.text == "Title\nbody\n"
    assert pane.styled("title") == ["Title"]

    pane.clear()
    assert pane.text == ""


def test_fake_pane_read_only():
    """Test that a read-only pane refuses changes."""
    pane = FakeTextPane("*weather*")
    pane.write("kept")
    pane.set_read_only(True)

    with pytest.raises(PaneReadOnlyError):
        pane.write("more")
    with pytest.raises(PaneReadOnlyError):
        pane.clear()

    assert pane.text == "kept"


def test_fake_pane_show_hide():
    pane = FakeTextPane("*weather*")
    assert pane.is_active is False

    pane.show()
    assert pane.is_active is True

    pane.hide()
    assert pane.is_active is False
    assert pane.show_count == 1


def test_host_get_or_create_reuses():
    """Test that panes are reused by name."""
    host = FakePaneHost()

    first = host.get_or_create("*weather*")
    second = host.get_or_create("*weather*")

    assert first is second
    assert host.get("*weather*") is first
    assert host.get("*other*") is None
    assert len(host.created) == 1


def test_host_destroy_forgets_pane():
    host = FakePaneHost()
    pane = host.get_or_create("*weather*")

    host.destroy(pane)

    assert pane.destroyed is True
    assert host.get("*weather*") is None
    assert host.get_or_create("*weather*") is not pane


def test_host_forgets_pane_destroyed_directly():
    host = FakePaneHost()
    pane = host.get_or_create("*weather*")

    pane.destroy()

    assert host.get("*weather*") is None
