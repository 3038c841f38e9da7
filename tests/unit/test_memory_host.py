"""Tests for the in-memory editor host."""

import pytest

from fontpoint.core.events import EventKind
from fontpoint.core.position import Position


def test_current_position(host, buffer):
    """Test the position snapshot reflects the selected window."""
    window = host.selected_window
    host.set_point(4)
    assert host.current_position() == Position(4, buffer, window, host.frame)


def test_set_point_is_clamped(host, buffer):
    """Test the cursor stays inside the buffer."""
    host.set_point(100)
    assert host.selected_window.point == len(buffer.text)
    host.set_point(-3)
    assert host.selected_window.point == 0


def test_font_runs_and_default_face(host, buffer, mono_face, sans_face):
    """Test explicit runs win over the frame's default face."""
    buffer.set_font(6, 11, sans_face)
    assert host.font_at(0) is mono_face
    assert host.font_at(6) is sans_face
    assert host.font_at(10, buffer=buffer) is sans_face


def test_font_at_end_of_buffer_is_none(host, buffer):
    """Test nothing is resolved past the last character."""
    assert host.font_at(len(buffer.text)) is None
    assert host.font_at(-1) is None


def test_no_default_face_resolves_none():
    """Test characters outside any run have no font without a default face."""
    from fontpoint.host.memory import MemoryHost

    host = MemoryHost()
    buffer = host.create_buffer("plain", "abc")
    host.create_window(buffer)
    assert host.font_at(0) is None


def test_set_font_rejects_bad_range(buffer, sans_face):
    """Test runs must lie inside the buffer."""
    with pytest.raises(ValueError):
        buffer.set_font(5, 50, sans_face)


def test_minibuffer(host):
    """Test selecting a minibuffer window is reported."""
    assert not host.in_minibuffer()
    prompt = host.create_buffer(" *Minibuf-1*", "M-x ", minibuffer=True)
    host.select_window(host.create_window(prompt))
    assert host.in_minibuffer()


def test_run_command_notifies(host):
    """Test commands publish ACTION_COMPLETED after running."""
    events = []
    host.events.subscribe(EventKind.ACTION_COMPLETED, events.append)
    assert host.run_command(lambda: "done") == "done"
    assert len(events) == 1


def test_insert_shifts_decorations_runs_and_point(host, buffer, sans_face):
    """Test insertion moves everything after it and notifies."""
    buffer.set_font(6, 11, sans_face)
    decoration = host.create_decoration(buffer, 6, 7)
    host.set_point(8)
    modified = []
    host.events.subscribe(EventKind.BUFFER_MODIFIED, modified.append, buffer=buffer)

    host.insert(buffer, 0, ">> ")

    assert buffer.text == ">> hello world"
    assert (decoration.start, decoration.end) == (9, 10)
    assert host.font_at(9) is sans_face
    assert host.selected_window.point == 11
    assert [event.buffer for event in modified] == [buffer]


def test_insert_at_decoration_end_does_not_grow_it(host, buffer):
    """Test text inserted right after a decoration stays undecorated."""
    decoration = host.create_decoration(buffer, 0, 5)
    host.insert(buffer, 5, "!!")
    assert (decoration.start, decoration.end) == (0, 5)


def test_delete_collapses_decorations(host, buffer):
    """Test deleted ranges drop the decorations inside them."""
    inside = host.create_decoration(buffer, 2, 3)
    after = host.create_decoration(buffer, 8, 9)
    host.delete(buffer, 1, 4)

    assert buffer.text == "ho world"
    assert inside not in host.decorations(buffer)
    assert (after.start, after.end) == (5, 6)


def test_decorations_listing_and_removal(host, buffer):
    """Test decorations are found by overlap and removed idempotently."""
    first = host.create_decoration(buffer, 0, 1)
    second = host.create_decoration(buffer, 4, 6)
    host.tag_decoration(second, "mine")
    host.set_decoration_style(second, {"foreground": "red"})

    assert host.list_decorations_in(buffer, 0, 5) == [first, second]
    assert host.list_decorations_in(buffer, 6, 11) == []
    assert host.decoration_tags(second) == frozenset({"mine"})
    assert second.style == {"foreground": "red"}

    host.remove_decoration(first)
    host.remove_decoration(first)
    assert host.decorations(buffer) == [second]


def test_status_line_render(host):
    """Test rendering joins status segments."""
    host.set_status_segment("a", "one")
    host.set_status_segment("b", "two")
    host.request_render()
    assert host.status_line == "one two"
    assert host.render_count == 1

    host.remove_status_segment("a")
    host.remove_status_segment("missing")
    host.request_render()
    assert host.status_line == "two"
