"""
In-memory editor host.

A small editor model implementing the EditorHost contract: buffers of text
with explicit font runs, windows with a cursor, a frame with a default
face, a status line and character decorations. Used by the command-line
driver and the tests.

Offsets are 0-based; the end-of-buffer offset equals len(buffer.text).
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont

from fontpoint.core.events import EventBus, EventKind
from fontpoint.core.font_io import load_font
from fontpoint.core.metrics import DEFAULT_DPI, FontMetrics, read_font_metrics
from fontpoint.core.position import Position
from fontpoint.utils.logging import logger


class FontFace:
    """A font file opened at a nominal size; the host's font handle."""

    def __init__(
        self,
        font: TTFont,
        size: float,
        dpi: int = DEFAULT_DPI,
        *,
        name: str | None = None,
    ) -> None:
        self.font = font
        self.size = size
        self.dpi = dpi
        self.name = name
        self._metrics: FontMetrics | None = None

    @classmethod
    def from_path(cls, path: Path, size: float, dpi: int = DEFAULT_DPI) -> "FontFace":
        """Load a face from a font file."""
        return cls(load_font(path), size, dpi, name=path.stem)

    @property
    def metrics(self) -> FontMetrics:
        if self._metrics is None:
            self._metrics = read_font_metrics(
                self.font, self.size, self.dpi, family=self.name
            )
        return self._metrics

    def __repr__(self) -> str:
        return f"FontFace({self.metrics.family!r}, {self.size:g})"


@dataclass(eq=False)
class FontRun:
    """Characters [start, end) drawn with face."""

    start: int
    end: int
    face: FontFace


@dataclass(eq=False)
class Decoration:
    """Style applied to characters [start, end) of a buffer."""

    buffer: "Buffer"
    start: int
    end: int
    style: dict[str, str] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)


class Buffer:
    """Text plus the font runs it is displayed with."""

    def __init__(self, name: str, text: str = "", *, minibuffer: bool = False) -> None:
        self.name = name
        self.text = text
        self.minibuffer = minibuffer
        self.runs: list[FontRun] = []

    def set_font(self, start: int, end: int, face: FontFace) -> None:
        """Display [start, end) with face. Later runs win where they overlap."""
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Range {start}-{end} outside buffer {self.name!r}")
        if start < end:
            self.runs.append(FontRun(start, end, face))

    def face_at(self, offset: int) -> FontFace | None:
        for run in reversed(self.runs):
            if run.start <= offset < run.end:
                return run.face
        return None

    def __repr__(self) -> str:
        return f"Buffer({self.name!r})"


class Frame:
    """Top-level container of windows, with the fallback face."""

    def __init__(self, name: str, default_face: FontFace | None = None) -> None:
        self.name = name
        self.default_face = default_face
        self.windows: list["Window"] = []

    def __repr__(self) -> str:
        return f"Frame({self.name!r})"


class Window:
    """A view on a buffer with its own cursor."""

    def __init__(self, buffer: Buffer, frame: Frame, point: int = 0) -> None:
        self.buffer = buffer
        self.frame = frame
        self.point = point

    def __repr__(self) -> str:
        return f"Window({self.buffer.name!r}, point={self.point})"


def _shift_on_insert(pos: int, offset: int, length: int, *, is_end: bool) -> int:
    if pos > offset or (pos == offset and not is_end):
        return pos + length
    return pos


def _shift_on_delete(pos: int, start: int, end: int) -> int:
    if pos <= start:
        return pos
    if pos < end:
        return start
    return pos - (end - start)


class MemoryHost:
    """EditorHost implementation holding everything in memory."""

    def __init__(self, default_face: FontFace | None = None) -> None:
        self.events = EventBus()
        self.frame = Frame("F1", default_face)
        self.buffers: list[Buffer] = []
        self.selected_window: Window | None = None
        self.status_segments: dict[str, str] = {}
        self.status_line = ""
        self.render_count = 0
        self._decorations: list[Decoration] = []

    # Buffers, windows, cursor

    def create_buffer(self, name: str, text: str = "", *, minibuffer: bool = False) -> Buffer:
        buffer = Buffer(name, text, minibuffer=minibuffer)
        self.buffers.append(buffer)
        return buffer

    def create_window(self, buffer: Buffer, frame: Frame | None = None) -> Window:
        """Show buffer in a new window; the first window is selected."""
        frame = frame or self.frame
        window = Window(buffer, frame)
        frame.windows.append(window)
        if self.selected_window is None:
            self.selected_window = window
        return window

    def select_window(self, window: Window) -> None:
        self.selected_window = window

    def set_point(self, offset: int, window: Window | None = None) -> None:
        """Move the cursor, clamped to the buffer."""
        window = window or self._window()
        window.point = max(0, min(offset, len(window.buffer.text)))

    def run_command(self, command: Callable[..., Any], *args: Any) -> Any:
        """Run a user action, then notify ACTION_COMPLETED."""
        result = command(*args)
        self.events.publish(EventKind.ACTION_COMPLETED)
        return result

    def _window(self) -> Window:
        if self.selected_window is None:
            raise RuntimeError("No window is selected")
        return self.selected_window

    # Editing

    def insert(self, buffer: Buffer, offset: int, text: str) -> None:
        """Insert text, shift positions after it and notify BUFFER_MODIFIED."""
        if not 0 <= offset <= len(buffer.text):
            raise ValueError(f"Offset {offset} outside buffer {buffer.name!r}")
        length = len(text)
        buffer.text = buffer.text[:offset] + text + buffer.text[offset:]

        for item in [*buffer.runs, *self.decorations(buffer)]:
            item.start = _shift_on_insert(item.start, offset, length, is_end=False)
            item.end = _shift_on_insert(item.end, offset, length, is_end=True)
        for window in self._windows_showing(buffer):
            if window.point >= offset:
                window.point += length

        self.events.publish(EventKind.BUFFER_MODIFIED, buffer)

    def delete(self, buffer: Buffer, start: int, end: int) -> None:
        """Delete [start, end), collapse positions inside it and notify."""
        if not 0 <= start <= end <= len(buffer.text):
            raise ValueError(f"Range {start}-{end} outside buffer {buffer.name!r}")
        buffer.text = buffer.text[:start] + buffer.text[end:]

        for item in [*buffer.runs, *self.decorations(buffer)]:
            item.start = _shift_on_delete(item.start, start, end)
            item.end = _shift_on_delete(item.end, start, end)
        buffer.runs = [run for run in buffer.runs if run.start < run.end]
        self._decorations = [
            d for d in self._decorations if d.buffer is not buffer or d.start < d.end
        ]
        for window in self._windows_showing(buffer):
            window.point = _shift_on_delete(window.point, start, end)

        self.events.publish(EventKind.BUFFER_MODIFIED, buffer)

    def _windows_showing(self, buffer: Buffer) -> list[Window]:
        return [w for w in self.frame.windows if w.buffer is buffer]

    # EditorHost: position and fonts

    def current_position(self) -> Position:
        window = self._window()
        return Position(window.point, window.buffer, window, window.frame)

    def point_max(self, buffer: Buffer) -> int:
        return len(buffer.text)

    def in_minibuffer(self) -> bool:
        return self.selected_window is not None and self.selected_window.buffer.minibuffer

    def font_at(
        self,
        offset: int,
        window: Window | None = None,
        buffer: Buffer | None = None,
    ) -> FontFace | None:
        """Face displaying the character at offset, or None past the text."""
        if window is None and buffer is None:
            window = self._window()
        if buffer is None:
            buffer = window.buffer
        if not 0 <= offset < len(buffer.text):
            return None

        face = buffer.face_at(offset)
        if face is None:
            frame = window.frame if window is not None else self.frame
            face = frame.default_face
        return face

    def font_metrics(self, font: FontFace) -> FontMetrics:
        return font.metrics

    # EditorHost: status line

    def set_status_segment(self, segment_id: str, text: str) -> None:
        self.status_segments[segment_id] = text

    def remove_status_segment(self, segment_id: str) -> None:
        self.status_segments.pop(segment_id, None)

    def request_render(self) -> None:
        self.status_line = " ".join(self.status_segments.values())
        self.render_count += 1
        logger.debug(f"Rendered status line: {self.status_line}")

    # EditorHost: decorations

    def create_decoration(self, buffer: Buffer, start: int, end: int) -> Decoration:
        if not 0 <= start <= end <= len(buffer.text):
            raise ValueError(f"Range {start}-{end} outside buffer {buffer.name!r}")
        decoration = Decoration(buffer, start, end)
        self._decorations.append(decoration)
        return decoration

    def set_decoration_style(self, decoration: Decoration, style: dict[str, str]) -> None:
        decoration.style.update(style)

    def tag_decoration(self, decoration: Decoration, category: str) -> None:
        decoration.tags.add(category)

    def decoration_tags(self, decoration: Decoration) -> frozenset[str]:
        return frozenset(decoration.tags)

    def list_decorations_in(self, buffer: Buffer, start: int, end: int) -> list[Decoration]:
        """Decorations of buffer overlapping [start, end)."""
        return [
            d
            for d in self._decorations
            if d.buffer is buffer and d.start < end and d.end > start
        ]

    def remove_decoration(self, decoration: Decoration) -> None:
        if decoration in self._decorations:
            self._decorations.remove(decoration)

    def decorations(self, buffer: Buffer | None = None) -> list[Decoration]:
        return [d for d in self._decorations if buffer is None or d.buffer is buffer]
