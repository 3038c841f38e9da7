"""
Editor host contract.

fontpoint never resolves fonts or draws anything itself; it reads cursor
state, font resolution and metrics from the host, and asks the host to
show status text and character decorations.
"""

from typing import Any, Protocol

from fontpoint.core.events import EventBus
from fontpoint.core.metrics import FontMetrics
from fontpoint.core.position import Position


class EditorHost(Protocol):
    """Capabilities fontpoint needs from an editor."""

    events: EventBus

    def current_position(self) -> Position: ...

    def point_max(self, buffer: Any) -> int: ...

    def in_minibuffer(self) -> bool: ...

    def font_at(
        self, offset: int, window: Any = None, buffer: Any = None
    ) -> Any | None: ...

    def font_metrics(self, font: Any) -> FontMetrics: ...

    def set_status_segment(self, segment_id: str, text: str) -> None: ...

    def remove_status_segment(self, segment_id: str) -> None: ...

    def request_render(self) -> None: ...

    def create_decoration(self, buffer: Any, start: int, end: int) -> Any: ...

    def set_decoration_style(self, decoration: Any, style: dict[str, str]) -> None: ...

    def tag_decoration(self, decoration: Any, category: str) -> None: ...

    def decoration_tags(self, decoration: Any) -> frozenset[str]: ...

    def list_decorations_in(self, buffer: Any, start: int, end: int) -> list[Any]: ...

    def remove_decoration(self, decoration: Any) -> None: ...
