"""
Font family overlay.

Tints every character of a buffer range with the color of the family of
the font it is displayed with. Decorations do not follow edits, so the
first modification of a decorated buffer clears its overlay.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from fontpoint.config.settings import Settings
from fontpoint.core.events import Event, EventKind, Subscription
from fontpoint.core.session import FontSession
from fontpoint.host.protocol import EditorHost
from fontpoint.utils.logging import logger

# Tag identifying decorations created by the overlay
OVERLAY_CATEGORY = "fontpoint-overlay"

Span = tuple[int, int]


class OverlayState(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


def plan_overlay(
    start: int,
    end: int,
    family_at: Callable[[int], str | None],
    color_for: Callable[[str], str],
) -> list[tuple[Span, str]]:
    """
    Compute one-character decorations for [start, end).

    Args:
        start: First offset
        end: Offset after the last character
        family_at: Font family at an offset, or None when unresolved
        color_for: Color of a family, assigning one if needed

    Returns:
        List of ((offset, offset + 1), color) in offset order
    """
    planned = []
    for offset in range(start, end):
        family = family_at(offset)
        if family is None:
            continue
        planned.append(((offset, offset + 1), color_for(family)))
    return planned


class FontOverlay:
    """Applies and clears the family overlay on host buffers."""

    def __init__(
        self,
        host: EditorHost,
        session: FontSession | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.host = host
        self.session = session or FontSession()
        self.settings = settings or Settings()
        # id(buffer) -> modification subscription
        self._teardown: dict[int, Subscription] = {}

    def state(self, buffer: Any) -> OverlayState:
        if self.host.events.is_subscribed(self._teardown.get(id(buffer))):
            return OverlayState.ACTIVE
        return OverlayState.INACTIVE

    def _bounds(self, buffer: Any, start: int | None, end: int | None) -> Span:
        point_max = self.host.point_max(buffer)
        start = 0 if start is None else max(0, start)
        end = point_max if end is None else min(end, point_max)
        if start > end:
            raise ValueError(f"Invalid range: {start}-{end}")
        return start, end

    def _family_at(self, buffer: Any, offset: int) -> str | None:
        font = self.host.font_at(offset, buffer=buffer)
        if font is None:
            return None
        return self.host.font_metrics(font).family

    def apply_overlay(
        self, buffer: Any, start: int | None = None, end: int | None = None
    ) -> list[tuple[Span, str]]:
        """
        Decorate each character in [start, end) with its family color.

        Defaults to the whole buffer. Applying again adds decorations on top
        of existing ones.

        Returns:
            The ((offset, offset + 1), color) decorations created
        """
        start, end = self._bounds(buffer, start, end)
        palette = self.settings.palette
        known_fonts = self.session.known_fonts

        planned = plan_overlay(
            start,
            end,
            lambda offset: self._family_at(buffer, offset),
            lambda family: known_fonts.color_for(family, palette),
        )

        host = self.host
        for (span_start, span_end), color in planned:
            decoration = host.create_decoration(buffer, span_start, span_end)
            host.set_decoration_style(decoration, {"foreground": color})
            host.tag_decoration(decoration, OVERLAY_CATEGORY)

        if planned:
            self._arm_teardown(buffer)
        logger.info(
            f"Applied font overlay to {buffer!r} [{start}, {end}): "
            f"{len(planned)} characters, {len(known_fonts)} families"
        )
        return planned

    def clear_overlay(
        self, buffer: Any, start: int | None = None, end: int | None = None
    ) -> int:
        """
        Remove overlay decorations in [start, end), defaulting to the whole
        buffer. Other decorations are left alone.

        Returns:
            Number of decorations removed
        """
        start, end = self._bounds(buffer, start, end)
        removed = 0
        for decoration in self._tagged(buffer, start, end):
            self.host.remove_decoration(decoration)
            removed += 1

        if not self._tagged(buffer, 0, self.host.point_max(buffer)):
            self._disarm_teardown(buffer)

        if removed:
            logger.info(f"Cleared {removed} overlay decorations from {buffer!r}")
        return removed

    def reset_fonts(self) -> None:
        """Forget family colors so the next overlay starts from the palette head."""
        self.session.reset_fonts()

    def _tagged(self, buffer: Any, start: int, end: int) -> list[Any]:
        host = self.host
        return [
            d
            for d in host.list_decorations_in(buffer, start, end)
            if OVERLAY_CATEGORY in host.decoration_tags(d)
        ]

    def _arm_teardown(self, buffer: Any) -> None:
        if id(buffer) in self._teardown:
            return
        self._teardown[id(buffer)] = self.host.events.subscribe(
            EventKind.BUFFER_MODIFIED, self._on_buffer_modified, buffer=buffer
        )

    def _disarm_teardown(self, buffer: Any) -> None:
        subscription = self._teardown.pop(id(buffer), None)
        self.host.events.unsubscribe(subscription)

    def _on_buffer_modified(self, event: Event) -> None:
        logger.debug(f"{event.buffer!r} modified, clearing font overlay")
        self.clear_overlay(event.buffer)
        self._disarm_teardown(event.buffer)
