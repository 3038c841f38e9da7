"""
Status-line font label.

Recomputes the label of the font at the cursor after each user action,
but only when the cursor position actually changed.
"""

from fontpoint.config.settings import Settings
from fontpoint.core.events import Event, EventKind, Subscription
from fontpoint.core.position import has_position_changed
from fontpoint.core.session import FontSession
from fontpoint.host.protocol import EditorHost
from fontpoint.utils.logging import logger

SEGMENT_ID = "fontpoint"


class FontStatus:
    """Keeps the fontpoint status-line segment up to date."""

    def __init__(
        self,
        host: EditorHost,
        session: FontSession | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.host = host
        self.session = session or FontSession()
        self.settings = settings or Settings()
        self._subscription: Subscription | None = None

    @property
    def enabled(self) -> bool:
        return self._subscription is not None

    @property
    def label(self) -> str:
        return self.session.label

    def enable(self) -> None:
        """Show the segment and start tracking the cursor."""
        if self.enabled:
            return
        self.host.set_status_segment(SEGMENT_ID, self.session.label)
        self._subscription = self.host.events.subscribe(
            EventKind.ACTION_COMPLETED, self._on_action_completed
        )
        logger.info("Font status enabled")
        if not self.update():
            self.host.request_render()

    def disable(self) -> None:
        """Stop tracking and remove the segment."""
        if not self.enabled:
            return
        self.host.events.unsubscribe(self._subscription)
        self._subscription = None
        self.session.last_position = None
        self.host.remove_status_segment(SEGMENT_ID)
        self.host.request_render()
        logger.info("Font status disabled")

    def _on_action_completed(self, event: Event) -> None:
        self.update()

    def update(self) -> bool:
        """
        Recompute the label if the cursor moved.

        Skipped, keeping the previous label, while a minibuffer prompt is
        active or when the cursor is at the end of the buffer.

        Returns:
            True if the label was recomputed and a render requested
        """
        host = self.host
        if host.in_minibuffer():
            logger.debug("Skipping font status update in minibuffer")
            return False

        position = host.current_position()
        if position.offset >= host.point_max(position.buffer):
            logger.debug("Skipping font status update at end of buffer")
            return False

        if not has_position_changed(position, self.session.last_position):
            return False

        font = host.font_at(position.offset, position.window)
        metrics = host.font_metrics(font) if font is not None else None

        self.session.label = self.settings.label_formatter(metrics)
        self.session.last_position = position
        host.set_status_segment(SEGMENT_ID, self.session.label)
        host.request_render()
        return True
