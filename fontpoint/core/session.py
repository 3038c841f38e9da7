"""
Session-scoped state shared by the status line and the overlay.
"""

from fontpoint.core.colors import KnownFonts
from fontpoint.core.label import PLACEHOLDER
from fontpoint.core.position import Position


class FontSession:
    """
    Mutable state for one fontpoint session.

    Holds the known-fonts table used by the overlay, plus the last cursor
    position and the label currently shown in the status line.
    """

    def __init__(self) -> None:
        self.known_fonts = KnownFonts()
        self.last_position: Position | None = None
        self.label = PLACEHOLDER

    def reset_fonts(self) -> None:
        """Forget all family colors."""
        self.known_fonts.reset()

    def reset(self) -> None:
        """Return to the freshly created state."""
        self.known_fonts.reset()
        self.last_position = None
        self.label = PLACEHOLDER
