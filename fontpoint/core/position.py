"""
Cursor position snapshots and change detection.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Position:
    """Where the cursor is: offset plus buffer, window and frame identity."""

    offset: int
    buffer: Any
    window: Any
    frame: Any


def has_position_changed(current: Position, last: Position | None) -> bool:
    """
    Check whether the cursor moved since the last snapshot.

    Args:
        current: Snapshot taken now
        last: Previous snapshot, or None on the first check

    Returns:
        True if there is no previous snapshot or any field differs
    """
    return last is None or current != last
