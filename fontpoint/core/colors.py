"""
Stable font family to color assignment.

Families get palette entries in the order they are first seen. Once a
family has a color it keeps it for the lifetime of the table; colors repeat
only when there are more families than palette entries.
"""

from collections.abc import Iterator, MutableMapping, Sequence


def color_for(
    family: str,
    table: MutableMapping[str, str],
    palette: Sequence[str],
) -> tuple[str, MutableMapping[str, str]]:
    """
    Look up or assign the color of a font family.

    Args:
        family: Font family name
        table: Known families mapped to colors, in first-seen order
        palette: Non-empty sequence of colors

    Returns:
        Tuple of (color, table); the table is updated in place
    """
    color = table.get(family)
    if color is None:
        color = palette[len(table) % len(palette)]
        table[family] = color
    return color, table


class KnownFonts:
    """Ordered family to color table for one session."""

    def __init__(self) -> None:
        self._table: dict[str, str] = {}

    def color_for(self, family: str, palette: Sequence[str]) -> str:
        """Color of family, assigning the next palette entry if new."""
        color, _ = color_for(family, self._table, palette)
        return color

    def get(self, family: str) -> str | None:
        return self._table.get(family)

    def items(self) -> list[tuple[str, str]]:
        return list(self._table.items())

    def reset(self) -> None:
        self._table.clear()

    def __contains__(self, family: object) -> bool:
        return family in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)
