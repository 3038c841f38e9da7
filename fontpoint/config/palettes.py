"""
Color palettes for the font overlay.

Each palette is an ordered tuple of color strings. Families are assigned
palette entries in the order they are first seen.
"""

from collections.abc import Sequence

# Built-in default (9 entries)
DEFAULT_PALETTE = (
    "#e6194b",  # red
    "#3cb44b",  # green
    "#4363d8",  # blue
    "#f58231",  # orange
    "#911eb4",  # purple
    "#42d4f4",  # cyan
    "#f032e6",  # magenta
    "#bfef45",  # lime
    "#9a6324",  # brown
)

PASTEL_PALETTE = (
    "#fbb4ae",
    "#b3cde3",
    "#ccebc5",
    "#decbe4",
    "#fed9a6",
    "#ffffcc",
    "#e5d8bd",
    "#fddaec",
)

MONO_PALETTE = (
    "#000000",
    "#555555",
    "#aaaaaa",
)

PALETTES: dict[str, tuple[str, ...]] = {
    "default": DEFAULT_PALETTE,
    "pastel": PASTEL_PALETTE,
    "mono": MONO_PALETTE,
}

CUSTOM = "custom"


class PaletteError(ValueError):
    """Raised when a palette setting cannot be resolved to usable colors."""


def validate_palette(colors: Sequence[str]) -> tuple[str, ...]:
    """
    Check a palette and return it as a tuple.

    Args:
        colors: Candidate color strings

    Returns:
        The palette as an immutable tuple

    Raises:
        PaletteError: If the palette is empty or holds a non-string or
            blank entry
    """
    if isinstance(colors, str):
        raise PaletteError("Palette must be a sequence of colors, not a string")

    try:
        palette = tuple(colors)
    except TypeError as e:
        raise PaletteError(f"Palette must be a sequence of colors: {colors!r}") from e
    if not palette:
        raise PaletteError("Palette must contain at least one color")

    for color in palette:
        if not isinstance(color, str) or not color.strip():
            raise PaletteError(f"Invalid palette color: {color!r}")

    return palette


def resolve_palette(
    name: str, custom: Sequence[str] | None = None
) -> tuple[str, ...]:
    """
    Resolve a palette selector to its colors.

    Args:
        name: Built-in palette name, or "custom"
        custom: Colors to use when name is "custom"

    Returns:
        The validated palette
    """
    if name == CUSTOM:
        if custom is None:
            raise PaletteError("Custom palette selected but no colors given")
        return validate_palette(custom)

    try:
        return PALETTES[name]
    except KeyError:
        known = ", ".join([*PALETTES, CUSTOM])
        raise PaletteError(
            f"Unknown palette '{name}' (expected one of: {known})"
        ) from None


def hex_to_rgb(color: str) -> tuple[int, int, int] | None:
    """Convert "#rrggbb" to an RGB tuple, or None for other notations."""
    value = color.strip()
    if len(value) != 7 or not value.startswith("#"):
        return None
    try:
        return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))
    except ValueError:
        return None
