"""
Font metrics introspection.

Reads the family name and pixel metrics of a font at a given nominal size.
"""

from dataclasses import dataclass

from fontTools.ttLib import TTFont

# Points per inch
POINTS_PER_INCH = 72

# Default screen resolution
DEFAULT_DPI = 96

SPACE = 0x0020


@dataclass(frozen=True)
class FontMetrics:
    """Family, nominal size and pixel metrics of a resolved font."""

    family: str
    size: float
    ascent: int = 0
    descent: int = 0
    height: int = 0
    max_width: int = 0
    avg_width: int = 0
    space_width: int = 0


def pixel_scale(font: TTFont, size: float, dpi: int = DEFAULT_DPI) -> float:
    """Font units to pixels factor for a nominal size in points."""
    units_per_em = font["head"].unitsPerEm if "head" in font else 1000
    return size * dpi / POINTS_PER_INCH / units_per_em


def get_family_name(font: TTFont) -> str | None:
    """
    Get the family name from the name table.

    Prefers the typographic family (nameID 16) over the legacy family
    (nameID 1).
    """
    if "name" not in font:
        return None
    return font["name"].getBestFamilyName()


def get_space_advance(font: TTFont) -> int:
    """Advance width of the glyph mapped to U+0020, in font units."""
    cmap = font.getBestCmap() or {}
    glyph_name = cmap.get(SPACE)
    if glyph_name is None or "hmtx" not in font:
        return 0
    advance, _lsb = font["hmtx"][glyph_name]
    return advance


def read_font_metrics(
    font: TTFont,
    size: float,
    dpi: int = DEFAULT_DPI,
    *,
    family: str | None = None,
) -> FontMetrics:
    """
    Read pixel metrics of a font.

    Values come from:
    - name: family
    - hhea: ascent, descent, advanceWidthMax
    - OS/2: xAvgCharWidth
    - hmtx: advance of the space glyph

    Args:
        font: TTFont instance to inspect
        size: Nominal size in points
        dpi: Screen resolution used to convert points to pixels
        family: Family override, used when the name table has none

    Returns:
        FontMetrics with pixel values rounded to integers
    """
    scale = pixel_scale(font, size, dpi)

    ascent = descent = max_width = 0
    if "hhea" in font:
        hhea = font["hhea"]
        ascent = hhea.ascent
        descent = -hhea.descent
        max_width = hhea.advanceWidthMax

    avg_width = 0
    if "OS/2" in font:
        avg_width = font["OS/2"].xAvgCharWidth

    space_width = get_space_advance(font)

    ascent_px = round(ascent * scale)
    descent_px = round(descent * scale)

    return FontMetrics(
        family=get_family_name(font) or family or "unknown",
        size=size,
        ascent=ascent_px,
        descent=descent_px,
        height=ascent_px + descent_px,
        max_width=round(max_width * scale),
        avg_width=round(avg_width * scale),
        space_width=round(space_width * scale),
    )
