"""Shared pytest fixtures."""

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontpoint.host.memory import FontFace, MemoryHost


def build_font(
    family: str,
    *,
    units_per_em: int = 1200,
    ascent: int = 1500,
    descent: int = -300,
    advance: int = 900,
    avg_width: int | None = None,
    space_width: int | None = None,
):
    """
    Build a minimal TrueType font in memory.

    With the defaults, at 12pt and 72dpi the font measures 9px wide and
    18px high.
    """
    fb = FontBuilder(units_per_em, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "A"])
    fb.setupCharacterMap({0x20: "space", 0x41: "A"})

    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, ascent))
    pen.lineTo((advance, ascent))
    pen.lineTo((advance, 0))
    pen.closePath()
    box = pen.glyph()
    fb.setupGlyf({".notdef": box, "space": TTGlyphPen(None).glyph(), "A": box})

    space = advance if space_width is None else space_width
    fb.setupHorizontalMetrics(
        {".notdef": (advance, 0), "space": (space, 0), "A": (advance, 0)}
    )
    fb.setupHorizontalHeader(
        ascent=ascent, descent=descent, advanceWidthMax=max(advance, space)
    )
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ascent,
        sTypoDescender=descent,
        usWinAscent=ascent,
        usWinDescent=-descent,
        xAvgCharWidth=advance if avg_width is None else avg_width,
    )
    fb.setupPost()
    return fb


@pytest.fixture
def make_font():
    """Factory building in-memory test fonts; returns the FontBuilder."""
    return build_font


@pytest.fixture
def mono_face():
    """12pt "Mono" face measuring 9x18px at 72dpi."""
    return FontFace(build_font("Mono").font, 12, dpi=72)


@pytest.fixture
def sans_face():
    """12pt "Sans" face with a different family name."""
    return FontFace(build_font("Sans", advance=600).font, 12, dpi=72)


@pytest.fixture
def mono_font_path(tmp_path):
    """The "Mono" test font saved to disk."""
    path = tmp_path / "Mono-Regular.ttf"
    build_font("Mono").save(str(path))
    return path


@pytest.fixture
def sans_font_path(tmp_path):
    """The "Sans" test font saved to disk."""
    path = tmp_path / "Sans-Regular.ttf"
    build_font("Sans", advance=600).save(str(path))
    return path


@pytest.fixture
def host(mono_face):
    """Host with one selected window on a "scratch" buffer in Mono."""
    host = MemoryHost(default_face=mono_face)
    buffer = host.create_buffer("scratch", "hello world")
    host.create_window(buffer)
    return host


@pytest.fixture
def buffer(host):
    """The buffer shown in the selected window."""
    return host.selected_window.buffer
